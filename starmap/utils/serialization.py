"""Map serialization to/from JSON.

Generated maps are saved in the same record shape that generate_map outputs,
so a saved file can be fed straight back into load_map.
"""

import json
from pathlib import Path
from typing import Any

from ..engine.map_generator import GeneratedMap, load_map
from ..models.map_model import MapModel


def save_map(generated: GeneratedMap, filepath: str | Path) -> Path:
    """Save a generated map to a JSON file.

    Args:
        generated: Map to save
        filepath: Destination path; parent directories are created

    Returns:
        Path written

    Example:
        save_map(generate_map(config), "maps/seed-12345.json")
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        json.dump(generated.to_dict(), f, indent=2)

    return path


def read_map_file(filepath: str | Path) -> dict[str, Any]:
    """Read raw map data from a JSON file.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If the file is not a JSON object
    """
    with open(Path(filepath)) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Invalid map file: {filepath} (expected a JSON object)")
    return data


def load_map_file(filepath: str | Path, map_size: int | None = None) -> MapModel:
    """Load a saved map file and rebuild its MapModel.

    Args:
        filepath: Path to saved map file
        map_size: Original grid size; defaults to the size stored in the file

    Returns:
        Reconstructed MapModel

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If JSON is invalid or malformed
        MapConfigError: If no map size is known
    """
    return load_map(read_map_file(filepath), map_size)
