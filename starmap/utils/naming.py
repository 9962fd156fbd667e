"""Procedural star naming.

Names are built from syllables drawn through the map's SeededRandom, so a
given seed always yields the same names in the same order. Uniqueness is
tracked per StarNameGenerator instance, one per generated map, which keeps
repeated generations in the same process identical.
"""

from .constants import NAME_LENGTH_RANGE, NAME_MAX_ATTEMPTS, UNIQUE_NAME_MAX_ATTEMPTS
from .rng import SeededRandom

PREFIXES = [
    "Al", "Ar", "Az", "Bel", "Cal", "Cor", "Del", "El", "Eld", "Fal", "Gal", "Gor",
    "Hel", "Ion", "Jar", "Kal", "Kor", "Lor", "Mal", "Mor", "Nar", "Nel", "Nor",
    "Ora", "Pel", "Qua", "Ral", "Sar", "Sel", "Tal", "Thor", "Ura", "Val", "Var",
    "Wor", "Xan", "Yor", "Zan", "Zor", "Aeth", "Bran", "Cael", "Dain", "Eir",
    "Fael", "Gwyn", "Hael", "Iris", "Jael", "Kael", "Lael", "Mael", "Nael",
    "Pael", "Quel", "Rael", "Sael", "Tael", "Uael", "Vael", "Wael",
]

MIDDLES = [
    "an", "ar", "el", "en", "er", "eth", "in", "ir", "on", "or", "th", "un",
    "al", "am", "at", "ax", "ex", "ix", "ox", "ux", "yn", "yr", "ys",
    "ad", "ed", "id", "od", "ud", "ag", "eg", "ig", "og", "ug", "ak", "ek",
    "ik", "ok", "uk", "ap", "ep", "ip", "op", "up", "as", "es", "is", "os",
    "us", "et", "it", "ot", "ut", "av", "ev", "iv", "ov", "uv",
]

SUFFIXES = [
    "ar", "ax", "el", "en", "er", "eth", "ex", "ix", "on", "or", "ox", "th",
    "an", "in", "un", "yn", "yr", "ys", "ad", "ed", "id", "od", "ud", "ag",
    "eg", "ig", "og", "ug", "ak", "ek", "ik", "ok", "uk", "al", "am", "ap",
    "ep", "ip", "op", "up", "as", "es", "is", "os", "us", "at", "et", "it",
    "ot", "ut", "av", "ev", "iv", "ov", "uv", "ir", "ur",
]

VOWELS = set("aeiouy")
CONSONANTS = set("bcdfghjklmnpqrstvwxz")

# Letter runs that read badly
PROBLEMATIC_PATTERNS = (
    "xxx", "zzz", "qqq", "www", "hhh", "jjj",
    "aaa", "eee", "iii", "ooo", "uuu", "yyy",
    "qk", "qj", "qx", "qz",
    "jq", "jz", "jx",
    "xq", "xz", "xj",
    "zq", "zj", "zx",
)

MIDDLE_SYLLABLE_PROB = 0.4


def is_valid_pronunciation(name: str) -> bool:
    """Check a name for hard-to-pronounce letter runs.

    Rejects more than 4 consonants or 3 vowels in a row, and any of
    PROBLEMATIC_PATTERNS.

    Examples:
        >>> is_valid_pronunciation("Kaelor")
        True
        >>> is_valid_pronunciation("Xanqzor")
        False
    """
    lower = name.lower()
    consonant_run = 0
    vowel_run = 0
    for char in lower:
        if char in CONSONANTS:
            consonant_run += 1
            vowel_run = 0
            if consonant_run > 4:
                return False
        elif char in VOWELS:
            vowel_run += 1
            consonant_run = 0
            if vowel_run > 3:
                return False
    return not any(pattern in lower for pattern in PROBLEMATIC_PATTERNS)


def generate_star_name(rng: SeededRandom) -> str:
    """Generate one syllable-based star name.

    Retries up to NAME_MAX_ATTEMPTS times until a candidate passes the
    pronunciation and length checks, then falls back to a plain
    prefix+suffix name.

    Args:
        rng: Random number generator (advanced by every draw)

    Returns:
        Capitalized star name, e.g. "Kaelor"
    """
    min_len, max_len = NAME_LENGTH_RANGE
    for _ in range(NAME_MAX_ATTEMPTS):
        use_middle = rng.next_float(0, 1) < MIDDLE_SYLLABLE_PROB
        prefix = rng.pick(PREFIXES)
        middle = rng.pick(MIDDLES) if use_middle else ""
        suffix = rng.pick(SUFFIXES)

        name = (prefix + middle + suffix).capitalize()
        if not is_valid_pronunciation(name):
            continue
        if not min_len <= len(name) <= max_len:
            continue
        return name

    return (rng.pick(PREFIXES) + rng.pick(SUFFIXES)).capitalize()


class StarNameGenerator:
    """Hands out unique star names for a single map."""

    def __init__(self, rng: SeededRandom):
        self.rng = rng
        self.used_names: set[str] = set()

    def next_name(self) -> str:
        """Return a name not yet handed out by this generator.

        After UNIQUE_NAME_MAX_ATTEMPTS collisions a numeric suffix is added
        ("Kaelor-2").
        """
        for _ in range(UNIQUE_NAME_MAX_ATTEMPTS):
            name = generate_star_name(self.rng)
            if name not in self.used_names:
                self.used_names.add(name)
                return name

        base_name = generate_star_name(self.rng)
        counter = 1
        unique_name = f"{base_name}-{counter}"
        while unique_name in self.used_names:
            counter += 1
            unique_name = f"{base_name}-{counter}"
        self.used_names.add(unique_name)
        return unique_name

    def reserve(self, name: str) -> None:
        """Mark a name as taken (e.g. names loaded from storage)."""
        self.used_names.add(name)

    def __len__(self) -> int:
        return len(self.used_names)
