"""Economy data model attached to stars."""

from dataclasses import asdict, dataclass


@dataclass
class Economy:
    """Economic development of a star.

    Stars start without an economy; one is attached once a player settles
    the star.
    """

    industrial_value: float = 0
    tech_level: float = 0
    trade_value: float = 0
    infrastructure_value: float = 0
    production_capacity: float = 0

    def invest(self, amount: float) -> float:
        """Invest resources to increase industrial development.

        Args:
            amount: Amount to invest (must be positive)

        Returns:
            New industrial value

        Raises:
            ValueError: If amount is not positive
        """
        if amount <= 0:
            raise ValueError(f"Invalid investment: {amount} (must be > 0)")
        self.industrial_value += amount
        return self.industrial_value

    @property
    def total_value(self) -> float:
        """Sum of all economic metrics."""
        return (
            self.industrial_value
            + self.tech_level
            + self.trade_value
            + self.infrastructure_value
            + self.production_capacity
        )

    def reset(self) -> None:
        """Reset every metric to zero."""
        self.industrial_value = 0
        self.tech_level = 0
        self.trade_value = 0
        self.infrastructure_value = 0
        self.production_capacity = 0

    def summary(self) -> dict:
        data = asdict(self)
        data["total_value"] = self.total_value
        return data
