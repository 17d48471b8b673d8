from dataclasses import dataclass


@dataclass(frozen=True)
class Act:
    """Class representing a bookable act (band, DJ, ...)"""
    name: str  # not unique, duplicates are separate bookable instances
    duration: int  # in minutes
    revenue: int  # anticipated revenue in dollars
    cost: int  # booking cost in dollars

    @property
    def net_value(self) -> int:
        return self.revenue - self.cost

    def __str__(self):
        return f"{self.name}"
