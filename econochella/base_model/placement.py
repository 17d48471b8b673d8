from enum import Enum


class Placement(Enum):
    """
    Where an act currently is: one of the festival venues, or not booked at all.

    The position of an act inside a venue is not part of the placement. It is
    looked up in the venue's slot sequence when needed.
    """

    TENT = "tent"
    AMPHITHEATER = "amphitheater"
    STADIUM = "stadium"
    UNPLACED = "unplaced"

    def __str__(self):
        return self.name.capitalize()

    @property
    def is_venue(self) -> bool:
        return self is not Placement.UNPLACED

    @classmethod
    def venues(cls) -> list['Placement']:
        return [placement for placement in cls if placement.is_venue]

    @classmethod
    def from_string(cls, placement_string: str) -> 'Placement':
        try:
            return cls[placement_string.strip().upper()]
        except KeyError:
            raise ValueError(f"No placement found for: {placement_string}")
