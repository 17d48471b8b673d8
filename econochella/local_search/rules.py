"""
Side constraints on the line-up.

Every rule is a small frozen dataclass with an `is_satisfied(festival)` check.
A rule is vacuously satisfied when the act it talks about is not booked, except
where the rule says otherwise. Rules naming an act that is not in the catalogue
raise ValueError when checked.
"""

from dataclasses import dataclass

from econochella.base_model.festival import Festival
from econochella.base_model.placement import Placement
from econochella.local_search.rules_engine_helpers import (
    any_same_venue, are_consecutive, format_clock_time, get_raw_neighbours,
    get_scheduled_clock_times, get_venues_holding, is_act_slot_of,
)


def _require_acts(festival: Festival, names) -> None:
    for name in names:
        festival.index_of(name)


@dataclass(frozen=True)
class MustStartAfter:
    """Act must start at or after the clock time (minutes since midnight)"""
    act: str
    clock_time: int

    def acts(self) -> tuple[str, ...]:
        return (self.act,)

    def is_satisfied(self, festival: Festival) -> bool:
        _require_acts(festival, self.acts())
        return all(start >= self.clock_time for start in get_scheduled_clock_times(festival, self.act))

    def __str__(self):
        return f"{self.act} must start at or after {format_clock_time(self.clock_time)}"


@dataclass(frozen=True)
class MustStartBefore:
    """Act must start strictly before the clock time (minutes since midnight)"""
    act: str
    clock_time: int

    def acts(self) -> tuple[str, ...]:
        return (self.act,)

    def is_satisfied(self, festival: Festival) -> bool:
        _require_acts(festival, self.acts())
        return all(start < self.clock_time for start in get_scheduled_clock_times(festival, self.act))

    def __str__(self):
        return f"{self.act} must start before {format_clock_time(self.clock_time)}"


@dataclass(frozen=True)
class MustNotShareVenueWith:
    act: str
    others: tuple[str, ...]

    def acts(self) -> tuple[str, ...]:
        return (self.act,) + tuple(self.others)

    def is_satisfied(self, festival: Festival) -> bool:
        _require_acts(festival, self.acts())
        return not any_same_venue(festival, self.act, self.others)

    def __str__(self):
        return f"{self.act} must not share a venue with {', '.join(self.others)}"


@dataclass(frozen=True)
class RequiresBooked:
    """If the act is booked anywhere, the required act must be booked too (any venue)"""
    act: str
    required: str

    def acts(self) -> tuple[str, ...]:
        return (self.act, self.required)

    def is_satisfied(self, festival: Festival) -> bool:
        _require_acts(festival, self.acts())
        if not any(placement.is_venue for placement in festival.placements_of(self.act)):
            return True
        return festival.is_booked(self.required)

    def __str__(self):
        return f"{self.act} requires {self.required} to be booked"


@dataclass(frozen=True)
class MustBeAdjacentDuplicate:
    """
    Instances of a duplicated act sharing a venue must play back to back.

    Adjacency is counted among the act slots, so the break in between does not matter.
    Instances in different venues are fine.
    """
    act: str

    def acts(self) -> tuple[str, ...]:
        return (self.act,)

    def is_satisfied(self, festival: Festival) -> bool:
        _require_acts(festival, self.acts())
        for venue in festival.venues.values():
            positions = venue.act_positions(self.act)
            if len(positions) >= 2 and not are_consecutive(positions):
                return False
        return True

    def __str__(self):
        return f"{self.act} instances must play back to back"


@dataclass(frozen=True)
class MustBeLastInVenue:
    act: str

    def acts(self) -> tuple[str, ...]:
        return (self.act,)

    def is_satisfied(self, festival: Festival) -> bool:
        _require_acts(festival, self.acts())
        for placement in get_venues_holding(festival, self.act):
            if not is_act_slot_of(festival.venues[placement].last_slot(), self.act):
                return False
        return True

    def __str__(self):
        return f"{self.act} must close its venue"


@dataclass(frozen=True)
class MustNotNeighbor:
    """
    The slots right before and after the act must not be `other`.
    Neighbours are taken from the raw program, so a break in between counts as a non-match.
    """
    act: str
    other: str

    def acts(self) -> tuple[str, ...]:
        return (self.act, self.other)

    def is_satisfied(self, festival: Festival) -> bool:
        _require_acts(festival, self.acts())
        for placement in get_venues_holding(festival, self.act):
            for raw_index in festival.venues[placement].slot_positions(self.act):
                neighbours = get_raw_neighbours(festival, placement, raw_index)
                if any(is_act_slot_of(slot, self.other) for slot in neighbours):
                    return False
        return True

    def __str__(self):
        return f"{self.act} must not play right before or after {self.other}"


@dataclass(frozen=True)
class ForbiddenVenue:
    act: str
    venue: Placement

    def acts(self) -> tuple[str, ...]:
        return (self.act,)

    def is_satisfied(self, festival: Festival) -> bool:
        _require_acts(festival, self.acts())
        return self.venue not in festival.placements_of(self.act)

    def __str__(self):
        return f"{self.act} may not play in the {self.venue}"


# keys used in festival JSON files
RULE_TYPES = {
    "must_start_after": MustStartAfter,
    "must_start_before": MustStartBefore,
    "must_not_share_venue_with": MustNotShareVenueWith,
    "requires_booked": RequiresBooked,
    "must_be_adjacent_duplicate": MustBeAdjacentDuplicate,
    "must_be_last_in_venue": MustBeLastInVenue,
    "must_not_neighbor": MustNotNeighbor,
    "forbidden_venue": ForbiddenVenue,
}
