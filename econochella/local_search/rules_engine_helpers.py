from econochella.base_model.festival import Festival
from econochella.base_model.placement import Placement
from econochella.base_model.slot import ActSlot


def parse_clock_time(clock_string: str) -> int:
    """
    Convert "HH:MM" to minutes since midnight.
    """
    try:
        hours, minutes = clock_string.strip().split(":")
        hours, minutes = int(hours), int(minutes)
    except (AttributeError, ValueError):
        raise ValueError(f"Invalid clock time: {clock_string!r}, expected HH:MM")
    if not (0 <= hours < 24 and 0 <= minutes < 60):
        raise ValueError(f"Invalid clock time: {clock_string!r}, expected HH:MM")
    return hours * 60 + minutes


def format_clock_time(minutes_since_midnight: int) -> str:
    # programs may run past midnight
    hours, minutes = divmod(minutes_since_midnight, 60)
    return f"{hours % 24:02d}:{minutes:02d}"


def get_scheduled_clock_times(festival: Festival, name: str) -> list[int]:
    """
    Real-world start times (minutes since midnight) of every scheduled instance of the act.
    """
    clock_times = []
    for venue in festival.venues.values():
        for slot in venue.act_slots():
            if slot.act.name == name:
                clock_times.append(venue.start_time + slot.start_time)
    return clock_times


def get_venues_holding(festival: Festival, name: str) -> list[Placement]:
    return [placement for placement, venue in festival.venues.items() if venue.contains(name)]


def any_same_venue(festival: Festival, name: str, other_names: tuple[str, ...]) -> bool:
    """
    Returns True if any act from other_names plays in a venue where `name` plays.
    """
    for placement in get_venues_holding(festival, name):
        venue = festival.venues[placement]
        if any(venue.contains(other_name) for other_name in other_names):
            return True
    return False


def get_raw_neighbours(festival: Festival, placement: Placement, raw_index: int) -> list:
    """Slots directly before and after the raw index, breaks included"""
    schedule = festival.get_schedule(placement)
    neighbours = []
    if raw_index - 1 >= 0:
        neighbours.append(schedule[raw_index - 1])
    if raw_index + 1 < len(schedule):
        neighbours.append(schedule[raw_index + 1])
    return neighbours


def is_act_slot_of(slot, name: str) -> bool:
    return isinstance(slot, ActSlot) and slot.act.name == name


def are_consecutive(positions: list[int]) -> bool:
    ordered = sorted(positions)
    return all(b - a == 1 for a, b in zip(ordered, ordered[1:]))
