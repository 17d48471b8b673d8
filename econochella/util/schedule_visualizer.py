from econochella.base_model.festival import Festival
from econochella.base_model.placement import Placement
from econochella.base_model.slot import ActSlot
from econochella.local_search.rules_engine import calculate_value, get_violations
from econochella.local_search.rules_engine_helpers import format_clock_time


def visualize(festival: Festival):
    """
    Print the final report: value and cost totals, then one table per venue
    with every slot of its program in order.
    """
    print(f"Value: {calculate_value(festival)}")
    print(f"Total cost: {festival.total_cost()} / {festival.budget}")
    for placement in Placement.venues():
        venue = festival.venues[placement]
        print(f"  {venue.name}: cost {venue.cost()}, time {venue.time()}/{venue.capacity_duration} min")

    col_widths = [8, 7, 32, 10, 12]
    headers = ["Start", "Clock", "Act", "Minutes", "Net value"]
    header_line = "+" + "+".join(["-" * w for w in col_widths]) + "+"

    for placement in Placement.venues():
        venue = festival.venues[placement]
        print()
        print(f"{str(placement)} (program starts {format_clock_time(venue.start_time)}, "
              f"{venue.break_duration} min breaks):")
        print(header_line)
        print("|" + "|".join(f"{h:^{w}}" for h, w in zip(headers, col_widths)) + "|")
        print(header_line)

        if not venue.slots:
            print("|" + f"{'(empty)':^{sum(col_widths) + len(col_widths) - 1}}" + "|")

        for slot in venue.slots:
            if isinstance(slot, ActSlot):
                cells = [
                    str(slot.start_time),
                    format_clock_time(venue.start_time + slot.start_time),
                    slot.act.name[:col_widths[2] - 2],
                    str(slot.act.duration),
                    str(slot.act.net_value),
                ]
            else:
                cells = ["", "", "-- break --", str(venue.break_duration), ""]
            print("|" + "|".join(f"{c:^{w}}" for c, w in zip(cells, col_widths)) + "|")

        print(header_line)

    unplaced = festival.unplanned_acts()
    if unplaced:
        print()
        print(f"Not booked ({len(unplaced)}): {', '.join(act.name for act in unplaced)}")

    violations = get_violations(festival)
    if violations:
        print()
        print("Constraint violations:")
        for violation in violations:
            print(f"  - {violation}")
