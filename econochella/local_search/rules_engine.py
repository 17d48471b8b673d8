from econochella.base_model.act import Act
from econochella.base_model.festival import Festival
from econochella.base_model.placement import Placement


def budget_respected(festival: Festival) -> bool:
    return festival.total_cost() <= festival.budget


def capacity_respected(festival: Festival) -> bool:
    return all(venue.time() <= venue.capacity_duration for venue in festival.venues.values())


def special_conditions(festival: Festival) -> bool:
    return all(rule.is_satisfied(festival) for rule in festival.rules)


def feasible(festival: Festival) -> bool:
    """
    Hard constraints: the budget, the length of every venue program, and all side rules.
    There is no partial credit, one broken rule makes the whole line-up infeasible.
    """
    return budget_respected(festival) and capacity_respected(festival) and special_conditions(festival)


def get_violations(festival: Festival) -> list[str]:
    """
    Same checks as feasible(), but collects a description of everything that is broken.
    """
    violations = []

    total_cost = festival.total_cost()
    if total_cost > festival.budget:
        violations.append(f"Budget exceeded: {total_cost} > {festival.budget}")

    for placement in Placement.venues():
        venue = festival.venues[placement]
        if venue.time() > venue.capacity_duration:
            violations.append(f"{venue.name} runs too long: {venue.time()} > {venue.capacity_duration} min")

    for rule in festival.rules:
        if not rule.is_satisfied(festival):
            violations.append(f"Rule broken: {rule}")

    return violations


def validate_rules(rules, acts: list[Act]) -> None:
    """
    Fail before the search starts if a rule names an act that is not in the catalogue.
    """
    names = {act.name for act in acts}
    for rule in rules:
        missing = [name for name in rule.acts() if name not in names]
        if missing:
            raise ValueError(f"Rule '{rule}' refers to unknown act(s): {', '.join(missing)}")


def special_bonuses(festival: Festival) -> int:
    # no bonus scoring yet
    return 0


def calculate_value(festival: Festival) -> int:
    """Objective: net value (revenue - cost) of every booked act, plus bonuses"""
    return sum(venue.value() for venue in festival.venues.values()) + special_bonuses(festival)


def calculate_delta_value(candidate: Festival, running: Festival) -> int:
    return calculate_value(candidate) - calculate_value(running)
