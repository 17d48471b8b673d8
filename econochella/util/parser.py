import json
from typing import Dict
from pathlib import Path

from econochella.base_model.act import Act
from econochella.base_model.festival import Festival
from econochella.base_model.placement import Placement
from econochella.base_model.venue import Venue
from econochella.config import DEFAULT_BUDGET, DEFAULT_TEMPERATURE, DEFAULT_VENUES
from econochella.local_search.rules import (
    RULE_TYPES, MustStartAfter, MustStartBefore, MustNotShareVenueWith, RequiresBooked,
    MustBeAdjacentDuplicate, MustBeLastInVenue, MustNotNeighbor, ForbiddenVenue,
)
from econochella.local_search.rules_engine_helpers import parse_clock_time
from econochella.local_search.rules_engine import validate_rules


def parse_input(input_path: Path) -> Dict:
    """
    Parse a festival JSON file into a structured data dictionary.

    Args:
        input_path: Path to the input JSON file

    Returns:
        Dictionary with budget, temperature, acts, venues and rules
    """
    with open(input_path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    return parse_data(data)


def parse_data(data: Dict) -> Dict:
    parsed_data = {
        "budget": int(data.get("budget", DEFAULT_BUDGET)),
        "temperature": float(data.get("temperature", DEFAULT_TEMPERATURE)),
    }
    if parsed_data["budget"] <= 0:
        raise ValueError(f"Budget must be positive, got {parsed_data['budget']}")
    if parsed_data["temperature"] <= 0:
        raise ValueError(f"Temperature must be positive, got {parsed_data['temperature']}")

    parsed_data["acts"] = [parse_act(act) for act in data.get("acts", [])]
    if not parsed_data["acts"]:
        raise ValueError("The festival file contains no acts")

    parsed_data["venues"] = parse_venues(data.get("venues", []))

    parsed_data["rules"] = [parse_rule(rule) for rule in data.get("rules", [])]
    validate_rules(parsed_data["rules"], parsed_data["acts"])

    return parsed_data


def parse_act(act: Dict) -> Act:
    try:
        parsed = Act(
            name=act["name"],
            duration=int(act["duration"]),
            revenue=int(act["revenue"]),
            cost=int(act["cost"])
        )
    except KeyError as e:
        raise ValueError(f"Act {act} is missing field {e}")

    if parsed.duration <= 0:
        raise ValueError(f"Act {parsed.name} must have a positive duration, got {parsed.duration}")
    if parsed.revenue < 0 or parsed.cost < 0:
        raise ValueError(f"Act {parsed.name} has negative revenue or cost")
    return parsed


def parse_venues(venues: list) -> Dict[Placement, Venue]:
    """Venues from the file, the defaults fill in whatever is left out"""
    parsed_venues = {}
    for venue in venues:
        placement = Placement.from_string(venue["name"])
        if not placement.is_venue:
            raise ValueError(f"{venue['name']} is not a venue")
        if placement in parsed_venues:
            raise ValueError(f"Venue {venue['name']} is defined twice")

        break_duration, capacity_duration, start_time = DEFAULT_VENUES[placement.value]
        parsed_venues[placement] = Venue(
            name=placement.value,
            break_duration=int(venue.get("break_duration", break_duration)),
            capacity_duration=int(venue.get("capacity_duration", capacity_duration)),
            start_time=parse_clock_time(venue.get("start_time", start_time))
        )

    for placement in Placement.venues():
        if placement not in parsed_venues:
            parsed_venues[placement] = build_default_venue(placement)

    return parsed_venues


def build_default_venue(placement: Placement) -> Venue:
    break_duration, capacity_duration, start_time = DEFAULT_VENUES[placement.value]
    return Venue(placement.value, break_duration, capacity_duration, parse_clock_time(start_time))


def parse_rule(rule: Dict):
    rule_type = rule.get("type")
    if rule_type not in RULE_TYPES:
        raise ValueError(f"No rule type found for: {rule_type}")

    try:
        if rule_type == "must_start_after":
            return MustStartAfter(rule["act"], parse_clock_time(rule["clock_time"]))
        if rule_type == "must_start_before":
            return MustStartBefore(rule["act"], parse_clock_time(rule["clock_time"]))
        if rule_type == "must_not_share_venue_with":
            if not isinstance(rule["others"], list):
                raise ValueError(f"Rule {rule}: 'others' must be a list of act names, got {rule['others']!r}")
            return MustNotShareVenueWith(rule["act"], tuple(rule["others"]))
        if rule_type == "requires_booked":
            return RequiresBooked(rule["act"], rule["required"])
        if rule_type == "must_be_adjacent_duplicate":
            return MustBeAdjacentDuplicate(rule["act"])
        if rule_type == "must_be_last_in_venue":
            return MustBeLastInVenue(rule["act"])
        if rule_type == "must_not_neighbor":
            return MustNotNeighbor(rule["act"], rule["other"])
        if rule_type == "forbidden_venue":
            return ForbiddenVenue(rule["act"], Placement.from_string(rule["venue"]))
    except KeyError as e:
        raise ValueError(f"Rule {rule} is missing field {e}")


def build_festival(parsed_data: Dict) -> Festival:
    """Festival with every act unplaced, ready for the search"""
    return Festival(
        acts=parsed_data["acts"],
        venues=parsed_data["venues"],
        budget=parsed_data["budget"],
        rules=parsed_data["rules"]
    )
