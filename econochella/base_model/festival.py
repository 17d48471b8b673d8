import random
from collections import Counter
from typing import Any, Iterator, Optional

from econochella.base_model.act import Act
from econochella.base_model.placement import Placement
from econochella.base_model.slot import Slot
from econochella.base_model.venue import Venue


class Festival:
    """
    Class that manages a complete line-up: the three venue programs and where
    every act instance of the catalogue currently is.

    `acts` and `placements` are parallel lists, one entry per act instance in
    catalogue order. Duplicate names are tracked independently.
    """

    def __init__(self, acts: list[Act], venues: dict[Placement, Venue], budget: int, rules: Optional[list[Any]] = None):
        if not acts:
            raise ValueError("The act catalogue is empty, there is nothing to schedule")

        missing_venues = [placement for placement in Placement.venues() if placement not in venues]
        if missing_venues:
            raise ValueError(f"No venue configured for: {', '.join(str(p) for p in missing_venues)}")
        if Placement.UNPLACED in venues:
            raise ValueError("UNPLACED is not a venue")
        booked_venues = [venue.name for venue in venues.values() if venue.slots]
        if booked_venues:
            raise ValueError(f"Venues must start with an empty program: {', '.join(booked_venues)}")

        self.acts: list[Act] = list(acts)
        self.placements: list[Placement] = [Placement.UNPLACED] * len(self.acts) # every act starts unbooked
        self.venues: dict[Placement, Venue] = {placement: venue.clone() for placement, venue in venues.items()}
        self.budget: int = budget
        self.rules: tuple = tuple(rules) if rules else () # rule objects, see local_search/rules.py

    def __str__(self):
        return "\n".join(str(self.venues[placement]) for placement in Placement.venues())

    def knapsack(self) -> Iterator[tuple[Act, Placement]]:
        return zip(self.acts, self.placements)

    def choose_act(self, rng: random.Random) -> tuple[int, Placement]:
        """Pick a uniformly random act instance and return its index and current placement"""
        index = rng.randint(0, len(self.acts) - 1)
        return index, self.placements[index]

    def move_act(self, index: int, new_placement: Placement, rng: Optional[random.Random] = None, position: Optional[int] = None) -> None:
        """
        Take the act out of its current venue (if any) and put it into the new one (if any).

        The act lands on a random act position unless `position` is given.
        Moving to the same venue removes and re-inserts it, usually somewhere else.
        """
        act = self.acts[index]
        old_placement = self.placements[index]

        if old_placement.is_venue:
            self.venues[old_placement].remove_act(act)

        if new_placement.is_venue:
            venue = self.venues[new_placement]
            if position is not None:
                venue.insert_act_at(act, position)
            elif rng is not None:
                venue.insert_act(act, rng)
            else:
                raise ValueError("Either a random generator or an explicit position is needed to insert an act")

        self.placements[index] = new_placement

    def place_act(self, index: int, placement: Placement, position: Optional[int] = None) -> None:
        """Deterministic move, appends to the end of the program when no position is given"""
        if placement.is_venue and position is None:
            venue = self.venues[placement]
            position = venue.number_of_acts()
            if self.placements[index] is placement:
                position -= 1
        self.move_act(index, placement, position=position)

    def get_venue(self, placement: Placement) -> Venue:
        if not placement.is_venue:
            raise ValueError("Unplaced acts have no venue")
        return self.venues[placement]

    def get_schedule(self, placement: Placement) -> list[Slot]:
        if not placement.is_venue:
            return []
        return self.venues[placement].slots

    def index_of(self, name: str) -> int:
        for i, act in enumerate(self.acts):
            if act.name == name:
                return i
        raise ValueError(f"Act {name} not found in the catalogue")

    def indices_of(self, name: str) -> list[int]:
        return [i for i, act in enumerate(self.acts) if act.name == name]

    def placement_of(self, name: str) -> Placement:
        """Placement of the first instance with this name"""
        return self.placements[self.index_of(name)]

    def placements_of(self, name: str) -> list[Placement]:
        indices = self.indices_of(name)
        if not indices:
            raise ValueError(f"Act {name} not found in the catalogue")
        return [self.placements[i] for i in indices]

    def is_booked(self, name: str) -> bool:
        return any(venue.contains(name) for venue in self.venues.values())

    def planned_acts(self) -> list[Act]:
        return [act for act, placement in self.knapsack() if placement.is_venue]

    def unplanned_acts(self) -> list[Act]:
        return [act for act, placement in self.knapsack() if not placement.is_venue]

    def total_cost(self) -> int:
        return sum(venue.cost() for venue in self.venues.values())

    def check_consistency(self) -> None:
        """
        Raise ValueError if a venue program is broken, or if the placements do not
        match what the venue programs actually contain.
        """
        for venue in self.venues.values():
            venue.check_invariants()

        expected = Counter((act.name, placement) for act, placement in self.knapsack() if placement.is_venue)
        actual = Counter()
        for placement, venue in self.venues.items():
            for name in venue.act_names():
                actual[(name, placement)] += 1

        if expected != actual:
            raise ValueError(f"Placements and venue programs differ: expected {dict(expected)}, found {dict(actual)}")

    def clone(self) -> 'Festival':
        festival = Festival.__new__(Festival)
        festival.acts = self.acts
        festival.placements = list(self.placements)
        festival.venues = {placement: venue.clone() for placement, venue in self.venues.items()}
        festival.budget = self.budget
        festival.rules = self.rules
        return festival

    def to_json(self) -> dict:
        return {
            "budget": self.budget,
            "cost": self.total_cost(),
            "venues": {placement.value: self.venues[placement].to_json() for placement in Placement.venues()},
            "unplaced": [act.name for act in self.unplanned_acts()],
        }
