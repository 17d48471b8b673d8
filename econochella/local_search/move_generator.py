import random

from econochella.base_model.festival import Festival
from econochella.base_model.placement import Placement
from econochella.local_search.move import Move


def choose_placement(rng: random.Random) -> Placement:
    """Uniform draw over every venue and UNPLACED"""
    options = list(Placement)
    return options[rng.randint(0, len(options) - 1)]


def generate_random_move(festival: Festival, rng: random.Random) -> Move:
    """
    Pick a random act and a random target placement.

    The target is drawn independently of where the act is now. Drawing the same
    venue again amounts to taking the act out and re-inserting it at a random spot.
    """
    act_index, current_placement = festival.choose_act(rng)
    new_placement = choose_placement(rng)
    return Move(act_index, current_placement, new_placement)
