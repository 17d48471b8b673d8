import random

from econochella.base_model.festival import Festival
from econochella.base_model.placement import Placement


class Move:
    """Relocation of a single act instance to another placement"""

    def __init__(self, act_index: int, old_placement: Placement, new_placement: Placement):
        self.act_index = act_index
        self.old_placement = old_placement
        self.new_placement = new_placement
        self.inserted_at = None # act position in the new venue, set once applied
        self.is_applied = False

    def __str__(self):
        move_type = [f"{self.old_placement} → {self.new_placement}"]
        if self.inserted_at is not None:
            move_type.append(f"position {self.inserted_at}")
        if self.is_delete_move:
            move_type.append("delete")
        if self.is_insert_move:
            move_type.append("insert")
        return f"Move(act {self.act_index}: {', '.join(move_type)})"

    @property
    def is_insert_move(self) -> bool:
        return not self.old_placement.is_venue and self.new_placement.is_venue

    @property
    def is_delete_move(self) -> bool:
        return self.old_placement.is_venue and not self.new_placement.is_venue


def do_move(move: Move, festival: Festival, rng: random.Random) -> None:
    """
    Apply the move to the festival. Use it on a clone, there is no undo.
    """
    if move.is_applied:
        return

    current = festival.placements[move.act_index]
    if current is not move.old_placement:
        raise ValueError(f"Act {move.act_index} is placed at {current}, the move expects {move.old_placement}")

    if move.new_placement.is_venue:
        venue = festival.venues[move.new_placement]
        n_acts = venue.number_of_acts()
        if move.old_placement is move.new_placement:
            n_acts -= 1 # the act leaves this venue before it is re-inserted
        move.inserted_at = rng.randint(0, n_acts)
        festival.move_act(move.act_index, move.new_placement, position=move.inserted_at)
    else:
        festival.move_act(move.act_index, move.new_placement)

    move.is_applied = True
