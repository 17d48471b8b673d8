from dataclasses import dataclass
from typing import Union

from econochella.base_model.act import Act


@dataclass(frozen=True)
class BreakSlot:
    """Changeover break. Its length is the venue's break duration."""

    def __str__(self):
        return "Break"


@dataclass(frozen=True)
class ActSlot:
    """A performance in a venue's program"""
    start_time: int  # minutes since the venue's program start
    act: Act

    def __str__(self):
        return f"{self.act.name}@{self.start_time}"

    def shifted(self, minutes: int) -> 'ActSlot':
        return ActSlot(self.start_time + minutes, self.act)


Slot = Union[BreakSlot, ActSlot]
