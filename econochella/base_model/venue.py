import random
from typing import Optional

from econochella.base_model.act import Act
from econochella.base_model.slot import Slot, ActSlot, BreakSlot


class Venue:
    """
    Class that manages the program of a single venue.

    The program is an ordered list of slots that alternates act, break, act, ...
    and always starts and ends with an act. Acts are inserted and removed as
    units together with one neighbouring break, so the alternation never drifts.
    """

    def __init__(self, name: str, break_duration: int, capacity_duration: int, start_time: int = 0):
        self.name: str = name
        self.break_duration: int = break_duration # minutes of changeover between two acts
        self.capacity_duration: int = capacity_duration # max length of the whole program in minutes
        self.start_time: int = start_time # clock time the program starts, in minutes since midnight
        self.slots: list[Slot] = []

        # running totals, kept in sync with the folds below by insert/remove
        self.current_time: int = 0
        self.current_cost: int = 0
        self.current_value: int = 0

    def __str__(self):
        return f"{self.name}: [{', '.join(str(slot) for slot in self.slots)}]"

    def number_of_acts(self) -> int:
        return (len(self.slots) + 1) // 2

    def insert_act(self, act: Act, rng: random.Random) -> int:
        """
        Insert the act at a uniformly random act position, including after the last act.

        Returns:
            The act position (index among act slots) the act was inserted at
        """
        position = rng.randint(0, self.number_of_acts())
        self.insert_act_at(act, position)
        return position

    def insert_act_at(self, act: Act, position: int) -> None:
        """
        Insert the act so it becomes the act number `position` (0-indexed) of the program.

        Inserting before an existing act adds the unit [act, break] in front of it and
        pushes everything behind it later. Appending adds the unit [break, act].
        The first act of an empty program gets no break.
        """
        n_acts = self.number_of_acts()
        if position < 0 or position > n_acts:
            raise ValueError(f"Act position {position} out of range for {self.name} with {n_acts} acts")

        if not self.slots:
            self.slots.append(ActSlot(0, act))
            self.current_time += act.duration

        elif position == n_acts:
            start_time = self.current_time + self.break_duration
            self.slots.extend([BreakSlot(), ActSlot(start_time, act)])
            self.current_time += self.break_duration + act.duration

        else:
            index = 2 * position
            displaced = self.slots[index]
            if not isinstance(displaced, ActSlot):
                raise ValueError(f"Expected an act slot at index {index} in {self.name}, found {displaced}")

            # the new act takes over the start time of the act it pushes back
            span = act.duration + self.break_duration
            self.slots[index:index] = [ActSlot(displaced.start_time, act), BreakSlot()]
            self._shift_start_times(index + 2, span)
            self.current_time += span

        self.current_cost += act.cost
        self.current_value += act.net_value

    def remove_act(self, act: Act) -> None:
        """
        Remove the last act in the program with the same name as `act`.

        Only one instance is removed per call, even if several acts share the name.
        """
        index = self._last_slot_index(act.name)
        if index is None:
            raise ValueError(f"Act {act.name} is not scheduled in {self.name}")

        removed: Act = self.slots[index].act

        if len(self.slots) == 1:
            self.slots.clear()
            self.current_time -= removed.duration

        elif index == 0:
            # the first act is paired with the break after it
            span = removed.duration + self.break_duration
            del self.slots[0:2]
            self._shift_start_times(0, -span)
            self.current_time -= span

        else:
            # every other act is paired with the break before it
            span = removed.duration + self.break_duration
            del self.slots[index - 1:index + 1]
            self._shift_start_times(index - 1, -span)
            self.current_time -= span

        self.current_cost -= removed.cost
        self.current_value -= removed.net_value

    def _shift_start_times(self, from_index: int, minutes: int) -> None:
        for i in range(from_index, len(self.slots)):
            slot = self.slots[i]
            if isinstance(slot, ActSlot):
                self.slots[i] = slot.shifted(minutes)

    def _last_slot_index(self, name: str) -> Optional[int]:
        for i in range(len(self.slots) - 1, -1, -1):
            slot = self.slots[i]
            if isinstance(slot, ActSlot) and slot.act.name == name:
                return i
        return None

    def cost(self) -> int:
        """Total booking cost of the program"""
        return sum(slot.act.cost for slot in self.slots if isinstance(slot, ActSlot))

    def time(self) -> int:
        """Total length of the program in minutes, breaks included"""
        total = 0
        for slot in self.slots:
            if isinstance(slot, ActSlot):
                total += slot.act.duration
            else:
                total += self.break_duration
        return total

    def value(self) -> int:
        """Total net value (revenue - cost) of the program"""
        return sum(slot.act.net_value for slot in self.slots if isinstance(slot, ActSlot))

    def check_invariants(self) -> None:
        """
        Raise ValueError if the slot sequence or the running totals are inconsistent.
        """
        if self.slots and len(self.slots) % 2 == 0:
            raise ValueError(f"{self.name} has an even number of slots ({len(self.slots)}), a break is dangling")

        elapsed = 0
        for i, slot in enumerate(self.slots):
            if i % 2 == 0:
                if not isinstance(slot, ActSlot):
                    raise ValueError(f"{self.name} expected an act at index {i}, found {slot}")
                if slot.start_time != elapsed:
                    raise ValueError(f"{self.name} act {slot.act.name} at index {i} starts at {slot.start_time}, expected {elapsed}")
                elapsed += slot.act.duration
            else:
                if not isinstance(slot, BreakSlot):
                    raise ValueError(f"{self.name} expected a break at index {i}, found {slot}")
                elapsed += self.break_duration

        if elapsed != self.current_time or self.time() != self.current_time:
            raise ValueError(f"{self.name} time out of sync: fold {self.time()}, running {self.current_time}")
        if self.cost() != self.current_cost:
            raise ValueError(f"{self.name} cost out of sync: fold {self.cost()}, running {self.current_cost}")
        if self.value() != self.current_value:
            raise ValueError(f"{self.name} value out of sync: fold {self.value()}, running {self.current_value}")

    def act_slots(self) -> list[ActSlot]:
        return [slot for slot in self.slots if isinstance(slot, ActSlot)]

    def act_names(self) -> list[str]:
        return [slot.act.name for slot in self.act_slots()]

    def contains(self, name: str) -> bool:
        return any(isinstance(slot, ActSlot) and slot.act.name == name for slot in self.slots)

    def first_act_slot(self, name: str) -> Optional[ActSlot]:
        for slot in self.slots:
            if isinstance(slot, ActSlot) and slot.act.name == name:
                return slot
        return None

    def slot_positions(self, name: str) -> list[int]:
        """Raw indices in the slot sequence (breaks counted) of every act with this name"""
        return [i for i, slot in enumerate(self.slots) if isinstance(slot, ActSlot) and slot.act.name == name]

    def act_positions(self, name: str) -> list[int]:
        """Indices among the act slots only (breaks ignored) of every act with this name"""
        return [i for i, act_name in enumerate(self.act_names()) if act_name == name]

    def last_slot(self) -> Optional[Slot]:
        return self.slots[-1] if self.slots else None

    def clone(self) -> 'Venue':
        # slots are immutable, copying the list is enough
        venue = Venue(self.name, self.break_duration, self.capacity_duration, self.start_time)
        venue.slots = list(self.slots)
        venue.current_time = self.current_time
        venue.current_cost = self.current_cost
        venue.current_value = self.current_value
        return venue

    def to_json(self) -> dict:
        program = []
        for slot in self.slots:
            if isinstance(slot, ActSlot):
                program.append({"act": slot.act.name, "start_time": slot.start_time})
            else:
                program.append({"break": self.break_duration})
        return {
            "name": self.name,
            "break_duration": self.break_duration,
            "capacity_duration": self.capacity_duration,
            "start_time": self.start_time,
            "cost": self.cost(),
            "time": self.time(),
            "value": self.value(),
            "program": program,
        }
