"""In-progress, unsubmitted choice of numbers."""

from __future__ import annotations

from .pool import MAX_NUMBERS_PER_PARTICIPANT, NumberPool, is_valid_number


class SelectionBuffer:
    def __init__(self, capacity: int = MAX_NUMBERS_PER_PARTICIPANT) -> None:
        self.capacity = capacity
        self._numbers: list[int] = []

    @property
    def numbers(self) -> tuple[int, ...]:
        return tuple(self._numbers)

    @property
    def is_full(self) -> bool:
        return len(self._numbers) >= self.capacity

    def __len__(self) -> int:
        return len(self._numbers)

    def __contains__(self, number: object) -> bool:
        return number in self._numbers

    def toggle(self, number: int, pool: NumberPool) -> bool:
        """Select or deselect ``number``; returns whether the buffer changed.

        Occupied numbers and clicks past capacity are ignored.
        """
        if not is_valid_number(number) or pool.is_occupied(number):
            return False
        if number in self._numbers:
            self._numbers.remove(number)
            return True
        if self.is_full:
            return False
        self._numbers.append(number)
        return True

    def prune(self, pool: NumberPool) -> list[int]:
        """Drop numbers that someone else claimed since they were selected."""
        dropped = [number for number in self._numbers if pool.is_occupied(number)]
        if dropped:
            self._numbers = [number for number in self._numbers if number not in dropped]
        return dropped

    def clear(self) -> None:
        self._numbers = []
