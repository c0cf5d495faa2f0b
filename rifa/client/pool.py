"""Local ownership model of the 1000 raffle numbers."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import ValidationError

logger = logging.getLogger(__name__)

POOL_SIZE = 1000
MAX_NUMBERS_PER_PARTICIPANT = 3

PALETTE: tuple[str, ...] = (
    "#3B82F6",
    "#EF4444",
    "#10B981",
    "#F59E0B",
    "#8B5CF6",
    "#EC4899",
    "#06B6D4",
    "#84CC16",
    "#F97316",
    "#6366F1",
    "#14B8A6",
    "#F43F5E",
    "#8B5A2B",
    "#6B7280",
    "#7C3AED",
)


class CollisionPolicy(str, Enum):
    LAST_WINS = "last_wins"
    REJECT = "reject"


@dataclass(frozen=True)
class Participant:
    name: str
    numbers: tuple[int, ...]
    color: str


def participant_color(index: int) -> str:
    """Display color for the participant at ``index`` in the fetched list."""
    return PALETTE[index % len(PALETTE)]


def is_valid_number(number: Any) -> bool:
    return isinstance(number, int) and not isinstance(number, bool) and 0 <= number < POOL_SIZE


def _read_entry(entry: Mapping[str, Any] | Participant, index: int) -> tuple[str, tuple[int, ...]]:
    if isinstance(entry, Participant):
        name, numbers = entry.name, entry.numbers
    elif isinstance(entry, Mapping):
        name, numbers = entry.get("name"), entry.get("numbers")
    else:
        raise ValidationError(f"Participant #{index} is not an object")

    if not isinstance(name, str) or name.strip() == "":
        raise ValidationError(f"Participant #{index} has no name")
    if not isinstance(numbers, (list, tuple)):
        raise ValidationError(f"Participant {name!r} has no number list")
    if not 1 <= len(numbers) <= MAX_NUMBERS_PER_PARTICIPANT:
        raise ValidationError(
            f"Participant {name!r} owns {len(numbers)} numbers, expected 1-{MAX_NUMBERS_PER_PARTICIPANT}"
        )
    for number in numbers:
        if not is_valid_number(number):
            raise ValidationError(f"Participant {name!r} owns invalid number {number!r}")
    if len(set(numbers)) != len(numbers):
        raise ValidationError(f"Participant {name!r} lists the same number twice")
    return name, tuple(numbers)


class NumberPool:
    """Number -> owning participant, always rebuilt from a full server listing."""

    def __init__(self, collision_policy: CollisionPolicy = CollisionPolicy.LAST_WINS) -> None:
        self.collision_policy = collision_policy
        self._owners: dict[int, Participant] = {}
        self._participants: tuple[Participant, ...] = ()

    @property
    def participants(self) -> tuple[Participant, ...]:
        return self._participants

    @property
    def occupied_count(self) -> int:
        return len(self._owners)

    @property
    def available_count(self) -> int:
        return POOL_SIZE - len(self._owners)

    def is_occupied(self, number: int) -> bool:
        return number in self._owners

    def owner_of(self, number: int) -> Participant | None:
        return self._owners.get(number)

    def occupied_numbers(self) -> list[int]:
        return sorted(self._owners)

    def rebuild(self, entries: Iterable[Mapping[str, Any] | Participant]) -> None:
        """Replace all ownership with ``entries``.

        Entries are validated first; on any ValidationError the pool keeps its
        previous contents. Colors are assigned from list position on every call.
        """
        participants: list[Participant] = []
        owners: dict[int, Participant] = {}
        for index, entry in enumerate(entries):
            name, numbers = _read_entry(entry, index)
            participant = Participant(name=name, numbers=numbers, color=participant_color(index))
            for number in numbers:
                previous = owners.get(number)
                if previous is not None:
                    if self.collision_policy is CollisionPolicy.REJECT:
                        raise ValidationError(
                            f"Number {number:03d} is claimed by both {previous.name!r} and {name!r}"
                        )
                    logger.warning(
                        "Server listed number %03d for both %r and %r; keeping %r",
                        number,
                        previous.name,
                        name,
                        name,
                    )
                owners[number] = participant
            participants.append(participant)

        self._owners, self._participants = owners, tuple(participants)
        logger.debug("Pool rebuilt: %d participants, %d numbers taken", len(participants), len(owners))
