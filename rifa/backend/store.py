"""Storage interface and in-memory implementation for raffle participants."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Protocol

from rifa.backend.models import MAX_NUMBERS_PER_PARTICIPANT, POOL_SIZE, ParticipantRecord

logger = logging.getLogger(__name__)


class StoreRejection(Exception):
    """Raised when a claim violates the raffle rules."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ParticipantStore(Protocol):
    def list_participants(self) -> list[ParticipantRecord]:
        """Return every participant in registration order."""

    def add_participant(self, name: str, numbers: list[int]) -> ParticipantRecord:
        """Register a participant or raise StoreRejection."""

    def reset(self) -> None:
        """Remove every participant."""


@dataclass
class InMemoryParticipantStore:
    pool_size: int = POOL_SIZE
    max_numbers: int = MAX_NUMBERS_PER_PARTICIPANT

    def __post_init__(self) -> None:
        self._participants: list[ParticipantRecord] = []
        self._taken: dict[int, str] = {}
        # sync endpoints run in a threadpool; check-then-claim must be atomic
        self._lock = threading.Lock()

    def list_participants(self) -> list[ParticipantRecord]:
        with self._lock:
            return list(self._participants)

    def add_participant(self, name: str, numbers: list[int]) -> ParticipantRecord:
        clean_name = name.strip()
        if clean_name == "":
            raise StoreRejection("El nombre es obligatorio")
        if not numbers or len(numbers) > self.max_numbers:
            raise StoreRejection(f"Debes elegir entre 1 y {self.max_numbers} números")
        if len(set(numbers)) != len(numbers):
            raise StoreRejection("Los números no pueden repetirse")
        for number in numbers:
            if not 0 <= number < self.pool_size:
                raise StoreRejection(f"El número {number} está fuera de rango")

        with self._lock:
            for number in numbers:
                owner = self._taken.get(number)
                if owner is not None:
                    raise StoreRejection(f"El número {number:03d} ya fue tomado por {owner}")

            record = ParticipantRecord(name=clean_name, numbers=tuple(numbers))
            self._participants.append(record)
            for number in numbers:
                self._taken[number] = clean_name
        logger.info("Registered %s with numbers %s", clean_name, list(numbers))
        return record

    def reset(self) -> None:
        with self._lock:
            removed = len(self._participants)
            self._participants = []
            self._taken = {}
        logger.info("Raffle reset, %d participants removed", removed)


def create_store() -> ParticipantStore:
    return InMemoryParticipantStore()
