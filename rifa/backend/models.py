"""Domain records and limits shared by the participant store."""

from __future__ import annotations

from dataclasses import dataclass

POOL_SIZE = 1000
MAX_NUMBERS_PER_PARTICIPANT = 3


@dataclass(frozen=True)
class ParticipantRecord:
    name: str
    numbers: tuple[int, ...]

    def to_payload(self) -> dict[str, object]:
        return {"name": self.name, "numbers": list(self.numbers)}
