"""Participant-store server for the raffle board."""

from .config import BackendSettings, load_settings
from .models import MAX_NUMBERS_PER_PARTICIPANT, POOL_SIZE, ParticipantRecord
from .store import InMemoryParticipantStore, ParticipantStore, StoreRejection, create_store

__all__ = [
    "BackendSettings",
    "create_store",
    "InMemoryParticipantStore",
    "load_settings",
    "MAX_NUMBERS_PER_PARTICIPANT",
    "ParticipantRecord",
    "ParticipantStore",
    "POOL_SIZE",
    "StoreRejection",
]
