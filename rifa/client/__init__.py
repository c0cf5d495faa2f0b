"""Board client: local number pool, selection and server synchronization."""

from .allocation import AllocationClient, SubmitState, validate_claim
from .config import ClientSettings, load_settings
from .confirm import RESET_PHRASE, Confirmation, ConsoleConfirmation, require_reset_confirmation
from .errors import (
    BusyError,
    ConfirmationAborted,
    NetworkError,
    RejectionError,
    RifaError,
    SnapshotError,
    ValidationError,
)
from .pool import PALETTE, POOL_SIZE, CollisionPolicy, NumberPool, Participant, participant_color
from .presentation import BoardStats, CellView, board_stats, describe_board, describe_cell, format_number
from .selection import SelectionBuffer

__all__ = [
    "AllocationClient",
    "board_stats",
    "BoardStats",
    "BusyError",
    "CellView",
    "ClientSettings",
    "CollisionPolicy",
    "Confirmation",
    "ConfirmationAborted",
    "ConsoleConfirmation",
    "describe_board",
    "describe_cell",
    "format_number",
    "load_settings",
    "NetworkError",
    "NumberPool",
    "PALETTE",
    "Participant",
    "participant_color",
    "POOL_SIZE",
    "RejectionError",
    "require_reset_confirmation",
    "RESET_PHRASE",
    "RifaError",
    "SelectionBuffer",
    "SnapshotError",
    "SubmitState",
    "ValidationError",
    "validate_claim",
]
