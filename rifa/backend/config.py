"""Configuration helpers for the participant-store server."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class BackendSettings:
    host: str
    port: int


def load_settings() -> BackendSettings:
    port_raw = os.getenv("RIFA_PORT", "4000")
    return BackendSettings(
        host=os.getenv("RIFA_HOST", "127.0.0.1"),
        port=int(port_raw),
    )
