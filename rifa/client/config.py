"""Configuration helpers for the board client."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .pool import CollisionPolicy


@dataclass(frozen=True)
class ClientSettings:
    server_url: str
    timeout_s: float
    collision_policy: CollisionPolicy
    snapshot_dir: Path


def load_settings() -> ClientSettings:
    timeout_raw = os.getenv("RIFA_TIMEOUT_S", "10.0")
    policy_raw = os.getenv("RIFA_COLLISION_POLICY", CollisionPolicy.LAST_WINS.value)
    return ClientSettings(
        server_url=os.getenv("RIFA_SERVER_URL", "http://127.0.0.1:4000").rstrip("/"),
        timeout_s=float(timeout_raw),
        collision_policy=CollisionPolicy(policy_raw.strip().lower()),
        snapshot_dir=Path(os.getenv("RIFA_SNAPSHOT_DIR", ".")),
    )
