"""Environment-driven configuration."""

from __future__ import annotations

import os

from mental_poker.models import CommitmentPolicy, ProtocolSettings

REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def load_settings() -> ProtocolSettings:
    """Build validated protocol settings from the current environment."""
    return ProtocolSettings(
        cards_in_deck=int(os.getenv("MENTAL_POKER_CARDS_IN_DECK", "52")),
        extra_secret=_env_bool("MENTAL_POKER_EXTRA_SECRET", True),
        curve=os.getenv("MENTAL_POKER_CURVE", "P-256"),
        commitment_policy=CommitmentPolicy(
            os.getenv("MENTAL_POKER_COMMITMENT_POLICY", CommitmentPolicy.EAGER.value)
        ),
    )


DEFAULT_SETTINGS = load_settings()
