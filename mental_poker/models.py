"""Pydantic models for protocol settings and the public player view."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

CURVE_COORDINATE_BYTES = {"P-256": 32, "P-384": 48, "P-521": 66}

SecretHash = Annotated[str, Field(pattern=r"^[0-9a-f]{64}$")]


class CommitmentPolicy(str, Enum):
    EAGER = "eager"  # hashes computed once and stored on the player
    LAZY = "lazy"  # hashes recomputed on every read, never stored


# --- Settings ---


class ProtocolSettings(BaseModel):
    """Per-round protocol parameters chosen by the surrounding game."""

    model_config = ConfigDict(frozen=True)

    cards_in_deck: int = Field(default=52, ge=1)
    extra_secret: bool = True  # one secret per card plus one
    curve: str = Field(default="P-256", pattern=r"^P-(256|384|521)$")
    point_count: Optional[int] = Field(default=None, ge=0)  # None = one per card
    commitment_policy: CommitmentPolicy = CommitmentPolicy.EAGER

    @property
    def secret_count(self) -> int:
        return self.cards_in_deck + (1 if self.extra_secret else 0)

    @property
    def points_per_player(self) -> int:
        if self.point_count is None:
            return self.cards_in_deck
        return self.point_count

    @property
    def coordinate_bytes(self) -> int:
        return CURVE_COORDINATE_BYTES[self.curve]


# --- Public view ---


class EncodedPoint(BaseModel):
    model_config = ConfigDict(extra="forbid")

    x: str = Field(..., pattern=r"^[0-9a-f]+$")
    y: str = Field(..., pattern=r"^[0-9a-f]+$")

    @model_validator(mode="after")
    def _same_width(self) -> EncodedPoint:
        if len(self.x) != len(self.y):
            raise ValueError("Point coordinates must have the same width")
        return self


class PublicPlayerView(BaseModel):
    """What a peer publishes before the reveal phase (no secrets, no bets)."""

    model_config = ConfigDict(extra="forbid")

    public_key: Optional[str] = None
    points: list[EncodedPoint] = Field(default_factory=list)
    secret_hashes: list[SecretHash] = Field(default_factory=list)
