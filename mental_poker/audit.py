"""Reveal-phase audit: check every peer's disclosed secrets.

A failed check is an expected outcome when a peer cheats, so it is reported
as data (``VerificationFailure``) and logged, never raised.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from mental_poker.models import ProtocolSettings
from mental_poker.player import Player

logger = logging.getLogger(__name__)

MISSING_REVEAL = "missing reveal"
MALFORMED_VIEW = "malformed public view"
MALFORMED_REVEAL = "malformed reveal"
NO_COMMITMENTS = "no commitments published"
COMMITMENT_MISMATCH = "commitment mismatch"


class VerificationFailure:
    __slots__ = ("peer_id", "reason")

    def __init__(self, peer_id: str, reason: str) -> None:
        self.peer_id = peer_id
        self.reason = reason

    def __repr__(self) -> str:
        return f"VerificationFailure({self.peer_id!r}, {self.reason!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VerificationFailure):
            return NotImplemented
        return self.peer_id == other.peer_id and self.reason == other.reason

    def __hash__(self) -> int:
        return hash((self.peer_id, self.reason))

    @property
    def message(self) -> str:
        return f"peer {self.peer_id} failed secret verification ({self.reason})"

    def to_dict(self) -> dict[str, str]:
        return {"peer_id": self.peer_id, "reason": self.reason, "message": self.message}


def _check_peer(
    peer_id: str,
    public_view: Mapping[str, Any],
    revealed: Optional[Sequence[str]],
    settings: Optional[ProtocolSettings],
) -> Optional[VerificationFailure]:
    if revealed is None:
        return VerificationFailure(peer_id, MISSING_REVEAL)

    try:
        peer = Player.from_public_view(dict(public_view), settings)
    except ValueError:
        return VerificationFailure(peer_id, MALFORMED_VIEW)

    if not peer.secret_hashes:
        return VerificationFailure(peer_id, NO_COMMITMENTS)

    try:
        peer.apply_reveal(revealed)
    except (TypeError, ValueError):
        return VerificationFailure(peer_id, MALFORMED_REVEAL)

    if not peer.verify_secrets_by_hashes():
        return VerificationFailure(peer_id, COMMITMENT_MISMATCH)
    return None


def verify_reveal(
    public_view: Mapping[str, Any],
    revealed: Sequence[str],
    settings: Optional[ProtocolSettings] = None,
) -> bool:
    """True if ``revealed`` matches the commitments in ``public_view``."""
    return _check_peer("?", public_view, revealed, settings) is None


def audit_reveals(
    public_views: Mapping[str, Mapping[str, Any]],
    reveals: Mapping[str, Sequence[str]],
    settings: Optional[ProtocolSettings] = None,
) -> list[VerificationFailure]:
    """Check each peer's reveal against its published view.

    Returns one failure per peer that did not verify, in ``public_views``
    order. An empty list means everyone passed.
    """
    failures: list[VerificationFailure] = []
    for peer_id, view in public_views.items():
        failure = _check_peer(peer_id, view, reveals.get(peer_id), settings)
        if failure is not None:
            logger.warning(failure.message)
            failures.append(failure)
    logger.info("Reveal audit: %d peers checked, %d failed", len(public_views), len(failures))
    return failures
