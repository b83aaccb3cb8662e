"""Player state for the commit-reveal card protocol.

A player owns a fixed number of secrets (one per card slot, plus an optional
extra one), publishes SHA-256 commitments to them before play, and discloses
the raw secrets only at the reveal phase. Peers rebuild a player from its
public view, apply the revealed secrets, and check them against the
commitments published earlier.

Two commitment policies share this one class:

* ``CommitmentPolicy.EAGER``: commitments are computed as soon as every
  secret is known and stored in ``secret_hashes``.
* ``CommitmentPolicy.LAZY``: commitments are recomputed by
  ``get_secret_hashes()`` on every read and never stored. Commitments that
  were supplied from outside (e.g. received from a peer) are still kept.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from mental_poker import crypto
from mental_poker.bets import Bet, BetType
from mental_poker.cards import Card
from mental_poker.commitment import commit_all, secret_from_hex, secret_to_hex
from mental_poker.config import DEFAULT_SETTINGS
from mental_poker.crypto import Point
from mental_poker.models import CommitmentPolicy, ProtocolSettings, PublicPlayerView

logger = logging.getLogger(__name__)


class Player:
    """A mutable participant of a game, owned by a single local caller."""

    def __init__(
        self,
        public_key: Optional[str] = None,
        points: Optional[Sequence[Point]] = None,
        secrets: Optional[Sequence[Optional[int]]] = None,
        secret_hashes: Optional[Sequence[str]] = None,
        bets: Optional[Sequence[Bet]] = None,
        cards_in_hand: Optional[Sequence[Card]] = None,
        settings: Optional[ProtocolSettings] = None,
        policy: Optional[CommitmentPolicy] = None,
    ) -> None:
        self.settings = settings or DEFAULT_SETTINGS
        self.policy = (
            CommitmentPolicy(policy) if policy is not None else self.settings.commitment_policy
        )
        self.public_key = public_key
        self.points: list[Point] = list(points or [])
        self._bets: list[Bet] = list(bets or [])
        self._check_bet_history(self._bets)
        self.cards_in_hand: list[Card] = list(cards_in_hand or [])
        self._secret_hashes: list[str] = list(secret_hashes or [])

        if secrets is not None:
            self.secrets: list[Optional[int]] = list(secrets)
        elif self._secret_hashes:
            self.secrets = [None] * len(self._secret_hashes)
        else:
            self.secrets = [None] * self.settings.secret_count

        if self._secret_hashes and len(self._secret_hashes) != len(self.secrets):
            raise ValueError(
                f"Got {len(self.secrets)} secrets but {len(self._secret_hashes)} secret hashes"
            )

        # Force setting hashes when every secret is known
        if (
            not self._secret_hashes
            and self.policy is CommitmentPolicy.EAGER
            and self._all_secrets_known()
        ):
            self._secret_hashes = commit_all(self.secrets)

    @staticmethod
    def _check_bet_history(bets: Sequence[Bet]) -> None:
        for bet in bets[:-1]:
            if bet.type is BetType.FOLD:
                raise ValueError("Bet history continues after a fold")

    def _all_secrets_known(self) -> bool:
        return all(s is not None for s in self.secrets)

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    @property
    def bets(self) -> tuple[Bet, ...]:
        """Read-only bet history; append through ``record_bet``."""
        return tuple(self._bets)

    @property
    def has_folded(self) -> bool:
        if not self._bets:
            return False
        return self._bets[-1].type is BetType.FOLD

    @property
    def secret_hashes(self) -> list[str]:
        if self.policy is CommitmentPolicy.EAGER or self._secret_hashes:
            return self._secret_hashes
        if not self._all_secrets_known():
            return []
        return self.get_secret_hashes()

    @secret_hashes.setter
    def secret_hashes(self, value: Sequence[str]) -> None:
        self._secret_hashes = list(value)

    def get_secret_hashes(self) -> list[str]:
        """Recompute commitments over the current secrets. Nothing is cached."""
        if not self._all_secrets_known():
            raise ValueError("Secrets are not fully populated")
        return commit_all(self.secrets)

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def generate_points(self) -> Player:
        """Replace all points with freshly generated ones."""
        self.points = crypto.get_random_points(
            self.settings.points_per_player, self.settings.curve
        )
        logger.debug("Generated %d points on %s", len(self.points), self.settings.curve)
        return self

    def generate_secrets(self) -> Player:
        """Replace all secrets with fresh ones and refresh their commitments."""
        self.secrets = crypto.get_random_secrets(self.settings.secret_count)
        if self.policy is CommitmentPolicy.EAGER:
            self._secret_hashes = commit_all(self.secrets)
        else:
            self._secret_hashes = []
        logger.debug("Generated %d secrets (%s commitments)", len(self.secrets), self.policy.value)
        return self

    # ------------------------------------------------------------------
    # Verification & reveal
    # ------------------------------------------------------------------

    def verify_secrets_by_hashes(self, expected: Optional[Sequence[str]] = None) -> bool:
        """Check the secrets against ``expected`` (default: ``secret_hashes``).

        Returns False instead of raising when a secret is missing or
        malformed, or when the number of hashes does not match.
        """
        if expected is None:
            expected = self.secret_hashes
        if not self._all_secrets_known():
            return False
        try:
            real_hashes = commit_all(self.secrets)
        except (TypeError, ValueError):
            return False

        if len(expected) != len(real_hashes):
            return False
        for i in range(len(real_hashes) - 1, -1, -1):
            if expected[i] != real_hashes[i]:
                return False
        return True

    def reveal_secrets(self) -> list[str]:
        """Fixed-width hex secrets to disclose at the reveal phase."""
        if not self._all_secrets_known():
            raise ValueError("Cannot reveal before all secrets are generated")
        return [secret_to_hex(s) for s in self.secrets]

    def apply_reveal(self, revealed: Sequence[str]) -> None:
        """Store secrets disclosed by this (peer) player."""
        self.secrets = [secret_from_hex(h) for h in revealed]

    # ------------------------------------------------------------------
    # Game actions
    # ------------------------------------------------------------------

    def record_bet(self, bet: Bet) -> None:
        """Append a wagering action. Folding ends the player's round."""
        if not isinstance(bet, Bet):
            raise TypeError(f"Expected a Bet, got {type(bet).__name__}")
        if self.has_folded:
            raise ValueError("Player has already folded")
        self._bets.append(bet)

    def reset_for_new_round(self) -> None:
        self.points = []
        self.secrets = [None] * self.settings.secret_count
        self._secret_hashes = []
        self._bets = []
        self.cards_in_hand = []

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_public_view(self) -> dict[str, Any]:
        """Serialize what may be shown to peers. Secrets, bets and cards never are."""
        view: dict[str, Any] = {}
        if self.public_key:
            view["public_key"] = self.public_key
        if self.points:
            width = self.settings.coordinate_bytes
            view["points"] = [p.to_dict(width) for p in self.points]
        hashes = self.secret_hashes
        if hashes:
            view["secret_hashes"] = list(hashes)
        return view

    @classmethod
    def from_public_view(
        cls,
        data: dict[str, Any] | PublicPlayerView,
        settings: Optional[ProtocolSettings] = None,
    ) -> Player:
        """Rebuild a peer from its published view."""
        view = data if isinstance(data, PublicPlayerView) else PublicPlayerView.model_validate(data)
        width = (settings or DEFAULT_SETTINGS).coordinate_bytes * 2
        for p in view.points:
            if len(p.x) != width:
                raise ValueError(f"Point coordinates must be {width} hex characters")
        return cls(
            public_key=view.public_key,
            points=[Point.from_dict(p.model_dump()) for p in view.points],
            secret_hashes=view.secret_hashes,
            settings=settings,
        )

    def to_dict(self) -> dict[str, Any]:
        """Full private state, for the owner's own persistence only."""
        width = self.settings.coordinate_bytes
        return {
            "public_key": self.public_key,
            "points": [p.to_dict(width) for p in self.points],
            "secrets": [secret_to_hex(s) if s is not None else None for s in self.secrets],
            "secret_hashes": list(self._secret_hashes),
            "bets": [b.to_dict() for b in self.bets],
            "cards_in_hand": [c.to_dict() for c in self.cards_in_hand],
            "settings": self.settings.model_dump(mode="json"),
            "policy": self.policy.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Player:
        settings_data = data.get("settings")
        settings = ProtocolSettings.model_validate(settings_data) if settings_data else None
        return cls(
            public_key=data.get("public_key"),
            points=[Point.from_dict(p) for p in data.get("points", [])],
            secrets=(
                [secret_from_hex(s) if s is not None else None for s in data["secrets"]]
                if data.get("secrets") is not None
                else None
            ),
            secret_hashes=data.get("secret_hashes", []),
            bets=[Bet.from_dict(b) for b in data.get("bets", [])],
            cards_in_hand=[Card.from_dict(c) for c in data.get("cards_in_hand", [])],
            settings=settings,
            policy=data.get("policy"),
        )
