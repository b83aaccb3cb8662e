"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from mental_poker.config import load_settings
from mental_poker.models import CommitmentPolicy, ProtocolSettings


class TestLoadSettings:
    def test_defaults(self, monkeypatch):
        for name in (
            "MENTAL_POKER_CARDS_IN_DECK",
            "MENTAL_POKER_EXTRA_SECRET",
            "MENTAL_POKER_CURVE",
            "MENTAL_POKER_COMMITMENT_POLICY",
        ):
            monkeypatch.delenv(name, raising=False)
        s = load_settings()
        assert s.cards_in_deck == 52
        assert s.secret_count == 53
        assert s.points_per_player == 52
        assert s.curve == "P-256"
        assert s.commitment_policy is CommitmentPolicy.EAGER

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("MENTAL_POKER_CARDS_IN_DECK", "32")
        monkeypatch.setenv("MENTAL_POKER_EXTRA_SECRET", "false")
        monkeypatch.setenv("MENTAL_POKER_CURVE", "P-384")
        monkeypatch.setenv("MENTAL_POKER_COMMITMENT_POLICY", "lazy")
        s = load_settings()
        assert s.secret_count == 32
        assert s.coordinate_bytes == 48
        assert s.commitment_policy is CommitmentPolicy.LAZY

    def test_bad_curve(self, monkeypatch):
        monkeypatch.setenv("MENTAL_POKER_CURVE", "secp256k1")
        with pytest.raises(ValidationError):
            load_settings()

    def test_bad_policy(self, monkeypatch):
        monkeypatch.setenv("MENTAL_POKER_COMMITMENT_POLICY", "sometimes")
        with pytest.raises(ValueError):
            load_settings()


class TestProtocolSettings:
    def test_explicit_point_count(self):
        assert ProtocolSettings(point_count=0).points_per_player == 0

    def test_deck_must_be_positive(self):
        with pytest.raises(ValidationError):
            ProtocolSettings(cards_in_deck=0)

    def test_frozen(self):
        s = ProtocolSettings()
        with pytest.raises(ValidationError):
            s.cards_in_deck = 10
