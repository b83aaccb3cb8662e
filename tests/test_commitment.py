"""Tests for secret encoding and hash commitments."""

import hashlib

import pytest
from mental_poker.commitment import (
    SECRET_BYTES,
    commit,
    commit_all,
    encode_secret,
    secret_from_hex,
    secret_to_hex,
)


class TestEncodeSecret:
    def test_fixed_width(self):
        assert len(encode_secret(1)) == SECRET_BYTES
        assert len(encode_secret(2**256 - 1)) == SECRET_BYTES

    def test_big_endian(self):
        assert encode_secret(1) == b"\x00" * 31 + b"\x01"

    def test_negative_raises(self):
        with pytest.raises(ValueError, match="does not fit"):
            encode_secret(-1)

    @pytest.mark.parametrize("bad", [1.5, "7", None, True])
    def test_non_int_raises(self, bad):
        with pytest.raises(TypeError, match="must be an int"):
            encode_secret(bad)

    def test_too_wide_raises(self):
        with pytest.raises(ValueError, match="does not fit"):
            encode_secret(2**256)


class TestCommit:
    def test_matches_sha256_of_encoding(self):
        expected = hashlib.sha256((5).to_bytes(32, "big")).hexdigest()
        assert commit(5) == expected

    def test_hex_digest_format(self):
        h = commit(123456789)
        assert len(h) == 64
        assert all(c in "0123456789abcdef" for c in h)

    def test_deterministic(self):
        assert commit(42) == commit(42)

    def test_distinct_secrets_distinct_hashes(self):
        assert commit(1) != commit(2)


class TestCommitAll:
    def test_deterministic(self):
        secrets = [7, 11, 2**200 + 3, 1]
        assert commit_all(secrets) == commit_all(list(secrets))

    def test_preserves_order_and_length(self):
        secrets = [3, 1, 2]
        hashes = commit_all(secrets)
        assert hashes == [commit(3), commit(1), commit(2)]

    def test_empty(self):
        assert commit_all([]) == []


class TestRevealEncoding:
    def test_to_hex_fixed_width(self):
        assert secret_to_hex(255) == "0" * 62 + "ff"

    def test_from_hex(self):
        assert secret_from_hex("0" * 62 + "ff") == 255

    def test_from_hex_wrong_width(self):
        with pytest.raises(ValueError, match="Expected 64 hex characters"):
            secret_from_hex("ff")

    @pytest.mark.parametrize(
        "text",
        [
            "0x" + "0" * 61 + "1",
            "+" + "0" * 62 + "1",
            " " + "0" * 62 + "1",
            "0" * 31 + "_" + "0" * 31 + "1",
            "0" * 62 + "FF",
        ],
    )
    def test_from_hex_rejects_non_canonical(self, text):
        assert len(text) == 64
        with pytest.raises(ValueError, match="lowercase hex"):
            secret_from_hex(text)

    def test_from_hex_not_hex(self):
        with pytest.raises(ValueError):
            secret_from_hex("z" * 64)
