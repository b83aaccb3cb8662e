"""Hash commitments over player secrets.

A commitment is the SHA-256 hex digest of the secret's canonical encoding:
the integer as exactly SECRET_BYTES big-endian bytes. Every participant must
use the same encoding, so this module is the wire contract for commitments.
"""

from __future__ import annotations

import hashlib
import re
from typing import Sequence

SECRET_BYTES = 32

_SECRET_HEX = re.compile(rf"[0-9a-f]{{{SECRET_BYTES * 2}}}")


def encode_secret(secret: int) -> bytes:
    if isinstance(secret, bool) or not isinstance(secret, int):
        raise TypeError(f"Secret must be an int, got {type(secret).__name__}")
    if secret < 0 or secret.bit_length() > SECRET_BYTES * 8:
        raise ValueError(f"Secret does not fit in {SECRET_BYTES} bytes")
    return secret.to_bytes(SECRET_BYTES, "big")


def commit(secret: int) -> str:
    """Return the commitment (hex digest) for a single secret."""
    return hashlib.sha256(encode_secret(secret)).hexdigest()


def commit_all(secrets: Sequence[int]) -> list[str]:
    """Commit to each secret, keeping order and length."""
    return [commit(s) for s in secrets]


# ------------------------------------------------------------------
# Reveal encoding
# ------------------------------------------------------------------


def secret_to_hex(secret: int) -> str:
    return encode_secret(secret).hex()


def secret_from_hex(text: str) -> int:
    if len(text) != SECRET_BYTES * 2:
        raise ValueError(f"Expected {SECRET_BYTES * 2} hex characters, got {len(text)}")
    if not _SECRET_HEX.fullmatch(text):
        raise ValueError("Secret must be lowercase hex without prefix or sign")
    return int(text, 16)
