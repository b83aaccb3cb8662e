"""Randomness and elliptic-curve points for the shuffle protocol.

Secrets come from the OS CSPRNG via :mod:`secrets`; points are public keys
``d*G`` of freshly generated pycryptodome ECC keys. Both sources are safe to
call from several threads at once.
"""

from __future__ import annotations

import secrets
from typing import Any

from Crypto.PublicKey import ECC

from mental_poker.commitment import SECRET_BYTES
from mental_poker.models import CURVE_COORDINATE_BYTES

# Zero is never drawn so that an unset slot can't be confused with a value.
_SECRET_LIMIT = (1 << (SECRET_BYTES * 8)) - 1


def coordinate_bytes(curve: str) -> int:
    try:
        return CURVE_COORDINATE_BYTES[curve]
    except KeyError:
        raise ValueError(f"Unsupported curve: {curve}") from None


class Point:
    """Affine point on an elliptic curve."""

    __slots__ = ("x", "y")

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def __repr__(self) -> str:
        return f"Point(x={self.x:#x}, y={self.y:#x})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def to_dict(self, width: int) -> dict[str, str]:
        """Encode as fixed-width lowercase hex; ``width`` is in bytes."""
        return {"x": format(self.x, f"0{width * 2}x"), "y": format(self.y, f"0{width * 2}x")}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Point:
        return cls(int(data["x"], 16), int(data["y"], 16))


def get_random_secret() -> int:
    return secrets.randbelow(_SECRET_LIMIT) + 1


def get_random_secrets(count: int) -> list[int]:
    return [get_random_secret() for _ in range(count)]


def get_random_point(curve: str = "P-256") -> Point:
    coordinate_bytes(curve)
    key = ECC.generate(curve=curve)
    q = key.pointQ
    return Point(int(q.x), int(q.y))


def get_random_points(count: int, curve: str = "P-256") -> list[Point]:
    return [get_random_point(curve) for _ in range(count)]
