"""Wagering actions recorded in a player's history."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class BetType(str, Enum):
    FOLD = "fold"
    CHECK = "check"
    CALL = "call"
    RAISE = "raise"
    ALL_IN = "all_in"


class Bet:
    """Immutable ``{type, amount?}`` record."""

    __slots__ = ("_type", "_amount")

    def __init__(self, type: BetType, amount: Optional[int] = None) -> None:
        if amount is not None and (isinstance(amount, bool) or not isinstance(amount, int) or amount < 0):
            raise ValueError(f"Invalid bet amount: {amount!r}")
        object.__setattr__(self, "_type", BetType(type))
        object.__setattr__(self, "_amount", amount)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Bet is immutable")

    @property
    def type(self) -> BetType:
        return self._type

    @property
    def amount(self) -> Optional[int]:
        return self._amount

    def __repr__(self) -> str:
        if self._amount is None:
            return f"Bet({self._type.value})"
        return f"Bet({self._type.value}, {self._amount})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bet):
            return NotImplemented
        return self._type == other._type and self._amount == other._amount

    def __hash__(self) -> int:
        return hash((self._type, self._amount))

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"type": self._type.value}
        if self._amount is not None:
            d["amount"] = self._amount
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Bet:
        return cls(BetType(data["type"]), data.get("amount"))
