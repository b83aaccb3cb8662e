"""Redis persistence for player state between rounds and restarts."""

from __future__ import annotations

import json
from typing import Any, Optional

import redis.asyncio as redis

from mental_poker.config import REDIS_URL
from mental_poker.player import Player

_pool: Optional[redis.Redis] = None


async def get_redis() -> redis.Redis:
    global _pool
    if _pool is None:
        _pool = redis.from_url(REDIS_URL, decode_responses=True)
    return _pool


def _players_key(code: str) -> str:
    return f"round:{code}:players"


def _player_key(code: str, player_id: str) -> str:
    return f"round:{code}:player:{player_id}"


def _view_key(code: str, player_id: str) -> str:
    return f"round:{code}:view:{player_id}"


# ------------------------------------------------------------------
# Private state (owner only)
# ------------------------------------------------------------------


async def store_player(code: str, player_id: str, player: Player) -> None:
    r = await get_redis()
    await r.set(_player_key(code, player_id), json.dumps(player.to_dict()))
    await r.sadd(_players_key(code), player_id)


async def load_player(code: str, player_id: str) -> Optional[Player]:
    r = await get_redis()
    raw = await r.get(_player_key(code, player_id))
    if raw is None:
        return None
    return Player.from_dict(json.loads(raw))


# ------------------------------------------------------------------
# Public views (as received from peers)
# ------------------------------------------------------------------


async def store_public_view(code: str, player_id: str, view: dict[str, Any]) -> None:
    r = await get_redis()
    await r.set(_view_key(code, player_id), json.dumps(view))
    await r.sadd(_players_key(code), player_id)


async def load_public_views(code: str) -> dict[str, dict[str, Any]]:
    """Every stored public view for a round, keyed by player id."""
    r = await get_redis()
    player_ids = await r.smembers(_players_key(code))
    views: dict[str, dict[str, Any]] = {}
    for pid in sorted(player_ids):
        raw = await r.get(_view_key(code, pid))
        if raw is not None:
            views[pid] = json.loads(raw)
    return views


async def delete_round(code: str) -> None:
    """Clean up all keys for a round."""
    r = await get_redis()
    player_ids = await r.smembers(_players_key(code))
    keys = [_players_key(code)]
    for pid in player_ids:
        keys.append(_player_key(code, pid))
        keys.append(_view_key(code, pid))
    await r.delete(*keys)


async def close() -> None:
    global _pool
    if _pool is not None:
        await _pool.aclose()
        _pool = None
