"""最大件数が並んだときのタイブレーカー。"""
from __future__ import annotations

from collections.abc import Sequence
import random
from typing import Protocol, runtime_checkable

from ..errors import ConfigError
from ..models import ItemCount

__all__ = [
    "TieBreaker",
    "FirstTieBreaker",
    "RandomTieBreaker",
    "TIE_BREAKER_ALIASES",
    "resolve_tie_breaker",
]


@runtime_checkable
class TieBreaker(Protocol):
    name: str

    def break_tie(self, candidates: Sequence[ItemCount]) -> ItemCount: ...


class FirstTieBreaker:
    name = "first"

    def break_tie(self, candidates: Sequence[ItemCount]) -> ItemCount:
        if not candidates:
            raise ValueError("TieBreaker: candidates must be non-empty")
        return candidates[0]


class RandomTieBreaker:
    name = "random"

    def __init__(self, *, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def break_tie(self, candidates: Sequence[ItemCount]) -> ItemCount:
        if not candidates:
            raise ValueError("TieBreaker: candidates must be non-empty")
        return self._rng.choice(list(candidates))


TIE_BREAKER_ALIASES: dict[str, set[str]] = {
    "first": {"first", "first_seen", "stable", "stable_order"},
    "random": {"random", "rand", "any"},
}


def resolve_tie_breaker(kind: str | None, *, seed: int | None = None) -> TieBreaker:
    kind_norm = (kind or "first").strip().lower()
    if kind_norm in TIE_BREAKER_ALIASES["first"]:
        return FirstTieBreaker()
    if kind_norm in TIE_BREAKER_ALIASES["random"]:
        return RandomTieBreaker(seed=seed)
    raise ConfigError(f"Unknown tie breaker: {kind!r}")
