"""組み込みカウンタモジュール群。"""
from __future__ import annotations

from .base import iter_runs, mapping_key, MappingCounter, SequenceCounter
from .dictionary_based import DictionaryBasedItemCounter
from .sort_based import SortBasedItemCounter
from .tie_breakers import (
    FirstTieBreaker,
    RandomTieBreaker,
    resolve_tie_breaker,
    TIE_BREAKER_ALIASES,
    TieBreaker,
)

__all__ = [
    "SequenceCounter",
    "MappingCounter",
    "SortBasedItemCounter",
    "DictionaryBasedItemCounter",
    "TieBreaker",
    "FirstTieBreaker",
    "RandomTieBreaker",
    "TIE_BREAKER_ALIASES",
    "resolve_tie_breaker",
    "iter_runs",
    "mapping_key",
]
