"""最頻アイテム判定のコア API ファサード。"""
from __future__ import annotations

from .counters import (
    DictionaryBasedItemCounter,
    FirstTieBreaker,
    MappingCounter,
    RandomTieBreaker,
    resolve_tie_breaker,
    SequenceCounter,
    SortBasedItemCounter,
    TieBreaker,
)
from .errors import (
    ConfigError,
    DuplicateNameError,
    FrequentItemsError,
    UnknownStrategyError,
    UnsupportedOperationError,
)
from .finder import FrequentItemFinder
from .loader import load_finder_config
from .models import FinderConfig, FrequentItem, ItemCount
from .registry import (
    CounterFactory,
    CounterRegistry,
    DEFAULT_MAPPING_STRATEGY,
    DEFAULT_SEQUENCE_STRATEGY,
    default_registry,
    ItemCounter,
)

__all__ = [
    "ItemCount",
    "FrequentItem",
    "FinderConfig",
    "SequenceCounter",
    "MappingCounter",
    "ItemCounter",
    "SortBasedItemCounter",
    "DictionaryBasedItemCounter",
    "TieBreaker",
    "FirstTieBreaker",
    "RandomTieBreaker",
    "resolve_tie_breaker",
    "CounterFactory",
    "CounterRegistry",
    "DEFAULT_SEQUENCE_STRATEGY",
    "DEFAULT_MAPPING_STRATEGY",
    "default_registry",
    "FrequentItemFinder",
    "load_finder_config",
    "FrequentItemsError",
    "UnknownStrategyError",
    "DuplicateNameError",
    "UnsupportedOperationError",
    "ConfigError",
]
