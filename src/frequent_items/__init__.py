"""文字列リスト中の最頻アイテムを判定するパッケージ。"""

from .core import (  # noqa: F401
    ConfigError,
    CounterRegistry,
    default_registry,
    DuplicateNameError,
    FrequentItem,
    FrequentItemFinder,
    FrequentItemsError,
    ItemCount,
    UnknownStrategyError,
    UnsupportedOperationError,
)

__all__ = [
    "ConfigError",
    "CounterRegistry",
    "default_registry",
    "DuplicateNameError",
    "FrequentItem",
    "FrequentItemFinder",
    "FrequentItemsError",
    "ItemCount",
    "UnknownStrategyError",
    "UnsupportedOperationError",
]
