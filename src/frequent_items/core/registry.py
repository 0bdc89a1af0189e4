"""カウンタ名とファクトリを対応付けるレジストリ。"""
from __future__ import annotations

from collections.abc import Callable, Iterable
import logging
from typing import Union

from .counters import DictionaryBasedItemCounter, MappingCounter, SequenceCounter, SortBasedItemCounter
from .errors import DuplicateNameError, UnknownStrategyError

__all__ = [
    "ItemCounter",
    "CounterFactory",
    "CounterRegistry",
    "DEFAULT_SEQUENCE_STRATEGY",
    "DEFAULT_MAPPING_STRATEGY",
    "default_registry",
]

LOGGER = logging.getLogger(__name__)

ItemCounter = Union[SequenceCounter, MappingCounter]
CounterFactory = Callable[[], ItemCounter]

DEFAULT_SEQUENCE_STRATEGY = "SortBased"
DEFAULT_MAPPING_STRATEGY = "DictionaryBased"


def _normalize(name: str) -> str:
    return (name or "").strip().lower()


class CounterRegistry:
    """登録済みカウンタを名前 (大文字小文字を区別しない) で生成する。

    同じ名前・エイリアスの二重登録は ``DuplicateNameError`` とし、既存の登録は維持する。
    """

    def __init__(self) -> None:
        self._factories: dict[str, CounterFactory] = {}
        self._canonical: dict[str, str] = {}

    def register(self, name: str, factory: CounterFactory, *, aliases: Iterable[str] = ()) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValueError("counter name must be a non-empty string")
        keys = [_normalize(name), *(_normalize(alias) for alias in aliases)]
        seen: set[str] = set()
        for key in keys:
            if not key:
                raise ValueError(f"empty alias for counter {name!r}")
            if key in self._canonical or key in seen:
                raise DuplicateNameError(name if key == keys[0] else key)
            seen.add(key)
        self._factories[name] = factory
        for key in keys:
            self._canonical[key] = name
        LOGGER.debug("registered counter %s (aliases=%s)", name, sorted(seen - {keys[0]}))

    def get_instance(self, name: str) -> ItemCounter:
        canonical = self._canonical.get(_normalize(name))
        if canonical is None:
            raise UnknownStrategyError(name, available=self.names())
        return self._factories[canonical]()

    def resolve_name(self, name: str) -> str:
        canonical = self._canonical.get(_normalize(name))
        if canonical is None:
            raise UnknownStrategyError(name, available=self.names())
        return canonical

    def names(self) -> list[str]:
        return list(self._factories)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _normalize(name) in self._canonical

    def __len__(self) -> int:
        return len(self._factories)


def default_registry() -> CounterRegistry:
    registry = CounterRegistry()
    registry.register(DEFAULT_SEQUENCE_STRATEGY, SortBasedItemCounter, aliases=("sort", "sorted"))
    registry.register(
        DEFAULT_MAPPING_STRATEGY,
        DictionaryBasedItemCounter,
        aliases=("dict", "dictionary", "map"),
    )
    return registry
