"""最頻アイテムを求めるオーケストレーター。"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import logging

from .counters import TieBreaker
from .counters.tie_breakers import FirstTieBreaker
from .errors import UnsupportedOperationError
from .models import FrequentItem, ItemCount
from .registry import (
    CounterRegistry,
    DEFAULT_MAPPING_STRATEGY,
    DEFAULT_SEQUENCE_STRATEGY,
    default_registry,
    ItemCounter,
)

__all__ = ["FrequentItemFinder"]

LOGGER = logging.getLogger(__name__)


class FrequentItemFinder:
    """選択中のカウンタで集計し、最大件数のアイテムを 1 つ選ぶ。

    選択中のカウンタは唯一の可変状態であり、スレッドセーフではない。
    複数スレッドで共有する場合は呼び出し側で排他すること。
    """

    def __init__(
        self,
        registry: CounterRegistry | None = None,
        *,
        tie_breaker: TieBreaker | None = None,
    ) -> None:
        self._registry = registry if registry is not None else default_registry()
        self._tie_breaker = tie_breaker or FirstTieBreaker()
        self._counter: ItemCounter | None = None
        self._selected: str | None = None

    @property
    def registry(self) -> CounterRegistry:
        return self._registry

    @property
    def selected_strategy(self) -> str | None:
        return self._selected

    @property
    def tie_breaker(self) -> TieBreaker:
        return self._tie_breaker

    def select_strategy(self, name: str) -> None:
        """``name`` のカウンタを選択する。未登録なら例外となり、直前の選択は維持される。"""

        canonical = self._registry.resolve_name(name)
        counter = self._registry.get_instance(canonical)
        self._counter = counter
        self._selected = canonical
        LOGGER.debug("selected counter %s", canonical)

    def count_items(self, items: Sequence[str]) -> list[ItemCount]:
        counter = self._ensure_selected(DEFAULT_SEQUENCE_STRATEGY)
        analyze = getattr(counter, "analyze", None)
        if analyze is None:
            raise UnsupportedOperationError(type(counter).__name__, "analyze")
        return analyze(list(items))

    def find_most_frequent(self, items: Sequence[str]) -> FrequentItem:
        """ソート順の集計結果から最頻アイテムを返す。同数なら先に現れたものが残る。"""

        counts = self.count_items(items)
        return self._pick_max(counts)

    def find_most_frequent_via_map(self, items: Sequence[str]) -> FrequentItem:
        """辞書形式の集計結果から最頻アイテムを返す。

        同数の扱いは辞書の反復順に依存するため、``find_most_frequent`` と
        異なるアイテムが選ばれることがある。
        """

        counter = self._ensure_selected(DEFAULT_MAPPING_STRATEGY)
        analyze_dict = getattr(counter, "analyze_dict", None)
        if analyze_dict is None:
            raise UnsupportedOperationError(type(counter).__name__, "analyze_dict")
        counts = analyze_dict(list(items))
        return self._pick_max(counts.values())

    def _ensure_selected(self, default: str) -> ItemCounter:
        if self._counter is None:
            self.select_strategy(default)
        assert self._counter is not None
        return self._counter

    def _pick_max(self, counts: Iterable[ItemCount]) -> FrequentItem:
        tied: list[ItemCount] = []
        max_count = -1
        for entry in counts:
            if entry.count > max_count:
                max_count = entry.count
                tied = [entry]
            elif entry.count == max_count:
                tied.append(entry)

        if not tied:
            return FrequentItem(item=None, count=0, strategy=self._selected)

        chosen = tied[0] if len(tied) == 1 else self._tie_breaker.break_tie(tied)
        tie_used = None if len(tied) == 1 else self._tie_breaker.name
        LOGGER.debug(
            "most frequent item %r (%d) via %s, tied=%d",
            chosen.item,
            chosen.count,
            self._selected,
            len(tied),
        )
        return FrequentItem(
            item=chosen.item,
            count=chosen.count,
            strategy=self._selected,
            tie_breaker_used=tie_used,
        )
