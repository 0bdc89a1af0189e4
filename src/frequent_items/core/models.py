"""集計結果と設定の dataclass 定義。"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "ItemCount",
    "FrequentItem",
    "FinderConfig",
]


@dataclass(slots=True)
class ItemCount:
    """1 種類のアイテムと出現回数の組。"""

    item: str
    count: int = 0

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"count must be >= 0: {self.count}")

    def get_item(self) -> str:
        return self.item

    def get_count(self) -> int:
        return self.count

    def increment(self) -> None:
        self.count += 1


@dataclass(frozen=True, slots=True)
class FrequentItem:
    """最頻アイテムの判定結果。入力が空なら ``item`` は ``None``。"""

    item: str | None
    count: int
    strategy: str | None = None
    tie_breaker_used: str | None = None

    @property
    def found(self) -> bool:
        return self.item is not None

    def as_tuple(self) -> tuple[str | None, int]:
        return self.item, self.count


@dataclass
class FinderConfig:
    """FrequentItemFinder の実行設定。"""

    sequence_strategy: str = "SortBased"
    mapping_strategy: str = "DictionaryBased"
    map_threshold: int = 50
    tie_breaker: str = "first"
    seed: int | None = None
