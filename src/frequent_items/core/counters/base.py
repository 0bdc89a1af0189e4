"""カウンタのプロトコルと共通のラン集約処理。"""
from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Protocol, runtime_checkable

from ..errors import UnsupportedOperationError
from ..models import ItemCount

__all__ = [
    "SequenceCounter",
    "MappingCounter",
    "UnsupportedFormMixin",
    "iter_runs",
    "mapping_key",
]


@runtime_checkable
class SequenceCounter(Protocol):
    name: str

    def analyze(self, items: Sequence[str]) -> list[ItemCount]: ...


@runtime_checkable
class MappingCounter(Protocol):
    name: str

    def analyze_dict(self, items: Sequence[str]) -> dict[str, ItemCount]: ...


class UnsupportedFormMixin:
    """実装していない集計形式を呼ばれたときに明示的に失敗させる。"""

    name: str

    def _unsupported(self, operation: str) -> UnsupportedOperationError:
        return UnsupportedOperationError(type(self).__name__, operation)


def iter_runs(items: Sequence[str]) -> Iterator[ItemCount]:
    """ソート済みのコピーを走査し、連続する同値をまとめて順に返す。

    ``sorted()`` による str の比較はコードポイント順 (大文字小文字を区別) で安定。
    呼び出し元のリストは変更しない。
    """

    counter: ItemCount | None = None
    for value in sorted(items):
        if counter is not None and value == counter.item:
            counter.increment()
            continue
        if counter is not None:
            yield counter
        counter = ItemCount(value, 1)
    if counter is not None:
        yield counter


def mapping_key(counter: ItemCount) -> str:
    return f"{counter.item}_{counter.count}"
