"""``"<item>_<count>"`` をキーとする辞書で集計するカウンタ。"""
from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import NoReturn

from ..models import ItemCount
from .base import iter_runs, mapping_key, UnsupportedFormMixin

__all__ = ["DictionaryBasedItemCounter"]

LOGGER = logging.getLogger(__name__)


class DictionaryBasedItemCounter(UnsupportedFormMixin):
    name = "DictionaryBased"

    def analyze_dict(self, items: Sequence[str]) -> dict[str, ItemCount]:
        # ランが閉じた時点の件数でキーを作るため、各アイテムは最終件数で 1 回だけ登録される
        counts: dict[str, ItemCount] = {}
        for counter in iter_runs(items):
            counts[mapping_key(counter)] = counter
        LOGGER.debug("%s: %d items -> %d keys", self.name, len(items), len(counts))
        return counts

    def analyze(self, items: Sequence[str]) -> NoReturn:
        raise self._unsupported("analyze")
