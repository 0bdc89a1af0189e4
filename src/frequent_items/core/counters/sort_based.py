"""ソートしてから 1 パスで数えるカウンタ。"""
from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import NoReturn

from ..models import ItemCount
from .base import iter_runs, UnsupportedFormMixin

__all__ = ["SortBasedItemCounter"]

LOGGER = logging.getLogger(__name__)


class SortBasedItemCounter(UnsupportedFormMixin):
    name = "SortBased"

    def analyze(self, items: Sequence[str]) -> list[ItemCount]:
        counts = list(iter_runs(items))
        LOGGER.debug("%s: %d items -> %d distinct", self.name, len(items), len(counts))
        return counts

    def analyze_dict(self, items: Sequence[str]) -> NoReturn:
        raise self._unsupported("analyze_dict")
