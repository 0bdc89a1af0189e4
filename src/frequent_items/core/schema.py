"""設定ファイル検証用の Pydantic モデル。"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["FinderConfigModel"]


class FinderConfigModel(BaseModel):
    """FrequentItemFinder 設定のスキーマ。"""

    model_config = ConfigDict(extra="forbid")

    sequence_strategy: str = Field(default="SortBased", min_length=1)
    mapping_strategy: str = Field(default="DictionaryBased", min_length=1)
    map_threshold: int = Field(default=50, ge=0)
    tie_breaker: Literal["first", "random"] = "first"
    seed: int | None = None
