from __future__ import annotations

import argparse
import json
from typing import Literal

from ..core.counters import resolve_tie_breaker
from ..core.errors import UnknownStrategyError, UnsupportedOperationError
from ..core.finder import FrequentItemFinder
from ..core.loader import load_finder_config
from ..core.models import FinderConfig, FrequentItem
from .utils import _msg, EXIT_OK, EXIT_STRATEGY_ERROR, LOGGER

AnalysisMode = Literal["sequence", "mapping"]


def resolve_config(args: argparse.Namespace) -> FinderConfig:
    """設定ファイルを読み込み、CLI で指定された値で上書きする。"""

    config = load_finder_config(args.config) if args.config else FinderConfig()
    if args.sequence_strategy:
        config.sequence_strategy = args.sequence_strategy
    if args.mapping_strategy:
        config.mapping_strategy = args.mapping_strategy
    if args.threshold is not None:
        config.map_threshold = args.threshold
    if args.tie_breaker:
        config.tie_breaker = args.tie_breaker
    if args.seed is not None:
        config.seed = args.seed
    return config


def choose_mode(requested: str, item_count: int, threshold: int) -> AnalysisMode:
    if requested == "sequence":
        return "sequence"
    if requested == "mapping":
        return "mapping"
    return "sequence" if item_count <= threshold else "mapping"


def build_finder(config: FinderConfig) -> FrequentItemFinder:
    tie_breaker = resolve_tie_breaker(config.tie_breaker, seed=config.seed)
    return FrequentItemFinder(tie_breaker=tie_breaker)


def find_with_mode(
    finder: FrequentItemFinder, config: FinderConfig, mode: AnalysisMode, items: list[str]
) -> FrequentItem:
    if mode == "sequence":
        finder.select_strategy(config.sequence_strategy)
        return finder.find_most_frequent(items)
    finder.select_strategy(config.mapping_strategy)
    return finder.find_most_frequent_via_map(items)


def render_result(result: FrequentItem, mode: AnalysisMode, fmt: str, lang: str) -> str:
    if fmt == "json":
        payload = {
            "item": result.item,
            "count": result.count,
            "strategy": result.strategy,
            "mode": mode,
            "tie_breaker": result.tie_breaker_used,
        }
        return json.dumps(payload, ensure_ascii=False)
    if not result.found:
        return _msg(lang, "no_items")
    if mode == "sequence":
        return _msg(lang, "result_sequence", item=result.item)
    return _msg(lang, "result_mapping", item=result.item, count=result.count)


def run_find(args: argparse.Namespace, items: list[str], lang: str) -> int:
    config = resolve_config(args)
    finder = build_finder(config)
    mode = choose_mode(args.mode, len(items), config.map_threshold)
    try:
        result = find_with_mode(finder, config, mode, items)
    except (UnknownStrategyError, UnsupportedOperationError) as exc:
        LOGGER.error(_msg(lang, "strategy_error", error=exc))
        return EXIT_STRATEGY_ERROR
    LOGGER.info(_msg(lang, "item_count", count=len(items), mode=mode, strategy=result.strategy))
    print(render_result(result, mode, args.format, lang))
    return EXIT_OK


__all__ = [
    "AnalysisMode",
    "build_finder",
    "choose_mode",
    "find_with_mode",
    "render_result",
    "resolve_config",
    "run_find",
]
