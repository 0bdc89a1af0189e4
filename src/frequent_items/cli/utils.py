from __future__ import annotations

import json
import logging
import os
from typing import Dict, Optional

LOGGER = logging.getLogger("frequent_items.cli")

EXIT_OK = 0
EXIT_INPUT_ERROR = 2
EXIT_STRATEGY_ERROR = 3

DEFAULT_LANG = "en"

LANG_MESSAGES: Dict[str, Dict[str, str]] = {
    "ja": {
        "result_sequence": "最頻出の名前: {item}",
        "result_mapping": "最頻出の名前の件数: {count} , 最頻出の名前: {item}",
        "no_items": "集計対象のアイテムがありません",
        "items_file_missing": "アイテムファイルが見つかりません: {path}",
        "items_file_unreadable": "アイテムファイルを読み込めません: {path} ({error})",
        "jsonl_decode_error": "JSONL の読み込みに失敗しました: {path}:{line}",
        "jsonl_invalid_object": "{path}:{line} は 'item' / 'text' / 'name' キーを含む JSON オブジェクトではありません",
        "jsonl_unsupported": "{path}:{line} がサポート外の JSON 形式です",
        "config_error": "設定ファイルが不正です: {error}",
        "strategy_error": "カウンタを利用できません: {error}",
        "item_count": "アイテム数: {count} (経路: {mode}, カウンタ: {strategy})",
        "sample_used": "入力が指定されていないためサンプルの名前一覧を使用します",
    },
    "en": {
        "result_sequence": "The most frequent name is: {item}",
        "result_mapping": "The most frequent name count: {count} , The most frequent name is: {item}",
        "no_items": "No items to count",
        "items_file_missing": "Items file not found: {path}",
        "items_file_unreadable": "Cannot read items file: {path} ({error})",
        "jsonl_decode_error": "Failed to read JSONL: {path}:{line}",
        "jsonl_invalid_object": "{path}:{line} must be a JSON object containing an 'item', 'text' or 'name' key",
        "jsonl_unsupported": "Unsupported JSON entry at {path}:{line}",
        "config_error": "Invalid configuration: {error}",
        "strategy_error": "Counting strategy unavailable: {error}",
        "item_count": "Items: {count} (path: {mode}, counter: {strategy})",
        "sample_used": "No input given; using the built-in sample names",
    },
}


class JsonLogFormatter(logging.Formatter):
    """JSON 形式でログを吐き出すフォーマッタ。"""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        return json.dumps({"level": record.levelname.lower(), "message": record.getMessage()}, ensure_ascii=False)


def _resolve_lang(requested: Optional[str]) -> str:
    lang = (requested or os.getenv("FREQUENT_ITEMS_LANG") or DEFAULT_LANG).lower()
    return lang if lang in LANG_MESSAGES else DEFAULT_LANG


def _msg(lang: str, key: str, **params: object) -> str:
    catalog = LANG_MESSAGES.get(lang, LANG_MESSAGES[DEFAULT_LANG])
    return catalog.get(key, key).format(**params)


def _configure_logging(as_json: bool, *, verbose: bool = False) -> None:
    handler = logging.StreamHandler()
    if as_json:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.INFO)


__all__ = [
    "LOGGER",
    "EXIT_OK",
    "EXIT_INPUT_ERROR",
    "EXIT_STRATEGY_ERROR",
    "DEFAULT_LANG",
    "LANG_MESSAGES",
    "JsonLogFormatter",
    "_configure_logging",
    "_msg",
    "_resolve_lang",
]
