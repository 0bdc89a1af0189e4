from __future__ import annotations

import argparse
import json
from pathlib import Path

from ..core.errors import FrequentItemsError
from .utils import _msg, LOGGER

SAMPLE_NAMES: tuple[str, ...] = (
    "Navin Kabra",
    "Amit Paranjape",
    "Navin Kabra",
    "Amit Paranjape1",
    "Navin Kotkar",
    "Gaurav Kotkar",
)

_JSONL_KEYS = ("item", "text", "name")


class ItemSourceError(FrequentItemsError):
    """アイテムの入力元を読み込めなかった。"""


def read_items_file(path: Path, lang: str) -> list[str]:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ItemSourceError(_msg(lang, "items_file_missing", path=path)) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ItemSourceError(_msg(lang, "items_file_unreadable", path=path, error=exc)) from exc
    return [line.rstrip("\r") for line in text.lstrip("\ufeff").split("\n") if line.strip()]


def read_jsonl_items(path: Path, lang: str) -> list[str]:
    items: list[str] = []
    try:
        with path.open("r", encoding="utf-8") as fp:
            for line_no, raw_line in enumerate(fp, start=1):
                line = raw_line.strip()
                if not line:
                    continue
                try:
                    obj = json.loads(line.lstrip("\ufeff"))
                except json.JSONDecodeError as exc:
                    raise ItemSourceError(
                        _msg(lang, "jsonl_decode_error", path=path, line=line_no)
                    ) from exc
                if isinstance(obj, str):
                    items.append(obj)
                    continue
                if isinstance(obj, dict):
                    for key in _JSONL_KEYS:
                        value = obj.get(key)
                        if isinstance(value, str):
                            items.append(value)
                            break
                    else:
                        raise ItemSourceError(
                            _msg(lang, "jsonl_invalid_object", path=path, line=line_no)
                        )
                    continue
                raise ItemSourceError(_msg(lang, "jsonl_unsupported", path=path, line=line_no))
    except FileNotFoundError as exc:
        raise ItemSourceError(_msg(lang, "items_file_missing", path=path)) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ItemSourceError(_msg(lang, "items_file_unreadable", path=path, error=exc)) from exc
    return items


def collect_items(args: argparse.Namespace, lang: str) -> list[str]:
    """位置引数・テキストファイル・JSONL の順にアイテムを連結する。

    どれも指定されていなければサンプルの名前一覧を返す。
    """

    items: list[str] = list(args.items or [])
    if args.items_file:
        items.extend(read_items_file(Path(args.items_file).expanduser(), lang))
    if args.jsonl:
        items.extend(read_jsonl_items(Path(args.jsonl).expanduser(), lang))
    if not items and not (args.items_file or args.jsonl):
        LOGGER.info(_msg(lang, "sample_used"))
        return list(SAMPLE_NAMES)
    return items


__all__ = [
    "ItemSourceError",
    "SAMPLE_NAMES",
    "collect_items",
    "read_items_file",
    "read_jsonl_items",
]
