from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from .utils import EXIT_INPUT_ERROR


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"integer expected: {value!r}") from exc
    if number < 0:
        raise argparse.ArgumentTypeError("--threshold must be >= 0")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        "frequent-items",
        description="Report the most frequent item in a list of strings.",
    )
    parser.add_argument("items", nargs="*", help="items to count")
    parser.add_argument("--items-file", type=Path, help="text file with one item per line")
    parser.add_argument("--jsonl", type=Path, help="JSONL file of strings or objects")
    parser.add_argument("--config", type=Path, help="finder config YAML")
    parser.add_argument(
        "--mode",
        choices=("auto", "sequence", "mapping"),
        default="auto",
        help="analysis path; auto picks sequence up to --threshold items",
    )
    parser.add_argument("--sequence-strategy", help="counter used for the sequence path")
    parser.add_argument("--mapping-strategy", help="counter used for the mapping path")
    parser.add_argument("--threshold", type=_non_negative_int, help="largest input handled by the sequence path")
    parser.add_argument("--tie-breaker", choices=("first", "random"), help="how ties are resolved")
    parser.add_argument("--seed", type=int, help="seed for the random tie breaker")
    parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="output format (text/json)",
    )
    parser.add_argument("--json-logs", action="store_true", help="emit logs as JSON")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--lang", choices=("ja", "en"), help="message language")
    return parser


def parse_cli_arguments(
    argv: Sequence[str] | None,
) -> tuple[argparse.Namespace | None, argparse.ArgumentParser, int | None]:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:  # argparse は内部で exit(2) を呼ぶ
        code = exc.code if isinstance(exc.code, int) else EXIT_INPUT_ERROR
        return None, parser, code
    return args, parser, None


__all__ = [
    "build_parser",
    "parse_cli_arguments",
]
