from __future__ import annotations

import sys
from typing import List, Optional

from ..core.errors import ConfigError
from .args import build_parser, parse_cli_arguments
from .items_io import collect_items, ItemSourceError, SAMPLE_NAMES
from .runner import run_find
from .utils import (
    _configure_logging,
    _msg,
    _resolve_lang,
    EXIT_INPUT_ERROR,
    EXIT_OK,
    EXIT_STRATEGY_ERROR,
    LOGGER,
)

__all__ = [
    "EXIT_INPUT_ERROR",
    "EXIT_OK",
    "EXIT_STRATEGY_ERROR",
    "SAMPLE_NAMES",
    "build_parser",
    "main",
]


def main(argv: Optional[List[str]] = None) -> int:
    args, _parser, parse_error = parse_cli_arguments(argv if argv is not None else sys.argv[1:])
    if parse_error is not None:
        return parse_error
    assert args is not None  # mypy safety

    lang = _resolve_lang(args.lang)
    _configure_logging(args.json_logs, verbose=args.verbose)

    try:
        items = collect_items(args, lang)
    except ItemSourceError as exc:
        LOGGER.error(str(exc))
        return EXIT_INPUT_ERROR

    try:
        return run_find(args, items, lang)
    except ConfigError as exc:
        LOGGER.error(_msg(lang, "config_error", error=exc))
        return EXIT_INPUT_ERROR


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
