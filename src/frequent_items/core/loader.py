"""設定ファイルの読み込みユーティリティ。"""
from __future__ import annotations

from collections.abc import MutableMapping
from pathlib import Path
from typing import cast

from pydantic import ValidationError
import yaml

from .errors import ConfigError
from .models import FinderConfig
from .schema import FinderConfigModel

__all__ = [
    "ConfigError",
    "load_finder_config",
]


def _format_validation_error(path: Path, exc: ValidationError) -> str:
    details = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part is not None)
        message = error.get("msg", "unknown error")
        if location:
            details.append(f"{location}: {message}")
        else:
            details.append(message)
    summary = "; ".join(details)
    return f"invalid finder config ({path}): {summary}"


def _load_yaml(path: Path) -> MutableMapping[str, object]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read finder config: {path}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in finder config ({path}): {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, MutableMapping):
        raise ConfigError(f"finder config must be a mapping: {path}")
    return cast(MutableMapping[str, object], data)


def load_finder_config(path: str | Path) -> FinderConfig:
    """YAML の設定ファイルを読み込み、検証済みの ``FinderConfig`` を返す。"""

    path = Path(path)
    data = _load_yaml(path)
    try:
        model = FinderConfigModel.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(_format_validation_error(path, exc)) from None
    return FinderConfig(
        sequence_strategy=model.sequence_strategy,
        mapping_strategy=model.mapping_strategy,
        map_threshold=model.map_threshold,
        tie_breaker=model.tie_breaker,
        seed=model.seed,
    )
