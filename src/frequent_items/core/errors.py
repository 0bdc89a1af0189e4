"""Normalized exception hierarchy for frequent-items core."""

from __future__ import annotations

from collections.abc import Iterable


class FrequentItemsError(Exception):
    """Base class for frequent-items errors."""


class UnknownStrategyError(FrequentItemsError, LookupError):
    """Raised when a counter name was never registered."""

    def __init__(self, name: str, *, available: Iterable[str] | None = None) -> None:
        self.name = name
        self.available = sorted(available) if available is not None else []
        message = f"unknown counting strategy: {name!r}"
        if self.available:
            message = f"{message}. supported: {', '.join(self.available)}"
        super().__init__(message)


class DuplicateNameError(FrequentItemsError, ValueError):
    """Raised when a counter name is registered twice."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"counting strategy already registered: {name!r}")


class UnsupportedOperationError(FrequentItemsError, NotImplementedError):
    """Raised when a counter is asked for an analysis form it does not provide."""

    def __init__(self, counter: str, operation: str) -> None:
        self.counter = counter
        self.operation = operation
        super().__init__(f"{counter} does not support {operation}()")


class ConfigError(FrequentItemsError):
    """Raised when finder configuration is invalid."""


__all__ = [
    "FrequentItemsError",
    "UnknownStrategyError",
    "DuplicateNameError",
    "UnsupportedOperationError",
    "ConfigError",
]
