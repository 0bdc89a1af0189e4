from __future__ import annotations

import pytest

from frequent_items.core import (
    CounterRegistry,
    default_registry,
    DictionaryBasedItemCounter,
    DuplicateNameError,
    SortBasedItemCounter,
    UnknownStrategyError,
)


def test_default_registry_knows_builtin_counters() -> None:
    registry = default_registry()
    assert registry.names() == ["SortBased", "DictionaryBased"]
    assert len(registry) == 2
    assert isinstance(registry.get_instance("SortBased"), SortBasedItemCounter)
    assert isinstance(registry.get_instance("DictionaryBased"), DictionaryBasedItemCounter)


@pytest.mark.parametrize(
    ("alias", "expected"),
    [
        ("sortbased", "SortBased"),
        (" sort ", "SortBased"),
        ("SORTED", "SortBased"),
        ("dict", "DictionaryBased"),
        ("Map", "DictionaryBased"),
    ],
)
def test_aliases_resolve_case_insensitively(alias: str, expected: str) -> None:
    registry = default_registry()
    assert alias in registry
    assert registry.resolve_name(alias) == expected


def test_get_instance_returns_fresh_instances() -> None:
    registry = default_registry()
    assert registry.get_instance("SortBased") is not registry.get_instance("SortBased")


def test_unknown_name_raises_with_available_names() -> None:
    registry = default_registry()
    with pytest.raises(UnknownStrategyError) as exc_info:
        registry.get_instance("DoesNotExist")
    assert exc_info.value.name == "DoesNotExist"
    assert exc_info.value.available == ["DictionaryBased", "SortBased"]
    assert "DoesNotExist" not in registry
    assert isinstance(exc_info.value, LookupError)


def test_duplicate_registration_keeps_existing_entry() -> None:
    registry = CounterRegistry()
    registry.register("Counting", SortBasedItemCounter)
    with pytest.raises(DuplicateNameError) as exc_info:
        registry.register("Counting", DictionaryBasedItemCounter)
    assert exc_info.value.name == "Counting"
    assert isinstance(registry.get_instance("Counting"), SortBasedItemCounter)
    assert registry.names() == ["Counting"]


def test_duplicate_alias_is_rejected_without_partial_registration() -> None:
    registry = default_registry()
    with pytest.raises(DuplicateNameError, match="'map'"):
        registry.register("Other", SortBasedItemCounter, aliases=("oth", "map"))
    assert "Other" not in registry
    assert "oth" not in registry
    assert registry.resolve_name("map") == "DictionaryBased"


def test_register_rejects_blank_names() -> None:
    registry = CounterRegistry()
    with pytest.raises(ValueError):
        registry.register("  ", SortBasedItemCounter)
    assert len(registry) == 0


def test_register_accepts_custom_factory() -> None:
    registry = CounterRegistry()
    created: list[SortBasedItemCounter] = []

    def factory() -> SortBasedItemCounter:
        counter = SortBasedItemCounter()
        created.append(counter)
        return counter

    registry.register("Tracked", factory)
    instance = registry.get_instance("tracked")
    assert created == [instance]
