from __future__ import annotations

from collections import Counter

import pytest

from frequent_items.core import (
    DictionaryBasedItemCounter,
    ItemCount,
    SortBasedItemCounter,
    UnsupportedOperationError,
)
from frequent_items.core.counters import iter_runs, mapping_key

hypothesis = pytest.importorskip("hypothesis")
st = hypothesis.strategies
given = hypothesis.given

_ITEMS = st.lists(st.text(max_size=4), max_size=40)


def test_item_count_increments_from_initial_value() -> None:
    counter = ItemCount("a")
    assert counter.get_item() == "a"
    assert counter.get_count() == 0
    counter.increment()
    counter.increment()
    assert counter.count == 2
    assert ItemCount("b", 5).get_count() == 5


def test_item_count_rejects_negative_count() -> None:
    with pytest.raises(ValueError, match="count must be >= 0"):
        ItemCount("a", -1)


def test_sort_based_counts_in_sorted_order() -> None:
    result = SortBasedItemCounter().analyze(["a", "b", "a", "c", "a", "b"])
    assert result == [ItemCount("a", 3), ItemCount("b", 2), ItemCount("c", 1)]


def test_sort_based_uses_case_sensitive_ordinal_order() -> None:
    result = SortBasedItemCounter().analyze(["b", "a", "B", "A", "a"])
    assert [entry.item for entry in result] == ["A", "B", "a", "b"]
    assert [entry.count for entry in result] == [1, 1, 2, 1]


def test_sort_based_does_not_mutate_input() -> None:
    items = ["z", "y", "z"]
    SortBasedItemCounter().analyze(items)
    assert items == ["z", "y", "z"]


def test_empty_input_gives_empty_results() -> None:
    assert SortBasedItemCounter().analyze([]) == []
    assert DictionaryBasedItemCounter().analyze_dict([]) == {}


def test_dictionary_based_keys_embed_final_count() -> None:
    result = DictionaryBasedItemCounter().analyze_dict(["a", "b", "a", "c", "a", "b"])
    assert result == {
        "a_3": ItemCount("a", 3),
        "b_2": ItemCount("b", 2),
        "c_1": ItemCount("c", 1),
    }


def test_dictionary_based_single_run() -> None:
    result = DictionaryBasedItemCounter().analyze_dict(["x", "x", "x"])
    assert list(result) == ["x_3"]


def test_each_counter_rejects_the_other_form() -> None:
    with pytest.raises(UnsupportedOperationError) as sort_exc:
        SortBasedItemCounter().analyze_dict(["a"])
    assert sort_exc.value.operation == "analyze_dict"
    assert sort_exc.value.counter == "SortBasedItemCounter"

    with pytest.raises(UnsupportedOperationError, match=r"analyze\(\)"):
        DictionaryBasedItemCounter().analyze(["a"])


def test_mapping_key_format() -> None:
    assert mapping_key(ItemCount("Navin Kabra", 2)) == "Navin Kabra_2"


def test_iter_runs_yields_fresh_counters() -> None:
    runs = list(iter_runs(["b", "a", "b"]))
    assert runs == [ItemCount("a", 1), ItemCount("b", 2)]
    assert runs[0] is not runs[1]


@given(_ITEMS)
def test_sort_based_preserves_totals_and_distinct_items(items: list[str]) -> None:
    result = SortBasedItemCounter().analyze(items)
    assert sum(entry.count for entry in result) == len(items)
    assert {entry.item for entry in result} == set(items)
    assert len(result) == len(set(items))
    assert [entry.item for entry in result] == sorted(set(items))
    assert {entry.item: entry.count for entry in result} == dict(Counter(items))


@given(_ITEMS)
def test_sequence_and_mapping_forms_agree(items: list[str]) -> None:
    sequence = SortBasedItemCounter().analyze(items)
    mapping = DictionaryBasedItemCounter().analyze_dict(items)
    assert {entry.item: entry.count for entry in sequence} == {
        entry.item: entry.count for entry in mapping.values()
    }
    assert set(mapping) == {f"{entry.item}_{entry.count}" for entry in sequence}


@given(_ITEMS)
def test_analysis_is_repeatable(items: list[str]) -> None:
    counter = SortBasedItemCounter()
    assert counter.analyze(items) == counter.analyze(items)
    mapper = DictionaryBasedItemCounter()
    assert mapper.analyze_dict(items) == mapper.analyze_dict(items)
