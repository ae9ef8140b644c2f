"""Tests for read-only collection lookups"""

import random

import pytest

from tongue.core.interfaces import RandomSource
from tongue.core.selector import (
    find_by_foreign,
    find_by_native,
    select_by_index,
    select_random,
)
from tongue.exceptions import EmptyCollectionError, IndexOutOfRangeError
from tongue.models.entry import Entry


class FixedSource:
    """Random source that always returns the same index"""

    def __init__(self, value: int):
        self.value = value
        self.calls: list[int] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        return self.value


ENTRIES = [
    Entry(native="Eins", foreign="Uno"),
    Entry(native="Hallo", foreign="Ciao"),
    Entry(native="Tschüss", foreign="Ciao"),
    Entry(native="Hallo", foreign="Salve"),
]


class TestSelectByIndex:
    def test_one_based(self):
        assert select_by_index(ENTRIES, 1) == ENTRIES[0]
        assert select_by_index(ENTRIES, 4) == ENTRIES[3]

    @pytest.mark.parametrize("index", [0, -1, 5, 100])
    def test_out_of_range(self, index):
        """Indices outside [1, count] report the valid range"""
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            select_by_index(ENTRIES, index)

        assert exc_info.value.count == 4
        assert "between 1 and 4" in exc_info.value.message

    def test_empty_collection(self):
        with pytest.raises(IndexOutOfRangeError):
            select_by_index([], 1)


class TestFindByText:
    def test_native_returns_all_matches_in_order(self):
        assert find_by_native(ENTRIES, "Hallo") == ["Ciao", "Salve"]

    def test_foreign_returns_all_matches_in_order(self):
        assert find_by_foreign(ENTRIES, "Ciao") == ["Hallo", "Tschüss"]

    def test_exact_match_only(self):
        """Matching is case and whitespace sensitive"""
        assert find_by_native(ENTRIES, "hallo") == []
        assert find_by_native(ENTRIES, "Hallo ") == []
        assert find_by_foreign(ENTRIES, "Nope") == []


class TestSelectRandom:
    def test_uses_injected_source(self):
        source = FixedSource(2)

        assert select_random(ENTRIES, source) == ENTRIES[2]
        assert source.calls == [4]

    def test_seeded_random_stays_in_bounds(self):
        """A real random.Random always yields a member of the collection"""
        rng = random.Random(1234)
        for _ in range(200):
            assert select_random(ENTRIES, rng) in ENTRIES

    def test_random_satisfies_protocol(self):
        assert isinstance(random.Random(), RandomSource)
        assert isinstance(FixedSource(0), RandomSource)

    def test_empty_collection(self):
        with pytest.raises(EmptyCollectionError):
            select_random([], FixedSource(0))

    def test_selection_does_not_mutate(self):
        entries = list(ENTRIES)
        select_random(entries, FixedSource(1))
        select_by_index(entries, 2)
        find_by_native(entries, "Hallo")
        assert entries == ENTRIES
