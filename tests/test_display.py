"""Tests for entry rendering"""

import logging

from tongue.core.display import DisplayMode, DisplayPolicy
from tongue.models.entry import Entry

ENTRY = Entry(native="Hallo", foreign="Ciao")


class TestDisplayPolicy:
    def test_both_by_default(self):
        policy = DisplayPolicy.from_flags(no_native=False, no_foreign=False)

        assert policy.mode is DisplayMode.BOTH
        assert policy.format_entry(ENTRY) == "Hallo - Ciao"

    def test_no_native(self):
        policy = DisplayPolicy.from_flags(no_native=True, no_foreign=False)
        assert policy.format_entry(ENTRY) == "Ciao"

    def test_no_foreign(self):
        policy = DisplayPolicy.from_flags(no_native=False, no_foreign=True)
        assert policy.format_entry(ENTRY) == "Hallo"

    def test_native_suppression_wins(self, caplog):
        """With both flags the entry is shown foreign-only and a warning logged"""
        with caplog.at_level(logging.WARNING, logger="tongue"):
            policy = DisplayPolicy.from_flags(no_native=True, no_foreign=True)

        assert policy.mode is DisplayMode.FOREIGN_ONLY
        assert policy.format_entry(ENTRY) == "Ciao"
        assert "ignoring --no-foreign" in caplog.text

    def test_listing_is_one_based(self):
        entries = [Entry(native="Eins", foreign="Uno"), ENTRY]

        assert DisplayPolicy().format_listing(entries) == [
            "1: Eins - Uno",
            "2: Hallo - Ciao",
        ]
        assert DisplayPolicy(DisplayMode.NATIVE_ONLY).format_listing(entries) == [
            "1: Eins",
            "2: Hallo",
        ]


class TestEntry:
    def test_accepts_field_names_and_aliases(self):
        assert Entry(Native="Hallo", Foreign="Ciao") == ENTRY

    def test_serializes_with_aliases(self):
        assert ENTRY.model_dump(by_alias=True) == {"Native": "Hallo", "Foreign": "Ciao"}
