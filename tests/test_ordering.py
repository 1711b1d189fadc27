"""
Tests for entry ordering and prefix filtering.

Created: 2026-10-19
"""

import itertools
import pytest
from pathlib import Path

from rmview.core.models import Entry, EntryKind
from rmview.core.ordering import filter_entries, order_and_filter, order_entries
from rmview.core.styles import EntryStyle, style_for


ROOT = Path("/work")


def make(name: str, kind: EntryKind = EntryKind.FILE) -> Entry:
    return Entry(name=name, path=ROOT / name, kind=kind)


@pytest.fixture
def entries():
    """Unordered listing with the self-entry in the middle."""
    return [
        make("zeta"),
        make("src", EntryKind.DIRECTORY),
        Entry.self_entry(ROOT),
        make("Readme"),
        make("link", EntryKind.OTHER),
        make("Docs", EntryKind.DIRECTORY),
        make(".env"),
    ]


class TestOrderEntries:
    """Test display ordering."""

    def test_order(self, entries):
        """Self first, then directories, then files and others by name."""
        ordered = order_entries(entries, ROOT)

        assert [e.name for e in ordered] == [
            ".", "Docs", "src", ".env", "Readme", "link", "zeta"
        ]

    def test_order_is_independent_of_input_order(self, entries):
        """Every permutation of a small listing orders identically."""
        sample = entries[:5]
        expected = order_entries(sample, ROOT)

        for permutation in itertools.permutations(sample):
            assert order_entries(list(permutation), ROOT) == expected

    def test_case_sensitive_names(self):
        """Uppercase sorts before lowercase."""
        ordered = order_entries([make("b"), make("a"), make("B"), make("A")], ROOT)

        assert [e.name for e in ordered] == ["A", "B", "a", "b"]

    def test_self_entry_matched_by_path(self):
        """The entry whose path equals the directory is first, whatever its name."""
        odd_self = Entry(name="zzz", path=ROOT, kind=EntryKind.DIRECTORY)

        ordered = order_entries([make("a", EntryKind.DIRECTORY), odd_self], ROOT)

        assert ordered[0] is odd_self

    def test_does_not_mutate_input(self, entries):
        before = list(entries)

        order_entries(entries, ROOT)

        assert entries == before


class TestFilterEntries:
    """Test prefix filtering."""

    def test_empty_filter_keeps_everything(self, entries):
        ordered = order_entries(entries, ROOT)

        assert filter_entries(ordered, "", ROOT) == ordered

    def test_dot_filter_keeps_self_and_dotfiles(self, entries):
        filtered = order_and_filter(entries, ".", ROOT)

        assert [e.name for e in filtered] == [".", ".env"]

    def test_other_filters_drop_self(self, entries):
        for text in ["s", "D", "..", "x"]:
            filtered = order_and_filter(entries, text, ROOT)
            assert all(not e.is_self for e in filtered)

    def test_prefix_is_case_sensitive(self, entries):
        assert [e.name for e in order_and_filter(entries, "d", ROOT)] == []
        assert [e.name for e in order_and_filter(entries, "D", ROOT)] == ["Docs"]

    def test_prefix_is_literal(self):
        """Glob and regex characters match themselves only."""
        listing = [make("a*b"), make("axb"), make("a.b"), make("[x]")]

        assert [e.name for e in filter_entries(listing, "a*", ROOT)] == ["a*b"]
        assert [e.name for e in filter_entries(listing, "a.", ROOT)] == ["a.b"]
        assert [e.name for e in filter_entries(listing, "[", ROOT)] == ["[x]"]

    def test_prefix_membership(self, entries):
        """An entry is kept exactly when its name starts with the filter."""
        for text in ["s", "sr", "src", "srcx", "R", "z", "l", "Do"]:
            filtered = order_and_filter(entries, text, ROOT)
            expected = [e for e in order_entries(entries, ROOT)
                        if not e.is_self and e.name.startswith(text)]
            assert filtered == expected

    def test_pure(self, entries):
        """Same inputs, same output."""
        assert order_and_filter(entries, "s", ROOT) == order_and_filter(entries, "s", ROOT)


class TestStyles:
    """Test style hints."""

    def test_style_for(self):
        assert style_for(Entry.self_entry(ROOT)) is EntryStyle.SELF
        assert style_for(make("src", EntryKind.DIRECTORY)) is EntryStyle.DIRECTORY
        assert style_for(make(".git", EntryKind.DIRECTORY)) is EntryStyle.HIDDEN_DIRECTORY
        assert style_for(make("a.txt")) is EntryStyle.FILE
        assert style_for(make(".env")) is EntryStyle.HIDDEN_FILE
        assert style_for(make("link", EntryKind.OTHER)) is EntryStyle.OTHER
