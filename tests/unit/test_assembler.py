"""
Unit tests for result assembly: filtering of non-matches and stable ordering.
"""

import pytest

from dirlist.models.entry import FileEntry, FolderEntry
from dirlist.tools.assembler import assemble_results


def _file(name):
    return FileEntry(path=f"/d/{name}", name=name, size=1)


def _folder(name):
    return FolderEntry(path=f"/d/{name}", name=name)


class TestAssembleResults:
    """Test cases for assemble_results()."""

    def setup_method(self):
        """Set up entries in a fixed enumeration order."""
        self.entries = [_file("b"), _folder("a"), _file("c"), _file("d")]

    @pytest.mark.parametrize("query", [None, ""])
    def test_no_query_keeps_native_order(self, query):
        """Test that nothing is filtered or reordered without a query."""
        result = assemble_results(self.entries, [0, 0, 0, 0], query)

        assert [entry.name for entry in result] == ["b", "a", "c", "d"]
        assert all(entry.relevance == 0 for entry in result)

    def test_no_query_returns_new_list(self):
        """Test that the caller's sequence is not handed back."""
        result = assemble_results(self.entries, [0, 0, 0, 0], None)
        assert result is not self.entries

    def test_drops_non_matches(self):
        """Test that entries scored None are removed."""
        result = assemble_results(self.entries, [1, None, 4, None], "q")

        assert [entry.name for entry in result] == ["b", "c"]

    def test_sorts_by_relevance(self):
        """Test ascending order of relevance."""
        result = assemble_results(self.entries, [5, 0, 1, 3], "q")

        assert [entry.name for entry in result] == ["a", "c", "d", "b"]
        assert [entry.relevance for entry in result] == [0, 1, 3, 5]

    def test_ties_keep_enumeration_order(self):
        """Test that the sort is stable for equal scores."""
        result = assemble_results(self.entries, [1, 1, 0, 1], "q")

        assert [entry.name for entry in result] == ["c", "b", "a", "d"]

    def test_no_alphabetical_tie_break(self):
        """Test that equal scores are not sorted by name."""
        entries = [_file("zeta"), _file("alpha"), _file("mid")]
        result = assemble_results(entries, [2, 2, 2], "q")

        assert [entry.name for entry in result] == ["zeta", "alpha", "mid"]

    def test_inputs_are_not_mutated(self):
        """Test that relevance is applied to copies."""
        assemble_results(self.entries, [5, 0, 1, 3], "q")

        assert all(entry.relevance == 0 for entry in self.entries)

    def test_kind_survives_ranking(self):
        """Test that ranked copies keep their kind."""
        result = assemble_results(self.entries, [None, 2, None, None], "q")

        assert isinstance(result[0], FolderEntry)
        assert result[0].relevance == 2

    def test_everything_filtered(self):
        """Test that a query matching nothing yields an empty list."""
        assert assemble_results(self.entries, [None] * 4, "q") == []

    def test_length_mismatch(self):
        """Test that scores must line up with entries."""
        with pytest.raises(ValueError, match="3 scores for 4 entries"):
            assemble_results(self.entries, [0, 0, 0], "q")
