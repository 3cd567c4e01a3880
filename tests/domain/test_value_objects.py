"""
Tests for domain value objects.
"""

import pytest

from book_catalog.domain.value_objects import ImportSummary, SearchFilter, UpdateInput


class TestUpdateInput:
    """Tests for the UpdateInput value object."""

    def test_create_empty_patch(self):
        changes = UpdateInput()

        assert changes.title is None
        assert changes.isbn is None
        assert changes.is_empty() is True

    def test_patch_with_one_field_is_not_empty(self):
        assert UpdateInput(year=2000).is_empty() is False

    def test_empty_string_counts_as_present(self):
        """An empty string is a value (to be validated), not an absent field."""
        assert UpdateInput(genre="").is_empty() is False

    def test_patch_immutability(self):
        changes = UpdateInput(title="Dune")

        with pytest.raises(Exception):  # FrozenInstanceError
            changes.title = "Other"


class TestSearchFilter:
    """Tests for the SearchFilter value object."""

    def test_create_empty_filter(self):
        book_filter = SearchFilter()

        assert book_filter.title is None
        assert book_filter.author is None
        assert book_filter.genre is None
        assert book_filter.year is None
        assert book_filter.is_empty() is True

    @pytest.mark.parametrize(
        "kwargs",
        [{"title": "dune"}, {"author": "herbert"}, {"genre": "sci"}, {"year": 1965}],
    )
    def test_any_criterion_makes_filter_non_empty(self, kwargs):
        assert SearchFilter(**kwargs).is_empty() is False


class TestImportSummary:
    """Tests for the ImportSummary value object."""

    def test_valid_summary(self):
        summary = ImportSummary(n_read=5, n_created=3, n_skipped=1, n_errors=1, errors=["bad"])

        assert summary.n_read == 5
        assert summary.errors == ["bad"]

    def test_invariant_violated(self):
        with pytest.raises(ValueError, match="Invariant violated"):
            ImportSummary(n_read=5, n_created=1, n_skipped=1, n_errors=1)

    def test_negative_count(self):
        with pytest.raises(ValueError, match="n_skipped cannot be negative"):
            ImportSummary(n_read=0, n_created=1, n_skipped=-1, n_errors=0)
