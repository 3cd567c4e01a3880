"""
Tests for ISBN, year and patch validators.
"""

import itertools

import pytest
from datetime import datetime, UTC

from book_catalog.domain.errors import (
    ErrorKind,
    InvalidISBNError,
    InvalidYearError,
    MissingFieldError,
)
from book_catalog.domain.validators import (
    normalize_isbn,
    validate_isbn,
    validate_update_input,
    validate_year,
)
from book_catalog.domain.value_objects import UpdateInput


VALID_ISBN_10 = ["0306406152", "080442957X", "0441172717"]
VALID_ISBN_13 = ["9788418037016", "9780306406157", "9780441172719", "9783161484100"]


class TestNormalizeISBN:
    """Tests for normalize_isbn()."""

    def test_strips_hyphens_and_spaces(self):
        assert normalize_isbn("978-84-18037-01-6") == "9788418037016"
        assert normalize_isbn("978 84 18037 01 6") == "9788418037016"

    def test_uppercases_check_character(self):
        assert normalize_isbn("080442957x") == "080442957X"

    def test_strips_surrounding_whitespace(self):
        assert normalize_isbn("  0-306-40615-2\n") == "0306406152"

    def test_does_not_validate(self):
        """Garbage goes in, normalized garbage comes out."""
        assert normalize_isbn("abc-12") == "ABC12"
        assert normalize_isbn("") == ""

    def test_whitespace_hidden_behind_hyphens(self):
        assert normalize_isbn("-\t9788418037016") == "9788418037016"
        assert normalize_isbn("9788418037016-\n") == "9788418037016"
        assert normalize_isbn("-\xa0x") == "X"

    @pytest.mark.parametrize(
        "raw",
        [
            "978-84-18037-01-6",
            " 0 8044 2957 x ",
            "abc--def",
            "",
            "---",
            "isbn: 12 3",
            "-\t9788418037016",
            "-\xa0X",
            "0306406152-\n",
            "\t- -\xa0-978-\n",
        ],
    )
    def test_idempotent(self, raw):
        once = normalize_isbn(raw)
        assert normalize_isbn(once) == once

    def test_idempotent_for_all_short_strings(self):
        """Every string of up to 4 chars over digits, x/X, separators and whitespace."""
        alphabet = "09xX- \t\xa0"
        for length in range(5):
            for chars in itertools.product(alphabet, repeat=length):
                raw = "".join(chars)
                once = normalize_isbn(raw)
                assert normalize_isbn(once) == once, repr(raw)

    def test_validation_agrees_with_normalized_form(self):
        raw = "-\t9788418037016"

        validate_isbn(raw)
        validate_isbn(normalize_isbn(raw))


class TestValidateISBN:
    """Tests for validate_isbn()."""

    @pytest.mark.parametrize("isbn", VALID_ISBN_10 + VALID_ISBN_13)
    def test_accepts_valid_isbns(self, isbn):
        validate_isbn(isbn)

    def test_accepts_hyphenated_isbn_13(self):
        validate_isbn("978-84-18037-01-6")

    def test_accepts_lowercase_x(self):
        validate_isbn("0-8044-2957-x")

    def test_rejects_bad_isbn_10_checksum(self):
        with pytest.raises(InvalidISBNError, match="ISBN-10 checksum"):
            validate_isbn("0306406153")

    def test_rejects_bad_isbn_13_checksum(self):
        with pytest.raises(InvalidISBNError, match="ISBN-13 checksum"):
            validate_isbn("9788418037017")

    @pytest.mark.parametrize(
        "isbn",
        [
            "",
            "123",
            "97884180370160",  # 14 digits
            "X306406152",  # X only allowed as check character
            "978841803701X",  # X never allowed in ISBN-13
            "03064O6152",  # letter O instead of zero
            "٠٣٠٦٤٠٦١٥٢",  # Arabic-Indic digits
        ],
    )
    def test_rejects_wrong_shape(self, isbn):
        with pytest.raises(InvalidISBNError, match="ISBN-10 or ISBN-13 format"):
            validate_isbn(isbn)

    @pytest.mark.parametrize("isbn", VALID_ISBN_10)
    def test_isbn_10_detects_every_single_digit_substitution(self, isbn):
        """Weights 10..1 are all coprime with 11, so no substitution preserves the sum."""
        for position in range(10):
            for digit in "0123456789":
                if digit == isbn[position]:
                    continue
                mutated = isbn[:position] + digit + isbn[position + 1:]
                with pytest.raises(InvalidISBNError):
                    validate_isbn(mutated)

    @pytest.mark.parametrize("isbn", VALID_ISBN_13)
    def test_isbn_13_detects_every_single_digit_substitution(self, isbn):
        """Weights 1 and 3 are coprime with 10, so no substitution preserves the sum."""
        for position in range(13):
            for digit in "0123456789":
                if digit == isbn[position]:
                    continue
                mutated = isbn[:position] + digit + isbn[position + 1:]
                with pytest.raises(InvalidISBNError):
                    validate_isbn(mutated)

    def test_error_kind(self):
        with pytest.raises(InvalidISBNError) as exc_info:
            validate_isbn("nope")

        assert exc_info.value.kind is ErrorKind.INVALID_ISBN
        assert isinstance(exc_info.value, ValueError)


class TestValidateYear:
    """Tests for validate_year()."""

    def test_lower_bound(self, fixed_clock):
        with pytest.raises(InvalidYearError):
            validate_year(1449, fixed_clock)
        validate_year(1450, fixed_clock)

    def test_upper_bound_is_current_year(self, fixed_clock):
        validate_year(2024, fixed_clock)
        with pytest.raises(InvalidYearError, match="between 1450 and current year"):
            validate_year(2025, fixed_clock)

    def test_current_year_resolved_on_every_call(self, fixed_clock):
        """Validity follows the clock; nothing is cached."""
        with pytest.raises(InvalidYearError):
            validate_year(2025, fixed_clock)

        fixed_clock.advance(days=365)

        validate_year(2025, fixed_clock)

    def test_defaults_to_system_clock(self):
        current_year = datetime.now(UTC).year

        validate_year(current_year)
        with pytest.raises(InvalidYearError):
            validate_year(current_year + 1)

    def test_rejects_negative_year(self, fixed_clock):
        with pytest.raises(InvalidYearError):
            validate_year(-1, fixed_clock)


class TestValidateUpdateInput:
    """Tests for validate_update_input()."""

    def test_empty_patch_is_valid(self, fixed_clock):
        validate_update_input(UpdateInput(), fixed_clock)

    def test_rejects_blank_title(self, fixed_clock):
        with pytest.raises(MissingFieldError, match="title cannot be empty"):
            validate_update_input(UpdateInput(title="   "), fixed_clock)

    def test_rejects_blank_author(self, fixed_clock):
        with pytest.raises(MissingFieldError, match="author cannot be empty"):
            validate_update_input(UpdateInput(author=""), fixed_clock)

    def test_allows_blank_genre(self, fixed_clock):
        validate_update_input(UpdateInput(genre=""), fixed_clock)

    def test_checks_present_year(self, fixed_clock):
        with pytest.raises(InvalidYearError):
            validate_update_input(UpdateInput(year=1000), fixed_clock)

    def test_checks_present_isbn(self, fixed_clock):
        with pytest.raises(InvalidISBNError):
            validate_update_input(UpdateInput(isbn="9788418037017"), fixed_clock)

    def test_accepts_valid_full_patch(self, fixed_clock):
        validate_update_input(
            UpdateInput(
                title="Dune",
                author="Frank Herbert",
                year=1965,
                genre="Science Fiction",
                isbn="0-441-17271-7",
            ),
            fixed_clock,
        )
