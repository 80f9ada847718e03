"""Tests for pocketpal.domain.models."""

from datetime import datetime
from decimal import Decimal

import pytest

from pocketpal.domain.models import (
    Category,
    Entry,
    category_labels,
    format_amount,
    parse_amount,
    truncate_amount,
)
from pocketpal.exceptions import InvalidAmountError, InvalidCategoryError


class TestCategory:
    """Tests for Category."""

    def test_labels(self) -> None:
        """Should expose a fixed display label per category."""
        assert category_labels() == [
            "Clothing",
            "Entertainment",
            "Food",
            "Medical",
            "Others",
            "Personal",
            "Utilities",
            "Transportation",
        ]

    def test_label_property(self) -> None:
        """Should return the display label."""
        assert Category.UTILITIES.label == "Utilities"

    def test_from_label_exact(self) -> None:
        """Should find a category by its label."""
        assert Category.from_label("Food") is Category.FOOD

    def test_from_label_ignores_case_and_whitespace(self) -> None:
        """Should match labels regardless of case and padding."""
        assert Category.from_label("  transportation ") is Category.TRANSPORTATION

    def test_from_label_unknown(self) -> None:
        """Should reject labels outside the closed set instead of defaulting."""
        with pytest.raises(InvalidCategoryError):
            Category.from_label("Groceries")

    def test_every_label_round_trips(self) -> None:
        """Should map every label back to its own category."""
        for category in Category:
            assert Category.from_label(category.label) is category


class TestAmounts:
    """Tests for amount helpers."""

    def test_truncate_rounds_down(self) -> None:
        """Should drop digits past the second decimal."""
        assert truncate_amount(Decimal("8.999")) == Decimal("8.99")

    def test_truncate_keeps_exact_values(self) -> None:
        """Should leave two-decimal values unchanged."""
        assert truncate_amount(Decimal("8.50")) == Decimal("8.50")

    def test_format_pads_to_two_decimals(self) -> None:
        """Should always show two decimals."""
        assert format_amount(Decimal("8.5")) == "8.50"
        assert format_amount(Decimal("3")) == "3.00"

    def test_format_never_rounds_up(self) -> None:
        """Should truncate when formatting."""
        assert format_amount(Decimal("0.129")) == "0.12"

    def test_parse_string(self) -> None:
        """Should parse decimal strings exactly."""
        assert parse_amount("8.50") == Decimal("8.50")

    def test_parse_float_via_str(self) -> None:
        """Should avoid binary float artefacts."""
        assert parse_amount(8.5) == Decimal("8.5")

    def test_parse_rejects_text(self) -> None:
        """Should reject non-numeric input."""
        with pytest.raises(InvalidAmountError):
            parse_amount("abc")

    def test_parse_rejects_infinity(self) -> None:
        """Should reject non-finite values."""
        with pytest.raises(InvalidAmountError):
            parse_amount("Infinity")

    @pytest.mark.parametrize("raw", ["1e30", "1000000000000", "-1e12", "1E+999999"])
    def test_parse_rejects_huge_amounts(self, raw: str) -> None:
        """Should reject amounts too large to store with two decimals."""
        with pytest.raises(InvalidAmountError):
            parse_amount(raw)

    def test_parse_accepts_largest_amount(self) -> None:
        """Should accept amounts just below the limit and keep them formattable."""
        amount = parse_amount("999999999999.999")

        assert format_amount(amount) == "999999999999.99"


class TestEntry:
    """Tests for Entry."""

    def test_equality_by_value(self) -> None:
        """Should compare entries by their fields."""
        when = datetime(2025, 1, 15, 12, 30)
        assert Entry("Rice", Decimal("8.50"), Category.FOOD, when) == Entry("Rice", Decimal("8.5"), Category.FOOD, when)

    def test_timestamp_is_optional(self) -> None:
        """Should default the timestamp to None."""
        assert Entry("Rice", Decimal("8.50"), Category.FOOD).timestamp is None

    def test_is_immutable(self) -> None:
        """Should not allow fields to be reassigned."""
        entry = Entry("Rice", Decimal("8.50"), Category.FOOD)
        with pytest.raises(AttributeError):
            entry.description = "Noodles"  # type: ignore[misc]
