"""Tests for pocketpal.commands.add."""

from datetime import datetime
from decimal import Decimal

import pytest

from pocketpal.commands.add import AddCommand
from pocketpal.domain.entry_log import EntryLog
from pocketpal.domain.models import Category, Entry
from pocketpal.exceptions import InvalidAmountError, InvalidCategoryError, InvalidDescriptionError

WHEN = datetime(2025, 1, 15, 12, 30)


class TestAddCommand:
    """Tests for AddCommand."""

    def test_builds_entry(self) -> None:
        """Should turn raw input into an entry."""
        command = AddCommand("Rice", 8.50, "Food", WHEN)

        assert command.entry == Entry("Rice", Decimal("8.50"), Category.FOOD, WHEN)

    def test_execute_appends(self) -> None:
        """Should append the entry to the log."""
        log = EntryLog()
        command = AddCommand("Rice", "8.50", "Food", WHEN)

        command.execute(log)

        assert log.entries == (Entry("Rice", Decimal("8.50"), Category.FOOD, WHEN),)

    def test_defaults_timestamp_to_now_without_seconds(self) -> None:
        """Should stamp the entry with the current minute."""
        before = datetime.now().replace(second=0, microsecond=0)
        command = AddCommand("Rice", "8.50", "Food")
        after = datetime.now()

        timestamp = command.entry.timestamp
        assert timestamp is not None
        assert before <= timestamp <= after
        assert timestamp.second == 0
        assert timestamp.microsecond == 0

    def test_strips_description(self) -> None:
        """Should trim surrounding whitespace from the description."""
        assert AddCommand("  Rice  ", "1", "Food", WHEN).entry.description == "Rice"

    def test_category_case_insensitive(self) -> None:
        """Should accept category labels in any case."""
        assert AddCommand("Rice", "1", "FOOD", WHEN).entry.category is Category.FOOD

    def test_mutates(self) -> None:
        """Should tell the caller to persist."""
        assert AddCommand("Rice", "1", "Food", WHEN).mutates

    @pytest.mark.parametrize("amount", ["0", "-3", "abc", "", "NaN", "0.001", "0.009", "1e30"])
    def test_rejects_bad_amount(self, amount: str) -> None:
        """Should refuse amounts that are not positive numbers."""
        with pytest.raises(InvalidAmountError):
            AddCommand("Rice", amount, "Food", WHEN)

    def test_accepts_one_cent(self) -> None:
        """Should accept the smallest amount that survives truncation."""
        assert AddCommand("Gum", "0.019", "Food", WHEN).entry.amount == Decimal("0.019")

    def test_rejects_unknown_category(self) -> None:
        """Should refuse categories outside the closed set."""
        with pytest.raises(InvalidCategoryError):
            AddCommand("Rice", "8.50", "Groceries", WHEN)

    @pytest.mark.parametrize("description", ["", "   ", "two\nlines"])
    def test_rejects_bad_description(self, description: str) -> None:
        """Should refuse empty or multi-line descriptions."""
        with pytest.raises(InvalidDescriptionError):
            AddCommand(description, "8.50", "Food", WHEN)
