"""Domain types for PocketPal.

- Category: closed set of spending categories with their display labels
- Entry: one recorded expense
- Amounts are Decimal values shown and stored with two decimal places,
  truncated toward zero so stored totals never grow
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_DOWN, Decimal, InvalidOperation
from enum import Enum

from pocketpal.exceptions import InvalidAmountError, InvalidCategoryError

CENT = Decimal("0.01")
# Amounts at or above this cannot be entered or loaded
MAX_AMOUNT = Decimal("1000000000000")


class Category(Enum):
    """Spending categories. The value is the label used on screen and on disk."""

    CLOTHING = "Clothing"
    ENTERTAINMENT = "Entertainment"
    FOOD = "Food"
    MEDICAL = "Medical"
    OTHERS = "Others"
    PERSONAL = "Personal"
    UTILITIES = "Utilities"
    TRANSPORTATION = "Transportation"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: str) -> "Category":
        """Look up a category by its label, ignoring case and surrounding whitespace.

        Args:
            label: Category label such as "Food" or "food".

        Returns:
            The matching Category.

        Raises:
            InvalidCategoryError: If no category has this label.
        """
        wanted = label.strip().lower()
        for category in cls:
            if category.value.lower() == wanted:
                return category
        raise InvalidCategoryError(f"Unknown category '{label}'. Choose from: {', '.join(category_labels())}")


def category_labels() -> list[str]:
    """Labels of all categories in declaration order."""
    return [category.value for category in Category]


def truncate_amount(amount: Decimal) -> Decimal:
    """Drop everything past the second decimal place (8.999 -> 8.99)."""
    return amount.quantize(CENT, rounding=ROUND_DOWN)


def format_amount(amount: Decimal) -> str:
    """Format an amount with exactly two decimals, truncating extra digits."""
    return f"{truncate_amount(amount):.2f}"


def parse_amount(raw: object) -> Decimal:
    """Convert raw input to a finite Decimal.

    Args:
        raw: String, int, float or Decimal.

    Returns:
        The amount as a Decimal. Floats go through str() so 8.5 becomes Decimal("8.5").

    Raises:
        InvalidAmountError: If the value is not a finite number or its size reaches MAX_AMOUNT.
    """
    try:
        amount = Decimal(str(raw).strip())
    except InvalidOperation as e:
        raise InvalidAmountError(f"'{raw}' is not a valid amount") from e
    if not amount.is_finite():
        raise InvalidAmountError(f"'{raw}' is not a valid amount")
    if abs(amount) >= MAX_AMOUNT:
        raise InvalidAmountError(f"'{raw}' is too large, amounts must be below {MAX_AMOUNT:,}")
    return amount


@dataclass(frozen=True)
class Entry:
    """Immutable expense record."""

    description: str
    amount: Decimal
    category: Category
    timestamp: datetime | None = None
