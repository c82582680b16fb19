"""Transaction fields: goods, price, quantity, and date.

Price and quantity carry several rules each. Their declared order is
part of the user-facing contract: an input such as ``"-abc"`` reports the
numeric-format message, never the negative-value one.
"""

from __future__ import annotations

import calendar
import datetime
import re
from typing import Any, ClassVar

from pydantic import BaseModel, Field, field_validator

from clientbook.domain.predicates import Rule
from clientbook.domain.values import StringValue

PRICE_LIMIT = 1_000_000
QUANTITY_LIMIT = 1_000_000

# Plain decimal literals only: no exponent, NaN, infinity, or digit separators.
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_DIGITS_PATTERN = re.compile(r"[0-9]+")
# int() refuses longer strings; anything this long is over every limit anyway.
_MAX_INTEGER_DIGITS = 100
_DATE_PATTERN = re.compile(r"([0-9]{2})/([0-9]{2})/([0-9]{4})")

_THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})
_MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def _integer_value(test: str) -> int | None:
    """Return the value of integer literal *test*, or None if it is not one.

    Literals too long to convert also give None.
    """
    if _INTEGER_PATTERN.fullmatch(test) is None:
        return None
    sign = "-" if test.startswith("-") else ""
    digits = test.lstrip("+-").lstrip("0") or "0"
    if len(digits) > _MAX_INTEGER_DIGITS:
        return None
    return int(sign + digits)


def format_price(amount: float) -> str:
    """Render *amount* with thousands grouping and two decimals, e.g. ``1,234.50``."""
    return f"{amount:,.2f}"


class Goods(StringValue):
    """The name of the goods in a transaction."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Goods can take any values, and it should not be blank"

    @staticmethod
    def is_valid_name(test: str) -> bool:
        return bool(test.strip())

    RULES = (Rule(is_valid_name, MESSAGE_CONSTRAINTS),)


class Price(StringValue):
    """Unit price of the goods transacted.

    The raw decimal literal is kept as the canonical form, so ``"12.50"``
    and ``"12.5"`` are distinct values even though their amounts match.
    """

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Price should only contain numbers and at most one decimal point."
    )
    MESSAGE_CONSTRAINTS_EMPTY: ClassVar[str] = "Price should not be left empty."
    MESSAGE_CONSTRAINTS_POSITIVE: ClassVar[str] = "Price should be not be negative."
    MESSAGE_CONSTRAINTS_LARGE: ClassVar[str] = "Price should be not be more than 1 million."

    @staticmethod
    def is_valid_price_empty(test: str) -> bool:
        return bool(test)

    @staticmethod
    def is_valid_price(test: str) -> bool:
        """Return True if *test* is a decimal literal."""
        return _DECIMAL_PATTERN.fullmatch(test) is not None

    @staticmethod
    def is_positive_price(test: str) -> bool:
        return "-" not in test

    @staticmethod
    def is_small_price(test: str) -> bool:
        """Return True if the amount is under one million.

        Only meaningful once ``is_valid_price`` holds; anything else is
        reported as not small rather than raising.
        """
        if not _DECIMAL_PATTERN.fullmatch(test):
            return False
        return float(test) < PRICE_LIMIT

    RULES = (
        Rule(is_valid_price_empty, MESSAGE_CONSTRAINTS_EMPTY),
        Rule(is_valid_price, MESSAGE_CONSTRAINTS),
        Rule(is_positive_price, MESSAGE_CONSTRAINTS_POSITIVE),
        Rule(is_small_price, MESSAGE_CONSTRAINTS_LARGE),
    )

    @property
    def amount(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return format_price(self.amount)


class Quantity(StringValue):
    """Number of units of goods transacted."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Quantity should only contain whole numbers."
    MESSAGE_CONSTRAINTS_EMPTY: ClassVar[str] = "Quantity should not be left empty."
    MESSAGE_CONSTRAINTS_POSITIVE: ClassVar[str] = "Quantity should not be negative."
    MESSAGE_CONSTRAINTS_LARGE: ClassVar[str] = "Quantity should be less than 1 million."
    MESSAGE_CONSTRAINTS_ZERO: ClassVar[str] = "Quantity should not be zero."

    @staticmethod
    def is_valid_quantity_empty(test: str) -> bool:
        return bool(test)

    @staticmethod
    def is_valid_quantity(test: str) -> bool:
        """Return True if *test* is an integer literal (sign allowed)."""
        return _INTEGER_PATTERN.fullmatch(test) is not None

    @staticmethod
    def is_positive_quantity(test: str) -> bool:
        return "-" not in test

    @staticmethod
    def is_valid_quantity_regex(test: str) -> bool:
        """Return True if *test* is made of digits only."""
        return _DIGITS_PATTERN.fullmatch(test) is not None

    @staticmethod
    def is_small_quantity(test: str) -> bool:
        value = _integer_value(test)
        return value is not None and value < QUANTITY_LIMIT

    @staticmethod
    def is_valid_quantity_non_zero(test: str) -> bool:
        if _INTEGER_PATTERN.fullmatch(test) is None:
            return False
        return test.lstrip("+-").lstrip("0") != ""

    RULES = (
        Rule(is_valid_quantity_empty, MESSAGE_CONSTRAINTS_EMPTY),
        Rule(is_valid_quantity, MESSAGE_CONSTRAINTS),
        Rule(is_positive_quantity, MESSAGE_CONSTRAINTS_POSITIVE),
        Rule(is_valid_quantity_regex, MESSAGE_CONSTRAINTS),
        Rule(is_small_quantity, MESSAGE_CONSTRAINTS_LARGE),
        Rule(is_valid_quantity_non_zero, MESSAGE_CONSTRAINTS_ZERO),
    )

    @property
    def amount(self) -> int:
        return int(self.value.lstrip("0") or "0")


class Date(BaseModel):
    """Date of a transaction.

    Entered and stored as ``DD/MM/YYYY``, shown as ``d MMM yyyy``
    (``7 Jan 2024``). February 29th is accepted in every year divisible
    by four, including 1900 and 2100; such dates resolve to February 28th
    since the calendar has no 29th in those years.
    """

    model_config = {"frozen": True}

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Date should be in the format DD/MM/YYYY"

    value: datetime.date = Field(strict=True)

    def __init__(self, value: Any) -> None:
        super().__init__(value=value)

    @staticmethod
    def is_valid_date(test: str) -> bool:
        """Return True if *test* is a ``DD/MM/YYYY`` calendar date."""
        match = _DATE_PATTERN.fullmatch(test)
        if match is None:
            return False
        day, month, year = (int(part) for part in match.groups())
        if year < 1 or not 1 <= month <= 12 or not 1 <= day <= 31:
            return False
        if month == 2:
            if day == 29:
                return year % 4 == 0
            return day < 29
        if month in _THIRTY_DAY_MONTHS:
            return day < 31
        return True

    @field_validator("value", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        if not cls.is_valid_date(value):
            raise ValueError(cls.MESSAGE_CONSTRAINTS)
        day, month, year = (int(part) for part in value.split("/"))
        last_day = calendar.monthrange(year, month)[1]
        return datetime.date(year, month, min(day, last_day))

    @classmethod
    def of(cls, value: datetime.date) -> Date:
        """Build a Date from a ``datetime.date``."""
        return cls.model_validate({"value": value})

    @classmethod
    def from_iso(cls, text: str) -> Date:
        """Read the ``yyyy-MM-dd`` storage form written by :meth:`to_iso`."""
        return cls.of(datetime.date.fromisoformat(text))

    @property
    def canonical(self) -> str:
        """The ``DD/MM/YYYY`` form."""
        return f"{self.value.day:02d}/{self.value.month:02d}/{self.value.year:04d}"

    def to_iso(self) -> str:
        return self.value.isoformat()

    def __str__(self) -> str:
        month = _MONTH_ABBREVIATIONS[self.value.month - 1]
        return f"{self.value.day} {month} {self.value.year:04d}"
