"""Parser facade — turns raw user strings into domain value objects.

Every parser trims the input, runs the target type's rules in their
declared order, and raises :class:`ParseError` carrying the first failing
rule's message. ``None`` is a programming error, reported as
``TypeError`` rather than ``ParseError``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from typing import Any, NoReturn, TypeVar

from clientbook.domain.client import Address, ClientEmail, ClientPhone, Name
from clientbook.domain.index import MAX_ONE_BASED, Index
from clientbook.domain.predicates import first_failure
from clientbook.domain.remark import Text
from clientbook.domain.tag import Tag
from clientbook.domain.transaction import Date, Goods, Price, Quantity
from clientbook.domain.values import StringValue

logger = logging.getLogger(__name__)

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."

_ONE_BASED_PATTERN = re.compile(r"[1-9][0-9]*")

V = TypeVar("V", bound=StringValue)


class ParseError(Exception):
    """Raw input broke one of a field's rules.

    Attributes:
        message: The user-facing text for the first failing rule.
        field: Name of the field being parsed (e.g. ``"price"``).
    """

    def __init__(self, message: str, *, field: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.field = field


def _trimmed(raw: str | None, field: str) -> str:
    if raw is None:
        raise TypeError(f"{field} input must not be None")
    return raw.strip()


def _reject(field: str, message: str) -> NoReturn:
    logger.debug("Rejected %s input: %s", field, message)
    raise ParseError(message, field=field)


def _parse_value(value_cls: type[V], raw: str | None, field: str) -> V:
    trimmed = _trimmed(raw, field)
    message = first_failure(value_cls.RULES, trimmed)
    if message is not None:
        _reject(field, message)
    return value_cls(trimmed)


def parse_index(one_based_index: str | None) -> Index:
    """Parse a one-based list position into a zero-based :class:`Index`."""
    trimmed = _trimmed(one_based_index, "index")
    if (
        _ONE_BASED_PATTERN.fullmatch(trimmed) is None
        or len(trimmed) > len(str(MAX_ONE_BASED))
        or int(trimmed) > MAX_ONE_BASED
    ):
        _reject("index", MESSAGE_INVALID_INDEX)
    return Index.from_one_based(int(trimmed))


def parse_name(name: str | None) -> Name:
    return _parse_value(Name, name, "name")


def parse_client_phone(phone: str | None) -> ClientPhone:
    return _parse_value(ClientPhone, phone, "phone")


def parse_client_email(email: str | None) -> ClientEmail:
    return _parse_value(ClientEmail, email, "email")


def parse_address(address: str | None) -> Address:
    return _parse_value(Address, address, "address")


def parse_text(text: str | None) -> Text:
    return _parse_value(Text, text, "text")


def parse_tag(tag: str | None) -> Tag:
    return _parse_value(Tag, tag, "tag")


def parse_tags(tags: Iterable[str] | None) -> set[Tag]:
    """Parse every raw tag, stopping at the first invalid one.

    Duplicates collapse into a single :class:`Tag`.
    """
    if tags is None:
        raise TypeError("tags input must not be None")
    if isinstance(tags, str):
        raise TypeError("tags input must be a collection of strings, not a single string")
    return {parse_tag(tag) for tag in tags}


def parse_goods(goods: str | None) -> Goods:
    return _parse_value(Goods, goods, "goods")


def parse_price(price: str | None) -> Price:
    """Parse a price.

    Rules, in order: not empty, a decimal literal, not negative, and
    under one million.
    """
    return _parse_value(Price, price, "price")


def parse_quantity(quantity: str | None) -> Quantity:
    """Parse a quantity.

    Rules, in order: not empty, an integer, not negative, digits only,
    under one million, and not zero.
    """
    return _parse_value(Quantity, quantity, "quantity")


def parse_date(date: str | None) -> Date:
    """Parse a ``DD/MM/YYYY`` date."""
    trimmed = _trimmed(date, "date")
    if not Date.is_valid_date(trimmed):
        _reject("date", Date.MESSAGE_CONSTRAINTS)
    return Date(trimmed)


FIELD_PARSERS: dict[str, Callable[[str], Any]] = {
    "index": parse_index,
    "name": parse_name,
    "phone": parse_client_phone,
    "email": parse_client_email,
    "address": parse_address,
    "text": parse_text,
    "tag": parse_tag,
    "goods": parse_goods,
    "price": parse_price,
    "quantity": parse_quantity,
    "date": parse_date,
}
