"""Client contact fields: name, phone, email, and address."""

from __future__ import annotations

import re
from typing import ClassVar

from clientbook.domain.predicates import Rule
from clientbook.domain.values import StringValue

_NAME_PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")
_PHONE_PATTERN = re.compile(r"[0-9]{3,}")
_ADDRESS_PATTERN = re.compile(r"[^\s].*")

# local-part@domain; the domain must start and end alphanumeric.
_EMAIL_SPECIAL_CHARACTERS = "!#$%&'*+/=?`{|}~^.-"
_EMAIL_PATTERN = re.compile(
    r"[\w" + re.escape(_EMAIL_SPECIAL_CHARACTERS) + r"]+"
    r"@[^\W_][a-zA-Z0-9.-]*[^\W_]",
    re.ASCII,
)


class Name(StringValue):
    """A client's name."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )

    @staticmethod
    def is_valid_name(test: str) -> bool:
        return _NAME_PATTERN.fullmatch(test) is not None

    RULES = (Rule(is_valid_name, MESSAGE_CONSTRAINTS),)


class ClientPhone(StringValue):
    """A client's phone number, kept as its digit string."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    )

    @staticmethod
    def is_valid_phone(test: str) -> bool:
        return _PHONE_PATTERN.fullmatch(test) is not None

    RULES = (Rule(is_valid_phone, MESSAGE_CONSTRAINTS),)


class ClientEmail(StringValue):
    """A client's email address."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Emails should be of the format local-part@domain "
        "and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and these special "
        f"characters, excluding the parentheses, ({_EMAIL_SPECIAL_CHARACTERS}) .\n"
        "2. This is followed by a '@' and then a domain name. The domain name must:\n"
        "    - be at least 2 characters long\n"
        "    - start and end with alphanumeric characters\n"
        "    - consist of alphanumeric characters, a period or a hyphen for the characters "
        "in between, if any."
    )

    @staticmethod
    def is_valid_email(test: str) -> bool:
        return _EMAIL_PATTERN.fullmatch(test) is not None

    RULES = (Rule(is_valid_email, MESSAGE_CONSTRAINTS),)


class Address(StringValue):
    """A client's address. Any text is accepted as long as it is not blank."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Addresses can take any values, and it should not be blank"

    @staticmethod
    def is_valid_address(test: str) -> bool:
        return _ADDRESS_PATTERN.fullmatch(test) is not None

    RULES = (Rule(is_valid_address, MESSAGE_CONSTRAINTS),)
