"""Free-text remarks recorded against a client."""

from __future__ import annotations

from typing import ClassVar

from clientbook.domain.predicates import Rule
from clientbook.domain.values import StringValue


class Text(StringValue):
    """The body of a remark."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Remarks can take any values, and it should not be blank"

    @staticmethod
    def is_valid_text(test: str) -> bool:
        return bool(test.strip())

    RULES = (Rule(is_valid_text, MESSAGE_CONSTRAINTS),)
