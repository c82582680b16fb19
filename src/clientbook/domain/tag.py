"""Tags attached to clients."""

from __future__ import annotations

import re
from typing import ClassVar

from clientbook.domain.predicates import Rule
from clientbook.domain.values import StringValue

_TAG_PATTERN = re.compile(r"[A-Za-z0-9]+")


class Tag(StringValue):
    """A single alphanumeric tag token."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Tags names should be alphanumeric"

    @staticmethod
    def is_valid_tag_name(test: str) -> bool:
        return _TAG_PATTERN.fullmatch(test) is not None

    RULES = (Rule(is_valid_tag_name, MESSAGE_CONSTRAINTS),)
