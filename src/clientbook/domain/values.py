"""Base class for string-backed value objects.

A value object holds one validated string. Construction re-runs the
subclass's rule chain, so an instance never carries a value its own
validator would reject, whichever path built it (parser facade,
``model_validate`` on stored data, or a direct call).
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, field_validator

from clientbook.domain.predicates import Rule, check_rules


class StringValue(BaseModel):
    """Immutable value object over a canonical string.

    Subclasses declare ``RULES`` in the order their messages should win.
    """

    model_config = {"frozen": True}

    RULES: ClassVar[tuple[Rule, ...]] = ()

    value: str

    def __init__(self, value: str) -> None:
        super().__init__(value=value)

    @field_validator("value")
    @classmethod
    def enforce_rules(cls, value: str) -> str:
        return check_rules(cls.RULES, value)

    @property
    def canonical(self) -> str:
        """The form this value round-trips through for persistence."""
        return self.value

    def __str__(self) -> str:
        return self.value
