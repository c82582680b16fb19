"""Ordered predicate chains pairing each validity check with its user message.

The order of a chain is observable: when an input breaks several rules,
the first failing rule decides which message the user sees.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Rule:
    """A single validity check and the message shown when it fails."""

    check: Callable[[str], bool]
    message: str


def first_failure(rules: Sequence[Rule], candidate: str) -> str | None:
    """Return the message of the first rule *candidate* breaks, or None.

    Rules after the first failure are never evaluated, so later checks may
    assume every earlier one passed.
    """
    for rule in rules:
        if not rule.check(candidate):
            return rule.message
    return None


def check_rules(rules: Sequence[Rule], candidate: str) -> str:
    """Assert *candidate* satisfies every rule and return it unchanged.

    Raises:
        ValueError: With the first failing rule's message.
    """
    message = first_failure(rules, candidate)
    if message is not None:
        raise ValueError(message)
    return candidate
