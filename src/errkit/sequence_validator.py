"""Validation rules for list-like values."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from errkit import messages as msg
from errkit.validators import BaseValidator

__all__ = ["SequenceValidator", "sequence"]


class SequenceValidator(BaseValidator[Sequence[Any]]):
    """Fluent validation rules for a sequence of items.

    Example:
        err = sequence(tags, "tags").required().max_items(5).validate()
    """

    def required(self) -> SequenceValidator:
        """Validate that the sequence has at least one item."""
        return self._check(len(self._value) > 0, msg.MSG_REQUIRED, msg.MSG_EMPTY)

    def empty(self) -> SequenceValidator:
        return self._check(len(self._value) == 0, msg.MSG_EMPTY, msg.MSG_NOT_EMPTY)

    def min_items(self, minimum: int) -> SequenceValidator:
        return self._check(
            len(self._value) >= minimum,
            msg.MSG_MIN_ITEMS,
            params={"min": minimum, "count": minimum},
        )

    def max_items(self, maximum: int) -> SequenceValidator:
        return self._check(
            len(self._value) <= maximum,
            msg.MSG_MAX_ITEMS,
            params={"max": maximum, "count": maximum},
        )

    def exact_items(self, length: int) -> SequenceValidator:
        return self._check(
            len(self._value) == length,
            msg.MSG_EXACT_ITEMS,
            params={"length": length, "count": length},
        )

    def items_between(self, minimum: int, maximum: int) -> SequenceValidator:
        """Validate that the item count is between minimum and maximum (inclusive)."""
        return self._check(
            minimum <= len(self._value) <= maximum,
            msg.MSG_ITEMS_BETWEEN,
            params={"min": minimum, "max": maximum},
        )

    def contains(self, item: Any) -> SequenceValidator:
        """Validate that the sequence contains ``item``."""
        return self._check(item in self._value, msg.MSG_CONTAINS_ITEM, params={"item": item})


def sequence(value: Sequence[Any] | None, field_name: str) -> SequenceValidator:
    """Create a SequenceValidator. None is validated as an empty sequence."""
    return SequenceValidator([] if value is None else value, field_name)
