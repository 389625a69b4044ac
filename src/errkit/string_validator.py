"""Validation rules for text values."""

from __future__ import annotations

import re

from errkit import messages as msg
from errkit import predicates
from errkit.validators import BaseValidator

__all__ = ["StringValidator", "string"]


class StringValidator(BaseValidator[str]):
    """Fluent validation rules for a string value.

    Lengths are counted in code points.

    Example:
        err = (
            string("john@example.com", "email")
            .required()
            .email()
            .max_length(100)
            .validate()
        )
    """

    # -------------------------------------------------------------------------
    # Basic validation
    # -------------------------------------------------------------------------

    def required(self) -> StringValidator:
        """Validate that the string is not blank after trimming whitespace."""
        return self._check(bool(self._value.strip()), msg.MSG_REQUIRED, msg.MSG_EMPTY)

    def empty(self) -> StringValidator:
        """Validate that the string is exactly empty."""
        return self._check(self._value == "", msg.MSG_EMPTY, msg.MSG_NOT_EMPTY)

    def equal_to(self, other: str, template: str | None = None) -> StringValidator:
        """Validate that the string equals another.

        Args:
            other: Expected value.
            template: Optional message key or inline template, e.g.
                ``"{{field}} must be exactly '{{expected}}'"``.
        """
        return self._check(
            self._value == other,
            template or msg.MSG_EQUAL_TO,
            msg.MSG_NOT_EQUAL_TO,
            {"expected": other},
        )

    # -------------------------------------------------------------------------
    # Length validation
    # -------------------------------------------------------------------------

    def min_length(self, minimum: int) -> StringValidator:
        return self._check(
            len(self._value) >= minimum, msg.MSG_MIN_LENGTH, params={"min": minimum}
        )

    def max_length(self, maximum: int) -> StringValidator:
        return self._check(
            len(self._value) <= maximum, msg.MSG_MAX_LENGTH, params={"max": maximum}
        )

    def exact_length(self, length: int) -> StringValidator:
        return self._check(
            len(self._value) == length, msg.MSG_EXACT_LENGTH, params={"length": length}
        )

    def length_between(self, minimum: int, maximum: int) -> StringValidator:
        """Validate that the length is between minimum and maximum (inclusive)."""
        return self._check(
            minimum <= len(self._value) <= maximum,
            msg.MSG_LENGTH_BETWEEN,
            params={"min": minimum, "max": maximum},
        )

    # -------------------------------------------------------------------------
    # Format validation
    # -------------------------------------------------------------------------

    def email(self) -> StringValidator:
        return self._check(predicates.is_email(self._value), msg.MSG_EMAIL)

    def url(self) -> StringValidator:
        """Validate an http(s) URL."""
        return self._check(predicates.is_url(self._value), msg.MSG_URL)

    def numeric(self) -> StringValidator:
        """Validate that the string contains only digits."""
        return self._check(predicates.is_numeric(self._value), msg.MSG_NUMERIC)

    def alpha(self) -> StringValidator:
        return self._check(predicates.is_alpha(self._value), msg.MSG_ALPHA)

    def alpha_numeric(self) -> StringValidator:
        return self._check(predicates.is_alpha_numeric(self._value), msg.MSG_ALPHA_NUMERIC)

    def regex(self, pattern: str | re.Pattern[str]) -> StringValidator:
        """Validate that the pattern matches somewhere in the string."""
        compiled = re.compile(pattern)
        return self._check(
            compiled.search(self._value) is not None,
            msg.MSG_REGEX,
            params={"pattern": compiled.pattern},
        )

    def integer(self) -> StringValidator:
        return self._check(predicates.is_integer(self._value), msg.MSG_INTEGER)

    def float_(self) -> StringValidator:
        return self._check(predicates.is_float(self._value), msg.MSG_FLOAT)

    def json(self) -> StringValidator:
        return self._check(predicates.is_json(self._value), msg.MSG_JSON)

    def base64(self) -> StringValidator:
        return self._check(predicates.is_base64(self._value), msg.MSG_BASE64)

    def uuid(self) -> StringValidator:
        return self._check(predicates.is_uuid(self._value), msg.MSG_UUID)

    def slug(self) -> StringValidator:
        return self._check(predicates.is_slug(self._value), msg.MSG_SLUG)

    # -------------------------------------------------------------------------
    # Membership
    # -------------------------------------------------------------------------

    def in_(self, *values: str) -> StringValidator:
        """Validate that the string is one of the given values."""
        return self._check(
            self._value in values, msg.MSG_IN, msg.MSG_NOT_IN, {"values": list(values)}
        )

    def not_in(self, *values: str) -> StringValidator:
        """Validate that the string is none of the given values."""
        return self._check(
            self._value not in values, msg.MSG_NOT_IN, msg.MSG_IN, {"values": list(values)}
        )

    def contains(self, substring: str) -> StringValidator:
        return self._check(
            substring in self._value, msg.MSG_CONTAINS, params={"substring": substring}
        )

    def starts_with(self, prefix: str) -> StringValidator:
        return self._check(
            self._value.startswith(prefix), msg.MSG_STARTS_WITH, params={"prefix": prefix}
        )

    def ends_with(self, suffix: str) -> StringValidator:
        return self._check(
            self._value.endswith(suffix), msg.MSG_ENDS_WITH, params={"suffix": suffix}
        )

    # -------------------------------------------------------------------------
    # Case
    # -------------------------------------------------------------------------

    def lowercase(self) -> StringValidator:
        return self._check(self._value == self._value.lower(), msg.MSG_LOWERCASE)

    def uppercase(self) -> StringValidator:
        return self._check(self._value == self._value.upper(), msg.MSG_UPPERCASE)


def string(value: str | None, field_name: str) -> StringValidator:
    """Create a StringValidator. None is validated as the empty string."""
    return StringValidator("" if value is None else value, field_name)
