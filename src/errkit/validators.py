"""Base validator with guard, negation and custom-rule machinery.

Provides the generic base class the field validator families build on. A
validator wraps one value and field name; each rule method checks the value
and records an Error into the validator's ValidationResult when it fails.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from errkit.errors import Error, new_validation_error
from errkit.messages import MSG_CUSTOM_NEGATED, negated_key
from errkit.results import ValidationResult

if TYPE_CHECKING:
    from errkit.localization import ParamValue

__all__ = ["BaseValidator", "CustomCheck", "Guard"]

T = TypeVar("T")
V = TypeVar("V", bound="BaseValidator[Any]")

Guard = Callable[[], bool]
"""Condition that must hold for a rule to run."""

CustomCheck = Callable[[Any, str], "BaseException | None"]
"""Custom rule: receives (value, field_name), returns an error or None."""


class BaseValidator(Generic[T]):
    """Base class for fluent field validators.

    Generic over T, the type of value being validated. Subclasses add rule
    methods that compute one boolean outcome and pass it to ``_check``.

    Example:
        from errkit import string

        err = (
            string(phone, "phone")
            .when(lambda: email == "")
            .required()
            .validate()
        )
    """

    def __init__(self, value: T, field_name: str) -> None:
        """Initialize the validator.

        Args:
            value: Value to validate.
            field_name: Name used in messages and as the error map key.
        """
        self._value = value
        self._field_name = field_name
        self._result = ValidationResult(value=value, field_name=field_name)
        self._negated = False
        self._guards: list[Guard] = []

    @property
    def value(self) -> T:
        """The value being validated."""
        return self._value

    @property
    def field_name(self) -> str:
        """Name of the field being validated."""
        return self._field_name

    @property
    def result(self) -> ValidationResult:
        """The result this chain records into."""
        return self._result

    # -------------------------------------------------------------------------
    # Chain modifiers
    # -------------------------------------------------------------------------

    def not_(self: V) -> V:
        """Negate the next rule only."""
        self._negated = True
        return self

    def when(self: V, condition: Guard) -> V:
        """Add a condition that must be true for subsequent rules to run."""
        self._guards.append(condition)
        return self

    def unless(self: V, condition: Guard) -> V:
        """Add a condition that must be false for subsequent rules to run."""
        self._guards.append(lambda: not condition())
        return self

    def _should_validate(self) -> bool:
        return all(guard() for guard in self._guards)

    # -------------------------------------------------------------------------
    # Recording
    # -------------------------------------------------------------------------

    def _new_error(self, message_key: str, params: Mapping[str, ParamValue] | None) -> Error:
        err = new_validation_error(message_key, self._field_name, self._value)
        if params:
            err = err.with_params(params)
        return err

    def _check(
        self: V,
        satisfied: bool,
        message_key: str,
        negated_message_key: str | None = None,
        params: Mapping[str, ParamValue] | None = None,
    ) -> V:
        """Record the outcome of one rule.

        A failed rule records ``message_key``; a rule that passed while
        negated records ``negated_message_key`` (the ``validation.not_*``
        variant by default). Nothing is recorded when a guard fails. The
        negation flag is cleared in every case.

        Returns:
            Self for method chaining.
        """
        negated, self._negated = self._negated, False
        if not self._should_validate():
            return self

        if not satisfied and not negated:
            self._result.add_error(self._new_error(message_key, params))
        elif satisfied and negated:
            key = negated_message_key or negated_key(message_key)
            self._result.add_error(self._new_error(key, params))
        return self

    def _record(self: V, message_key: str, params: Mapping[str, ParamValue] | None = None) -> V:
        """Record an error regardless of negation, subject to guards."""
        self._negated = False
        if self._should_validate():
            self._result.add_error(self._new_error(message_key, params))
        return self

    # -------------------------------------------------------------------------
    # Rules and results
    # -------------------------------------------------------------------------

    def custom(self: V, fn: CustomCheck | None) -> V:
        """Validate with a custom function.

        The function receives the value and the field name and returns an
        error (an Error or any other exception) when the value is invalid,
        otherwise None.

        Example:
            def no_admin(value, field_name):
                if "admin" in value:
                    return new_validation_error(
                        "{{field}} cannot contain 'admin'", field_name, value
                    )
                return None

            string("administrator", "username").custom(no_admin)
        """
        negated, self._negated = self._negated, False
        if fn is None or not self._should_validate():
            return self

        err = fn(self._value, self._field_name)
        if err is not None and not negated:
            self._result.add_error(err)
        elif err is None and negated:
            self._result.add_error(self._new_error(MSG_CUSTOM_NEGATED, None))
        return self

    def validate(self) -> Error | None:
        """Get the container Error for this field, or None if valid."""
        return self._result.error()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(field_name={self._field_name!r}, "
            f"errors={len(self._result.errors)})"
        )
