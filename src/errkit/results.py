"""Validation result containers.

Per-field result class for accumulating the errors one validator chain records.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from http import HTTPStatus
from typing import TYPE_CHECKING, Any

from errkit.errors import Error, ErrorCollector

if TYPE_CHECKING:
    from errkit.localization import Localizer

__all__ = ["ValidationResult"]


@dataclass
class ValidationResult:
    """Result of validating one field, with error aggregation.

    Attributes:
        value: The value that was validated.
        field_name: Name of the field. Empty names become "value".
        errors: Errors recorded by the validator chain, in order.
    """

    value: Any = None
    field_name: str = "value"
    errors: list[Error] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.field_name:
            self.field_name = "value"

    @property
    def is_valid(self) -> bool:
        """True if no errors have been recorded."""
        return not self.errors

    def add_error(self, error: BaseException | None) -> ValidationResult:
        """Record an error.

        Exceptions that are not an Error are converted to a 400 Error carrying
        this result's field name. A container Error contributes its children
        instead of itself. None is ignored.

        Returns:
            Self, for method chaining.
        """
        if error is None:
            return self
        if not isinstance(error, Error):
            error = Error(HTTPStatus.BAD_REQUEST, str(error), error).with_field_name(
                self.field_name
            )
        if error.has_errors():
            self.errors.extend(error.all_errors())
        else:
            self.errors.append(error)
        return self

    def all_errors(self) -> list[Error]:
        """Get a copy of the recorded errors."""
        return self.errors.copy()

    def error(self) -> Error | None:
        """Get a 400 container Error holding every recorded error.

        Returns:
            None if the field is valid.
        """
        if self.is_valid:
            return None
        return ErrorCollector(HTTPStatus.BAD_REQUEST).add_errors(self.errors).to_error()

    def localized_messages(self, locale: Localizer | str | None = None) -> list[str]:
        """Render each recorded error, in order."""
        return [err.localized_error(locale) for err in self.errors]

    def localized_err_map(self, locale: Localizer | str | None = None) -> dict[str, list[str]] | None:
        """Map field names to localized messages, or None if valid."""
        container = self.error()
        if container is None:
            return None
        return container.localized_err_map(locale)

    def err_map(self) -> dict[str, list[str]] | None:
        """Map field names to messages using the default localizer."""
        return self.localized_err_map(None)
