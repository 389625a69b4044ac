"""Structured application errors.

Provides :class:`Error`, an exception enriched with an HTTP-style status, a
safe user-facing message, an optional wrapped cause, diagnostic stack data and
localization metadata, plus :class:`ErrorCollector` for assembling container
errors out of several children.

A sealed ``Error`` is immutable: every ``with_*`` builder returns a new
instance. Child collections are only ever one level deep. Adding an error that
already has children contributes those children instead of the error itself.

Example:
    from http import HTTPStatus

    from errkit.errors import Error, ErrorCollector, required_error

    err = Error(HTTPStatus.BAD_REQUEST, "Invalid email")
    err.status  # 400
    err.stack   # () - stacks are only captured for internal errors

    collector = ErrorCollector(HTTPStatus.BAD_REQUEST)
    collector.add_error(required_error("email", ""))
    collector.add_error(required_error("name", ""))
    container = collector.to_error()
    container.err_map()  # {"email": ["email is required"], "name": ["name is required"]}
"""

from __future__ import annotations

import logging
import traceback
from collections.abc import Iterable, Mapping
from enum import Enum, auto
from http import HTTPStatus
from typing import TYPE_CHECKING, Any

from errkit.localization import has_placeholders, render_template, resolve_localizer
from errkit.messages import (
    MSG_DUPLICATE,
    MSG_EMAIL,
    MSG_ERROR_MULTIPLE,
    MSG_MAX,
    MSG_MAX_LENGTH,
    MSG_MIN,
    MSG_MIN_LENGTH,
    MSG_REQUIRED,
)

if TYPE_CHECKING:
    from errkit.localization import Localizer, ParamValue

__all__ = [
    "NON_FIELD_ERRORS",
    "Diagnostics",
    "Error",
    "ErrorCollector",
    "bad_request",
    "conflict",
    "duplicate_error",
    "email_error",
    "forbidden",
    "format_stack",
    "internal",
    "max_length_error",
    "max_value_error",
    "message",
    "min_length_error",
    "min_value_error",
    "new",
    "new_validation_error",
    "not_found",
    "required_error",
    "stack",
    "status",
    "unauthorized",
    "wrap",
]

logger = logging.getLogger(__name__)

NON_FIELD_ERRORS = "error"
"""Error map bucket for errors that carry no field name."""

_STACK_DEPTH = 32


class Diagnostics(Enum):
    """Controls whether an Error captures a stack at construction."""

    AUTO = auto()
    """Capture only for internal (500) errors."""

    STACK = auto()
    """Always capture."""

    NONE = auto()
    """Never capture."""


def _capture_stack() -> tuple[traceback.FrameSummary, ...]:
    # Drop the frames belonging to this module so the stack ends at the caller.
    frames = traceback.extract_stack(limit=_STACK_DEPTH + 4)
    while frames and frames[-1].filename == __file__:
        frames.pop()
    return tuple(frames[-_STACK_DEPTH:])


def _flatten(children: Iterable[Error | None]) -> list[Error]:
    flat: list[Error] = []
    for child in children:
        if child is None:
            continue
        if child.has_errors():
            flat.extend(child.all_errors())
        else:
            flat.append(child)
    return flat


class Error(Exception):
    """An application error with status, safe message and localization data.

    Attributes are exposed as read-only properties. Use the ``with_*``
    builders to derive a modified copy.
    """

    def __init__(
        self,
        status: int = 0,
        message: str = "",
        cause: BaseException | None = None,
        *,
        diagnostics: Diagnostics = Diagnostics.AUTO,
    ) -> None:
        """Create an error.

        Args:
            status: HTTP status code. 0 becomes 500 Internal Server Error.
            message: User-safe message for client responses.
            cause: Underlying exception to wrap (optional).
            diagnostics: Stack capture policy. AUTO captures a stack only
                when the resolved status is 500.
        """
        super().__init__(message)
        self._status = int(status) or HTTPStatus.INTERNAL_SERVER_ERROR.value
        self._message = message
        self._cause = cause
        self._message_key = ""
        self._field_name = ""
        self._value: ParamValue | None = None
        self._params: dict[str, ParamValue] = {}
        self._children: tuple[Error, ...] = ()

        capture = diagnostics is Diagnostics.STACK or (
            diagnostics is Diagnostics.AUTO
            and self._status == HTTPStatus.INTERNAL_SERVER_ERROR
        )
        self._stack = _capture_stack() if capture else ()

        if cause is not None:
            self.__cause__ = cause

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def status(self) -> int:
        """HTTP status code."""
        return self._status

    @property
    def message(self) -> str:
        """User-safe message, possibly empty."""
        return self._message

    @property
    def cause(self) -> BaseException | None:
        """The wrapped exception, if any."""
        return self._cause

    @property
    def stack(self) -> tuple[traceback.FrameSummary, ...]:
        """Frames captured at construction; empty unless diagnostics were enabled."""
        return self._stack

    @property
    def message_key(self) -> str:
        """Localization key, empty if unset."""
        return self._message_key

    @property
    def field_name(self) -> str:
        """Name of the field this error is about, empty if unset."""
        return self._field_name

    @property
    def value(self) -> ParamValue | None:
        """The rejected input value."""
        return self._value

    @property
    def params(self) -> dict[str, ParamValue]:
        """Copy of the template parameters."""
        return dict(self._params)

    @property
    def children(self) -> tuple[Error, ...]:
        """Child errors, never nested more than one level."""
        return self._children

    # -------------------------------------------------------------------------
    # Builders
    # -------------------------------------------------------------------------

    def _replace(self, **changes: Any) -> Error:
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone.args = self.args
        clone.__cause__ = self.__cause__
        for name, value in changes.items():
            setattr(clone, f"_{name}", value)
        return clone

    def with_message_key(self, message_key: str) -> Error:
        """Return a copy with the localization key set."""
        return self._replace(message_key=message_key)

    def with_field_name(self, field_name: str) -> Error:
        """Return a copy with the field name set."""
        return self._replace(field_name=field_name)

    def with_value(self, value: ParamValue | None) -> Error:
        """Return a copy with the rejected value set."""
        return self._replace(value=value)

    def with_param(self, key: str, value: ParamValue) -> Error:
        """Return a copy with one template parameter added or replaced."""
        return self._replace(params={**self._params, key: value})

    def with_params(self, params: Mapping[str, ParamValue]) -> Error:
        """Return a copy with several template parameters merged in."""
        return self._replace(params={**self._params, **params})

    def with_errors(self, *errors: Error | None) -> Error:
        """Return a copy with child errors appended.

        Errors that already contain children contribute their children
        directly; None entries are skipped.
        """
        return self._replace(children=self._children + tuple(_flatten(errors)))

    # -------------------------------------------------------------------------
    # Child errors
    # -------------------------------------------------------------------------

    def all_errors(self) -> list[Error]:
        """Get the child errors in insertion order."""
        return list(self._children)

    def has_errors(self) -> bool:
        """Check if this error contains child errors."""
        return bool(self._children)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def localized_error(self, locale: Localizer | str | None = None) -> str:
        """Render this error as text.

        Args:
            locale: A Localizer, a language tag, or None for the default
                registry's default language.

        Returns:
            The child messages (joined when there are several), the localized
            template for the message key, or a plain fallback text.
        """
        if self._children:
            return self._format_children(locale)

        if self._message_key:
            text = self._localize(locale)
            if text:
                return text

        return self._fallback_message()

    def _format_children(self, locale: Localizer | str | None) -> str:
        messages = [child.localized_error(locale) for child in self._children]
        if len(messages) == 1:
            return messages[0]
        joined = "; ".join(messages)
        text = resolve_localizer(locale).localize(MSG_ERROR_MULTIPLE, {"errors": joined})
        return text or f"multiple errors: {joined}"

    def _template_data(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self._field_name:
            data["field"] = self._field_name
        if self._value is not None:
            data["value"] = self._value
        data.update(self._params)
        return data

    def _localize(self, locale: Localizer | str | None) -> str | None:
        data = self._template_data()
        count = self._params.get("count", 1)
        if not isinstance(count, int):
            count = 1
        text = resolve_localizer(locale).localize(self._message_key, data, count)
        if text is None and has_placeholders(self._message_key):
            # Message keys may carry an inline template instead of a catalog key.
            text = render_template(self._message_key, data)
        return text

    def _fallback_message(self) -> str:
        if self._cause is not None:
            return str(self._cause)
        if self._message:
            return self._message
        if self._message_key and self._field_name:
            return f"validation error for field '{self._field_name}'"
        if self._message_key:
            return f"validation error (key: {self._message_key})"
        return "unknown error"

    def localized_err_map(self, locale: Localizer | str | None = None) -> dict[str, list[str]] | None:
        """Map field names to localized messages.

        Children are grouped by their field name (errors without one go under
        ``NON_FIELD_ERRORS``). Without children, an error with a message key
        maps itself.

        Returns:
            The error map, or None when there is nothing to report.
        """
        if self._children:
            entries: Iterable[Error] = self._children
        elif self._message_key:
            entries = (self,)
        else:
            return None

        result: dict[str, list[str]] = {}
        for err in entries:
            key = err.field_name or NON_FIELD_ERRORS
            result.setdefault(key, []).append(err.localized_error(locale))
        return result or None

    def err_map(self) -> dict[str, list[str]] | None:
        """Map field names to messages using the default localizer."""
        return self.localized_err_map(None)

    def __str__(self) -> str:
        return self.localized_error()

    def __repr__(self) -> str:
        parts = [f"status={self._status}"]
        if self._message:
            parts.append(f"message={self._message!r}")
        if self._message_key:
            parts.append(f"message_key={self._message_key!r}")
        if self._field_name:
            parts.append(f"field_name={self._field_name!r}")
        if self._children:
            parts.append(f"children={len(self._children)}")
        return f"{type(self).__name__}({', '.join(parts)})"


class ErrorCollector:
    """Mutable holder for assembling a container Error.

    Example:
        collector = ErrorCollector(HTTPStatus.BAD_REQUEST)
        collector.add_error(err1)
        collector.add_errors([err2, err3])
        container = collector.to_error()
    """

    def __init__(
        self,
        status: int = 0,
        message: str = "",
        cause: BaseException | None = None,
        *,
        diagnostics: Diagnostics = Diagnostics.AUTO,
    ) -> None:
        self._status = status
        self._message = message
        self._cause = cause
        self._diagnostics = diagnostics
        self._errors: list[Error] = []

    def add_error(self, error: Error | None) -> ErrorCollector:
        """Add a child error, flattening any children it carries.

        Returns:
            Self for method chaining.
        """
        self._errors.extend(_flatten((error,)))
        return self

    def add_errors(self, errors: Iterable[Error | None] | None) -> ErrorCollector:
        """Add several child errors in order.

        Returns:
            Self for method chaining.
        """
        if errors:
            self._errors.extend(_flatten(errors))
        return self

    def all_errors(self) -> list[Error]:
        """Get a copy of the collected errors."""
        return self._errors.copy()

    def has_errors(self) -> bool:
        """Check if any errors have been collected."""
        return bool(self._errors)

    def to_error(self) -> Error:
        """Seal the collected errors into a new container Error."""
        container = Error(
            self._status, self._message, self._cause, diagnostics=self._diagnostics
        )
        return container._replace(children=tuple(self._errors))

    def __len__(self) -> int:
        return len(self._errors)

    def __repr__(self) -> str:
        return f"ErrorCollector(status={self._status}, errors={len(self._errors)})"


# =============================================================================
# Helpers over any exception
# =============================================================================


def new(status: int, message: str, cause: BaseException | None = None) -> Error:
    """Create an Error; see :class:`Error` for the status and stack rules."""
    return Error(status, message, cause)


def status(err: BaseException | None) -> int:
    """Get the HTTP status for any exception.

    Returns:
        200 for None, the Error's status for an Error, otherwise 500.
    """
    if err is None:
        return HTTPStatus.OK.value
    if isinstance(err, Error):
        return err.status
    return HTTPStatus.INTERNAL_SERVER_ERROR.value


def message(err: BaseException | None) -> str:
    """Get a message that is safe to send to clients.

    Returns:
        "" for None; for an Error its message, or the reason phrase of its
        status when it has none; "Internal Server Error" for anything else.
    """
    if err is None:
        return ""
    if isinstance(err, Error):
        if err.message:
            return err.message
        try:
            return HTTPStatus(err.status).phrase
        except ValueError:
            return ""
    return HTTPStatus.INTERNAL_SERVER_ERROR.phrase


def stack(err: BaseException | None) -> tuple[traceback.FrameSummary, ...]:
    """Get the captured stack of an Error; empty for anything else."""
    if isinstance(err, Error):
        return err.stack
    return ()


def format_stack(err: BaseException | None) -> str:
    """Format the captured stack for logging, or "" when there is none."""
    frames = stack(err)
    if not frames:
        return ""
    return "".join(traceback.format_list(list(frames)))


def wrap(err: BaseException | None) -> Error | None:
    """Give any exception Error capabilities.

    Errors are returned unchanged; other exceptions are wrapped as internal
    errors. None stays None.
    """
    if err is None:
        return None
    if isinstance(err, Error):
        return err
    logger.debug("Wrapping %s as internal error", type(err).__name__)
    return Error(HTTPStatus.INTERNAL_SERVER_ERROR, HTTPStatus.INTERNAL_SERVER_ERROR.phrase, err)


def bad_request(message: str, cause: BaseException | None = None) -> Error:
    """Create a 400 Bad Request error."""
    return Error(HTTPStatus.BAD_REQUEST, message, cause)


def unauthorized(message: str, cause: BaseException | None = None) -> Error:
    """Create a 401 Unauthorized error."""
    return Error(HTTPStatus.UNAUTHORIZED, message, cause)


def forbidden(message: str, cause: BaseException | None = None) -> Error:
    """Create a 403 Forbidden error."""
    return Error(HTTPStatus.FORBIDDEN, message, cause)


def not_found(message: str, cause: BaseException | None = None) -> Error:
    """Create a 404 Not Found error."""
    return Error(HTTPStatus.NOT_FOUND, message, cause)


def conflict(message: str, cause: BaseException | None = None) -> Error:
    """Create a 409 Conflict error."""
    return Error(HTTPStatus.CONFLICT, message, cause)


def internal(message: str, cause: BaseException | None = None) -> Error:
    """Create a 500 Internal Server Error."""
    return Error(HTTPStatus.INTERNAL_SERVER_ERROR, message, cause)


# =============================================================================
# Validation errors
# =============================================================================


def new_validation_error(message_key: str, field_name: str, value: ParamValue | None) -> Error:
    """Create a 400 validation error for a field.

    Example:
        err = new_validation_error("validation.min_length", "password", "123")
        err = err.with_param("min", 8)
        str(err)  # "password must be at least 8 characters long"
    """
    return (
        Error(HTTPStatus.BAD_REQUEST)
        .with_message_key(message_key)
        .with_field_name(field_name)
        .with_value(value)
    )


def required_error(field_name: str, value: ParamValue | None) -> Error:
    return new_validation_error(MSG_REQUIRED, field_name, value)


def min_length_error(field_name: str, value: ParamValue | None, minimum: int) -> Error:
    return new_validation_error(MSG_MIN_LENGTH, field_name, value).with_param("min", minimum)


def max_length_error(field_name: str, value: ParamValue | None, maximum: int) -> Error:
    return new_validation_error(MSG_MAX_LENGTH, field_name, value).with_param("max", maximum)


def email_error(field_name: str, value: ParamValue | None) -> Error:
    return new_validation_error(MSG_EMAIL, field_name, value)


def min_value_error(field_name: str, value: ParamValue | None, minimum: ParamValue) -> Error:
    return new_validation_error(MSG_MIN, field_name, value).with_param("min", minimum)


def max_value_error(field_name: str, value: ParamValue | None, maximum: ParamValue) -> Error:
    return new_validation_error(MSG_MAX, field_name, value).with_param("max", maximum)


def duplicate_error(field_name: str, value: ParamValue | None) -> Error:
    """Create an error for a unique constraint violation."""
    return new_validation_error(MSG_DUPLICATE, field_name, value)
