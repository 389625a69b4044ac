"""Pydantic response model for rendering errors at an API boundary."""

from __future__ import annotations

from http import HTTPStatus

from pydantic import BaseModel, ConfigDict, Field

from errkit.errors import Error
from errkit.errors import message as error_message
from errkit.errors import status as error_status
from errkit.localization import Localizer
from errkit.orchestrator import ValidationOrchestrator

__all__ = ["ErrorResponse"]


class ErrorResponse(BaseModel):
    """Serializable error payload.

    Attributes:
        status: HTTP status code.
        message: Client-safe message.
        errors: Field-to-messages map, or None when there are no field errors.

    Example:
        response = ErrorResponse.from_orchestrator(orchestrator, locale="es")
        response.model_dump_json()
        # '{"status":400,"message":"Bad Request","errors":{"email":[...]}}'
    """

    model_config = ConfigDict(frozen=True)

    status: int = Field(default=HTTPStatus.OK.value, ge=100, le=599)
    message: str = ""
    errors: dict[str, list[str]] | None = None

    @classmethod
    def from_error(
        cls, err: BaseException | None, locale: Localizer | str | None = None
    ) -> ErrorResponse:
        """Build a response from any exception, or None for success."""
        err_map = err.localized_err_map(locale) if isinstance(err, Error) else None
        return cls(status=error_status(err), message=error_message(err), errors=err_map)

    @classmethod
    def from_orchestrator(
        cls, orchestrator: ValidationOrchestrator, locale: Localizer | str | None = None
    ) -> ErrorResponse:
        """Build a response from an orchestrator's error map."""
        if orchestrator.valid:
            return cls()
        return cls(
            status=HTTPStatus.BAD_REQUEST.value,
            message=HTTPStatus.BAD_REQUEST.phrase,
            errors=orchestrator.localized_err_map(locale),
        )
