"""Structured errors and fluent field validation for service code."""

from errkit.catalog import MessageCatalog, normalize_language
from errkit.errors import (
    NON_FIELD_ERRORS,
    Diagnostics,
    Error,
    ErrorCollector,
    bad_request,
    conflict,
    duplicate_error,
    email_error,
    forbidden,
    format_stack,
    internal,
    max_length_error,
    max_value_error,
    message,
    min_length_error,
    min_value_error,
    new,
    new_validation_error,
    not_found,
    required_error,
    stack,
    status,
    unauthorized,
    wrap,
)
from errkit.events import (
    ObservableMixin,
    ValidationEvent,
    ValidationEventType,
    ValidationObserver,
)
from errkit.localization import (
    Localizer,
    LocalizerRegistry,
    ParamValue,
    default_registry,
    get_localizer,
    render_template,
    reset_default_registry,
    set_default_registry,
)
from errkit.messages import DEFAULT_LANGUAGE, DEFAULT_MESSAGES
from errkit.number_validator import NumberValidator, floating, integer, number
from errkit.orchestrator import ValidationOrchestrator, in_, in_row, is_, v
from errkit.protocols import ValidatorProtocol
from errkit.results import ValidationResult
from errkit.schemas import ErrorResponse
from errkit.sequence_validator import SequenceValidator, sequence
from errkit.string_validator import StringValidator, string
from errkit.validators import BaseValidator

__all__ = [
    # Errors
    "Diagnostics",
    "Error",
    "ErrorCollector",
    "NON_FIELD_ERRORS",
    "bad_request",
    "conflict",
    "forbidden",
    "format_stack",
    "internal",
    "message",
    "new",
    "not_found",
    "stack",
    "status",
    "unauthorized",
    "wrap",
    # Validation errors
    "duplicate_error",
    "email_error",
    "max_length_error",
    "max_value_error",
    "min_length_error",
    "min_value_error",
    "new_validation_error",
    "required_error",
    # Localization
    "DEFAULT_LANGUAGE",
    "DEFAULT_MESSAGES",
    "Localizer",
    "LocalizerRegistry",
    "MessageCatalog",
    "ParamValue",
    "default_registry",
    "get_localizer",
    "normalize_language",
    "render_template",
    "reset_default_registry",
    "set_default_registry",
    # Validators
    "BaseValidator",
    "NumberValidator",
    "SequenceValidator",
    "StringValidator",
    "ValidationResult",
    "ValidatorProtocol",
    "floating",
    "integer",
    "number",
    "sequence",
    "string",
    # Orchestration
    "ValidationOrchestrator",
    "in_",
    "in_row",
    "is_",
    "v",
    # Observer pattern
    "ObservableMixin",
    "ValidationEvent",
    "ValidationEventType",
    "ValidationObserver",
    # Response schema
    "ErrorResponse",
]

__version__ = "0.1.0"
