"""Message keys and the baseline English catalog.

Every rule in the validator families records one of these keys. Templates use
``{{field}}``, ``{{value}}`` and ``{{<param>}}`` placeholders, substituted as
plain text by :mod:`errkit.localization`.
"""

from __future__ import annotations

__all__ = ["DEFAULT_LANGUAGE", "DEFAULT_MESSAGES", "negated_key"]

DEFAULT_LANGUAGE = "en"

# Standard validation messages
MSG_REQUIRED = "validation.required"
MSG_EMPTY = "validation.empty"
MSG_MIN_LENGTH = "validation.min_length"
MSG_MAX_LENGTH = "validation.max_length"
MSG_EXACT_LENGTH = "validation.exact_length"
MSG_LENGTH_BETWEEN = "validation.length_between"
MSG_EMAIL = "validation.email"
MSG_URL = "validation.url"
MSG_NUMERIC = "validation.numeric"
MSG_ALPHA = "validation.alpha"
MSG_ALPHA_NUMERIC = "validation.alpha_numeric"
MSG_REGEX = "validation.regex"
MSG_IN = "validation.in"
MSG_NOT_IN = "validation.not_in"
MSG_CONTAINS = "validation.contains"
MSG_STARTS_WITH = "validation.starts_with"
MSG_ENDS_WITH = "validation.ends_with"
MSG_LOWERCASE = "validation.lowercase"
MSG_UPPERCASE = "validation.uppercase"
MSG_INTEGER = "validation.integer"
MSG_FLOAT = "validation.float"
MSG_JSON = "validation.json"
MSG_BASE64 = "validation.base64"
MSG_UUID = "validation.uuid"
MSG_SLUG = "validation.slug"
MSG_MIN = "validation.min_value"
MSG_MAX = "validation.max_value"
MSG_BETWEEN = "validation.between"
MSG_ZERO = "validation.zero"
MSG_EQUAL = "validation.equal"
MSG_EQUAL_TO = "validation.equal_to"
MSG_GREATER_THAN = "validation.greater_than"
MSG_LESS_THAN = "validation.less_than"
MSG_POSITIVE = "validation.positive"
MSG_NEGATIVE = "validation.negative"
MSG_EVEN = "validation.even"
MSG_ODD = "validation.odd"
MSG_MULTIPLE_OF = "validation.multiple_of"
MSG_FINITE = "validation.finite"
MSG_PRECISION = "validation.precision"
MSG_MIN_ITEMS = "validation.min_items"
MSG_MAX_ITEMS = "validation.max_items"
MSG_EXACT_ITEMS = "validation.exact_items"
MSG_ITEMS_BETWEEN = "validation.items_between"
MSG_CONTAINS_ITEM = "validation.contains_item"
MSG_INVALID = "validation.invalid"
MSG_DUPLICATE = "validation.duplicate"
MSG_CUSTOM_NEGATED = "validation.custom_negated"

# Negated validation messages
MSG_NOT_EMPTY = "validation.not_empty"
MSG_NOT_EQUAL = "validation.not_equal"
MSG_NOT_EQUAL_TO = "validation.not_equal_to"
MSG_NOT_MIN_LENGTH = "validation.not_min_length"
MSG_NOT_MAX_LENGTH = "validation.not_max_length"
MSG_NOT_EXACT_LENGTH = "validation.not_exact_length"
MSG_NOT_LENGTH_BETWEEN = "validation.not_length_between"
MSG_NOT_BETWEEN = "validation.not_between"
MSG_NOT_EMAIL = "validation.not_email"
MSG_NOT_URL = "validation.not_url"
MSG_NOT_NUMERIC = "validation.not_numeric"
MSG_NOT_ALPHA = "validation.not_alpha"
MSG_NOT_ALPHA_NUMERIC = "validation.not_alpha_numeric"
MSG_NOT_REGEX = "validation.not_regex"
MSG_NOT_CONTAINS = "validation.not_contains"
MSG_NOT_STARTS_WITH = "validation.not_starts_with"
MSG_NOT_ENDS_WITH = "validation.not_ends_with"
MSG_NOT_LOWERCASE = "validation.not_lowercase"
MSG_NOT_UPPERCASE = "validation.not_uppercase"
MSG_NOT_INTEGER = "validation.not_integer"
MSG_NOT_FLOAT = "validation.not_float"
MSG_NOT_JSON = "validation.not_json"
MSG_NOT_BASE64 = "validation.not_base64"
MSG_NOT_UUID = "validation.not_uuid"
MSG_NOT_SLUG = "validation.not_slug"
MSG_NOT_ZERO = "validation.not_zero"
MSG_NOT_MIN = "validation.not_min_value"
MSG_NOT_MAX = "validation.not_max_value"
MSG_NOT_GREATER_THAN = "validation.not_greater_than"
MSG_NOT_LESS_THAN = "validation.not_less_than"
MSG_NOT_POSITIVE = "validation.not_positive"
MSG_NOT_NEGATIVE = "validation.not_negative"
MSG_NOT_EVEN = "validation.not_even"
MSG_NOT_ODD = "validation.not_odd"
MSG_NOT_MULTIPLE_OF = "validation.not_multiple_of"
MSG_NOT_FINITE = "validation.not_finite"
MSG_NOT_PRECISION = "validation.not_precision"
MSG_NOT_MIN_ITEMS = "validation.not_min_items"
MSG_NOT_MAX_ITEMS = "validation.not_max_items"
MSG_NOT_EXACT_ITEMS = "validation.not_exact_items"
MSG_NOT_ITEMS_BETWEEN = "validation.not_items_between"
MSG_NOT_CONTAINS_ITEM = "validation.not_contains_item"

# Special validation messages
MSG_MUST_BE_ZERO = "validation.must_be_zero"
MSG_DIVISOR_ZERO = "validation.divisor_zero"

# Error messages
MSG_ERROR_MULTIPLE = "error.multiple"
MSG_ERROR_NOT_FOUND = "error.not_found"
MSG_ERROR_INVALID_REQUEST = "error.invalid_request"


def negated_key(message_key: str) -> str:
    """Return the ``validation.not_<rule>`` variant of a rule's message key."""
    return "validation.not_" + message_key.removeprefix("validation.")


DEFAULT_MESSAGES: dict[str, str] = {
    MSG_REQUIRED: "{{field}} is required",
    MSG_EMPTY: "{{field}} must be empty",
    MSG_MIN_LENGTH: "{{field}} must be at least {{min}} characters long",
    MSG_MAX_LENGTH: "{{field}} must be at most {{max}} characters long",
    MSG_EXACT_LENGTH: "{{field}} must be exactly {{length}} characters long",
    MSG_LENGTH_BETWEEN: "{{field}} must be between {{min}} and {{max}} characters long",
    MSG_EMAIL: "{{field}} must be a valid email address",
    MSG_URL: "{{field}} must be a valid URL",
    MSG_NUMERIC: "{{field}} must contain only numeric characters",
    MSG_ALPHA: "{{field}} must contain only alphabetic characters",
    MSG_ALPHA_NUMERIC: "{{field}} must contain only alphanumeric characters",
    MSG_REGEX: "{{field}} does not match the required pattern",
    MSG_IN: "{{field}} must be one of: {{values}}",
    MSG_NOT_IN: "{{field}} must not be one of: {{values}}",
    MSG_CONTAINS: "{{field}} must contain '{{substring}}'",
    MSG_STARTS_WITH: "{{field}} must start with '{{prefix}}'",
    MSG_ENDS_WITH: "{{field}} must end with '{{suffix}}'",
    MSG_LOWERCASE: "{{field}} must be in lowercase",
    MSG_UPPERCASE: "{{field}} must be in uppercase",
    MSG_INTEGER: "{{field}} must be a valid integer",
    MSG_FLOAT: "{{field}} must be a valid number",
    MSG_JSON: "{{field}} must be valid JSON",
    MSG_BASE64: "{{field}} must be valid base64",
    MSG_UUID: "{{field}} must be a valid UUID",
    MSG_SLUG: "{{field}} must be a valid slug",
    MSG_MIN: "{{field}} must be at least {{min}}",
    MSG_MAX: "{{field}} must be at most {{max}}",
    MSG_BETWEEN: "{{field}} must be between {{min}} and {{max}}",
    MSG_ZERO: "{{field}} must be zero",
    MSG_EQUAL: "{{field}} must equal {{expected}}",
    MSG_EQUAL_TO: "{{field}} must equal {{expected}}",
    MSG_GREATER_THAN: "{{field}} must be greater than {{limit}}",
    MSG_LESS_THAN: "{{field}} must be less than {{limit}}",
    MSG_POSITIVE: "{{field}} must be positive",
    MSG_NEGATIVE: "{{field}} must be negative",
    MSG_EVEN: "{{field}} must be even",
    MSG_ODD: "{{field}} must be odd",
    MSG_MULTIPLE_OF: "{{field}} must be a multiple of {{divisor}}",
    MSG_FINITE: "{{field}} must be finite",
    MSG_PRECISION: "{{field}} must have at most {{places}} decimal places",
    MSG_MIN_ITEMS: "{{field}} must contain at least {{min}} items",
    MSG_MAX_ITEMS: "{{field}} must contain at most {{max}} items",
    MSG_EXACT_ITEMS: "{{field}} must contain exactly {{length}} items",
    MSG_ITEMS_BETWEEN: "{{field}} must contain between {{min}} and {{max}} items",
    MSG_CONTAINS_ITEM: "{{field}} must contain {{item}}",
    MSG_INVALID: "{{field}} value is invalid",
    MSG_DUPLICATE: "{{field}} already exists, another record has the same value",
    MSG_CUSTOM_NEGATED: "{{field}} must not satisfy the custom check",
    MSG_NOT_EMPTY: "{{field}} must not be empty",
    MSG_NOT_EQUAL: "{{field}} must not equal {{expected}}",
    MSG_NOT_EQUAL_TO: "{{field}} must not equal {{expected}}",
    MSG_NOT_MIN_LENGTH: "{{field}} must be less than {{min}} characters long",
    MSG_NOT_MAX_LENGTH: "{{field}} must be more than {{max}} characters long",
    MSG_NOT_EXACT_LENGTH: "{{field}} must not be exactly {{length}} characters long",
    MSG_NOT_LENGTH_BETWEEN: "{{field}} must not be between {{min}} and {{max}} characters long",
    MSG_NOT_BETWEEN: "{{field}} must not be between {{min}} and {{max}}",
    MSG_NOT_EMAIL: "{{field}} must not be a valid email address",
    MSG_NOT_URL: "{{field}} must not be a valid URL",
    MSG_NOT_NUMERIC: "{{field}} must not contain only numeric characters",
    MSG_NOT_ALPHA: "{{field}} must not contain only alphabetic characters",
    MSG_NOT_ALPHA_NUMERIC: "{{field}} must not contain only alphanumeric characters",
    MSG_NOT_REGEX: "{{field}} must not match the pattern",
    MSG_NOT_CONTAINS: "{{field}} must not contain '{{substring}}'",
    MSG_NOT_STARTS_WITH: "{{field}} must not start with '{{prefix}}'",
    MSG_NOT_ENDS_WITH: "{{field}} must not end with '{{suffix}}'",
    MSG_NOT_LOWERCASE: "{{field}} must not be in lowercase",
    MSG_NOT_UPPERCASE: "{{field}} must not be in uppercase",
    MSG_NOT_INTEGER: "{{field}} must not be a valid integer",
    MSG_NOT_FLOAT: "{{field}} must not be a valid number",
    MSG_NOT_JSON: "{{field}} must not be valid JSON",
    MSG_NOT_BASE64: "{{field}} must not be valid base64",
    MSG_NOT_UUID: "{{field}} must not be a valid UUID",
    MSG_NOT_SLUG: "{{field}} must not be a valid slug",
    MSG_NOT_ZERO: "{{field}} must not be zero",
    MSG_NOT_MIN: "{{field}} must be less than {{min}}",
    MSG_NOT_MAX: "{{field}} must be more than {{max}}",
    MSG_NOT_GREATER_THAN: "{{field}} must not be greater than {{limit}}",
    MSG_NOT_LESS_THAN: "{{field}} must not be less than {{limit}}",
    MSG_NOT_POSITIVE: "{{field}} must not be positive",
    MSG_NOT_NEGATIVE: "{{field}} must not be negative",
    MSG_NOT_EVEN: "{{field}} must not be even",
    MSG_NOT_ODD: "{{field}} must not be odd",
    MSG_NOT_MULTIPLE_OF: "{{field}} must not be a multiple of {{divisor}}",
    MSG_NOT_FINITE: "{{field}} must not be finite",
    MSG_NOT_PRECISION: "{{field}} must not have at most {{places}} decimal places",
    MSG_NOT_MIN_ITEMS: "{{field}} must contain fewer than {{min}} items",
    MSG_NOT_MAX_ITEMS: "{{field}} must contain more than {{max}} items",
    MSG_NOT_EXACT_ITEMS: "{{field}} must not contain exactly {{length}} items",
    MSG_NOT_ITEMS_BETWEEN: "{{field}} must not contain between {{min}} and {{max}} items",
    MSG_NOT_CONTAINS_ITEM: "{{field}} must not contain {{item}}",
    MSG_MUST_BE_ZERO: "{{field}} must be zero",
    MSG_DIVISOR_ZERO: "{{field}} divisor cannot be zero",
    MSG_ERROR_MULTIPLE: "multiple errors: {{errors}}",
    MSG_ERROR_NOT_FOUND: "{{field}} is not found",
    MSG_ERROR_INVALID_REQUEST: "invalid request",
}
