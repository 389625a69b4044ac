"""Boolean format checks used by the string validator."""

from __future__ import annotations

import base64
import binascii
import json
import re

__all__ = [
    "ALPHA_NUMERIC_RE",
    "ALPHA_RE",
    "EMAIL_RE",
    "INTEGER_RE",
    "NUMERIC_RE",
    "SLUG_RE",
    "URL_RE",
    "UUID_RE",
    "is_alpha",
    "is_alpha_numeric",
    "is_base64",
    "is_email",
    "is_float",
    "is_integer",
    "is_json",
    "is_numeric",
    "is_slug",
    "is_url",
    "is_uuid",
]

EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
URL_RE = re.compile(r"^https?://[^\s/$.?#].[^\s]*$")
NUMERIC_RE = re.compile(r"^[0-9]+$")
INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")
ALPHA_RE = re.compile(r"^[a-zA-Z]+$")
ALPHA_NUMERIC_RE = re.compile(r"^[a-zA-Z0-9]+$")
UUID_RE = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)
SLUG_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def is_email(text: str) -> bool:
    return EMAIL_RE.fullmatch(text) is not None


def is_url(text: str) -> bool:
    return URL_RE.fullmatch(text) is not None


def is_numeric(text: str) -> bool:
    return NUMERIC_RE.fullmatch(text) is not None


def is_alpha(text: str) -> bool:
    return ALPHA_RE.fullmatch(text) is not None


def is_alpha_numeric(text: str) -> bool:
    return ALPHA_NUMERIC_RE.fullmatch(text) is not None


def is_uuid(text: str) -> bool:
    return UUID_RE.fullmatch(text) is not None


def is_slug(text: str) -> bool:
    """Lowercase letters and digits separated by single hyphens."""
    return SLUG_RE.fullmatch(text) is not None


def is_integer(text: str) -> bool:
    return INTEGER_RE.fullmatch(text) is not None


def is_float(text: str) -> bool:
    # float() also accepts surrounding whitespace and digit separators
    if not text or text != text.strip() or "_" in text:
        return False
    try:
        float(text)
    except ValueError:
        return False
    return True


def is_json(text: str) -> bool:
    if not text.strip():
        return False
    try:
        json.loads(text)
    except ValueError:
        return False
    return True


def is_base64(text: str) -> bool:
    """Padded or unpadded standard base64."""
    if not text:
        return False
    padded = text + "=" * (-len(text) % 4)
    try:
        base64.b64decode(padded, validate=True)
    except (binascii.Error, ValueError):
        return False
    return True
