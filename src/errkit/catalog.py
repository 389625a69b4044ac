"""Message catalogs for localization.

Provides a Pydantic model describing the templates registered for one
language.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = ["MessageCatalog", "normalize_language"]


def normalize_language(tag: str) -> str:
    """Normalize a language tag for cache and catalog lookups.

    Tags are compared case-insensitively and ``_`` is accepted as a
    separator, so ``"en_US"`` and ``"EN-us"`` both become ``"en-us"``.
    """
    return tag.strip().replace("_", "-").lower()


class MessageCatalog(BaseModel):
    """Templates registered for a single language.

    Attributes:
        language: Language tag the templates belong to (normalized).
        messages: Mapping of message key to template string. These are the
            singular forms.
        plurals: Mapping of message key to the template used when a count
            other than one is rendered. Keys without a plural form use
            their singular template.

    Example:
        catalog = MessageCatalog(
            language="es",
            messages={"validation.min_items": "{{field}} necesita {{min}} elemento"},
            plurals={"validation.min_items": "{{field}} necesita {{min}} elementos"},
        )
        registry.register_catalog(catalog)
    """

    model_config = ConfigDict(frozen=True)

    language: str
    messages: dict[str, str] = Field(default_factory=dict)
    plurals: dict[str, str] = Field(default_factory=dict)

    @field_validator("language")
    @classmethod
    def _check_language(cls, value: str) -> str:
        tag = normalize_language(value)
        if not tag:
            raise ValueError("language tag cannot be empty")
        return tag

    @field_validator("messages", "plurals")
    @classmethod
    def _check_messages(cls, value: dict[str, str]) -> dict[str, str]:
        for key, template in value.items():
            if not key:
                raise ValueError("message key cannot be empty")
            if not template:
                raise ValueError(f"template cannot be empty for key {key!r}")
        return value

    def get(self, key: str, count: int = 1) -> str | None:
        """Get the template for a key, or None if the catalog lacks it.

        A count other than one selects the plural form when there is one.
        """
        if count != 1 and key in self.plurals:
            return self.plurals[key]
        return self.messages.get(key)

    def keys(self) -> list[str]:
        """Get every key with a singular or plural template, sorted."""
        return sorted(self.messages.keys() | self.plurals.keys())

    def __contains__(self, key: object) -> bool:
        return key in self.messages or key in self.plurals

    def __len__(self) -> int:
        return len(self.messages)
