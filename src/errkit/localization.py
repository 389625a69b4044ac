"""Localizer registry and template rendering.

A :class:`LocalizerRegistry` owns the message catalogs and hands out one
:class:`Localizer` per language tag. Localizers are built on first request
and memoized; concurrent callers asking for the same tag observe the same
instance. Unregistered languages never fail, they resolve through the
default language's catalog.

A process-wide registry is available through :func:`default_registry` for
convenience. Tests should install their own with :func:`set_default_registry`
or tear it down with :func:`reset_default_registry`.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from decimal import Decimal
from fractions import Fraction
from threading import Lock
from typing import Any, Union

from errkit.catalog import MessageCatalog, normalize_language
from errkit.messages import DEFAULT_LANGUAGE, DEFAULT_MESSAGES

__all__ = [
    "Localizer",
    "LocalizerRegistry",
    "ParamValue",
    "default_registry",
    "format_param",
    "get_localizer",
    "render_template",
    "reset_default_registry",
    "set_default_registry",
]

logger = logging.getLogger(__name__)

Scalar = Union[str, int, float, Decimal, Fraction, bool]
ParamValue = Union[Scalar, list[Scalar], tuple[Scalar, ...]]
"""Values that may be substituted into a message template."""

_PLACEHOLDER = re.compile(r"\{\{\s*([A-Za-z_][A-Za-z0-9_]*)\s*\}\}")


def format_param(value: Any) -> str:
    """Render a template parameter as text.

    Lists and tuples are comma-joined; everything else goes through ``str``.
    """
    if isinstance(value, (list, tuple)):
        return ", ".join(format_param(item) for item in value)
    return str(value)


def render_template(template: str, data: Mapping[str, Any] | None = None) -> str:
    """Substitute ``{{name}}`` placeholders in a template.

    Substitution is plain text replacement. Placeholders without a matching
    entry in ``data`` are left as they are.

    Args:
        template: Template string, e.g. ``"{{field}} is required"``.
        data: Values for the placeholders.

    Returns:
        The rendered text.
    """
    if not data:
        return template

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in data:
            return format_param(data[name])
        return match.group(0)

    return _PLACEHOLDER.sub(_replace, template)


def has_placeholders(text: str) -> bool:
    """Check whether text contains at least one ``{{name}}`` placeholder."""
    return _PLACEHOLDER.search(text) is not None


class Localizer:
    """Resolves message keys to text for one language.

    Lookups walk the fallback chain, requested language first and then the
    registry's default language. Each language answers with its plural form
    when a count other than one is asked for and it has one, otherwise with
    its singular form. Templates are snapshotted when the localizer is built.
    """

    def __init__(
        self,
        language: str,
        catalogs: Iterable[tuple[str, Mapping[str, str], Mapping[str, str]]],
    ) -> None:
        self._language = language
        self._catalogs = tuple(
            (tag, dict(messages), dict(plurals)) for tag, messages, plurals in catalogs
        )

    @property
    def language(self) -> str:
        """Language tag this localizer was built for."""
        return self._language

    @property
    def fallbacks(self) -> tuple[str, ...]:
        """Languages consulted, in order."""
        return tuple(tag for tag, _, _ in self._catalogs)

    def template(self, key: str, count: int = 1) -> str | None:
        """Get the raw template for a key, or None if no language has it."""
        for _, messages, plurals in self._catalogs:
            if count != 1 and key in plurals:
                return plurals[key]
            template = messages.get(key)
            if template is not None:
                return template
        return None

    def localize(
        self, key: str, data: Mapping[str, Any] | None = None, count: int = 1
    ) -> str | None:
        """Render the template for a key.

        Args:
            key: Message key.
            data: Values for the template placeholders.
            count: Quantity the message describes. Anything other than one
                selects the plural form.

        Returns:
            The rendered text, or None when the key is missing from every
            language in the fallback chain.
        """
        template = self.template(key, count)
        if template is None:
            logger.debug("No template for %r in %s", key, self.fallbacks)
            return None
        return render_template(template, data)

    def must_localize(
        self, key: str, data: Mapping[str, Any] | None = None, count: int = 1
    ) -> str:
        """Render the template for a key, returning the key itself on a miss."""
        text = self.localize(key, data, count)
        return key if text is None else text

    def __repr__(self) -> str:
        return f"Localizer(language={self._language!r}, fallbacks={list(self.fallbacks)!r})"


class LocalizerRegistry:
    """Registry of message catalogs and cached localizers.

    Example:
        registry = LocalizerRegistry()
        registry.add_messages("es", {"validation.required": "{{field}} es obligatorio"})

        registry.get_localizer("es") is registry.get_localizer("es")  # True
        registry.get_localizer("fr").language  # "fr", resolves English text
    """

    def __init__(
        self,
        default_language: str = DEFAULT_LANGUAGE,
        catalogs: Iterable[MessageCatalog] = (),
        *,
        include_defaults: bool = True,
    ) -> None:
        """Initialize the registry.

        Args:
            default_language: Language every lookup falls back to.
            catalogs: Catalogs to register up front.
            include_defaults: Register the built-in English templates under
                the default language. Defaults to True.
        """
        self._default_language = normalize_language(default_language) or DEFAULT_LANGUAGE
        self._messages: dict[str, dict[str, str]] = {}
        self._plurals: dict[str, dict[str, str]] = {}
        self._localizers: dict[str, Localizer] = {}
        self._lock = Lock()

        if include_defaults:
            self._messages[self._default_language] = dict(DEFAULT_MESSAGES)
        for catalog in catalogs:
            self.register_catalog(catalog)

    @property
    def default_language(self) -> str:
        """Language every lookup falls back to."""
        return self._default_language

    def get_localizer(self, tag: str | None = None) -> Localizer:
        """Get the localizer for a language, building it on first request.

        Args:
            tag: Language tag. None or empty selects the default language.

        Returns:
            The cached Localizer for the normalized tag.
        """
        language = normalize_language(tag or "") or self._default_language

        localizer = self._localizers.get(language)
        if localizer is not None:
            return localizer

        with self._lock:
            localizer = self._localizers.get(language)
            if localizer is None:
                localizer = self._build(language)
                self._localizers[language] = localizer
        return localizer

    def _build(self, language: str) -> Localizer:
        chain = [language]
        if language != self._default_language:
            chain.append(self._default_language)
        catalogs = [
            (tag, self._messages.get(tag, {}), self._plurals.get(tag, {})) for tag in chain
        ]
        logger.debug("Built localizer for %s with fallbacks %s", language, chain)
        return Localizer(language, catalogs)

    def register_catalog(self, catalog: MessageCatalog) -> None:
        """Merge a catalog's templates into its language.

        Localizers that consult the language are evicted from the cache so
        subsequent lookups see the new templates.
        """
        with self._lock:
            messages = self._messages.setdefault(catalog.language, {})
            messages.update(catalog.messages)
            self._plurals.setdefault(catalog.language, {}).update(catalog.plurals)
            self._evict(catalog.language)

    def add_messages(
        self,
        language: str,
        messages: Mapping[str, str],
        plurals: Mapping[str, str] | None = None,
    ) -> None:
        """Register templates for a language.

        Args:
            language: Language tag.
            messages: Singular templates by key.
            plurals: Plural templates by key, used for counts other than one.

        Raises:
            pydantic.ValidationError: If the language, a key or a template is empty.
        """
        self.register_catalog(
            MessageCatalog(language=language, messages=dict(messages), plurals=dict(plurals or {}))
        )

    def _evict(self, language: str) -> None:
        if language == self._default_language:
            evicted = list(self._localizers)
            self._localizers.clear()
        else:
            evicted = [language] if self._localizers.pop(language, None) else []
        if evicted:
            logger.debug("Evicted cached localizers %s", evicted)

    def has_message(self, language: str, key: str) -> bool:
        """Check if a template is registered for exactly this language and key."""
        return key in self._messages.get(normalize_language(language), {})

    def languages(self) -> list[str]:
        """Get the languages that have registered templates."""
        return list(self._messages)

    def keys(self, language: str) -> list[str]:
        """Get the sorted message keys registered for exactly this language.

        Keys registered only with a plural form are included.
        """
        tag = normalize_language(language)
        return sorted(self._messages.get(tag, {}).keys() | self._plurals.get(tag, {}).keys())

    def clear(self) -> None:
        """Drop all cached localizers. Registered catalogs are kept."""
        with self._lock:
            self._localizers.clear()

    def __repr__(self) -> str:
        return (
            f"LocalizerRegistry(default_language={self._default_language!r}, "
            f"languages={self.languages()!r})"
        )


_default_registry: LocalizerRegistry | None = None
_default_lock = Lock()


def default_registry() -> LocalizerRegistry:
    """Get the process-wide registry, creating it on first use."""
    global _default_registry
    registry = _default_registry
    if registry is not None:
        return registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = LocalizerRegistry()
        return _default_registry


def set_default_registry(registry: LocalizerRegistry) -> None:
    """Install a registry as the process-wide default."""
    global _default_registry
    with _default_lock:
        _default_registry = registry


def reset_default_registry() -> None:
    """Discard the process-wide registry; the next use builds a fresh one."""
    global _default_registry
    with _default_lock:
        _default_registry = None


def get_localizer(tag: str | None = None) -> Localizer:
    """Get a localizer from the process-wide registry."""
    return default_registry().get_localizer(tag)


def resolve_localizer(locale: Localizer | str | None) -> Localizer:
    """Turn a Localizer, a language tag or None into a Localizer."""
    if isinstance(locale, Localizer):
        return locale
    return get_localizer(locale)
