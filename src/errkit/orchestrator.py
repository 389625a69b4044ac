"""Multi-field validation orchestration.

A :class:`ValidationOrchestrator` collects the results of several field
validators, optionally under a namespace or a row index, and renders them as a
single field-to-messages map for API responses.

Example:
    from errkit import integer, is_, string

    orchestrator = is_(
        string(req.email, "email").required().email(),
        integer(req.age, "age").min(18),
    )
    if not orchestrator.valid:
        return orchestrator.err_map()
        # {"email": ["email is required"], "age": ["age must be at least 18"]}
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from errkit.events import ObservableMixin, ValidationEvent, ValidationEventType

if TYPE_CHECKING:
    from errkit.errors import Error
    from errkit.localization import Localizer
    from errkit.protocols import ValidatorProtocol
    from errkit.results import ValidationResult

__all__ = ["ValidationOrchestrator", "in_", "in_row", "is_", "v"]


class ValidationOrchestrator(ObservableMixin):
    """Collects per-field validation results keyed by (namespaced) field name.

    Keys keep their first insertion position. Adding a result under an
    existing key replaces the stored result in place.
    """

    def __init__(self) -> None:
        self._results: dict[str, ValidationResult] = {}

    # -------------------------------------------------------------------------
    # Collecting results
    # -------------------------------------------------------------------------

    def _put(self, key: str, result: ValidationResult) -> None:
        replaced = key in self._results
        self._results[key] = result
        if not self.has_observers:
            return
        event_type = (
            ValidationEventType.FIELD_REPLACED if replaced else ValidationEventType.FIELD_ADDED
        )
        self.notify(
            ValidationEvent(
                event_type=event_type,
                source=self,
                data={"field": key, "valid": result.is_valid},
            )
        )

    def is_(self, *validators: ValidatorProtocol) -> ValidationOrchestrator:
        """Add the results of one or more field validators.

        Each result is stored under its validator's field name.

        Returns:
            Self for method chaining.
        """
        for validator in validators:
            result = validator.result
            self._put(result.field_name, result)
        return self

    def in_(self, namespace: str, child: ValidationOrchestrator) -> ValidationOrchestrator:
        """Merge a child orchestrator's results under ``namespace.field`` keys.

        Messages still use the bare field names.

        Example:
            orchestrator.in_("address", is_(string(city, "city").required()))
            orchestrator.err_map()  # {"address.city": ["city is required"]}
        """
        return self._merge(child, namespace, f"{namespace}.", index=None)

    def in_row(
        self, namespace: str, index: int, child: ValidationOrchestrator
    ) -> ValidationOrchestrator:
        """Merge a child orchestrator's results under ``namespace[index].field`` keys."""
        return self._merge(child, namespace, f"{namespace}[{index}].", index=index)

    def _merge(
        self,
        child: ValidationOrchestrator,
        namespace: str,
        prefix: str,
        index: int | None,
    ) -> ValidationOrchestrator:
        keys: list[str] = []
        for field_name, result in child._results.items():
            key = prefix + field_name
            self._put(key, result)
            keys.append(key)
        if self.has_observers:
            self.notify(
                ValidationEvent(
                    event_type=ValidationEventType.NAMESPACE_MERGED,
                    source=self,
                    data={"namespace": namespace, "index": index, "fields": keys},
                )
            )
        return self

    # -------------------------------------------------------------------------
    # Querying
    # -------------------------------------------------------------------------

    @property
    def valid(self) -> bool:
        """True when every collected field is valid."""
        return all(result.is_valid for result in self._results.values())

    def is_valid(self, field_name: str) -> bool:
        """Check a single field. Unknown fields count as valid."""
        result = self._results.get(field_name)
        return result is None or result.is_valid

    def field_names(self) -> list[str]:
        """Get the collected keys in insertion order."""
        return list(self._results)

    def get_field_result(self, field_name: str) -> ValidationResult | None:
        return self._results.get(field_name)

    def localized_err_map(
        self, locale: Localizer | str | None = None
    ) -> dict[str, list[str]] | None:
        """Map each invalid field to its localized messages.

        Args:
            locale: A Localizer, a language tag, or None for the default.

        Returns:
            The error map in insertion order, or None when everything is valid.
        """
        err_map = {
            key: result.localized_messages(locale)
            for key, result in self._results.items()
            if not result.is_valid
        }
        return err_map or None

    def err_map(self) -> dict[str, list[str]] | None:
        """Map each invalid field to its messages using the default localizer."""
        return self.localized_err_map(None)

    def to_json(self, locale: Localizer | str | None = None) -> str:
        """Serialize the error map as JSON, ``"{}"`` when everything is valid."""
        return json.dumps(self.localized_err_map(locale) or {}, ensure_ascii=False)

    def error(self) -> Error | None:
        """Get the container Error of the first invalid field, or None."""
        for result in self._results.values():
            if not result.is_valid:
                return result.error()
        return None

    def __len__(self) -> int:
        return len(self._results)

    def __str__(self) -> str:
        if self.valid:
            return "ValidationOrchestrator: Valid"
        messages = [
            f"{key}: {err.localized_error()}"
            for key, result in self._results.items()
            for err in result.errors
        ]
        return f"ValidationOrchestrator: Invalid ({', '.join(messages)})"

    def __repr__(self) -> str:
        return f"ValidationOrchestrator(fields={self.field_names()!r}, valid={self.valid})"


# =============================================================================
# Module helpers
# =============================================================================


def v() -> ValidationOrchestrator:
    """Create an empty orchestrator."""
    return ValidationOrchestrator()


def is_(*validators: ValidatorProtocol) -> ValidationOrchestrator:
    """Create an orchestrator holding the given validators' results."""
    return ValidationOrchestrator().is_(*validators)


def in_(namespace: str, child: ValidationOrchestrator) -> ValidationOrchestrator:
    """Create an orchestrator holding ``child`` under ``namespace``."""
    return ValidationOrchestrator().in_(namespace, child)


def in_row(namespace: str, index: int, child: ValidationOrchestrator) -> ValidationOrchestrator:
    """Create an orchestrator holding ``child`` under ``namespace[index]``."""
    return ValidationOrchestrator().in_row(namespace, index, child)
