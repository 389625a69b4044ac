"""Validation protocols for type checking.

Structural type accepted wherever the orchestrator takes a field validator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from errkit.errors import Error
    from errkit.results import ValidationResult

__all__ = ["ValidatorProtocol"]


@runtime_checkable
class ValidatorProtocol(Protocol):
    """Protocol for field validators.

    Use this for type hints when accepting any validator family.
    """

    @property
    def field_name(self) -> str:
        """Name of the field being validated."""
        ...

    @property
    def result(self) -> ValidationResult:
        """The result the validator records into."""
        ...

    def validate(self) -> Error | None:
        """Get the container Error for the field, or None if valid."""
        ...
