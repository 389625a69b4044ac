"""Observer hooks for validation orchestration.

An orchestrator reports every field result it stores and every namespace it
merges. Observers see keys as they end up in the error map, e.g.
``items[2].sku``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Protocol, runtime_checkable

__all__ = [
    "ObservableMixin",
    "ValidationEvent",
    "ValidationEventType",
    "ValidationObserver",
]


class ValidationEventType(Enum):
    """Types of events an orchestrator emits."""

    FIELD_ADDED = auto()
    """Emitted when a field result is stored under a new key."""

    FIELD_REPLACED = auto()
    """Emitted when a field result overwrites an existing key."""

    NAMESPACE_MERGED = auto()
    """Emitted after a child orchestrator is merged under a namespace."""


@dataclass
class ValidationEvent:
    """An event emitted by an observable object.

    Attributes:
        event_type: The type of event that occurred.
        source: The object that emitted the event.
        data: Event-specific data.

    Example:
        event = ValidationEvent(
            event_type=ValidationEventType.FIELD_ADDED,
            source=orchestrator,
            data={"field": "address.city", "valid": False},
        )
    """

    event_type: ValidationEventType
    source: object
    data: dict[str, Any] = field(default_factory=dict)


@runtime_checkable
class ValidationObserver(Protocol):
    """Protocol for event observers.

    Example:
        class LoggingObserver:
            def on_event(self, event: ValidationEvent) -> None:
                logger.info("%s: %s", event.event_type.name, event.data)
    """

    def on_event(self, event: ValidationEvent) -> None:
        """Handle an event."""
        ...


class ObservableMixin:
    """Mixin that lets an orchestrator broadcast its collection events.

    An observer may subscribe to a subset of :class:`ValidationEventType`
    members and otherwise receives every event. Observers are called
    synchronously, in registration order, and only by the object they were
    registered on. Merging a child orchestrator does not forward anything to
    the child's observers.

    Example:
        orchestrator = v()
        orchestrator.add_observer(audit, ValidationEventType.FIELD_REPLACED)
        orchestrator.is_(string(first, "email"))
        orchestrator.is_(string(second, "email"))  # audit sees one event
    """

    _subscriptions: list[tuple[ValidationObserver, frozenset[ValidationEventType]]]

    def _get_subscriptions(
        self,
    ) -> list[tuple[ValidationObserver, frozenset[ValidationEventType]]]:
        if getattr(self, "_subscriptions", None) is None:
            self._subscriptions = []
        return self._subscriptions

    def add_observer(self, observer: ValidationObserver, *event_types: ValidationEventType) -> None:
        """Register an observer.

        Args:
            observer: Receiver of the events.
            *event_types: Event types to deliver. No types means all of them.
                Registering an observer again only updates its event types.
        """
        subscriptions = self._get_subscriptions()
        wanted = frozenset(event_types)
        for position, (existing, _) in enumerate(subscriptions):
            if existing is observer:
                subscriptions[position] = (observer, wanted)
                return
        subscriptions.append((observer, wanted))

    def remove_observer(self, observer: ValidationObserver) -> None:
        subscriptions = self._get_subscriptions()
        subscriptions[:] = [entry for entry in subscriptions if entry[0] is not observer]

    def notify(self, event: ValidationEvent) -> None:
        """Send an event to every observer subscribed to its type."""
        for observer, event_types in list(self._get_subscriptions()):
            if not event_types or event.event_type in event_types:
                observer.on_event(event)

    @property
    def has_observers(self) -> bool:
        """True when at least one observer is registered."""
        return bool(self._get_subscriptions())

    @property
    def observers(self) -> list[ValidationObserver]:
        """Get the registered observers, in registration order."""
        return [observer for observer, _ in self._get_subscriptions()]

    def clear_observers(self) -> None:
        self._get_subscriptions().clear()
