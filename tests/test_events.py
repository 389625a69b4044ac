"""Tests for the observer pattern and orchestrator events."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from errkit import (
    ObservableMixin,
    ValidationEvent,
    ValidationEventType,
    ValidationObserver,
    is_,
    string,
    v,
)

# =============================================================================
# Test Observers
# =============================================================================


class RecordingObserver:
    """Observer that records all events for testing."""

    def __init__(self) -> None:
        self.events: list[ValidationEvent] = []

    def on_event(self, event: ValidationEvent) -> None:
        self.events.append(event)

    @property
    def event_types(self) -> list[ValidationEventType]:
        return [e.event_type for e in self.events]


class CountingObserver:
    """Observer that counts events by type."""

    def __init__(self) -> None:
        self.counts: dict[ValidationEventType, int] = {}

    def on_event(self, event: ValidationEvent) -> None:
        self.counts[event.event_type] = self.counts.get(event.event_type, 0) + 1


# =============================================================================
# Observer Registration Unit Tests
# =============================================================================


class TestObservableMixinUnit:
    """Unit tests for observer registration."""

    def test_observers_satisfy_protocol(self) -> None:
        assert isinstance(RecordingObserver(), ValidationObserver)
        assert isinstance(CountingObserver(), ValidationObserver)

    def test_add_observer_once(self) -> None:
        orchestrator = v()
        observer = RecordingObserver()
        orchestrator.add_observer(observer)
        orchestrator.add_observer(observer)

        assert orchestrator.observers == [observer]

    def test_remove_and_clear(self) -> None:
        orchestrator = v()
        first, second = RecordingObserver(), RecordingObserver()
        orchestrator.add_observer(first)
        orchestrator.add_observer(second)

        orchestrator.remove_observer(first)
        orchestrator.remove_observer(first)
        assert orchestrator.observers == [second]

        orchestrator.clear_observers()
        assert orchestrator.observers == []

    def test_observers_returns_copy(self) -> None:
        orchestrator = v()
        orchestrator.add_observer(RecordingObserver())
        orchestrator.observers.clear()

        assert len(orchestrator.observers) == 1

    def test_has_observers(self) -> None:
        orchestrator = v()
        observer = RecordingObserver()
        assert not orchestrator.has_observers

        orchestrator.add_observer(observer)
        assert orchestrator.has_observers

        orchestrator.remove_observer(observer)
        assert not orchestrator.has_observers

    def test_subscribe_to_event_types(self) -> None:
        orchestrator = v()
        replaced_only = RecordingObserver()
        everything = RecordingObserver()
        orchestrator.add_observer(replaced_only, ValidationEventType.FIELD_REPLACED)
        orchestrator.add_observer(everything)

        orchestrator.is_(string("", "email"))
        orchestrator.is_(string("a@b.co", "email"))

        assert replaced_only.event_types == [ValidationEventType.FIELD_REPLACED]
        assert everything.event_types == [
            ValidationEventType.FIELD_ADDED,
            ValidationEventType.FIELD_REPLACED,
        ]

    def test_re_adding_updates_event_types(self) -> None:
        orchestrator = v()
        observer = RecordingObserver()
        orchestrator.add_observer(observer, ValidationEventType.NAMESPACE_MERGED)
        orchestrator.add_observer(observer)

        orchestrator.is_(string("", "email"))

        assert orchestrator.observers == [observer]
        assert observer.event_types == [ValidationEventType.FIELD_ADDED]

    def test_mixin_on_plain_class(self) -> None:
        class Source(ObservableMixin):
            pass

        source = Source()
        observer = RecordingObserver()
        source.add_observer(observer)
        source.notify(ValidationEvent(ValidationEventType.FIELD_ADDED, source))

        assert observer.event_types == [ValidationEventType.FIELD_ADDED]
        assert observer.events[0].data == {}


# =============================================================================
# Orchestrator Event Unit Tests
# =============================================================================


class TestOrchestratorEventsUnit:
    """Unit tests for events emitted by the orchestrator."""

    def test_field_added_and_replaced(self) -> None:
        orchestrator = v()
        observer = RecordingObserver()
        orchestrator.add_observer(observer)

        orchestrator.is_(string("", "email").required())
        orchestrator.is_(string("a@b.co", "email").required())

        assert observer.event_types == [
            ValidationEventType.FIELD_ADDED,
            ValidationEventType.FIELD_REPLACED,
        ]
        assert observer.events[0].data == {"field": "email", "valid": False}
        assert observer.events[1].data == {"field": "email", "valid": True}
        assert observer.events[0].source is orchestrator

    def test_namespace_merged(self) -> None:
        orchestrator = v()
        observer = RecordingObserver()
        orchestrator.add_observer(observer)

        orchestrator.in_row("items", 2, is_(string("", "sku"), string("", "qty")))

        assert observer.event_types == [
            ValidationEventType.FIELD_ADDED,
            ValidationEventType.FIELD_ADDED,
            ValidationEventType.NAMESPACE_MERGED,
        ]
        assert observer.events[-1].data == {
            "namespace": "items",
            "index": 2,
            "fields": ["items[2].sku", "items[2].qty"],
        }

    def test_child_observers_not_notified_by_parent(self) -> None:
        child = is_(string("", "name"))
        child_observer = RecordingObserver()
        child.add_observer(child_observer)

        v().in_("address", child)

        assert child_observer.events == []

    @given(names=st.lists(st.sampled_from(["a", "b", "c"]), max_size=10))
    @settings(max_examples=50)
    def test_event_counts(self, names: list[str]) -> None:
        orchestrator = v()
        observer = CountingObserver()
        orchestrator.add_observer(observer)

        for name in names:
            orchestrator.is_(string("", name))

        added = observer.counts.get(ValidationEventType.FIELD_ADDED, 0)
        replaced = observer.counts.get(ValidationEventType.FIELD_REPLACED, 0)
        assert added == len(set(names))
        assert added + replaced == len(names)
