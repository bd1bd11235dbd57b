"""Stub implementation of ElectionEventEmitterPort for testing.

This stub captures emitted events for test assertions and can simulate a
failing observer.

Usage in tests:
    stub = ElectionEventEmitterStub()
    service = ElectionService(repository, stub)

    service.start_register_session("owner")

    assert stub.event_types() == ["election.workflow.phase_changed"]
"""

from __future__ import annotations

from ballotflow.application.ports.election_event_emitter import ElectionEventEmitterPort
from ballotflow.domain.events.election import ElectionEventPayload


class ElectionEventEmitterStub(ElectionEventEmitterPort):
    """Stub emitter recording every delivered event.

    Attributes:
        emitted_events: Events delivered so far, in order.
        fail_exception: If set, emit() raises it instead of recording.
    """

    def __init__(self) -> None:
        self.emitted_events: list[ElectionEventPayload] = []
        self.fail_exception: Exception | None = None

    def emit(self, event: ElectionEventPayload) -> None:
        if self.fail_exception is not None:
            raise self.fail_exception
        self.emitted_events.append(event)

    def event_types(self) -> list[str]:
        """Get the event type of every recorded event, in order."""
        return [event.event_type for event in self.emitted_events]

    def reset(self) -> None:
        """Forget recorded events and stop failing."""
        self.emitted_events.clear()
        self.fail_exception = None
