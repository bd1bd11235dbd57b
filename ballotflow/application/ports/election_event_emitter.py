"""Election Event Emitter port.

Observers receive notifications after an operation has been committed.
Delivery is fire-and-forget from the election's perspective: a failing
emitter never rolls back the operation that produced the event.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ballotflow.domain.events.election import ElectionEventPayload


class ElectionEventEmitterPort(ABC):
    """Port for publishing election notifications."""

    @abstractmethod
    def emit(self, event: ElectionEventPayload) -> None:
        """Deliver one notification to observers.

        Args:
            event: The committed event payload.
        """
        ...
