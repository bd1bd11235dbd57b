"""Event emitter adapter writing notifications to the structured log.

Observers that tail the log (or a log shipper) receive every committed
election notification as a JSON line with its event type and payload.
"""

from __future__ import annotations

import structlog

from ballotflow.application.ports.election_event_emitter import ElectionEventEmitterPort
from ballotflow.domain.events.election import ElectionEventPayload


class LoggingEventEmitter(ElectionEventEmitterPort):
    """Emit election notifications as structured log entries."""

    def __init__(self, channel: str = "election.notifications") -> None:
        self._log = structlog.get_logger().bind(channel=channel)

    def emit(self, event: ElectionEventPayload) -> None:
        self._log.info(
            "election_notification",
            event_type=event.event_type,
            payload=event.to_dict(),
        )
