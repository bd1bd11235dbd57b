"""Infrastructure adapters.

Adapters implement the ports defined in the application layer.
"""

from ballotflow.infrastructure.adapters.logging_event_emitter import LoggingEventEmitter

__all__: list[str] = ["LoggingEventEmitter"]
