"""Application ports - Abstract interfaces for infrastructure adapters.

Available ports:
- ElectionStateRepositoryPort: load/save of the single election state
- ElectionEventEmitterPort: notification delivery to observers
"""

from ballotflow.application.ports.election_event_emitter import ElectionEventEmitterPort
from ballotflow.application.ports.election_state_repository import (
    ElectionStateRepositoryPort,
)

__all__: list[str] = ["ElectionEventEmitterPort", "ElectionStateRepositoryPort"]
