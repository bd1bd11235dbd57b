"""In-memory stubs for development and testing."""

from ballotflow.infrastructure.stubs.election_event_emitter_stub import (
    ElectionEventEmitterStub,
)
from ballotflow.infrastructure.stubs.election_state_repository_stub import (
    ElectionStateRepositoryStub,
)

__all__: list[str] = ["ElectionEventEmitterStub", "ElectionStateRepositoryStub"]
