"""Bootstrap wiring for the election service.

Configures logging for the deployment environment and wires an
ElectionService to its repository and event emitter. Callers that persist
state elsewhere pass their own repository; otherwise the election lives in
memory for the life of the process.
"""

from __future__ import annotations

from ballotflow.application.ports.election_event_emitter import ElectionEventEmitterPort
from ballotflow.application.ports.election_state_repository import (
    ElectionStateRepositoryPort,
)
from ballotflow.application.services.election_service import ElectionService
from ballotflow.config.election_config import ElectionConfig
from ballotflow.infrastructure.adapters.logging_event_emitter import LoggingEventEmitter
from ballotflow.infrastructure.observability import configure_structlog
from ballotflow.infrastructure.stubs.election_state_repository_stub import (
    ElectionStateRepositoryStub,
)


def create_election_service(
    config: ElectionConfig | None = None,
    *,
    repository: ElectionStateRepositoryPort | None = None,
    event_emitter: ElectionEventEmitterPort | None = None,
) -> ElectionService:
    """Create a wired ElectionService.

    Args:
        config: Deployment configuration; read from the environment if None.
        repository: State store; defaults to an in-memory store seeded with
            a fresh election owned by config.owner_id.
        event_emitter: Notification sink; defaults to the structured log.

    Returns:
        Ready-to-use election service.
    """
    if config is None:
        config = ElectionConfig.from_environment()

    configure_structlog(environment=config.environment)

    if repository is None:
        repository = ElectionStateRepositoryStub(owner=config.owner_id)
    if event_emitter is None:
        event_emitter = LoggingEventEmitter()

    return ElectionService(repository, event_emitter)
