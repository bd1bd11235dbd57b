"""
Pytest configuration and shared fixtures for ballotflow tests.

Testing Standards:
- Unit tests go in tests/unit/<layer>/
- Domain rules are tested against ElectionState directly
- Service tests use the in-memory repository and capturing emitter stubs
"""

from collections.abc import Callable, Iterator

import pytest
import structlog

from ballotflow.application.services.election_service import ElectionService
from ballotflow.domain.models.election_state import ElectionState
from ballotflow.domain.models.workflow import PHASE_ORDER, WorkflowPhase
from ballotflow.infrastructure.stubs import (
    ElectionEventEmitterStub,
    ElectionStateRepositoryStub,
)

OWNER = "owner"

# Transition operation that leaves each phase
_ADVANCE_FROM: dict[WorkflowPhase, str] = {
    WorkflowPhase.REGISTERING_VOTERS: "start_register_session",
    WorkflowPhase.PROPOSALS_REGISTRATION_STARTED: "end_proposal_registration",
    WorkflowPhase.PROPOSALS_REGISTRATION_ENDED: "start_voting_session",
    WorkflowPhase.VOTING_SESSION_STARTED: "end_voting_session",
    WorkflowPhase.VOTING_SESSION_ENDED: "tally_votes",
}


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore structlog defaults so configuration never leaks between tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from ballotflow import __version__

    return __version__


@pytest.fixture
def owner() -> str:
    return OWNER


@pytest.fixture
def state() -> ElectionState:
    """A fresh election owned by OWNER."""
    return ElectionState.create(OWNER)


@pytest.fixture
def repository() -> ElectionStateRepositoryStub:
    return ElectionStateRepositoryStub(owner=OWNER)


@pytest.fixture
def emitter() -> ElectionEventEmitterStub:
    return ElectionEventEmitterStub()


@pytest.fixture
def service(
    repository: ElectionStateRepositoryStub,
    emitter: ElectionEventEmitterStub,
) -> ElectionService:
    return ElectionService(repository, emitter)


@pytest.fixture
def advance_to() -> Callable[[ElectionService, WorkflowPhase], None]:
    """Drive a service forward, as the owner, until it reaches a phase."""

    def _advance(service: ElectionService, target: WorkflowPhase) -> None:
        while service.current_phase() is not target:
            current = service.current_phase()
            if PHASE_ORDER.index(current) > PHASE_ORDER.index(target):
                raise AssertionError(f"Cannot advance from {current} back to {target}")
            getattr(service, _ADVANCE_FROM[current])(OWNER)

    return _advance
