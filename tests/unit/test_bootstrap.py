"""Unit tests for election service bootstrap wiring."""

import os
from unittest.mock import patch

import structlog

from ballotflow.application.services.election_service import ElectionService
from ballotflow.bootstrap import create_election_service
from ballotflow.config import ElectionConfig
from ballotflow.domain.models.workflow import WorkflowPhase
from ballotflow.infrastructure.stubs import (
    ElectionEventEmitterStub,
    ElectionStateRepositoryStub,
)


class TestCreateElectionService:
    def test_default_wiring_creates_fresh_election(self) -> None:
        service = create_election_service(ElectionConfig(owner_id="admin"))

        assert isinstance(service, ElectionService)
        assert service.current_phase() is WorkflowPhase.REGISTERING_VOTERS
        assert service.is_authorized("admin") is True
        assert service.snapshot().owner == "admin"

    def test_configures_logging_for_environment(self) -> None:
        create_election_service(ElectionConfig(owner_id="admin", environment="development"))
        processors = structlog.get_config()["processors"]
        assert any(isinstance(p, structlog.dev.ConsoleRenderer) for p in processors)

    def test_reads_config_from_environment(self) -> None:
        with patch.dict(os.environ, {"ELECTION_OWNER_ID": "env-admin"}, clear=True):
            service = create_election_service()
        assert service.snapshot().owner == "env-admin"

    def test_uses_given_repository_and_emitter(self) -> None:
        repository = ElectionStateRepositoryStub(owner="other")
        emitter = ElectionEventEmitterStub()

        service = create_election_service(
            ElectionConfig(owner_id="admin"),
            repository=repository,
            event_emitter=emitter,
        )
        service.authorize("other", "alice")

        assert repository.save_count == 1
        assert len(emitter.emitted_events) == 1

    def test_smoke_full_election(self, project_version: str) -> None:
        service = create_election_service(ElectionConfig(owner_id="admin"))
        service.authorize("admin", "alice")
        service.start_register_session("admin")
        service.submit_proposal("alice", "P0")
        service.end_proposal_registration("admin")
        service.start_voting_session("admin")
        service.cast_vote("alice", 0)
        service.end_voting_session("admin")
        service.tally_votes("admin")

        assert service.compute_winners().winning_indices == (0,)
        assert project_version == "0.1.0"
