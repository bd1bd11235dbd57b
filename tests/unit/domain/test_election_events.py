"""Unit tests for election event payloads."""

import pytest

from ballotflow.domain.events.election import (
    AUTHORIZED_EVENT_TYPE,
    PHASE_CHANGED_EVENT_TYPE,
    AuthorizedEventPayload,
    ElectionResetEventPayload,
    PhaseChangedEventPayload,
    ProposalRegisteredEventPayload,
    VotedEventPayload,
    VoterRegisteredEventPayload,
)
from ballotflow.domain.models.workflow import WorkflowPhase


class TestEventPayloads:
    def test_event_types_are_distinct(self) -> None:
        types = {
            AuthorizedEventPayload.event_type,
            VoterRegisteredEventPayload.event_type,
            ProposalRegisteredEventPayload.event_type,
            PhaseChangedEventPayload.event_type,
            VotedEventPayload.event_type,
            ElectionResetEventPayload.event_type,
        }
        assert len(types) == 6

    def test_event_type_is_not_a_field(self) -> None:
        event = AuthorizedEventPayload(actor="alice")
        assert event.event_type == AUTHORIZED_EVENT_TYPE
        assert event.to_dict() == {"actor": "alice"}

    def test_phase_changed_serializes_phase_values(self) -> None:
        event = PhaseChangedEventPayload(
            previous_phase=WorkflowPhase.REGISTERING_VOTERS,
            new_phase=WorkflowPhase.PROPOSALS_REGISTRATION_STARTED,
        )
        assert event.event_type == PHASE_CHANGED_EVENT_TYPE
        assert event.to_dict() == {
            "previous_phase": "RegisteringVoters",
            "new_phase": "ProposalsRegistrationStarted",
        }

    def test_voted_payload(self) -> None:
        assert VotedEventPayload(actor="alice", proposal_index=1).to_dict() == {
            "actor": "alice",
            "proposal_index": 1,
        }

    def test_reset_payload(self) -> None:
        event = ElectionResetEventPayload(
            previous_phase=WorkflowPhase.VOTES_TALLIED,
            cleared_voters=2,
            cleared_proposals=3,
        )
        assert event.to_dict()["previous_phase"] == "VotesTallied"
        assert event.to_dict()["cleared_proposals"] == 3

    def test_payloads_are_frozen(self) -> None:
        event = ProposalRegisteredEventPayload(proposal_index=0)
        with pytest.raises(AttributeError):
            event.proposal_index = 1  # type: ignore[misc]
