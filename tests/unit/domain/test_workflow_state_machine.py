"""Unit tests for the workflow state machine rules."""

import pytest

from ballotflow.domain.errors import (
    InvalidPhaseTransitionError,
    NotOwnerError,
    PhaseRequiredError,
)
from ballotflow.domain.events.election import PhaseChangedEventPayload
from ballotflow.domain.models.election_state import ElectionState
from ballotflow.domain.models.workflow import PHASE_ORDER, WorkflowPhase
from ballotflow.domain.services import workflow_state_machine
from ballotflow.domain.services.workflow_state_machine import TRANSITION_OPERATIONS, TRANSITIONS

TRANSITION_SEQUENCE = list(TRANSITION_OPERATIONS)


class TestTransitionTable:
    def test_transitions_follow_phase_order(self) -> None:
        for operation, (current, following) in zip(
            TRANSITION_SEQUENCE, zip(PHASE_ORDER, PHASE_ORDER[1:])
        ):
            assert TRANSITIONS[operation] == (current, following)

    def test_final_phase_has_no_transition(self) -> None:
        assert all(
            required is not WorkflowPhase.VOTES_TALLIED for required, _ in TRANSITIONS.values()
        )
        assert len(TRANSITIONS) == len(PHASE_ORDER) - 1


class TestAdvance:
    def test_full_forward_walk(self, state: ElectionState) -> None:
        visited = [state.phase]
        for operation in TRANSITION_SEQUENCE:
            events = workflow_state_machine.advance(state, "owner", operation)
            assert events == [
                PhaseChangedEventPayload(previous_phase=visited[-1], new_phase=state.phase)
            ]
            visited.append(state.phase)
        assert tuple(visited) == PHASE_ORDER

    @pytest.mark.parametrize("operation", TRANSITION_SEQUENCE[1:])
    def test_out_of_order_transition_fails(
        self, state: ElectionState, operation: str
    ) -> None:
        with pytest.raises(InvalidPhaseTransitionError) as exc_info:
            workflow_state_machine.advance(state, "owner", operation)
        assert exc_info.value.current is WorkflowPhase.REGISTERING_VOTERS
        assert state.phase is WorkflowPhase.REGISTERING_VOTERS

    def test_repeating_a_transition_fails(self, state: ElectionState) -> None:
        workflow_state_machine.advance(state, "owner", "start_register_session")
        with pytest.raises(InvalidPhaseTransitionError):
            workflow_state_machine.advance(state, "owner", "start_register_session")
        assert state.phase is WorkflowPhase.PROPOSALS_REGISTRATION_STARTED

    def test_cannot_advance_past_votes_tallied(self, state: ElectionState) -> None:
        for operation in TRANSITION_SEQUENCE:
            workflow_state_machine.advance(state, "owner", operation)
        for operation in TRANSITION_SEQUENCE:
            with pytest.raises(InvalidPhaseTransitionError):
                workflow_state_machine.advance(state, "owner", operation)
        assert state.phase is WorkflowPhase.VOTES_TALLIED

    def test_non_owner_cannot_advance(self, state: ElectionState) -> None:
        state.whitelist.add("alice")
        with pytest.raises(NotOwnerError):
            workflow_state_machine.advance(state, "alice", "start_register_session")
        assert state.phase is WorkflowPhase.REGISTERING_VOTERS

    def test_owner_check_precedes_phase_check(self, state: ElectionState) -> None:
        with pytest.raises(NotOwnerError):
            workflow_state_machine.advance(state, "mallory", "tally_votes")


class TestRequirePhase:
    def test_matching_phase_passes(self, state: ElectionState) -> None:
        workflow_state_machine.require_phase(
            state, WorkflowPhase.REGISTERING_VOTERS, "anything"
        )

    def test_other_phase_fails(self, state: ElectionState) -> None:
        with pytest.raises(PhaseRequiredError) as exc_info:
            workflow_state_machine.require_phase(
                state, WorkflowPhase.VOTING_SESSION_STARTED, "cast_vote"
            )
        assert exc_info.value.operation == "cast_vote"
        assert exc_info.value.current is WorkflowPhase.REGISTERING_VOTERS
