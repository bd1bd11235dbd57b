"""Unit tests for the voter registry rules."""

import pytest

from ballotflow.domain.errors import (
    NotOwnerError,
    NotWhitelistedError,
    VoterAlreadyRegisteredError,
    VoterAlreadyVotedError,
)
from ballotflow.domain.events.election import VoterRegisteredEventPayload
from ballotflow.domain.models.election_state import ElectionState
from ballotflow.domain.models.voter import Voter
from ballotflow.domain.models.workflow import PHASE_ORDER, WorkflowPhase
from ballotflow.domain.services import voter_registry


class TestRegisterVoter:
    def test_registers_target(self, state: ElectionState) -> None:
        events = voter_registry.register_voter(state, "owner", "alice")
        assert state.voter("alice") == Voter(registered=True)
        assert state.registered_voters == ["alice"]
        assert events == [VoterRegisteredEventPayload(actor="alice")]

    def test_target_need_not_be_whitelisted(self, state: ElectionState) -> None:
        voter_registry.register_voter(state, "owner", "outsider")
        assert state.voter("outsider").registered is True
        assert "outsider" not in state.whitelist

    def test_registration_order_is_kept(self, state: ElectionState) -> None:
        for actor in ["carol", "alice", "bob"]:
            voter_registry.register_voter(state, "owner", actor)
        assert state.registered_voters == ["carol", "alice", "bob"]

    def test_second_registration_fails(self, state: ElectionState) -> None:
        voter_registry.register_voter(state, "owner", "alice")
        with pytest.raises(VoterAlreadyRegisteredError):
            voter_registry.register_voter(state, "owner", "alice")
        assert state.registered_voters == ["alice"]

    def test_actor_who_voted_cannot_register(self, state: ElectionState) -> None:
        state.voters["alice"] = Voter().with_vote(0)
        with pytest.raises(VoterAlreadyVotedError):
            voter_registry.register_voter(state, "owner", "alice")
        assert state.registered_voters == []

    def test_whitelisted_non_owner_cannot_register(self, state: ElectionState) -> None:
        state.whitelist.add("alice")
        with pytest.raises(NotOwnerError):
            voter_registry.register_voter(state, "alice", "bob")

    def test_owner_removed_from_whitelist_cannot_register(
        self, state: ElectionState
    ) -> None:
        state.whitelist.discard("owner")
        with pytest.raises(NotWhitelistedError):
            voter_registry.register_voter(state, "owner", "alice")

    @pytest.mark.parametrize("phase", PHASE_ORDER)
    def test_allowed_in_every_phase(
        self, state: ElectionState, phase: WorkflowPhase
    ) -> None:
        state.phase = phase
        voter_registry.register_voter(state, "owner", "alice")
        assert state.voter("alice").registered is True
