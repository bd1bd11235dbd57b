"""Proposal registry domain rules: proposal submission and vote casting.

Voting requires whitelist membership, not voter registration.
"""

from __future__ import annotations

from ballotflow.domain.errors.validation import (
    AlreadyVotedError,
    ProposalIndexOutOfRangeError,
)
from ballotflow.domain.events.election import (
    ProposalRegisteredEventPayload,
    VotedEventPayload,
)
from ballotflow.domain.models.election_state import ActorId, ElectionState
from ballotflow.domain.models.proposal import Proposal
from ballotflow.domain.models.workflow import WorkflowPhase
from ballotflow.domain.services.authorization_registry import require_authorized
from ballotflow.domain.services.workflow_state_machine import require_phase


def check_proposal_index(state: ElectionState, proposal_index: int) -> None:
    """Raise ProposalIndexOutOfRangeError unless the index addresses a proposal."""
    # bool is an int subclass; True must not address proposal 1
    if isinstance(proposal_index, bool) or not isinstance(proposal_index, int):
        raise ProposalIndexOutOfRangeError(proposal_index, len(state.proposals))
    if not 0 <= proposal_index < len(state.proposals):
        raise ProposalIndexOutOfRangeError(proposal_index, len(state.proposals))


def submit_proposal(
    state: ElectionState, caller: ActorId, description: str
) -> list[ProposalRegisteredEventPayload]:
    """Append a proposal during proposal registration.

    Args:
        state: Election state to mutate.
        caller: Must be whitelisted.
        description: Proposal text.

    Returns:
        The ProposalRegistered notification carrying the new index.

    Raises:
        NotWhitelistedError: If caller is not whitelisted.
        PhaseRequiredError: Outside PROPOSALS_REGISTRATION_STARTED.
    """
    require_authorized(state, caller, "submit_proposal")
    require_phase(state, WorkflowPhase.PROPOSALS_REGISTRATION_STARTED, "submit_proposal")

    state.proposals.append(Proposal(description=description))
    return [ProposalRegisteredEventPayload(proposal_index=len(state.proposals) - 1)]


def cast_vote(
    state: ElectionState, caller: ActorId, proposal_index: int
) -> list[VotedEventPayload]:
    """Count caller's single vote for a proposal.

    Args:
        state: Election state to mutate.
        caller: Must be whitelisted; registration is not checked.
        proposal_index: Index of the chosen proposal.

    Returns:
        The Voted notification.

    Raises:
        NotWhitelistedError: If caller is not whitelisted.
        PhaseRequiredError: Outside VOTING_SESSION_STARTED.
        AlreadyVotedError: If caller has voted before.
        ProposalIndexOutOfRangeError: If the index addresses no proposal.
    """
    require_authorized(state, caller, "cast_vote")
    require_phase(state, WorkflowPhase.VOTING_SESSION_STARTED, "cast_vote")

    record = state.voter(caller)
    if record.has_voted:
        raise AlreadyVotedError(caller, record.voted_proposal_index)
    check_proposal_index(state, proposal_index)

    state.voters[caller] = record.with_vote(proposal_index)
    state.proposals[proposal_index] = state.proposals[proposal_index].with_added_vote()
    return [VotedEventPayload(actor=caller, proposal_index=proposal_index)]
