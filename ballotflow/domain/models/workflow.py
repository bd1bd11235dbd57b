"""Workflow phase model for the election state machine.

State Machine (strictly linear, one step at a time):
    REGISTERING_VOTERS
        -> PROPOSALS_REGISTRATION_STARTED   (start_register_session)
        -> PROPOSALS_REGISTRATION_ENDED     (end_proposal_registration)
        -> VOTING_SESSION_STARTED           (start_voting_session)
        -> VOTING_SESSION_ENDED             (end_voting_session)
        -> VOTES_TALLIED                    (tally_votes)

No phase is terminal: reset returns any phase to REGISTERING_VOTERS.
"""

from __future__ import annotations

from enum import Enum


class WorkflowPhase(Enum):
    """Phase of the election workflow.

    Phases:
        REGISTERING_VOTERS: Initial phase, owner registers voters
        PROPOSALS_REGISTRATION_STARTED: Whitelisted actors submit proposals
        PROPOSALS_REGISTRATION_ENDED: Proposal list is frozen
        VOTING_SESSION_STARTED: Whitelisted actors cast votes
        VOTING_SESSION_ENDED: Votes are frozen
        VOTES_TALLIED: Winners can be computed
    """

    REGISTERING_VOTERS = "RegisteringVoters"
    PROPOSALS_REGISTRATION_STARTED = "ProposalsRegistrationStarted"
    PROPOSALS_REGISTRATION_ENDED = "ProposalsRegistrationEnded"
    VOTING_SESSION_STARTED = "VotingSessionStarted"
    VOTING_SESSION_ENDED = "VotingSessionEnded"
    VOTES_TALLIED = "VotesTallied"

    def next_phase(self) -> WorkflowPhase | None:
        """Get the single phase this phase may advance to.

        Returns:
            The following phase, or None for VOTES_TALLIED.
        """
        return PHASE_SUCCESSOR.get(self)


PHASE_ORDER: tuple[WorkflowPhase, ...] = tuple(WorkflowPhase)

INITIAL_PHASE: WorkflowPhase = WorkflowPhase.REGISTERING_VOTERS

# Each phase maps to the only phase it may advance to
PHASE_SUCCESSOR: dict[WorkflowPhase, WorkflowPhase] = {
    current: following for current, following in zip(PHASE_ORDER, PHASE_ORDER[1:])
}
