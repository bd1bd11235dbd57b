"""Domain events emitted to external observers after committed operations."""

from ballotflow.domain.events.election import (
    AUTHORIZED_EVENT_TYPE,
    ELECTION_RESET_EVENT_TYPE,
    PHASE_CHANGED_EVENT_TYPE,
    PROPOSAL_REGISTERED_EVENT_TYPE,
    VOTED_EVENT_TYPE,
    VOTER_REGISTERED_EVENT_TYPE,
    AuthorizedEventPayload,
    ElectionEventPayload,
    ElectionResetEventPayload,
    PhaseChangedEventPayload,
    ProposalRegisteredEventPayload,
    VotedEventPayload,
    VoterRegisteredEventPayload,
)

__all__: list[str] = [
    "AUTHORIZED_EVENT_TYPE",
    "ELECTION_RESET_EVENT_TYPE",
    "PHASE_CHANGED_EVENT_TYPE",
    "PROPOSAL_REGISTERED_EVENT_TYPE",
    "VOTED_EVENT_TYPE",
    "VOTER_REGISTERED_EVENT_TYPE",
    "AuthorizedEventPayload",
    "ElectionEventPayload",
    "ElectionResetEventPayload",
    "PhaseChangedEventPayload",
    "ProposalRegisteredEventPayload",
    "VotedEventPayload",
    "VoterRegisteredEventPayload",
]
