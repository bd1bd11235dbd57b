"""Election event payloads for notifications to external observers.

This module defines the payloads emitted after a committed operation:
- AuthorizedEventPayload: An actor joined the whitelist
- VoterRegisteredEventPayload: The owner registered a voter
- ProposalRegisteredEventPayload: A proposal was appended
- PhaseChangedEventPayload: The workflow advanced one phase
- VotedEventPayload: A vote was counted
- ElectionResetEventPayload: The owner wiped proposals and voters

Payloads are frozen and carry no behavior beyond serialization. The
application layer emits them only after the operation's state is saved.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Union

from ballotflow.domain.models.workflow import WorkflowPhase

# Event type constants for election notifications
AUTHORIZED_EVENT_TYPE: str = "election.whitelist.authorized"
VOTER_REGISTERED_EVENT_TYPE: str = "election.voter.registered"
PROPOSAL_REGISTERED_EVENT_TYPE: str = "election.proposal.registered"
PHASE_CHANGED_EVENT_TYPE: str = "election.workflow.phase_changed"
VOTED_EVENT_TYPE: str = "election.vote.cast"
ELECTION_RESET_EVENT_TYPE: str = "election.workflow.reset"


@dataclass(frozen=True, eq=True)
class AuthorizedEventPayload:
    """Payload emitted when an actor is added to the whitelist.

    Emitted by single authorization even when the actor was already a
    member, and once per target by bulk authorization.

    Attributes:
        actor: The authorized actor.
    """

    event_type: ClassVar[str] = AUTHORIZED_EVENT_TYPE

    actor: str

    def to_dict(self) -> dict[str, Any]:
        return {"actor": self.actor}


@dataclass(frozen=True, eq=True)
class VoterRegisteredEventPayload:
    """Payload emitted when the owner registers a voter.

    Attributes:
        actor: The newly registered voter.
    """

    event_type: ClassVar[str] = VOTER_REGISTERED_EVENT_TYPE

    actor: str

    def to_dict(self) -> dict[str, Any]:
        return {"actor": self.actor}


@dataclass(frozen=True, eq=True)
class ProposalRegisteredEventPayload:
    """Payload emitted when a proposal is appended.

    Attributes:
        proposal_index: Zero-based insertion index of the new proposal.
    """

    event_type: ClassVar[str] = PROPOSAL_REGISTERED_EVENT_TYPE

    proposal_index: int

    def to_dict(self) -> dict[str, Any]:
        return {"proposal_index": self.proposal_index}


@dataclass(frozen=True, eq=True)
class PhaseChangedEventPayload:
    """Payload emitted on every forward workflow transition.

    Attributes:
        previous_phase: Phase before the transition.
        new_phase: Phase after the transition.
    """

    event_type: ClassVar[str] = PHASE_CHANGED_EVENT_TYPE

    previous_phase: WorkflowPhase
    new_phase: WorkflowPhase

    def to_dict(self) -> dict[str, Any]:
        return {
            "previous_phase": self.previous_phase.value,
            "new_phase": self.new_phase.value,
        }


@dataclass(frozen=True, eq=True)
class VotedEventPayload:
    """Payload emitted when a vote is counted.

    Attributes:
        actor: The voter.
        proposal_index: Proposal the vote went to.
    """

    event_type: ClassVar[str] = VOTED_EVENT_TYPE

    actor: str
    proposal_index: int

    def to_dict(self) -> dict[str, Any]:
        return {"actor": self.actor, "proposal_index": self.proposal_index}


@dataclass(frozen=True, eq=True)
class ElectionResetEventPayload:
    """Payload emitted when the owner resets the election.

    Attributes:
        previous_phase: Phase the election was in before the reset.
        cleared_voters: Number of registered voter records cleared.
        cleared_proposals: Number of proposals removed.
    """

    event_type: ClassVar[str] = ELECTION_RESET_EVENT_TYPE

    previous_phase: WorkflowPhase
    cleared_voters: int
    cleared_proposals: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "previous_phase": self.previous_phase.value,
            "cleared_voters": self.cleared_voters,
            "cleared_proposals": self.cleared_proposals,
        }


ElectionEventPayload = Union[
    AuthorizedEventPayload,
    VoterRegisteredEventPayload,
    ProposalRegisteredEventPayload,
    PhaseChangedEventPayload,
    VotedEventPayload,
    ElectionResetEventPayload,
]
