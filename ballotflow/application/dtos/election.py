"""Election read models for the queryable state surface.

Pydantic models exported by ElectionService.snapshot() so callers can
serialize the election (phase, whitelist, proposals, voter records, and the
winner set once votes are tallied) without reaching into domain objects.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ballotflow.domain.models.election_state import ElectionState
from ballotflow.domain.models.tally import TallyResult
from ballotflow.domain.models.workflow import WorkflowPhase
from ballotflow.domain.services.tally_engine import scan_winners


class ProposalView(BaseModel):
    """A proposal with its index."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=0, description="Zero-based insertion index")
    description: str = Field(..., description="Proposal text")
    vote_count: int = Field(..., ge=0, description="Votes received")


class VoterRecordView(BaseModel):
    """A voter record keyed by actor."""

    model_config = ConfigDict(frozen=True)

    actor: str
    registered: bool
    has_voted: bool
    voted_proposal_index: int | None = None


class TallyResultView(BaseModel):
    """Serialized winner set."""

    model_config = ConfigDict(frozen=True)

    winning_indices: list[int] = Field(default_factory=list)
    winning_vote_count: int = Field(0, ge=0)

    @classmethod
    def from_result(cls, result: TallyResult) -> TallyResultView:
        return cls(
            winning_indices=list(result.winning_indices),
            winning_vote_count=result.winning_vote_count,
        )


class ElectionSnapshot(BaseModel):
    """Point-in-time view of the whole election.

    Attributes:
        owner: The administrator.
        phase: Current workflow phase value.
        whitelist: Whitelisted actors, sorted.
        proposals: Proposals in index order.
        voters: Records of every actor holding a non-default record,
            registered voters first in registration order.
        tally: Winner set, present only in the VotesTallied phase.
    """

    model_config = ConfigDict(frozen=True)

    owner: str
    phase: str
    whitelist: list[str] = Field(default_factory=list)
    proposals: list[ProposalView] = Field(default_factory=list)
    voters: list[VoterRecordView] = Field(default_factory=list)
    tally: TallyResultView | None = None

    @classmethod
    def from_state(cls, state: ElectionState) -> ElectionSnapshot:
        """Build a snapshot from a committed state."""
        ordered = list(state.registered_voters)
        ordered += sorted(actor for actor in state.voters if actor not in ordered)
        tally = None
        if state.phase is WorkflowPhase.VOTES_TALLIED:
            tally = TallyResultView.from_result(scan_winners(state.proposals))
        return cls(
            owner=state.owner,
            phase=state.phase.value,
            whitelist=sorted(state.whitelist),
            proposals=[
                ProposalView(
                    index=index,
                    description=proposal.description,
                    vote_count=proposal.vote_count,
                )
                for index, proposal in enumerate(state.proposals)
            ],
            voters=[
                VoterRecordView(
                    actor=actor,
                    registered=state.voter(actor).registered,
                    has_voted=state.voter(actor).has_voted,
                    voted_proposal_index=state.voter(actor).voted_proposal_index,
                )
                for actor in ordered
            ],
            tally=tally,
        )
