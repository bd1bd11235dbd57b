"""Domain models for the election workflow."""

from ballotflow.domain.models.election_state import ActorId, ElectionState
from ballotflow.domain.models.proposal import Proposal
from ballotflow.domain.models.tally import TallyResult
from ballotflow.domain.models.voter import UNREGISTERED_VOTER, Voter
from ballotflow.domain.models.workflow import (
    INITIAL_PHASE,
    PHASE_ORDER,
    WorkflowPhase,
)

__all__: list[str] = [
    "ActorId",
    "ElectionState",
    "INITIAL_PHASE",
    "PHASE_ORDER",
    "Proposal",
    "TallyResult",
    "UNREGISTERED_VOTER",
    "Voter",
    "WorkflowPhase",
]
