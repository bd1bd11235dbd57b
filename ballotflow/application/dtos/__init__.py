"""Application DTOs - pydantic read models of the election state."""

from ballotflow.application.dtos.election import (
    ElectionSnapshot,
    ProposalView,
    TallyResultView,
    VoterRecordView,
)

__all__: list[str] = [
    "ElectionSnapshot",
    "ProposalView",
    "TallyResultView",
    "VoterRecordView",
]
