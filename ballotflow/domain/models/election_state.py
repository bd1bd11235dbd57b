"""Election state aggregate.

ElectionState is the single mutable struct holding everything the election
knows: the owner, the whitelist, voter records, the registered-voter index,
proposals and the current phase. The application layer loads it, works on a
clone, and commits the clone only when an operation succeeds.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ballotflow.domain.models.proposal import Proposal
from ballotflow.domain.models.voter import UNREGISTERED_VOTER, Voter
from ballotflow.domain.models.workflow import INITIAL_PHASE, WorkflowPhase

# Opaque caller identifier supplied by the identity context
ActorId = str


@dataclass
class ElectionState:
    """All state of one election.

    Attributes:
        owner: The administrator, fixed at creation.
        whitelist: Actors allowed to run whitelist-gated operations.
        voters: Voter records keyed by actor. Missing keys read as the
            default unregistered record.
        registered_voters: Registration order of voters, without duplicates.
        proposals: Proposals in insertion order.
        phase: Current workflow phase.
    """

    owner: ActorId
    whitelist: set[ActorId] = field(default_factory=set)
    voters: dict[ActorId, Voter] = field(default_factory=dict)
    registered_voters: list[ActorId] = field(default_factory=list)
    proposals: list[Proposal] = field(default_factory=list)
    phase: WorkflowPhase = field(default=INITIAL_PHASE)

    @classmethod
    def create(cls, owner: ActorId) -> ElectionState:
        """Create a fresh election with the owner already whitelisted.

        Args:
            owner: The administrator's actor id.

        Returns:
            New state in the initial phase.
        """
        if not owner:
            raise ValueError("owner must be a non-empty actor id")
        return cls(owner=owner, whitelist={owner})

    def voter(self, actor: ActorId) -> Voter:
        """Get the voter record for actor, defaulting to unregistered."""
        return self.voters.get(actor, UNREGISTERED_VOTER)

    def clone(self) -> ElectionState:
        """Return an independent copy suitable for a tentative transaction.

        Voter and Proposal records are frozen, so copying the containers is
        enough to isolate the clone.
        """
        return ElectionState(
            owner=self.owner,
            whitelist=set(self.whitelist),
            voters=dict(self.voters),
            registered_voters=list(self.registered_voters),
            proposals=list(self.proposals),
            phase=self.phase,
        )
