"""Voter record model.

A voter record exists conceptually for every actor: reading an actor that
was never registered and never voted yields the default record.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(frozen=True, eq=True)
class Voter:
    """Per-actor voting record.

    Attributes:
        registered: True once the owner registered the actor.
        has_voted: True once the actor cast its single vote.
        voted_proposal_index: Proposal the vote went to, None before voting.
    """

    registered: bool = field(default=False)
    has_voted: bool = field(default=False)
    voted_proposal_index: int | None = field(default=None)

    def __post_init__(self) -> None:
        """Validate voter record fields."""
        if self.has_voted != (self.voted_proposal_index is not None):
            raise ValueError("voted_proposal_index must be set exactly when has_voted is True")
        if self.voted_proposal_index is not None and self.voted_proposal_index < 0:
            raise ValueError("voted_proposal_index must be non-negative")

    def as_registered(self) -> Voter:
        """Return a copy of this record marked as registered."""
        return replace(self, registered=True)

    def with_vote(self, proposal_index: int) -> Voter:
        """Return a copy of this record holding a vote for proposal_index."""
        return replace(self, has_voted=True, voted_proposal_index=proposal_index)


UNREGISTERED_VOTER: Voter = Voter()
