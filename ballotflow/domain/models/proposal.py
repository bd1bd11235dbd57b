"""Proposal model. Proposals are identified by their insertion index."""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(frozen=True, eq=True)
class Proposal:
    """A proposal competing in the election.

    Attributes:
        description: Free text submitted by a whitelisted actor.
        vote_count: Votes received so far.
    """

    description: str
    vote_count: int = field(default=0)

    def __post_init__(self) -> None:
        if self.vote_count < 0:
            raise ValueError("vote_count must be non-negative")

    def with_added_vote(self) -> Proposal:
        """Return a copy of this proposal with one more vote."""
        return replace(self, vote_count=self.vote_count + 1)
