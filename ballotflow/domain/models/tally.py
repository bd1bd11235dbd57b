"""Tally result model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, eq=True)
class TallyResult:
    """Winning proposals of a tallied election.

    Attributes:
        winning_indices: Indices of every proposal reaching the top count,
            in index order. Empty when no proposal received a vote.
        winning_vote_count: The top vote count, 0 when nobody voted.
    """

    winning_indices: tuple[int, ...]
    winning_vote_count: int

    @property
    def is_tie(self) -> bool:
        """True when more than one proposal shares the top count."""
        return len(self.winning_indices) > 1
