"""Domain precondition errors.

Duplicate registration, double voting, out-of-range proposal indices and
duplicate whitelist entries in a bulk add all raise a subclass of
ValidationError.
"""

from __future__ import annotations

from ballotflow.domain.exceptions import BallotflowError


class ValidationError(BallotflowError):
    """Raised when a domain precondition is violated."""


class VoterAlreadyRegisteredError(ValidationError):
    """Raised when registering an actor that is already a registered voter."""

    def __init__(self, actor: str) -> None:
        self.actor = actor
        super().__init__(f"Voter {actor!r} is already registered")


class VoterAlreadyVotedError(ValidationError):
    """Raised when registering an actor whose record already holds a vote."""

    def __init__(self, actor: str) -> None:
        self.actor = actor
        super().__init__(f"Voter {actor!r} has already voted and cannot be registered")


class AlreadyVotedError(ValidationError):
    """Raised on a second cast_vote by the same actor.

    Attributes:
        actor: The voter.
        voted_proposal_index: Index of the proposal the first vote went to.
    """

    def __init__(self, actor: str, voted_proposal_index: int | None) -> None:
        self.actor = actor
        self.voted_proposal_index = voted_proposal_index
        super().__init__(
            f"Voter {actor!r} has already voted for proposal {voted_proposal_index}"
        )


class ProposalIndexOutOfRangeError(ValidationError):
    """Raised when a proposal index does not address an existing proposal."""

    def __init__(self, index: int, proposal_count: int) -> None:
        self.index = index
        self.proposal_count = proposal_count
        super().__init__(
            f"Proposal index {index} out of range; {proposal_count} proposal(s) registered"
        )


class AlreadyAuthorizedError(ValidationError):
    """Raised by bulk authorization when a target is already whitelisted.

    The whole batch is rejected, including targets listed before the
    offending one.
    """

    def __init__(self, actor: str) -> None:
        self.actor = actor
        super().__init__(
            f"Actor {actor!r} is already authorized; bulk authorization aborted"
        )
