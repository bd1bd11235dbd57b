"""Domain errors for the election workflow.

Three families, all rooted at BallotflowError:
- AuthorizationError: caller lacks the owner role or whitelist membership
- StateError: operation invoked outside its workflow phase
- ValidationError: duplicate registration, double vote, bad index,
  duplicate whitelist entry in a bulk add
"""

from ballotflow.domain.errors.authorization import (
    AuthorizationError,
    NotOwnerError,
    NotWhitelistedError,
)
from ballotflow.domain.errors.validation import (
    AlreadyAuthorizedError,
    AlreadyVotedError,
    ProposalIndexOutOfRangeError,
    ValidationError,
    VoterAlreadyRegisteredError,
    VoterAlreadyVotedError,
)
from ballotflow.domain.errors.workflow import (
    InvalidPhaseTransitionError,
    PhaseRequiredError,
    StateError,
)

__all__: list[str] = [
    "AlreadyAuthorizedError",
    "AlreadyVotedError",
    "AuthorizationError",
    "InvalidPhaseTransitionError",
    "NotOwnerError",
    "NotWhitelistedError",
    "PhaseRequiredError",
    "ProposalIndexOutOfRangeError",
    "StateError",
    "ValidationError",
    "VoterAlreadyRegisteredError",
    "VoterAlreadyVotedError",
]
