"""Authorization errors for owner-only and whitelist-gated operations.

Raised before any state is touched, so a rejected caller never leaves a
trace in the election state.
"""

from __future__ import annotations

from ballotflow.domain.exceptions import BallotflowError


class AuthorizationError(BallotflowError):
    """Raised when the caller lacks the role or whitelist membership required.

    Attributes:
        actor: The rejected caller.
        operation: Name of the operation that was attempted.
    """

    def __init__(self, actor: str, operation: str, message: str) -> None:
        self.actor = actor
        self.operation = operation
        super().__init__(message)


class NotOwnerError(AuthorizationError):
    """Raised when a non-owner invokes an owner-only operation."""

    def __init__(self, actor: str, operation: str) -> None:
        super().__init__(
            actor,
            operation,
            f"Caller {actor!r} is not the owner; {operation} is owner-only",
        )


class NotWhitelistedError(AuthorizationError):
    """Raised when a caller outside the whitelist invokes a gated operation."""

    def __init__(self, actor: str, operation: str) -> None:
        super().__init__(
            actor,
            operation,
            f"Caller {actor!r} is not whitelisted; {operation} requires authorization",
        )
