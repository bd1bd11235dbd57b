"""Workflow phase errors.

This module defines errors for operations attempted outside their required
workflow phase, and for transitions that skip or regress the phase order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ballotflow.domain.exceptions import BallotflowError

if TYPE_CHECKING:
    from ballotflow.domain.models.workflow import WorkflowPhase


class StateError(BallotflowError):
    """Raised when an operation is invoked outside its required workflow phase."""


class InvalidPhaseTransitionError(StateError):
    """Raised when a forward transition is attempted from the wrong phase.

    The workflow only ever moves one step forward, so every transition
    operation names exactly one phase it may start from.

    Attributes:
        current: Phase the election is in.
        expected: Phase the transition must start from.
        target: Phase the transition would have moved to.
    """

    def __init__(
        self,
        current: WorkflowPhase,
        expected: WorkflowPhase,
        target: WorkflowPhase,
    ) -> None:
        """Initialize invalid phase transition error.

        Args:
            current: Current workflow phase.
            expected: Required starting phase for the transition.
            target: Attempted target phase.
        """
        self.current = current
        self.expected = expected
        self.target = target
        super().__init__(
            f"Invalid phase transition: {current.value} -> {target.value}. "
            f"Transition requires phase {expected.value}"
        )


class PhaseRequiredError(StateError):
    """Raised when a phase-gated operation runs in any other phase.

    Attributes:
        operation: Name of the rejected operation.
        current: Phase the election is in.
        required: Phase the operation needs.
    """

    def __init__(
        self,
        operation: str,
        current: WorkflowPhase,
        required: WorkflowPhase,
    ) -> None:
        self.operation = operation
        self.current = current
        self.required = required
        super().__init__(
            f"{operation} requires phase {required.value}, "
            f"election is in {current.value}"
        )
