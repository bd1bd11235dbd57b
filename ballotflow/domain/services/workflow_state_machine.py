"""Workflow state machine domain rules.

Every forward transition is owner-only and must start from the exact
preceding phase. Phase-gated operations call require_phase before touching
any registry.
"""

from __future__ import annotations

from typing import cast

from ballotflow.domain.errors.workflow import (
    InvalidPhaseTransitionError,
    PhaseRequiredError,
)
from ballotflow.domain.events.election import PhaseChangedEventPayload
from ballotflow.domain.models.election_state import ActorId, ElectionState
from ballotflow.domain.models.workflow import PHASE_ORDER, WorkflowPhase
from ballotflow.domain.services.authorization_registry import require_owner

# Forward transition operations, one per phase that can advance, in workflow order
TRANSITION_OPERATIONS: tuple[str, ...] = (
    "start_register_session",
    "end_proposal_registration",
    "start_voting_session",
    "end_voting_session",
    "tally_votes",
)

# Transition operation name -> (required phase, target phase)
TRANSITIONS: dict[str, tuple[WorkflowPhase, WorkflowPhase]] = {
    operation: (phase, cast(WorkflowPhase, phase.next_phase()))
    for operation, phase in zip(TRANSITION_OPERATIONS, PHASE_ORDER)
}


def require_phase(
    state: ElectionState, required: WorkflowPhase, operation: str
) -> None:
    """Guard a phase-gated operation.

    Raises:
        PhaseRequiredError: If the election is not in the required phase.
    """
    if state.phase is not required:
        raise PhaseRequiredError(operation, state.phase, required)


def advance(
    state: ElectionState, caller: ActorId, operation: str
) -> list[PhaseChangedEventPayload]:
    """Run the named forward transition.

    Args:
        state: Election state to mutate.
        caller: Actor requesting the transition; must be the owner.
        operation: One of the TRANSITIONS keys.

    Returns:
        The PhaseChanged notification.

    Raises:
        NotOwnerError: If caller is not the owner.
        InvalidPhaseTransitionError: If the election is not in the phase
            the transition starts from.
    """
    expected, target = TRANSITIONS[operation]
    require_owner(state, caller, operation)
    if state.phase is not expected:
        raise InvalidPhaseTransitionError(state.phase, expected, target)

    previous = state.phase
    state.phase = target
    return [PhaseChangedEventPayload(previous_phase=previous, new_phase=target)]
