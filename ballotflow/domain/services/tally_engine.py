"""Tally engine domain rules: winner computation and election reset.

Winner scan (index order, running best starts at 0):
    count > best                  -> winners = [index], best = count
    count == best and best > 0    -> winners.append(index)

A proposal with zero votes can therefore never win: when nobody voted the
result is ([], 0).
"""

from __future__ import annotations

from collections.abc import Sequence

from ballotflow.domain.events.election import ElectionResetEventPayload
from ballotflow.domain.models.election_state import ActorId, ElectionState
from ballotflow.domain.models.proposal import Proposal
from ballotflow.domain.models.tally import TallyResult
from ballotflow.domain.models.workflow import INITIAL_PHASE, WorkflowPhase
from ballotflow.domain.services.authorization_registry import require_owner
from ballotflow.domain.services.workflow_state_machine import require_phase


def scan_winners(proposals: Sequence[Proposal]) -> TallyResult:
    """Scan proposals for the top vote count and every index reaching it."""
    best = 0
    winners: list[int] = []
    for index, proposal in enumerate(proposals):
        if proposal.vote_count > best:
            winners = [index]
            best = proposal.vote_count
        elif proposal.vote_count == best and best > 0:
            winners.append(index)
    return TallyResult(winning_indices=tuple(winners), winning_vote_count=best)


def compute_winners(state: ElectionState) -> TallyResult:
    """Compute winners of a tallied election.

    Raises:
        PhaseRequiredError: Before VOTES_TALLIED.
    """
    require_phase(state, WorkflowPhase.VOTES_TALLIED, "compute_winners")
    return scan_winners(state.proposals)


def reset(state: ElectionState, caller: ActorId) -> list[ElectionResetEventPayload]:
    """Return the election to its initial phase, keeping the whitelist.

    Only voters listed in the registered-voter index are cleared. A record
    created by voting without registration survives the reset.

    Args:
        state: Election state to mutate.
        caller: Must be the owner.

    Returns:
        The ElectionReset notification.

    Raises:
        NotOwnerError: If caller is not the owner.
    """
    require_owner(state, caller, "reset")

    event = ElectionResetEventPayload(
        previous_phase=state.phase,
        cleared_voters=len(state.registered_voters),
        cleared_proposals=len(state.proposals),
    )
    state.phase = INITIAL_PHASE
    state.proposals.clear()
    for actor in state.registered_voters:
        state.voters.pop(actor, None)
    state.registered_voters.clear()
    return [event]
