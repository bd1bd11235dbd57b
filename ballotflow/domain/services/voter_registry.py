"""Voter registry domain rules.

Registration is owner-only and has no phase restriction. An actor whose
record already holds a vote cannot be registered, even if the vote was cast
without registration.
"""

from __future__ import annotations

from ballotflow.domain.errors.validation import (
    VoterAlreadyRegisteredError,
    VoterAlreadyVotedError,
)
from ballotflow.domain.events.election import VoterRegisteredEventPayload
from ballotflow.domain.models.election_state import ActorId, ElectionState
from ballotflow.domain.services.authorization_registry import (
    require_authorized,
    require_owner,
)


def register_voter(
    state: ElectionState, caller: ActorId, target: ActorId
) -> list[VoterRegisteredEventPayload]:
    """Register target as a voter.

    Args:
        state: Election state to mutate.
        caller: Must be the owner and whitelisted.
        target: Actor to register.

    Returns:
        The VoterRegistered notification.

    Raises:
        NotOwnerError: If caller is not the owner.
        NotWhitelistedError: If the owner has left the whitelist.
        VoterAlreadyRegisteredError: If target is already registered.
        VoterAlreadyVotedError: If target has already voted.
    """
    require_owner(state, caller, "register_voter")
    require_authorized(state, caller, "register_voter")

    record = state.voter(target)
    if record.registered:
        raise VoterAlreadyRegisteredError(target)
    if record.has_voted:
        raise VoterAlreadyVotedError(target)

    state.voters[target] = record.as_registered()
    state.registered_voters.append(target)
    return [VoterRegisteredEventPayload(actor=target)]
