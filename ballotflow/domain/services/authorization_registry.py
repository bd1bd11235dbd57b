"""Authorization registry domain rules.

The owner is an explicit field of ElectionState and is checked by guard
functions before any owner-only operation. The whitelist is a plain set:
single authorization is idempotent, bulk authorization refuses any target
that is already present and rejects the whole batch.
"""

from __future__ import annotations

from collections.abc import Iterable

from ballotflow.domain.errors.authorization import NotOwnerError, NotWhitelistedError
from ballotflow.domain.errors.validation import AlreadyAuthorizedError
from ballotflow.domain.events.election import AuthorizedEventPayload
from ballotflow.domain.models.election_state import ActorId, ElectionState


def is_authorized(state: ElectionState, actor: ActorId) -> bool:
    """Check whitelist membership."""
    return actor in state.whitelist


def require_owner(state: ElectionState, caller: ActorId, operation: str) -> None:
    """Guard an owner-only operation.

    Raises:
        NotOwnerError: If caller is not the owner.
    """
    if caller != state.owner:
        raise NotOwnerError(caller, operation)


def require_authorized(state: ElectionState, caller: ActorId, operation: str) -> None:
    """Guard a whitelist-gated operation.

    Raises:
        NotWhitelistedError: If caller is not whitelisted.
    """
    if caller not in state.whitelist:
        raise NotWhitelistedError(caller, operation)


def authorize(
    state: ElectionState, caller: ActorId, target: ActorId
) -> list[AuthorizedEventPayload]:
    """Add target to the whitelist on behalf of an authorized caller.

    Re-adding an existing member is not an error and still notifies.

    Args:
        state: Election state to mutate.
        caller: Actor requesting the change; must be whitelisted.
        target: Actor to add.

    Returns:
        The Authorized notification for target.

    Raises:
        NotWhitelistedError: If caller is not whitelisted.
    """
    require_authorized(state, caller, "authorize")
    state.whitelist.add(target)
    return [AuthorizedEventPayload(actor=target)]


def bulk_authorize(
    state: ElectionState, caller: ActorId, targets: Iterable[ActorId]
) -> list[AuthorizedEventPayload]:
    """Add several targets to the whitelist, all or nothing.

    Every target is checked before the whitelist is touched. A target
    listed twice in the same batch counts as already authorized on its
    second occurrence.

    Args:
        state: Election state to mutate.
        caller: Actor requesting the change; must be the owner.
        targets: Actors to add, in notification order.

    Returns:
        One Authorized notification per target, in order.

    Raises:
        NotOwnerError: If caller is not the owner.
        AlreadyAuthorizedError: If any target is already whitelisted.
    """
    require_owner(state, caller, "bulk_authorize")

    pending: list[ActorId] = []
    for target in targets:
        if target in state.whitelist or target in pending:
            raise AlreadyAuthorizedError(target)
        pending.append(target)

    state.whitelist.update(pending)
    return [AuthorizedEventPayload(actor=target) for target in pending]
