"""Election service - the transaction boundary of the election workflow.

Every public operation runs under one lock and follows the same discipline:
load the committed ElectionState, clone it, apply the domain rule to the
clone, save the clone, then emit the rule's notifications. A rule that
raises leaves the committed state untouched and emits nothing.

Caller identity is supplied by the hosting environment as an opaque actor
id; this service never authenticates it.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

import structlog

from ballotflow.application.dtos.election import ElectionSnapshot
from ballotflow.application.ports.election_event_emitter import ElectionEventEmitterPort
from ballotflow.application.ports.election_state_repository import (
    ElectionStateRepositoryPort,
)
from ballotflow.application.services.base import LoggingMixin
from ballotflow.domain.events.election import ElectionEventPayload
from ballotflow.domain.exceptions import BallotflowError
from ballotflow.domain.models.election_state import ActorId, ElectionState
from ballotflow.domain.models.proposal import Proposal
from ballotflow.domain.models.tally import TallyResult
from ballotflow.domain.models.voter import Voter
from ballotflow.domain.models.workflow import WorkflowPhase
from ballotflow.domain.services import (
    authorization_registry,
    proposal_registry,
    tally_engine,
    voter_registry,
    workflow_state_machine,
)

T = TypeVar("T")

Rule = Callable[[ElectionState], Sequence[ElectionEventPayload]]


class ElectionService(LoggingMixin):
    """Runs election operations as serialized all-or-nothing transactions.

    Example:
        >>> from ballotflow.infrastructure.stubs import (
        ...     ElectionEventEmitterStub,
        ...     ElectionStateRepositoryStub,
        ... )
        >>> emitter = ElectionEventEmitterStub()
        >>> service = ElectionService(ElectionStateRepositoryStub("owner"), emitter)
        >>> service.authorize("owner", "alice")
        >>> service.is_authorized("alice")
        True
    """

    def __init__(
        self,
        repository: ElectionStateRepositoryPort,
        event_emitter: ElectionEventEmitterPort,
    ) -> None:
        """Initialize the election service.

        Args:
            repository: Store holding the committed election state.
            event_emitter: Observer notified after each committed operation.
        """
        self._repository = repository
        self._event_emitter = event_emitter
        self._lock = threading.RLock()
        self._init_logger()

    # =========================================================================
    # Authorization registry
    # =========================================================================

    def authorize(self, caller: ActorId, target: ActorId) -> None:
        """Whitelist target; idempotent, caller must be whitelisted."""
        self._execute(
            "authorize",
            caller,
            lambda state: authorization_registry.authorize(state, caller, target),
            target=target,
        )

    def bulk_authorize(self, caller: ActorId, targets: Iterable[ActorId]) -> None:
        """Whitelist every target at once; owner-only, rejects any duplicate."""
        batch = list(targets)
        self._execute(
            "bulk_authorize",
            caller,
            lambda state: authorization_registry.bulk_authorize(state, caller, batch),
            target_count=len(batch),
        )

    # =========================================================================
    # Voter registry
    # =========================================================================

    def register_voter(self, caller: ActorId, target: ActorId) -> None:
        """Register target as a voter; owner-only, any phase."""
        self._execute(
            "register_voter",
            caller,
            lambda state: voter_registry.register_voter(state, caller, target),
            target=target,
        )

    # =========================================================================
    # Workflow transitions
    # =========================================================================

    def start_register_session(self, caller: ActorId) -> None:
        self._advance("start_register_session", caller)

    def end_proposal_registration(self, caller: ActorId) -> None:
        self._advance("end_proposal_registration", caller)

    def start_voting_session(self, caller: ActorId) -> None:
        self._advance("start_voting_session", caller)

    def end_voting_session(self, caller: ActorId) -> None:
        self._advance("end_voting_session", caller)

    def tally_votes(self, caller: ActorId) -> None:
        self._advance("tally_votes", caller)

    # =========================================================================
    # Proposal registry
    # =========================================================================

    def submit_proposal(self, caller: ActorId, description: str) -> int:
        """Submit a proposal and return its index."""
        events = self._execute(
            "submit_proposal",
            caller,
            lambda state: proposal_registry.submit_proposal(state, caller, description),
        )
        return events[0].proposal_index

    def cast_vote(self, caller: ActorId, proposal_index: int) -> None:
        """Count caller's single vote for the proposal at proposal_index."""
        self._execute(
            "cast_vote",
            caller,
            lambda state: proposal_registry.cast_vote(state, caller, proposal_index),
            proposal_index=proposal_index,
        )

    # =========================================================================
    # Tally engine
    # =========================================================================

    def compute_winners(self) -> TallyResult:
        """Compute the winning proposals; only valid once votes are tallied."""
        return self._query("compute_winners", tally_engine.compute_winners)

    def reset(self, caller: ActorId) -> None:
        """Wipe proposals and registered voters, back to voter registration."""
        self._execute(
            "reset",
            caller,
            lambda state: tally_engine.reset(state, caller),
        )

    # =========================================================================
    # Query surface
    # =========================================================================

    def current_phase(self) -> WorkflowPhase:
        return self._query("current_phase", lambda state: state.phase)

    def is_authorized(self, actor: ActorId) -> bool:
        return self._query(
            "is_authorized",
            lambda state: authorization_registry.is_authorized(state, actor),
        )

    def get_voter(self, actor: ActorId) -> Voter:
        """Get actor's voter record; unknown actors read as unregistered."""
        return self._query("get_voter", lambda state: state.voter(actor))

    def get_proposal(self, proposal_index: int) -> Proposal:
        """Get one proposal by index.

        Raises:
            ProposalIndexOutOfRangeError: If no proposal has this index.
        """

        def read(state: ElectionState) -> Proposal:
            proposal_registry.check_proposal_index(state, proposal_index)
            return state.proposals[proposal_index]

        return self._query("get_proposal", read)

    def list_proposals(self) -> list[Proposal]:
        return self._query("list_proposals", lambda state: list(state.proposals))

    def snapshot(self) -> ElectionSnapshot:
        """Export the committed state as a pydantic read model."""
        return self._query("snapshot", ElectionSnapshot.from_state)

    # =========================================================================
    # Transaction plumbing
    # =========================================================================

    def _advance(self, operation: str, caller: ActorId) -> None:
        self._execute(
            operation,
            caller,
            lambda state: workflow_state_machine.advance(state, caller, operation),
        )

    def _execute(
        self,
        operation: str,
        caller: ActorId,
        rule: Rule,
        **context: object,
    ) -> Sequence[ElectionEventPayload]:
        """Apply rule to a clone of the state and commit it if it succeeds.

        Args:
            operation: Operation name for logging.
            caller: Actor invoking the operation.
            rule: Domain rule mutating the clone and returning notifications.
            **context: Extra log context.

        Returns:
            The notifications emitted for the committed operation.

        Raises:
            BallotflowError: Whatever the rule raised; nothing is committed.
        """
        log = self._log_operation(operation, caller=caller, **context)
        with self._lock:
            working = self._repository.load().clone()
            try:
                events = rule(working)
            except BallotflowError as exc:
                log.warning(
                    "operation_rejected",
                    error_type=type(exc).__name__,
                    reason=str(exc),
                )
                raise

            self._repository.save(working)
            log.info(
                "operation_committed",
                phase=working.phase.value,
                event_count=len(events),
            )
            self._dispatch(events, log)
        return events

    def _query(self, operation: str, read: Callable[[ElectionState], T]) -> T:
        with self._lock:
            try:
                return read(self._repository.load())
            except BallotflowError as exc:
                self._log_operation(operation).warning(
                    "query_rejected",
                    error_type=type(exc).__name__,
                    reason=str(exc),
                )
                raise

    def _dispatch(
        self,
        events: Sequence[ElectionEventPayload],
        log: structlog.BoundLogger,
    ) -> None:
        """Emit committed notifications; delivery failures never undo a commit."""
        for event in events:
            try:
                self._event_emitter.emit(event)
            except Exception:
                log.exception("event_emission_failed", event_type=event.event_type)
