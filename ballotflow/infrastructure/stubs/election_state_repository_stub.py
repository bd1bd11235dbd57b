"""In-memory implementation of ElectionStateRepositoryPort.

Holds one committed ElectionState. load() hands out a clone so callers can
never mutate the committed state without going through save().

Usage in tests:
    repository = ElectionStateRepositoryStub(owner="owner")
    service = ElectionService(repository, ElectionEventEmitterStub())

    service.authorize("owner", "alice")

    assert "alice" in repository.committed.whitelist
    assert repository.save_count == 1
"""

from __future__ import annotations

from ballotflow.application.ports.election_state_repository import (
    ElectionStateRepositoryPort,
)
from ballotflow.domain.models.election_state import ElectionState


class ElectionStateRepositoryStub(ElectionStateRepositoryPort):
    """In-memory election state store.

    Attributes:
        committed: The last saved state.
        save_count: Number of successful saves, for commit assertions.
    """

    def __init__(
        self,
        owner: str | None = None,
        *,
        initial_state: ElectionState | None = None,
    ) -> None:
        """Initialize the store with a fresh election or a given state.

        Args:
            owner: Owner of a freshly created election.
            initial_state: Existing state to start from instead.
        """
        if initial_state is None:
            if owner is None:
                raise ValueError("Either owner or initial_state is required")
            initial_state = ElectionState.create(owner)
        self.committed: ElectionState = initial_state.clone()
        self.save_count: int = 0

    def load(self) -> ElectionState:
        return self.committed.clone()

    def save(self, state: ElectionState) -> None:
        self.committed = state.clone()
        self.save_count += 1
