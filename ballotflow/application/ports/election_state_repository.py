"""Election State Repository port.

The store that holds ElectionState between operations. The application
service loads the state, works on a clone and saves the clone only when the
operation succeeded, so adapters never see a partially applied operation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ballotflow.domain.models.election_state import ElectionState


class ElectionStateRepositoryPort(ABC):
    """Abstract interface for election state persistence."""

    @abstractmethod
    def load(self) -> ElectionState:
        """Load the committed election state.

        Returns:
            The state as left by the last committed operation.
        """
        ...

    @abstractmethod
    def save(self, state: ElectionState) -> None:
        """Commit a new election state, replacing the previous one.

        Args:
            state: The state to commit.
        """
        ...
