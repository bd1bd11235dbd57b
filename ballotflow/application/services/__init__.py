"""Application services."""

from ballotflow.application.services.election_service import ElectionService

__all__: list[str] = ["ElectionService"]
