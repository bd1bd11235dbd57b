"""Bootstrap wiring helpers."""

from ballotflow.bootstrap.election import create_election_service

__all__: list[str] = ["create_election_service"]
