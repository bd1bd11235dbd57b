"""Configuration for ballotflow deployments."""

from ballotflow.config.election_config import ElectionConfig

__all__: list[str] = ["ElectionConfig"]
