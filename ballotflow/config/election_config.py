"""Election configuration with environment variable overrides.

Environment Variables:
- ELECTION_OWNER_ID: Actor id of the administrator (required)
- ELECTION_ENVIRONMENT: 'production' (JSON logs) or 'development' (console logs),
  default 'production'
- LOG_LEVEL: Read by the logging configuration, default INFO
"""

from __future__ import annotations

import os
from dataclasses import dataclass

OWNER_ID_ENV = "ELECTION_OWNER_ID"
ENVIRONMENT_ENV = "ELECTION_ENVIRONMENT"

DEFAULT_ENVIRONMENT = "production"

VALID_ENVIRONMENTS: frozenset[str] = frozenset({"production", "development"})


@dataclass(frozen=True)
class ElectionConfig:
    """Configuration for one election deployment.

    Attributes:
        owner_id: Actor id of the administrator, fixed for the election's life.
        environment: Logging mode, 'production' or 'development'.
    """

    owner_id: str
    environment: str = DEFAULT_ENVIRONMENT

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.owner_id or not self.owner_id.strip():
            raise ValueError("owner_id must be a non-empty actor id")
        if self.environment not in VALID_ENVIRONMENTS:
            raise ValueError(
                f"environment must be one of {sorted(VALID_ENVIRONMENTS)}, "
                f"got {self.environment!r}"
            )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @classmethod
    def from_environment(cls) -> ElectionConfig:
        """Create config from environment variables.

        Returns:
            ElectionConfig with values from environment or defaults.

        Raises:
            ValueError: If ELECTION_OWNER_ID is missing or a value is invalid.
        """
        return cls(
            owner_id=os.environ.get(OWNER_ID_ENV, ""),
            environment=os.environ.get(ENVIRONMENT_ENV, DEFAULT_ENVIRONMENT).lower(),
        )
