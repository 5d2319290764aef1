"""Configuration loaded from environment variables.

A .env file in the working directory is loaded first when present;
variables already set in the environment win.

Variables:
    VITALTRACK_REPOSITORY_BACKEND: "inmemory" (default, only backend)
    VITALTRACK_ID_STRATEGY: "uuid" (default) or "sequential"
    VITALTRACK_ID_PREFIX: Prefix for sequential ids (default: "")
    VITALTRACK_LOG_LEVEL: Logging level name (default: "INFO")
    VITALTRACK_LOG_JSON: "true" for JSON log lines (default: "false")
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

SUPPORTED_BACKENDS = ("inmemory",)
SUPPORTED_ID_STRATEGIES = ("uuid", "sequential")

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Runtime settings.

    Attributes:
        repository_backend: Persistence backend name
        id_strategy: Identifier generation strategy
        id_prefix: Prefix for sequential identifiers
        log_level: Logging level name
        log_json: Render log lines as JSON
    """

    repository_backend: str = "inmemory"
    id_strategy: str = "uuid"
    id_prefix: str = ""
    log_level: str = "INFO"
    log_json: bool = False

    def __post_init__(self) -> None:
        if self.repository_backend not in SUPPORTED_BACKENDS:
            raise ValueError(
                f"Unsupported repository backend: {self.repository_backend}. "
                f"Use one of: {', '.join(SUPPORTED_BACKENDS)}"
            )
        if self.id_strategy not in SUPPORTED_ID_STRATEGIES:
            raise ValueError(
                f"Unsupported id strategy: {self.id_strategy}. "
                f"Use one of: {', '.join(SUPPORTED_ID_STRATEGIES)}"
            )

    @classmethod
    def from_env(cls) -> "Settings":
        """Read settings from the current environment (no .env loading)."""
        return cls(
            repository_backend=os.getenv("VITALTRACK_REPOSITORY_BACKEND", "inmemory").lower(),
            id_strategy=os.getenv("VITALTRACK_ID_STRATEGY", "uuid").lower(),
            id_prefix=os.getenv("VITALTRACK_ID_PREFIX", ""),
            log_level=os.getenv("VITALTRACK_LOG_LEVEL", "INFO").upper(),
            log_json=os.getenv("VITALTRACK_LOG_JSON", "false").lower() in _TRUE_VALUES,
        )


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Load .env (if any) and build Settings from the environment.

    Args:
        env_file: Explicit .env path (default: search from the working directory)

    Raises:
        ValueError: If backend or id strategy is not supported

    Example:
        >>> settings = load_settings()
        >>> settings.repository_backend
        'inmemory'
    """
    load_dotenv(dotenv_path=env_file, override=False)
    return Settings.from_env()
