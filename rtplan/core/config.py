"""rtplan runtime configuration and settings."""
import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class RuntimeConfig:
    """Runtime configuration for the rtplan CLI.

    Attributes:
        log_file: Path for file logging, None for the default location
        verbose: Enable debug-level logging (default: False)
        file_logging: Write a log file at all (default: False)
    """

    log_file: Optional[str] = None
    verbose: bool = False
    file_logging: bool = False

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """Create config from environment variables.

        Environment variables:
            RTPLAN_LOG_FILE: Log file path; setting it enables file logging
            RTPLAN_VERBOSE: "1"/"true" enables debug logging

        Returns:
            RuntimeConfig instance with values from environment or defaults
        """
        log_file = os.getenv("RTPLAN_LOG_FILE") or None
        return cls(
            log_file=log_file,
            verbose=_env_flag("RTPLAN_VERBOSE"),
            file_logging=log_file is not None,
        )


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


# Global config instance (can be overridden)
_config: Optional[RuntimeConfig] = None


def get_config() -> RuntimeConfig:
    """Get the global runtime configuration.

    Returns:
        RuntimeConfig instance (creates from environment if not set)
    """
    global _config
    if _config is None:
        _config = RuntimeConfig.from_env()
    return _config


def set_config(config: Optional[RuntimeConfig]):
    """Set the global runtime configuration.

    Args:
        config: RuntimeConfig instance to use globally, None to re-read the environment
    """
    global _config
    _config = config
