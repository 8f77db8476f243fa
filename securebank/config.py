"""Configuration management for securebank."""

import os
from dataclasses import dataclass

from securebank.exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("standard", "json")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off", ""):
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")


def _env_int(name: str) -> int | None:
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class SecureBankConfig:
    """Main configuration for the simulator."""

    log_level: str = "WARNING"
    log_format: str = "standard"
    unique_account_numbers: bool = False
    demo_accounts: int = 0
    seed: int | None = None
    currency_symbol: str = "$"

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.log_level}")
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(f"Unknown log format: {self.log_format}")
        if self.demo_accounts < 0:
            raise ConfigurationError(
                f"demo_accounts cannot be negative, got {self.demo_accounts}"
            )

    @classmethod
    def from_env(cls) -> "SecureBankConfig":
        """Create config from environment variables."""
        return cls(
            log_level=os.getenv("SECUREBANK_LOG_LEVEL", "WARNING"),
            log_format=os.getenv("SECUREBANK_LOG_FORMAT", "standard"),
            unique_account_numbers=_env_bool("SECUREBANK_UNIQUE_ACCOUNT_NUMBERS", False),
            demo_accounts=_env_int("SECUREBANK_DEMO_ACCOUNTS") or 0,
            seed=_env_int("SECUREBANK_SEED"),
        )
