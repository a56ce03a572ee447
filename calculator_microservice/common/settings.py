"""Runtime configuration for the calculator service."""
import logging
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, IPvAnyAddress, field_validator


class Settings(BaseModel):
    """
    Service configuration.

    Values come from CLI arguments or ``CALCULATOR_*`` environment variables,
    falling back to the defaults declared here.
    """

    # Configuration must not change once the server is bound
    model_config = ConfigDict(frozen=True, validate_default=True)

    host: IPvAnyAddress = Field(default="0.0.0.0", description="Interface the HTTP server binds to")
    port: int = Field(default=3000, ge=1, le=65535, description="HTTP port")
    log_dir: Path = Field(default=Path("logs"), description="Directory holding error.log and combined.log")
    log_level: str = Field(default="INFO", description="Minimum level written to console and combined.log")

    @field_validator("log_level")
    def log_level_must_be_known(cls, v: str) -> str:
        """Ensure the log level is one of the standard logging level names."""
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v!r}")
        return level

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from ``CALCULATOR_*`` environment variables.

        :return: Validated settings
        :rtype: Settings
        :raises pydantic.ValidationError: If a variable holds an invalid value
        """
        env = {
            "host": os.getenv("CALCULATOR_HOST"),
            "port": os.getenv("CALCULATOR_PORT"),
            "log_dir": os.getenv("CALCULATOR_LOG_DIR"),
            "log_level": os.getenv("CALCULATOR_LOG_LEVEL"),
        }
        return cls(**{key: value for key, value in env.items() if value is not None})
