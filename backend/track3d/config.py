"""
Library Configuration

Uses Pydantic Settings for type-safe configuration.
"""

import logging
import sys
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator, model_validator, ConfigDict


class Settings(BaseSettings):
    """Library settings with validation."""

    # === Core ===
    log_level: str = Field(default="INFO", description="Logging level")

    # === Gradient ===
    gradient_min_stops: int = Field(
        default=2,
        ge=2,
        description="Minimum number of color stops in a line gradient"
    )
    gradient_max_stops: int = Field(
        default=50,
        ge=2,
        description="Maximum number of color stops in a line gradient"
    )
    points_per_gradient_stop: int = Field(
        default=10,
        ge=1,
        description="Track points covered by one gradient stop"
    )

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept 'debug', 'Debug', ... and reject unknown level names."""
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @model_validator(mode="after")
    def check_gradient_stop_range(self) -> "Settings":
        """The stop cap must not be below the stop floor."""
        if self.gradient_min_stops > self.gradient_max_stops:
            raise ValueError(
                f"gradient_min_stops ({self.gradient_min_stops}) exceeds "
                f"gradient_max_stops ({self.gradient_max_stops})"
            )
        return self

    model_config = ConfigDict(
        env_prefix="TRACK3D_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """
    Install the stdout log handler used by applications embedding track3d.

    Args:
        level: Level name; defaults to settings.log_level
    """
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )
