"""Configuration models."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigModel(BaseModel):
    """Main configuration model."""

    preview_limit: int = Field(10, description="Entities ranked by 'preview'", ge=1, le=1000)
    log_level: str = Field("WARNING", description="Logging level for the CLI")
    ordering_path: Optional[str] = Field(
        None, description="Ordering configuration used when none is given"
    )
    weight_sum_target: int = Field(
        100, description="Recommended total of active weights", ge=1
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the logging level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {v}")
        return level
