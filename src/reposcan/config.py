from __future__ import annotations

from typing import Literal

from pydantic import Field, conint, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import Limits

LogLevel = Literal["debug", "info", "warning", "error"]


class ScannerConfig(BaseSettings):
    """Scanner settings loaded from REPOSCAN_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="REPOSCAN_",
        frozen=True,
        extra="ignore",
    )

    max_depth: conint(ge=1, le=Limits.MAX_DEPTH_CEILING) = Field(
        default=Limits.MAX_DEPTH,
        description="Directories nested deeper than this below the root are not entered",
    )
    max_file_bytes: conint(ge=1) = Field(
        default=Limits.MAX_FILE_SIZE,
        description="Files larger than this are counted but not content-scanned",
    )
    log_level: LogLevel = Field(default="warning", description="Minimum level written to stderr")
    annotations: bool = Field(
        default=False,
        description="Also emit GitHub Actions ::warning:: / ::error:: workflow commands",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_lowercase(cls, value: str) -> str:
        if isinstance(value, str):
            return value.strip().lower()
        return value
