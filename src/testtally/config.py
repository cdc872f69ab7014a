"""Harness configuration."""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from testtally.outcomes import ReportMode


class TallySettings(BaseSettings):
    """Defaults for a test run.

    Loads from environment variables automatically:
        TESTTALLY_SQUELCH, TESTTALLY_REPORT_MODE, TESTTALLY_LOG_LEVEL

    Explicit arguments to ``RunSession`` calls always take precedence.
    """

    squelch: bool = Field(default=False, description="Hide passing results and status messages")
    report_mode: ReportMode = Field(
        default=ReportMode.ON_FAILURE,
        description="When to print the boxed summary of a finished sub-test group",
    )
    log_level: str = Field(default="WARNING", description="Log level used by the command-line interface")

    model_config = SettingsConfigDict(
        extra="forbid",
        env_prefix="TESTTALLY_",
    )

    @field_validator("report_mode", mode="before")
    @classmethod
    def parse_report_mode(cls, v: Any) -> Any:
        """Accept ``0``/``1``/``2`` as well as member names such as ``on_failure``."""
        if isinstance(v, str):
            text = v.strip()
            if text.isdigit():
                return ReportMode(int(text))
            try:
                return ReportMode[text.upper()]
            except KeyError as e:
                raise ValueError(f"Unknown report mode: {v!r}") from e
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()
