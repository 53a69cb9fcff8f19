"""Logging configuration settings."""

from pydantic import BaseModel, Field, field_validator

from hooklog.levels import level_name, parse_level


class LoggingSettings(BaseModel):
    """Output and diagnostics settings for hooklog handlers."""

    level: str = Field(
        default="INFO",
        description="Minimum level written by the terminal handler (DEBUG, INFO, WARN, ERROR, or offsets like INFO+2)",
    )

    format: str = Field(
        default="text",
        description="Terminal handler format: 'text' (logfmt), 'json' (JSON lines) or 'rich' (colored console)",
    )

    add_timestamp: bool = Field(
        default=True,
        description="Whether to include the record time in each output line",
    )

    log_hook_failures: bool = Field(
        default=False,
        description="Log hook failures as diagnostic messages instead of only counting them",
    )

    freeze_hooks: bool = Field(
        default=False,
        description="Reject hook registration once the handler has been built",
    )

    diagnostics_level: str = Field(
        default="WARN",
        description="Minimum level for hooklog's own diagnostic messages",
    )

    json_diagnostics: bool = Field(
        default=False,
        description="Render diagnostic messages as JSON lines",
    )

    @field_validator("level", "diagnostics_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        return level_name(parse_level(v))

    @field_validator("format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate and normalize log format."""
        lower_v = v.lower()
        valid_formats = ["text", "json", "rich"]
        if lower_v not in valid_formats:
            raise ValueError(f"Invalid log format: {v}. Must be one of {valid_formats}")
        return lower_v
