"""The ``[logging]`` configuration section."""

from typing import Literal, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["simple", "detailed", "json"]


class LoggingConfig(BaseModel):
    """Console and log file settings for a run."""

    model_config = ConfigDict(extra='forbid')

    level: LogLevel = Field(default="INFO", description="Root log level")
    format: LogFormat = Field(
        default="simple",
        description="Console format; the log file is always JSON"
    )
    file: Optional[str] = Field(
        default=None,
        description="Rotating log file path, ${USER_LOGS}-style variables allowed"
    )
    max_file_size_mb: int = Field(default=10, ge=1, description="Size at which the log file rotates")
    backup_count: int = Field(default=5, ge=0, description="Rotated log files to keep")

    @field_validator('level', mode='before')
    @classmethod
    def upper_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @field_validator('format', mode='before')
    @classmethod
    def lower_format(cls, v):
        return v.lower() if isinstance(v, str) else v
