"""Configuration models for the image inverter."""

from typing import List

from pydantic import BaseModel, Field, ConfigDict, field_validator

from .common import LoggingConfig
from .path_utils import DEFAULT_EXTENSIONS, normalize_extensions


class PipelineConfig(BaseModel):
    """Producer/consumer pipeline configuration."""

    model_config = ConfigDict(extra='forbid')

    input_dir: str = Field(
        default="input_images",
        description="Directory containing the images to invert"
    )
    output_dir: str = Field(
        default="output_images",
        description="Directory the inverted images are written to (created if missing)"
    )
    worker_threads: int = Field(
        default=4,
        ge=1,
        description="Number of consumer threads"
    )
    extensions: List[str] = Field(
        default_factory=lambda: list(DEFAULT_EXTENSIONS),
        description="File extensions treated as images (case-insensitive)"
    )
    output_prefix: str = Field(
        default="inverted_",
        description="Prefix added to each output file name"
    )

    @field_validator('extensions', mode='before')
    @classmethod
    def split_extensions(cls, v):
        """Accept a comma-separated string as well as a list."""
        if isinstance(v, str):
            return v.split(",")
        return v

    @field_validator('extensions')
    @classmethod
    def normalize(cls, v: List[str]) -> List[str]:
        """Normalize to lower-case with a leading dot; reject an empty set."""
        normalized = sorted(normalize_extensions(v))
        if not normalized:
            raise ValueError("at least one image extension is required")
        return normalized


class InverterConfig(BaseModel):
    """Root configuration for the image inverter."""

    model_config = ConfigDict(extra='forbid')

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)
