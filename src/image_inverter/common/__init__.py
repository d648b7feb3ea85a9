"""Common utilities for image_inverter."""

from .config import ConfigLoader
from .config_utils import expand_path_variables
from .logging import setup_logging, LogContext
from .logging_config import LoggingConfig
from .errors import (
    InverterError, ConfigurationError, FileProcessingError,
    PermissionDeniedError, CorruptedFileError, UnsupportedFormatError,
)

__all__ = [
    'ConfigLoader',
    'LoggingConfig',
    'expand_path_variables',
    'setup_logging',
    'LogContext',
    'InverterError',
    'ConfigurationError',
    'FileProcessingError',
    'PermissionDeniedError',
    'CorruptedFileError',
    'UnsupportedFormatError',
]
