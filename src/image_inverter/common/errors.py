"""Base error definitions for image_inverter."""

from typing import Any, Dict


class InverterError(Exception):
    """Base exception for all image_inverter errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = context


class ConfigurationError(InverterError):
    """Configuration is invalid or missing."""
    pass


class FileProcessingError(InverterError):
    """Base exception for file processing errors."""
    pass


class PermissionDeniedError(FileProcessingError):
    """File access denied due to permissions."""
    pass


class CorruptedFileError(FileProcessingError):
    """File is corrupted or malformed."""
    pass


class UnsupportedFormatError(FileProcessingError):
    """No image codec is registered for the file extension."""
    pass
