"""Error classes for the image inversion pipeline."""

from .common import (
    ConfigurationError,
    InverterError,
    FileProcessingError,
    PermissionDeniedError,
    CorruptedFileError,
    UnsupportedFormatError,
)

__all__ = [
    "InverterError",
    "ConfigurationError",
    "FileProcessingError",
    "PermissionDeniedError",
    "CorruptedFileError",
    "UnsupportedFormatError",
    "PipelineError",
    "DiscoveryError",
    "ImageReadError",
    "ImageWriteError",
    "classify_error",
]


class PipelineError(InverterError):
    """Base error for pipeline operations."""
    pass


class DiscoveryError(PipelineError):
    """The task source could not be enumerated."""
    pass


class ImageReadError(CorruptedFileError):
    """Input image could not be opened or decoded."""
    pass


class ImageWriteError(FileProcessingError):
    """Output image could not be written."""
    pass


def classify_error(exception: Exception) -> str:
    """
    Classify an exception into an error category.

    Args:
        exception: The exception to classify

    Returns:
        Error category string: 'discovery', 'permission', 'corrupted',
        'write', 'unsupported', 'io', or 'unknown'
    """
    if isinstance(exception, DiscoveryError):
        return 'discovery'
    elif isinstance(exception, PermissionDeniedError):
        return 'permission'
    elif isinstance(exception, CorruptedFileError):
        return 'corrupted'
    elif isinstance(exception, ImageWriteError):
        return 'write'
    elif isinstance(exception, UnsupportedFormatError):
        return 'unsupported'
    elif isinstance(exception, PermissionError):
        return 'permission'
    elif isinstance(exception, OSError):
        return 'io'
    else:
        return 'unknown'
