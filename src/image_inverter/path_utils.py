"""Path eligibility rules for image discovery."""

import os
from pathlib import Path
from typing import Iterable

__all__ = ['is_hidden', 'is_system_file', 'normalize_extensions', 'DEFAULT_EXTENSIONS']

DEFAULT_EXTENSIONS = ('.jpeg', '.jpg', '.png')

# System files to exclude (cross-platform)
SYSTEM_FILES = {
    'thumbs.db',      # Windows thumbnail cache
    'desktop.ini',    # Windows folder settings
    '.ds_store',      # macOS folder metadata
    'icon\r',         # macOS custom folder icon (has literal carriage return!)
}


def is_hidden(path: Path) -> bool:
    """
    Cross-platform hidden file detection.

    Unix/Linux/macOS: Files starting with '.'
    Windows: Files with FILE_ATTRIBUTE_HIDDEN flag

    Args:
        path: Path to check

    Returns:
        True if file is hidden on the current platform
    """
    if path.name.startswith('.'):
        return True

    if os.name == 'nt' and path.exists():
        try:
            import ctypes
            attrs = ctypes.windll.kernel32.GetFileAttributesW(str(path))
            # FILE_ATTRIBUTE_HIDDEN = 2
            return attrs != -1 and bool(attrs & 2)
        except (AttributeError, OSError):
            pass

    return False


def is_system_file(path: Path) -> bool:
    """Return True for OS-generated files such as Thumbs.db or .DS_Store."""
    return path.name.lower() in SYSTEM_FILES


def normalize_extensions(extensions: Iterable[str]) -> frozenset[str]:
    """Lower-case extensions and make sure each one has a leading dot."""
    normalized = set()
    for ext in extensions:
        ext = ext.strip().lower()
        if not ext:
            continue
        normalized.add(ext if ext.startswith('.') else f'.{ext}')
    return frozenset(normalized)
