"""Image discovery for the inversion pipeline.

Lists the input directory (non-recursively) and yields one ImageTask per
eligible image. Entries are visited in name order so that repeated runs over
the same directory enqueue the same sequence.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator

from .errors import DiscoveryError
from .parallel.tasks import ImageTask
from .path_utils import DEFAULT_EXTENSIONS, is_hidden, is_system_file, normalize_extensions

logger = logging.getLogger(__name__)


def discover_images(
    input_dir: Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> Iterator[ImageTask]:
    """Yield an ImageTask for every eligible image in input_dir.

    Skipped without error:
    - anything that is not a regular file
    - hidden and system files
    - files whose extension is not in ``extensions``

    Args:
        input_dir: Directory to list
        extensions: Accepted file extensions (case-insensitive)

    Yields:
        ImageTask for each eligible file

    Raises:
        DiscoveryError: If input_dir cannot be listed
    """
    accepted = normalize_extensions(extensions)

    try:
        entries = sorted(input_dir.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise DiscoveryError(
            f"Cannot list input directory: {e}",
            path=str(input_dir),
        ) from e

    logger.debug(f"Listing input directory: {{'path': {str(input_dir)!r}, 'entries': {len(entries)}}}")

    for entry in entries:
        if not entry.is_file():
            continue

        if is_hidden(entry) or is_system_file(entry):
            logger.info(f"Skipping hidden or system file: {{'name': {entry.name!r}}}")
            continue

        if entry.suffix.lower() not in accepted:
            logger.info(f"Skipping non-image file: {{'name': {entry.name!r}}}")
            continue

        logger.info(f"Adding {entry.name} to queue")
        yield ImageTask(name=entry.name, path=entry)
