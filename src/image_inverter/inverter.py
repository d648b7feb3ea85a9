"""Color inversion task body.

Runs inside worker threads. Each call reads one source image and writes one
``<prefix><name>`` file into the output directory; calls never share an
output path, so no locking is needed here.
"""

import logging
from functools import partial
from pathlib import Path
from typing import Callable

from PIL import Image, ImageOps, UnidentifiedImageError

from .errors import ImageReadError, ImageWriteError, PermissionDeniedError, UnsupportedFormatError
from .parallel.tasks import ImageTask

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_PREFIX = "inverted_"


def invert_colors(img: Image.Image) -> Image.Image:
    """Return a copy of img with its color channels inverted.

    Alpha is kept as-is. Modes ImageOps.invert cannot handle are converted
    first: bilevel to L, palette and everything else to RGB (RGBA when the
    palette carries transparency).

    Args:
        img: Loaded Pillow image

    Returns:
        New inverted image
    """
    if img.mode == "PA" or (img.mode == "P" and "transparency" in img.info):
        img = img.convert("RGBA")

    if img.mode in ("RGBA", "LA"):
        *color_bands, alpha = img.split()
        color = Image.merge("RGB" if img.mode == "RGBA" else "L", color_bands)
        inverted = ImageOps.invert(color)
        inverted.putalpha(alpha)
        return inverted

    if img.mode == "1":
        img = img.convert("L")
    elif img.mode not in ("L", "RGB"):
        img = img.convert("RGB")

    return ImageOps.invert(img)


def invert_image(
    task: ImageTask,
    output_dir: Path,
    prefix: str = DEFAULT_OUTPUT_PREFIX,
) -> Path:
    """Invert one image and save it into output_dir.

    Args:
        task: Image to process
        output_dir: Existing directory to write into
        prefix: Prepended to the source file name

    Returns:
        Path of the written image

    Raises:
        PermissionDeniedError: If the source cannot be opened for reading
        UnsupportedFormatError: If Pillow has no writer for the file extension
        ImageReadError: If the source is missing, is not a decodable image, or
            exceeds Pillow's decompression bomb limit
        ImageWriteError: If the inverted image cannot be saved
    """
    output_path = output_dir / f"{prefix}{task.name}"

    # The output format is picked from the extension, so check it before decoding
    output_format = Image.registered_extensions().get(output_path.suffix.lower())
    if output_format not in Image.SAVE:
        raise UnsupportedFormatError(
            f"No image writer registered for extension: {output_path.suffix!r}",
            path=str(task.path),
        )

    try:
        with Image.open(task.path) as img:
            img.load()
            inverted = invert_colors(img)
    except PermissionError as e:
        raise PermissionDeniedError(
            f"Permission denied reading image: {task.path}",
            path=str(task.path),
        ) from e
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        raise ImageReadError(
            f"Error reading image: {task.path}: {e}",
            path=str(task.path),
        ) from e

    try:
        inverted.save(output_path)
    except (OSError, ValueError, KeyError) as e:
        raise ImageWriteError(
            f"Error saving image: {output_path}: {e}",
            path=str(output_path),
        ) from e

    logger.debug(f"Inverted image: {{'source': {str(task.path)!r}, 'output': {str(output_path)!r}, 'mode': {inverted.mode!r}}}")
    return output_path


def make_inverter(output_dir: Path, prefix: str = DEFAULT_OUTPUT_PREFIX) -> Callable[[ImageTask], Path]:
    """Bind invert_image to an output directory for use as a worker task body."""
    return partial(invert_image, output_dir=output_dir, prefix=prefix)
