"""Work items exchanged between the producer and worker threads."""

from dataclasses import dataclass
from pathlib import Path
from typing import Union


@dataclass(frozen=True)
class ImageTask:
    """One image to process.

    Attributes:
        name: File name, used to build the output file name
        path: Full path to the source image
    """
    name: str
    path: Path

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("ImageTask name must not be empty")


@dataclass(frozen=True)
class Shutdown:
    """Termination marker: the worker that receives it exits its loop."""


SHUTDOWN = Shutdown()

Task = Union[ImageTask, Shutdown]
