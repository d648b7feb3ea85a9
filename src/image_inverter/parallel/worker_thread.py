"""Worker thread for the inversion pipeline.

Each worker loops:
1. Pop a task from the work queue (blocks until one is available)
2. Exit on a Shutdown marker
3. Otherwise run the task body; a failing task is logged and skipped

A failed task never stops the worker: the only way out of the loop is the
worker's own marker.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from ..errors import classify_error
from .blocking_queue import BlockingQueue
from .tasks import ImageTask, Shutdown, Task

logger = logging.getLogger(__name__)


@dataclass
class WorkerStats:
    """Counters owned by a single worker thread.

    Only the owning thread writes them; the orchestrator reads them after
    joining that thread.
    """
    thread_id: int
    processed: int = 0
    failed: int = 0
    received_shutdown: bool = False

    def to_dict(self) -> dict:
        return {
            "thread_id": self.thread_id,
            "processed": self.processed,
            "failed": self.failed,
            "received_shutdown": self.received_shutdown,
        }


def worker_thread_main(
    thread_id: int,
    work_queue: BlockingQueue[Task],
    process: Callable[[ImageTask], Path],
    stats: WorkerStats,
) -> None:
    """Main function for worker thread.

    Args:
        thread_id: Unique identifier for this worker thread
        work_queue: Shared queue of ImageTask items and Shutdown markers
        process: Task body; returns the path it wrote, raises on failure
        stats: Counters for this worker
    """
    logger.info(f"Worker thread {thread_id} started")

    try:
        while True:
            task = work_queue.pop()

            if isinstance(task, Shutdown):
                logger.debug(f"Worker thread {thread_id} received shutdown marker")
                stats.received_shutdown = True
                break

            logger.info(f"Processing {task.name}")

            try:
                output_path = process(task)
            except Exception as e:
                stats.failed += 1
                logger.error(
                    f"Worker {thread_id} failed to process {task.name}: "
                    f"{{'path': {str(task.path)!r}, 'category': {classify_error(e)!r}, 'error': {str(e)!r}}}"
                )
                logger.debug("Task failure details", exc_info=True)
                continue

            stats.processed += 1
            logger.info(f"Finished {task.name}: {{'output': {str(output_path)!r}}}")

    finally:
        logger.info(
            f"Worker thread {thread_id} exiting "
            f"(processed={stats.processed}, errors={stats.failed})"
        )
