"""Producer thread for the inversion pipeline.

Pushes every discovered task into the shared work queue, then exactly one
termination marker per worker. The markers are pushed even when discovery
finds nothing or fails part-way, so no worker is left blocked in pop().
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from ..errors import classify_error
from .blocking_queue import BlockingQueue
from .tasks import SHUTDOWN, ImageTask, Task

logger = logging.getLogger(__name__)


@dataclass
class ProducerStats:
    """Counters filled in by the producer thread.

    Read by the orchestrator only after the producer has been joined.
    """
    tasks_pushed: int = 0
    markers_pushed: int = 0
    error: Optional[Exception] = None


def producer_thread_main(
    work_queue: BlockingQueue[Task],
    source: Callable[[], Iterable[ImageTask]],
    num_consumers: int,
    stats: ProducerStats,
) -> None:
    """Main function for the producer thread.

    Args:
        work_queue: Shared queue the workers pop from
        source: Returns the tasks to enqueue; may be a lazy generator
        num_consumers: Number of worker threads, one marker is pushed for each
        stats: Filled in with push counts and the discovery error, if any
    """
    logger.info(f"Producer thread started: {{'consumers': {num_consumers}}}")

    try:
        for task in source():
            work_queue.push(task)
            stats.tasks_pushed += 1
    except Exception as e:
        stats.error = e
        logger.error(
            f"Task discovery failed: {{'category': {classify_error(e)!r}, 'error': {str(e)!r}, "
            f"'tasks_pushed': {stats.tasks_pushed}}}",
            exc_info=True,
        )
    finally:
        for _ in range(num_consumers):
            work_queue.push(SHUTDOWN)
            stats.markers_pushed += 1

        logger.info(
            f"Producer thread finished: {{'tasks_pushed': {stats.tasks_pushed}, "
            f"'markers_pushed': {stats.markers_pushed}}}"
        )
