"""Parallel image inverter orchestrator.

Coordinates the producer/consumer components:
- One shared BlockingQueue
- One producer thread (discovery -> queue, then one marker per worker)
- N worker threads (queue -> invert -> save)
"""

import logging
import threading
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from .discovery import discover_images
from .inverter import DEFAULT_OUTPUT_PREFIX, make_inverter
from .parallel.blocking_queue import BlockingQueue
from .parallel.producer_thread import ProducerStats, producer_thread_main
from .parallel.tasks import ImageTask, Task
from .parallel.worker_thread import WorkerStats, worker_thread_main
from .path_utils import DEFAULT_EXTENSIONS

logger = logging.getLogger(__name__)


@dataclass
class PipelineSummary:
    """Aggregate outcome of one run, built after every thread has joined."""
    status: str
    tasks_discovered: int
    tasks_processed: int
    tasks_failed: int
    markers_pushed: int
    markers_consumed: int
    queue_pushed: int
    queue_popped: int
    queue_remaining: int
    duration_seconds: float
    discovery_error: Optional[str] = None
    per_worker: List[WorkerStats] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "tasks_discovered": self.tasks_discovered,
            "tasks_processed": self.tasks_processed,
            "tasks_failed": self.tasks_failed,
            "markers_pushed": self.markers_pushed,
            "markers_consumed": self.markers_consumed,
            "queue_pushed": self.queue_pushed,
            "queue_popped": self.queue_popped,
            "queue_remaining": self.queue_remaining,
            "duration_seconds": round(self.duration_seconds, 3),
            "discovery_error": self.discovery_error,
            "per_worker": [stats.to_dict() for stats in self.per_worker],
        }


class ParallelInverter:
    """Inverts a directory of images with one producer and N worker threads.

    Architecture:
    - 1 producer thread: lists the input directory and enqueues ImageTasks,
      then pushes exactly ``worker_threads`` Shutdown markers
    - N worker threads: pop, invert, save; exit on their marker
    - 1 unbounded BlockingQueue shared by all of them

    Every thread is joined before ``run`` returns.
    """

    def __init__(
        self,
        output_dir: Path,
        worker_threads: int = 4,
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
        output_prefix: str = DEFAULT_OUTPUT_PREFIX,
        process: Optional[Callable[[ImageTask], Path]] = None,
    ):
        """Initialize the inverter.

        Args:
            output_dir: Directory to write inverted images to
            worker_threads: Number of consumer threads (at least 1)
            extensions: File extensions treated as images
            output_prefix: Prefix for output file names
            process: Task body override; defaults to Pillow inversion into output_dir
        """
        if worker_threads < 1:
            raise ValueError(f"worker_threads must be at least 1, got {worker_threads}")

        self.output_dir = output_dir
        self.worker_threads = worker_threads
        self.extensions = tuple(extensions)
        self.output_prefix = output_prefix
        self.process = process or make_inverter(output_dir, output_prefix)

        # Components (initialized during run)
        self.work_queue: Optional[BlockingQueue[Task]] = None
        self.producer_thread: Optional[threading.Thread] = None
        self.worker_thread_list: List[threading.Thread] = []
        self.producer_stats: Optional[ProducerStats] = None
        self.worker_stats: List[WorkerStats] = []

        logger.info(
            f"Initialized ParallelInverter: {{'threads': {worker_threads}, "
            f"'output_dir': {str(output_dir)!r}, 'extensions': {list(self.extensions)!r}}}"
        )

    def run(self, input_dir: Path) -> PipelineSummary:
        """Invert every eligible image in input_dir.

        Args:
            input_dir: Directory to read images from

        Returns:
            PipelineSummary; status is 'failed' only when discovery failed
        """
        logger.info(f"Starting run: {{'input_dir': {str(input_dir)!r}}}")
        start_time = time.time()

        self._initialize_components()
        self._start_threads(input_dir)
        self._wait_for_completion()

        summary = self._build_summary(time.time() - start_time)

        if summary.status == "failed":
            logger.error(f"Run finished with discovery failure: {summary.to_dict()}")
        else:
            logger.info(
                f"All tasks completed: {{'processed': {summary.tasks_processed}, "
                f"'failed': {summary.tasks_failed}, 'duration_seconds': {summary.duration_seconds:.1f}}}"
            )

        return summary

    def _initialize_components(self) -> None:
        """Prepare the output directory and the shared queue before any thread starts."""
        self.output_dir.mkdir(parents=True, exist_ok=True)

        self.work_queue = BlockingQueue()
        self.producer_stats = ProducerStats()
        self.worker_stats = [WorkerStats(thread_id=i) for i in range(self.worker_threads)]
        self.worker_thread_list = []

    def _start_threads(self, input_dir: Path) -> None:
        """Start the producer thread and the worker threads."""
        extensions = self.extensions

        self.producer_thread = threading.Thread(
            target=producer_thread_main,
            args=(
                self.work_queue,
                lambda: discover_images(input_dir, extensions),
                self.worker_threads,
                self.producer_stats,
            ),
            name="Producer",
        )
        self.producer_thread.start()

        for i in range(self.worker_threads):
            thread = threading.Thread(
                target=worker_thread_main,
                args=(
                    i,
                    self.work_queue,
                    self.process,
                    self.worker_stats[i],
                ),
                name=f"Worker-{i}",
            )
            thread.start()
            self.worker_thread_list.append(thread)

        logger.info(f"Started threads: {{'producer': 1, 'workers': {self.worker_threads}}}")

    def _wait_for_completion(self) -> None:
        """Join the producer and every worker."""
        self.producer_thread.join()
        logger.debug("Producer thread finished")

        for thread in self.worker_thread_list:
            thread.join()
        logger.info("All worker threads finished")

    def _build_summary(self, duration_seconds: float) -> PipelineSummary:
        queue_stats = self.work_queue.get_stats()
        error = self.producer_stats.error

        return PipelineSummary(
            status="failed" if error else "completed",
            tasks_discovered=self.producer_stats.tasks_pushed,
            tasks_processed=sum(s.processed for s in self.worker_stats),
            tasks_failed=sum(s.failed for s in self.worker_stats),
            markers_pushed=self.producer_stats.markers_pushed,
            markers_consumed=sum(1 for s in self.worker_stats if s.received_shutdown),
            queue_pushed=queue_stats["pushed"],
            queue_popped=queue_stats["popped"],
            queue_remaining=queue_stats["depth"],
            duration_seconds=duration_seconds,
            discovery_error=str(error) if error else None,
            per_worker=list(self.worker_stats),
        )
