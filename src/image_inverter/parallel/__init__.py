"""Parallel processing components for the inversion pipeline.

This package contains the producer/consumer infrastructure:
- Blocking queue: unbounded FIFO shared by all threads
- Tasks: ImageTask work items and the Shutdown marker
- Producer thread: enqueues discovered tasks, then one marker per worker
- Worker threads: run the task body until they receive a marker
"""

from .blocking_queue import BlockingQueue
from .producer_thread import ProducerStats, producer_thread_main
from .tasks import SHUTDOWN, ImageTask, Shutdown, Task
from .worker_thread import WorkerStats, worker_thread_main

__all__ = [
    "BlockingQueue",
    "ImageTask",
    "Shutdown",
    "SHUTDOWN",
    "Task",
    "ProducerStats",
    "producer_thread_main",
    "WorkerStats",
    "worker_thread_main",
]
