"""Batch image color inversion on a producer/consumer thread pool."""

from .config import InverterConfig, PipelineConfig
from .pipeline import ParallelInverter, PipelineSummary

__version__ = "0.1.0"

__all__ = [
    'ParallelInverter',
    'PipelineSummary',
    'InverterConfig',
    'PipelineConfig',
]
