"""CLI command for batch image inversion."""

import logging
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import InverterConfig
from .pipeline import ParallelInverter
from .common import ConfigLoader, ConfigurationError, LogContext, expand_path_variables, setup_logging

# Application name derived from package name
_package = __package__ or "image_inverter"
APP_NAME = _package.replace('_', '-').replace('.', '-')


def invert_command(
    config: InverterConfig,
    input_dir_override: Optional[Path] = None,
    output_dir_override: Optional[Path] = None,
    worker_threads_override: Optional[int] = None,
) -> int:
    """Invert every image in the input directory.

    Args:
        config: Configuration object
        input_dir_override: Optional override for the input directory
        output_dir_override: Optional override for the output directory
        worker_threads_override: Optional override for worker thread count

    Returns:
        Exit code (0 for success)
    """
    logger = logging.getLogger(__package__ or __name__)

    input_dir = input_dir_override or Path(expand_path_variables(config.pipeline.input_dir))
    output_dir = output_dir_override or Path(expand_path_variables(config.pipeline.output_dir))
    worker_threads = worker_threads_override if worker_threads_override is not None else config.pipeline.worker_threads

    try:
        logger.info(f"Configuration: {{'input_dir': {str(input_dir)!r}, 'output_dir': {str(output_dir)!r}, 'worker_threads': {worker_threads}, 'extensions': {config.pipeline.extensions!r}}}")

        if not input_dir.is_dir():
            raise ConfigurationError("Input directory does not exist", path=str(input_dir))

        inverter = ParallelInverter(
            output_dir=output_dir,
            worker_threads=worker_threads,
            extensions=config.pipeline.extensions,
            output_prefix=config.pipeline.output_prefix,
        )

        with LogContext(logger, input_dir=str(input_dir), output_dir=str(output_dir)):
            summary = inverter.run(input_dir)

        logger.info(f"Run complete: {summary.to_dict()}")

        return 0 if summary.status == "completed" else 1

    except ConfigurationError as e:
        logger.error(f"{e.message}: {e.context}")
        return 1

    except Exception as e:
        logger.exception(f"Run failed: {e}")
        return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the invert command."""
    parser = argparse.ArgumentParser(
        description="Invert the colors of every image in a directory using a pool of worker threads"
    )
    parser.add_argument(
        "--input-dir",
        type=Path,
        required=False,
        help="Directory containing the images to invert (overrides config)"
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        required=False,
        help="Directory to write inverted images to (overrides config)"
    )
    parser.add_argument(
        "--worker-threads",
        type=int,
        required=False,
        help="Number of consumer threads (overrides config)"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (defaults.toml)"
    )

    args = parser.parse_args(argv)

    if args.worker_threads is not None and args.worker_threads < 1:
        parser.error("--worker-threads must be at least 1")

    loader = ConfigLoader(
        app_name=APP_NAME,
        config_class=InverterConfig
    )

    try:
        config = loader.load(defaults_path=args.config)
    except ConfigurationError as e:
        # Logging is configured from the config, so report directly
        print(f"Configuration error: {e.message}", file=sys.stderr)
        return 1

    log_file = Path(expand_path_variables(config.logging.file)) if config.logging.file else None
    setup_logging(
        level=config.logging.level,
        format=config.logging.format,
        log_file=log_file,
        max_file_size_mb=config.logging.max_file_size_mb,
        backup_count=config.logging.backup_count,
    )

    return invert_command(
        config=config,
        input_dir_override=args.input_dir,
        output_dir_override=args.output_dir,
        worker_threads_override=args.worker_threads,
    )


if __name__ == "__main__":
    sys.exit(main())
