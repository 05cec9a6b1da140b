"""Configuration validation for the flight finder.

This module validates the runtime configuration before any data is read:

1. Sources:
   - Airport and event files exist, are files, are readable
   - Warnings for empty or very large files

2. Output:
   - Output path is not a directory
   - Output directory exists (or can be created) and is writable
   - Warning when an existing result file will be replaced

3. Options:
   - Worker count is within [1, MAX_WORKERS]

Validation happens at startup to fail fast with clear error messages
rather than deep inside segmentation.
"""

import os
from pathlib import Path
from typing import List, Tuple

from .constants import LARGE_FILE_WARNING_MB, MAX_WORKERS
from .exceptions import ConfigurationError, MissingSourceError
from .logger import logger


class ConfigValidator:
    """Validates runtime configuration and environment."""

    def __init__(self) -> None:
        """Initialize the validator with empty error and warning lists."""
        self.errors: List[str] = []
        self.warnings: List[str] = []
        self.missing_sources: List[str] = []

    def validate_all(
        self,
        airports_path: str,
        events_path: str,
        output_path: str,
        workers: int = 1,
    ) -> Tuple[bool, List[str], List[str]]:
        """
        Run all validation checks.

        Args:
            airports_path: Path to the airport source
            events_path: Path to the event source
            output_path: Path of the result file
            workers: Number of segmentation workers

        Returns:
            Tuple of (is_valid, errors, warnings)
        """
        self.errors = []
        self.warnings = []
        self.missing_sources = []

        self._validate_source(airports_path, "Airport")
        self._validate_source(events_path, "Event")
        self._validate_output_path(output_path)
        self._validate_workers(workers)

        return len(self.errors) == 0, self.errors, self.warnings

    def _validate_source(self, source_path: str, label: str) -> None:
        """Validate a source file."""
        path = Path(source_path)

        if not path.exists():
            self.missing_sources.append(str(source_path))
            self.errors.append(f"{label} source does not exist: {source_path}")
            return

        if not path.is_file():
            self.errors.append(f"{label} source is not a file: {source_path}")
            return

        if not os.access(path, os.R_OK):
            self.errors.append(f"No read permission for: {source_path}")
            return

        size = path.stat().st_size
        if size == 0:
            self.warnings.append(f"{label} source is empty: {source_path}")
        elif size > LARGE_FILE_WARNING_MB * 1024 * 1024:
            self.warnings.append(
                f"Large {label.lower()} source ({size / 1024 / 1024:.1f} MB), "
                "processing may be slow"
            )

    def _validate_output_path(self, output_path: str) -> None:
        """Validate the result file location."""
        path = Path(output_path)

        if path.is_dir():
            self.errors.append(f"Output path is a directory: {output_path}")
            return

        parent = path.parent
        if not parent.exists():
            try:
                parent.mkdir(parents=True, exist_ok=True)
                logger.info(f"Created output directory: {parent}")
            except OSError as e:
                self.errors.append(f"Cannot create output directory {parent}: {e}")
                return

        if not os.access(parent, os.W_OK):
            self.errors.append(f"No write permission for: {parent}")
            return

        if path.exists():
            self.warnings.append(f"Output file will be overwritten: {output_path}")

    def _validate_workers(self, workers: int) -> None:
        """Check the worker count is usable."""
        if isinstance(workers, bool) or not isinstance(workers, int):
            self.errors.append(f"Worker count must be an integer, got {workers!r}")
        elif workers < 1:
            self.errors.append(f"Worker count must be at least 1, got {workers}")
        elif workers > MAX_WORKERS:
            self.warnings.append(
                f"Worker count {workers} exceeds {MAX_WORKERS}, using {MAX_WORKERS}"
            )


def validate_environment(
    airports_path: str,
    events_path: str,
    output_path: str,
    workers: int = 1,
    fail_on_warnings: bool = False,
) -> None:
    """
    Validate environment and raise exception if invalid.

    Args:
        airports_path: Path to the airport source
        events_path: Path to the event source
        output_path: Path of the result file
        workers: Number of segmentation workers
        fail_on_warnings: If True, treat warnings as errors

    Raises:
        MissingSourceError: If a source file does not exist
        ConfigurationError: If any other validation fails
    """
    validator = ConfigValidator()
    is_valid, errors, warnings = validator.validate_all(
        airports_path, events_path, output_path, workers
    )

    if validator.missing_sources:
        raise MissingSourceError("Source file not found", validator.missing_sources[0])

    for warning in warnings:
        logger.warning(warning)

    if not is_valid or (fail_on_warnings and warnings):
        error_msg = "Configuration validation failed:\n"
        if errors:
            error_msg += "\nErrors:\n" + "\n".join(f"  • {err}" for err in errors)
        if fail_on_warnings and warnings:
            error_msg += "\nWarnings (treated as errors):\n" + "\n".join(
                f"  • {warn}" for warn in warnings
            )
        raise ConfigurationError(error_msg)

    if not warnings:
        logger.info("✓ Configuration validation passed")
