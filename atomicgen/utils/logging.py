"""
Logging configuration and utilities.

This module provides centralized logging configuration for the
atomicgen package with appropriate formatting and levels.
"""

import logging
import os
from typing import Optional


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the atomicgen package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
    """
    # Determine log level
    if level is None:
        level = os.environ.get("ATOMICGEN_LOG_LEVEL", "INFO")

    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("atomicgen")
    logger.setLevel(log_level)

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    if name == "atomicgen" or name.startswith("atomicgen."):
        return logging.getLogger(name)
    return logging.getLogger(f"atomicgen.{name}")


class GeneratorLogger:
    """
    Logging helpers for a generation run.

    Wraps a module logger with one method per event the pipeline
    reports: starting a target, finishing a section and the outcome
    of the regeneration gate.
    """

    def __init__(self, name: str):
        """
        Initialize logger for specific component.

        Args:
            name: Component name for logging context
        """
        self.logger = get_logger(name)

    def log_generation_start(self, target: str, template: str) -> None:
        """
        Log the start of a generation run.

        Args:
            target: Target name
            template: Path of the template being expanded
        """
        self.logger.info(f"Generating target '{target}' from {template}")

    def log_section(self, section: str, blocks: int) -> None:
        """
        Log how many blocks a section contributed.

        Args:
            section: Section name
            blocks: Number of rendered blocks appended
        """
        self.logger.debug(f"Section '{section}': {blocks} blocks")

    def log_write(self, destination: str, size: int) -> None:
        """
        Log a destination write.

        Args:
            destination: Destination path
            size: Number of bytes written
        """
        self.logger.info(f"Wrote {destination} ({size} bytes)")

    def log_write_skipped(self, destination: str) -> None:
        """
        Log a skipped write for unchanged output.

        Args:
            destination: Destination path
        """
        self.logger.info(f"{destination} is up to date, skipping write")

    def log_stale(self, destination: str) -> None:
        """
        Log a destination that differs from generated output.

        Args:
            destination: Destination path
        """
        self.logger.warning(f"{destination} is out of date")


# Initialize logging on module import
setup_logging()
