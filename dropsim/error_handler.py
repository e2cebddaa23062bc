"""Logging setup and top-level error handling for the headless runner."""
import sys
import logging

from .errors import SimulationError


class ErrorHandler:
    """Centralized error handling and logging configuration."""

    def __init__(self, verbose: bool = False):
        """Initialize the error handler.

        Args:
            verbose: Log engine events at INFO instead of WARNING
        """
        self.verbose = verbose
        self._setup_logging()

    def _setup_logging(self) -> None:
        logging.basicConfig(
            level=logging.INFO if self.verbose else logging.WARNING,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            handlers=[logging.StreamHandler(sys.stderr)],
            force=True,
        )

        self.logger = logging.getLogger('dropsim')

    def handle_error(self, error: Exception, critical: bool = True) -> int:
        """Log an error; returns the process exit code, or exits when critical.

        Args:
            error: The exception that occurred
            critical: Whether this error should terminate execution
        """
        if isinstance(error, SimulationError):
            self.logger.error(f"{type(error).__name__}: {error}")
        else:
            self.logger.exception(f"Unexpected error: {error}")

        if critical:
            sys.exit(1)
        return 1
