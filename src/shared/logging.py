import logging
import sys
from typing import Optional

from src.const import LOG_DATE_FORMAT, LOG_FORMAT
from .config import Config


class LoggingManager:
    """Manager for logging setup and logger retrieval."""

    _console_handler: Optional[logging.Handler] = None

    @classmethod
    def setup_logging(cls, level: str = "INFO") -> None:
        """Route log records to stdout at the given level.

        Repeated calls replace the handler installed by the previous call, so
        each log line appears once between the progress glyphs and the report.

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        """
        numeric_level = getattr(logging, level.upper(), logging.INFO)
        root_logger = logging.getLogger()

        if cls._console_handler is not None:
            root_logger.removeHandler(cls._console_handler)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        console_handler.setLevel(numeric_level)
        cls._console_handler = console_handler

        root_logger.setLevel(numeric_level)
        root_logger.addHandler(console_handler)

        # HTTP and plotting libraries stay quiet unless configured otherwise
        config = Config()
        for logger_name, library_level in config.library_log_levels.items():
            logging.getLogger(logger_name).setLevel(getattr(logging, library_level.upper(), logging.WARNING))

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a logger instance.

        Args:
            name: Logger name, typically __name__
        """
        return logging.getLogger(name)
