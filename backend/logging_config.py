"""
Logging configuration
"""

import logging
import logging.handlers

from pathlib import Path
from typing import Optional

DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
MAX_LOG_BYTES = 10 * 1024 * 1024


def _rotating_handler(path: Path, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(path, maxBytes=MAX_LOG_BYTES, backupCount=5, encoding='utf-8')
    handler.setFormatter(formatter)
    return handler


class LoggingConfig:
    """Console plus rotating backend and access logs under logs_dir"""
    def __init__(self, logs_dir: str = "logs"):
        self.logs_dir = Path(logs_dir)
        self.app_log_file = self.logs_dir / "backend.log"
        self.access_log_file = self.logs_dir / "backend_access.log"

    def setup_logging(self):
        self.logs_dir.mkdir(parents=True, exist_ok=True)
        formatter = logging.Formatter('%(asctime)s | %(name)s | %(levelname)s | %(message)s', DATE_FORMAT)

        root_logger = logging.getLogger()
        root_logger.setLevel(logging.INFO)
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)
        root_logger.addHandler(_rotating_handler(self.app_log_file, formatter))

        # Request lines stay out of the console and the backend log
        access_logger = logging.getLogger("access")
        access_logger.setLevel(logging.INFO)
        access_logger.propagate = False
        for handler in access_logger.handlers[:]:
            access_logger.removeHandler(handler)
        access_logger.addHandler(
            _rotating_handler(self.access_log_file, logging.Formatter('%(asctime)s | ACCESS | %(message)s', DATE_FORMAT))
        )

        return root_logger


# Default logging configuration instance
_logging_config = LoggingConfig()


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def get_logging_config() -> LoggingConfig:
    """Get logging configuration instance for dependency injection"""
    return _logging_config


def format_access_line(method: str, path: str, status_code: Optional[int] = None,
                       response_time: Optional[float] = None, error: Optional[str] = None) -> str:
    log_parts = [
        f"method={method}",
        f"path={path}",
        f"status={status_code or 'N/A'}",
    ]

    if response_time is not None:
        log_parts.append(f"response_time={response_time:.3f}s")

    if error:
        log_parts.append(f"error={error}")

    return " | ".join(log_parts)


def log_api_access(method: str, path: str, status_code: Optional[int] = None,
                   response_time: Optional[float] = None, error: Optional[str] = None):
    logging.getLogger("access").info(
        format_access_line(method, path, status_code, response_time, error)
    )
