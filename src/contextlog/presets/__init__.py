"""Pre-configured logger factories for different environments."""

from contextlog.presets.browser import (
    ErrorTrackingLogger,
    create_browser_logger,
    default_is_dev,
)
from contextlog.presets.library import ConsoleLogger, NoOpLogger, create_library_logger
from contextlog.presets.worker import (
    create_request_logger,
    create_worker_logger,
    get_request_id,
)

__all__ = [
    "ConsoleLogger",
    "ErrorTrackingLogger",
    "NoOpLogger",
    "create_browser_logger",
    "create_library_logger",
    "create_request_logger",
    "create_worker_logger",
    "default_is_dev",
    "get_request_id",
]
