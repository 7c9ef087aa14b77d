"""
Structured logging helpers for services that handle canonical errors.

The library itself never logs; these utilities let callers configure
structlog and enrich log events with the category, status and type of a
``CanonicalError`` passed as ``error=``.

Service name, environment, level and format default to ``Settings``, so log
rendering and problem rendering always agree on the deployment environment.

Example:
    >>> configure_logging("users-service")
    >>> logger = create_service_logger("api")
    >>> logger.warning("lookup failed", error=err)
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars
from structlog.typing import Processor

from canonical_errors.canonical_error import CanonicalError
from canonical_errors.config import Environment, get_settings


class ServiceContext:
    """
    Processor adding service.name and deployment.environment fields to all logs.
    """

    def __init__(self, service_name: str, environment: Environment) -> None:
        self.service_name = service_name
        self.environment = environment

    def __call__(
        self, logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict["service.name"] = self.service_name
        event_dict["deployment.environment"] = self.environment.value
        return event_dict


def add_canonical_error_context(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """
    Expand a ``CanonicalError`` passed as ``error=`` into flat log fields.

    Fields added:
    - error.category: category display name (e.g. "not_found")
    - error.status: HTTP status code
    - error.type: problem type URI
    - error.message: current display message
    - error.resource_type: only when the error is tagged with one

    Events without a canonical error are returned unchanged.
    """
    err = event_dict.get("error")
    if not isinstance(err, CanonicalError):
        return event_dict

    event_dict.pop("error")
    event_dict["error.category"] = err.category_name
    event_dict["error.status"] = err.status_code
    event_dict["error.type"] = err.gts_type
    event_dict["error.message"] = err.message
    if err.resource_type is not None:
        event_dict["error.resource_type"] = err.resource_type
    return event_dict


def build_processors(use_json: bool, service_context: ServiceContext) -> list[Processor]:
    processors: list[Processor] = [
        merge_contextvars,
        service_context,
        add_canonical_error_context,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
    ]
    if use_json:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.set_exc_info)
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def configure_logging(
    service_name: str | None = None,
    environment: str | Environment | None = None,
    log_level: str | None = None,
) -> None:
    """
    Configure structlog for a service.

    Args:
        service_name: Name of the service (defaults to Settings.SERVICE_NAME)
        environment: Environment name (defaults to Settings.ENVIRONMENT)
        log_level: Logging level (defaults to Settings.LOG_LEVEL)

    Settings.LOG_FORMAT selects "json" or "console" output; when unset, JSON
    is used in production and console output elsewhere.
    """
    settings = get_settings()
    service_name = service_name or settings.SERVICE_NAME
    environment = Environment(environment) if environment is not None else settings.ENVIRONMENT
    log_level = log_level or settings.LOG_LEVEL

    if settings.LOG_FORMAT is not None:
        use_json = settings.LOG_FORMAT == "json"
    else:
        use_json = environment == Environment.PRODUCTION

    logging.basicConfig(
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        level=getattr(logging, log_level.upper()),
        force=True,
    )

    structlog.configure(
        processors=build_processors(use_json, ServiceContext(service_name, environment)),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def create_service_logger(name: str | None = None) -> Any:
    """
    Create a service logger with optional name binding.

    Args:
        name: Optional logger name (e.g., "api", "worker")

    Returns:
        A configured structlog BoundLogger instance
    """
    logger = structlog.get_logger()

    if name:
        logger = logger.bind(logger_name=name)

    return logger
