"""
confgroups Logging Configuration

Structured logging setup using structlog with JSON output for production
and human-readable output for development.
"""

import logging
import sys

import structlog


def setup_logging(
    log_level: str = "INFO",
    environment: str = "development",
    enable_json: bool = False,
) -> None:
    """Setup structured logging configuration."""

    # Configure standard library logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == "production" or enable_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance."""
    return structlog.get_logger(name)


class ConfigEventLogger:
    """Logger for configuration loading events with structured data."""

    def __init__(self, name: str = "confgroups.loader"):
        self.logger = get_logger(name)

    def log_group_loaded(
        self,
        group: str,
        namespace: str | None,
        environment: str,
        path: str,
        key_count: int,
        environment_override: bool,
        **kwargs
    ) -> None:
        """Log a configuration group read from disk."""
        self.logger.debug(
            "config_group_loaded",
            group=group,
            namespace=namespace,
            environment=environment,
            path=path,
            key_count=key_count,
            environment_override=environment_override,
            **kwargs
        )

    def log_group_missing(
        self,
        group: str,
        namespace: str | None,
        reason: str,
        **kwargs
    ) -> None:
        """Log a group that resolved to an empty mapping."""
        self.logger.debug(
            "config_group_missing",
            group=group,
            namespace=namespace,
            reason=reason,
            **kwargs
        )

    def log_namespace_registered(self, namespace: str, hint: str, **kwargs) -> None:
        """Log namespace hint registration."""
        self.logger.debug(
            "config_namespace_registered",
            namespace=namespace,
            hint=hint,
            **kwargs
        )

    def log_load_failed(self, path: str, error: str, **kwargs) -> None:
        """Log a configuration source that could not be read."""
        self.logger.warning(
            "config_load_failed",
            path=path,
            error=error,
            **kwargs
        )
