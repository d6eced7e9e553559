"""
confgroups Custom Exceptions

Defines the exception classes raised by the configuration repository.
Missing groups, items and namespaces are never errors; only misuse of the key
syntax and unreadable configuration sources raise.
"""

from typing import Any


class ConfGroupsError(Exception):
    """Base exception class for confgroups-specific errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for JSON serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }


class ConfigurationError(ConfGroupsError):
    """Raised when there's an error in configuration management."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.config_key = config_key


class InvalidKeyError(ConfigurationError):
    """Raised when a configuration key cannot be parsed."""

    def __init__(self, message: str, config_key: str | None = None, **kwargs):
        kwargs.setdefault("error_code", "INVALID_KEY")
        super().__init__(message, config_key=config_key, **kwargs)


class ConfigLoadError(ConfigurationError):
    """Raised when a configuration file is unreadable or malformed."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        **kwargs
    ):
        kwargs.setdefault("error_code", "LOAD_FAILED")
        super().__init__(message, **kwargs)
        self.path = path
