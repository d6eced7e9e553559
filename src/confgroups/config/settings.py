"""
confgroups Settings

Process-level settings for building a configuration repository:
1. Default values (code)
2. Environment variables and an optional ``.env`` file
3. Explicit keyword arguments

The repository itself is built by ``create_repository`` and handed to its
consumers; no global instance is kept here.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from confgroups.config.constants import DEFAULT_CONFIG_PATH, DEFAULT_EXTENSION
from confgroups.config.environments import detect_environment
from confgroups.filesystem import Filesystem
from confgroups.loader import FileLoader
from confgroups.repository import Repository
from confgroups.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


class Settings(BaseSettings):
    """Repository settings using Pydantic for validation."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    config_path: str = Field(default=DEFAULT_CONFIG_PATH, alias="CONFIG_PATH")
    environment: str = Field(default_factory=detect_environment, alias="ENVIRONMENT")
    extension: str = Field(default=DEFAULT_EXTENSION, alias="CONFIG_EXTENSION")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_json: bool = Field(default=False, alias="LOG_JSON")

    @field_validator("extension")
    @classmethod
    def _normalize_extension(cls, value: str) -> str:
        value = value.strip().lstrip(".")
        if not value:
            raise ValueError("extension must not be empty")
        return value

    @field_validator("environment")
    @classmethod
    def _normalize_environment(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("config_path")
    @classmethod
    def _normalize_config_path(cls, value: str) -> str:
        # Paths are joined with "/", so a trailing one would double up
        return value.rstrip("/") or "/"


def create_repository(
    settings: Settings | None = None,
    namespaces: dict[str, str] | None = None,
    configure_logging: bool = False,
) -> Repository:
    """Build a file-backed configuration repository.

    Args:
        settings: Settings to build from; read from the environment if omitted.
        namespaces: Namespace hints to register, mapping name to directory.
        configure_logging: Also apply the logging settings via ``setup_logging``.
    """
    settings = settings or Settings()

    if configure_logging:
        setup_logging(
            log_level=settings.log_level,
            environment=settings.environment,
            enable_json=settings.log_json,
        )

    loader = FileLoader(Filesystem(), settings.config_path, extension=settings.extension)
    repository = Repository(loader, settings.environment)

    for namespace, hint in (namespaces or {}).items():
        repository.add_namespace(namespace, hint)

    logger.info(
        "config_repository_created",
        config_path=settings.config_path,
        environment=settings.environment,
        extension=settings.extension,
        namespaces=sorted(namespaces or {}),
    )

    return repository
