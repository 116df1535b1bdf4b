"""Centralized logging configuration for neo-permissions.

The library logs through loguru. By default its records are disabled so that
importing the package never writes to the host application's sinks; set
``NEO_PERMISSIONS_LOG_ENABLED=true`` (or pass explicit settings) to turn them on.

The console sink is added next to loguru's default handler, which is left to
the host application. Keeping both prints every library record twice.
"""

import sys
from typing import List, Optional

from loguru import logger

from .constants import LOG_NAMESPACE
from ..core.exceptions import ConfigurationError
from .settings import PermissionSettings, get_settings


class LoggingConfig:
    """Loguru sink management for the library namespace."""

    _handler_ids: List[int] = []
    trace_matches: bool = False

    @classmethod
    def _only_library(cls, record) -> bool:
        return (record["name"] or "").startswith(LOG_NAMESPACE)

    @classmethod
    def _environment_settings(cls) -> PermissionSettings:
        """Environment settings, or the defaults when the environment is invalid.

        Runs on package import, which must not fail because of a bad
        ``NEO_PERMISSIONS_*`` value. ``get_settings`` itself keeps raising.
        """
        try:
            return get_settings()
        except ConfigurationError as e:
            logger.warning(f"Invalid neo-permissions configuration, using defaults: {e.details}")
            return PermissionSettings.model_construct()

    @classmethod
    def configure(cls, settings: Optional[PermissionSettings] = None) -> List[int]:
        """Configure loguru based on settings.

        Args:
            settings: Explicit settings, defaults to the cached environment settings

        Returns:
            Ids of the sinks added by this call
        """
        if settings is None:
            settings = cls._environment_settings()
        cls.reset()
        cls.trace_matches = settings.log_enabled and settings.trace_matches

        if not settings.log_enabled:
            logger.disable(LOG_NAMESPACE)
            return []

        logger.enable(LOG_NAMESPACE)
        cls._handler_ids.append(
            logger.add(
                sys.stderr,
                level=settings.log_level,
                format=settings.log_format,
                filter=cls._only_library,
            )
        )

        if settings.log_file:
            cls._handler_ids.append(
                logger.add(
                    settings.log_file,
                    level=settings.log_level,
                    format=settings.log_format,
                    filter=cls._only_library,
                    rotation=settings.log_rotation,
                    retention=settings.log_retention,
                )
            )

        logger.debug(f"Logging configured: level={settings.log_level}, file={settings.log_file}")
        return list(cls._handler_ids)

    @classmethod
    def reset(cls) -> None:
        """Remove every sink previously added by ``configure``."""
        while cls._handler_ids:
            handler_id = cls._handler_ids.pop()
            try:
                logger.remove(handler_id)
            except ValueError:
                # Already removed by the host application
                pass


def setup_logging(settings: Optional[PermissionSettings] = None) -> List[int]:
    """Setup logging configuration from settings.

    This is the main entry point for configuring library logging. It runs
    once on package import and may be called again after the settings change.
    """
    return LoggingConfig.configure(settings)


def reset_logging() -> None:
    """Remove the sinks added by ``setup_logging``."""
    LoggingConfig.reset()


def is_match_tracing_enabled() -> bool:
    """Whether matcher and compressor decisions are logged."""
    return LoggingConfig.trace_matches
