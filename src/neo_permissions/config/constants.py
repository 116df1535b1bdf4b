"""Constants for neo-permissions.

Reserved tokens of the permission declaration language and the logging
namespace used by the library.
"""

from typing import Final


# Permission Declaration Language
class PermissionSyntax:
    """Reserved tokens of the dot-notation permission language."""

    SEPARATOR: Final[str] = "."
    WILDCARD: Final[str] = "*"
    GLOBAL_WILDCARD: Final[str] = "*"


SEPARATOR: Final[str] = PermissionSyntax.SEPARATOR
WILDCARD: Final[str] = PermissionSyntax.WILDCARD
GLOBAL_WILDCARD: Final[str] = PermissionSyntax.GLOBAL_WILDCARD


# Logging
LOG_NAMESPACE: Final[str] = "neo_permissions"

LOG_LEVELS: Final[tuple] = (
    "TRACE",
    "DEBUG",
    "INFO",
    "SUCCESS",
    "WARNING",
    "ERROR",
    "CRITICAL",
)

DEFAULT_LOG_FORMAT: Final[str] = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
