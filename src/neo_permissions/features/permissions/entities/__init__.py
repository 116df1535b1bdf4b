"""Permission entities."""

from .permission import (
    LiteralSegment,
    WildcardSegment,
    Segment,
    PermissionCode,
    parse_segment,
)

__all__ = [
    "LiteralSegment",
    "WildcardSegment",
    "Segment",
    "PermissionCode",
    "parse_segment",
]
