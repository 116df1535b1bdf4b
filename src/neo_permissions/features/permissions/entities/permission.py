"""Permission value objects for neo-permissions.

A ``PermissionCode`` is the parsed form of a dot-notation permission string.
Each segment is either a ``LiteralSegment`` or the ``WildcardSegment``.
Parsing never fails: empty segments are literals like any other.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from ....config.constants import GLOBAL_WILDCARD, SEPARATOR, WILDCARD
from ..matcher import covers, split_permission


@dataclass(frozen=True)
class LiteralSegment:
    """Segment that must match the required segment exactly."""

    text: str

    def accepts(self, segment: str) -> bool:
        return self.text == segment

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class WildcardSegment:
    """Segment that accepts any required segment at its position."""

    def accepts(self, segment: str) -> bool:
        return True

    def __str__(self) -> str:
        return WILDCARD


Segment = Union[LiteralSegment, WildcardSegment]


def parse_segment(token: str) -> Segment:
    """Parse a single segment token."""
    if token == WILDCARD:
        return WildcardSegment()
    return LiteralSegment(token)


@dataclass(frozen=True)
class PermissionCode:
    """Immutable value object for a dot-notation permission."""

    value: str
    segments: Tuple[Segment, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        """Parse the segments once."""
        object.__setattr__(
            self,
            "segments",
            tuple(parse_segment(token) for token in split_permission(self.value))
        )

    @classmethod
    def from_segments(cls, *segments: str) -> "PermissionCode":
        """Build a permission from its segment tokens."""
        return cls(SEPARATOR.join(segments))

    @property
    def depth(self) -> int:
        """Number of segments."""
        return len(self.segments)

    @property
    def domain(self) -> str:
        """First segment, the most general one."""
        return str(self.segments[0])

    @property
    def action(self) -> Optional[str]:
        """Last segment of a multi-segment permission."""
        if self.depth < 2:
            return None
        return str(self.segments[-1])

    @property
    def is_global_wildcard(self) -> bool:
        return self.value == GLOBAL_WILDCARD

    @property
    def has_wildcard(self) -> bool:
        return any(isinstance(segment, WildcardSegment) for segment in self.segments)

    @property
    def has_trailing_wildcard(self) -> bool:
        return isinstance(self.segments[-1], WildcardSegment)

    def allows(self, required: Union[str, "PermissionCode"]) -> bool:
        """Check if this grant allows the required permission.

        Same decision as ``matches(str(required), self.value)``, evaluated on
        the parsed segments.
        """
        if self.is_global_wildcard:
            return True

        required_segments = split_permission(str(required))
        if self.has_trailing_wildcard:
            prefix = self.segments[:-1]
            if len(prefix) > len(required_segments):
                return False
        elif self.depth != len(required_segments):
            return False
        else:
            prefix = self.segments

        return all(
            segment.accepts(token)
            for segment, token in zip(prefix, required_segments)
        )

    def covers(self, other: Union[str, "PermissionCode"]) -> bool:
        """Check if this grant absorbs the other one during compression."""
        return covers(self.value, str(other))

    def __str__(self) -> str:
        return self.value
