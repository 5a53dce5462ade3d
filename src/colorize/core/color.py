"""ANSI color map parsing and extension."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping

logger = logging.getLogger(__name__)

ESC = "\033"

# Sequence written after every highlighted span
RESET = f"{ESC}[0m"

# Color used when no color map is given (bold red)
DEFAULT_HIGHLIGHT = f"{ESC}[1;31m"

# Named shortcuts for ANSI parameters.
# white/whiteB intentionally share the cyan codes.
SHORTCUTS: dict[str, str] = {
    "blue": "34",
    "blueB": "44",
    "bold": "1",
    "cyan": "36",
    "cyanB": "46",
    "faint": "2",
    "gray": "38;5;245",
    "grayB": "48;5;245",
    "green": "32",
    "greenB": "42",
    "italic": "3",
    "magenta": "35",
    "magentaB": "45",
    "normal": "22",
    "red": "31",
    "redB": "41",
    "reset": "0",
    "reverse": "7",
    "strike": "9",
    "underline": "4",
    "white": "36",
    "whiteB": "46",
    "yellow": "33",
    "yellowB": "43",
}

# One line description per shortcut, used by the help text
SHORTCUT_DESCRIPTIONS: dict[str, str] = {
    "blue": "Foreground blue.",
    "blueB": "Background blue.",
    "bold": "Make the color bold.",
    "cyan": "Foreground cyan.",
    "cyanB": "Background cyan.",
    "faint": "Make the color faint.",
    "gray": "Foreground light gray.",
    "grayB": "Background light gray.",
    "green": "Foreground green.",
    "greenB": "Background green.",
    "italic": "Make the text italic.",
    "magenta": "Foreground magenta.",
    "magentaB": "Background magenta.",
    "normal": "Make the text normal.",
    "red": "Foreground red.",
    "redB": "Background red.",
    "reset": "Reset.",
    "reverse": "Reverse the fore/background colors.",
    "strike": "Strike-through the text.",
    "underline": "Underline the text.",
    "white": "Foreground white.",
    "whiteB": "Background white.",
    "yellow": "Foreground yellow.",
    "yellowB": "Background yellow.",
}

GROUP_SEPARATOR = ","
SEGMENT_SEPARATOR = "+"

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def is_integer(segment: str) -> bool:
    """Check if a segment is a plain base-10 integer like "31" or "-1".

    A leading "+" is accepted here but never reaches this check through
    resolve_group, which has already split on it.
    """
    return _INTEGER_RE.fullmatch(segment) is not None


def to_escape(params: str) -> str:
    """Wrap ANSI parameters as an SGR escape sequence."""
    return f"{ESC}[{params}m"


class ColorResolver:
    """Resolves color map specifications into ANSI escape sequences.

    A specification is a comma separated list of groups, one group per
    pattern. Each group is a plus separated list of segments. A segment is
    a number, a shortcut name or a raw ANSI parameter string that is passed
    through unchanged, which allows things like full RGB codes:

        red+38;2;255;82;197;48;2;155;106;0
    """

    def __init__(self, shortcuts: Mapping[str, str] | None = None) -> None:
        """Initialize the resolver.

        Args:
            shortcuts: Extra shortcut names. Built-in names cannot be
                redefined; colliding entries are ignored.
        """
        self.shortcuts: dict[str, str] = dict(SHORTCUTS)

        for name, value in (shortcuts or {}).items():
            if name in SHORTCUTS:
                logger.warning("ignoring shortcut '%s': built-in names cannot be redefined", name)
                continue
            self.shortcuts[name] = str(value)

    def resolve_segment(self, segment: str) -> str:
        """Resolve a single segment to its ANSI parameter text."""
        if is_integer(segment):
            return segment
        if segment in self.shortcuts:
            return self.shortcuts[segment]
        # Raw value
        return segment

    def resolve_group(self, group: str) -> str:
        """Resolve one group like "red+bold" to an escape sequence."""
        segments = group.split(SEGMENT_SEPARATOR)
        params = ";".join(self.resolve_segment(segment) for segment in segments)
        return to_escape(params)

    def resolve(self, spec: str) -> list[str]:
        """Resolve a color map specification.

        Args:
            spec: Color map like "green+bold,blue+bold"

        Returns:
            One escape sequence per group, in order

        Examples:
            >>> ColorResolver().resolve("red+bold,34")
            ['\\x1b[31;1m', '\\x1b[34m']
        """
        codes: list[str] = []
        for index, group in enumerate(spec.split(GROUP_SEPARATOR), start=1):
            code = self.resolve_group(group)
            logger.info("colorMap[%d] = %r", index, code)
            codes.append(code)
        return codes

    def resolve_all(
        self, specs: Iterable[str], color_map: list[str] | None = None
    ) -> list[str]:
        """Resolve several specifications, accumulating their groups.

        Args:
            specs: Specifications in the order they were supplied
            color_map: Existing color map to append to (not modified)

        Returns:
            New color map
        """
        result = list(color_map or [])
        for spec in specs:
            result.extend(self.resolve(spec))
        return result


def resolve_color_spec(spec: str, shortcuts: Mapping[str, str] | None = None) -> list[str]:
    """Resolve a color map specification.

    Args:
        spec: Color map like "red+greenB+bold,blue+bold"
        shortcuts: Extra shortcut names

    Returns:
        List of escape sequences, one per group
    """
    return ColorResolver(shortcuts).resolve(spec)


def extend_color_map(color_map: list[str], size: int) -> list[str]:
    """Extend a color map so it has at least ``size`` entries.

    An empty map is seeded with the default highlight. The last entry is
    repeated for the remaining patterns.

    Args:
        color_map: Resolved escape sequences
        size: Number of patterns

    Returns:
        New list, at least ``max(size, 1)`` long
    """
    result = list(color_map) if color_map else [DEFAULT_HIGHLIGHT]

    last = result[-1]
    while len(result) < size:
        result.append(last)

    return result
