"""Regex-based line highlighting."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from colorize.core.color import RESET

logger = logging.getLogger(__name__)


class ColorizeError(Exception):
    """Base class for fatal colorize errors."""


class PatternError(ColorizeError):
    """A pattern could not be compiled."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"invalid pattern '{source}': {reason}")
        self.source = source
        self.reason = reason


@dataclass(frozen=True)
class Pattern:
    """A compiled regular expression and the text it was compiled from."""

    source: str
    regex: re.Pattern[str] = field(compare=False, repr=False)

    @classmethod
    def compile(cls, source: str) -> Pattern:
        """Compile a pattern.

        Raises:
            PatternError: If the source is not a valid regular expression
        """
        try:
            regex = re.compile(source)
        except re.error as e:
            raise PatternError(source, str(e)) from e
        return cls(source=source, regex=regex)

    def find_substrings(self, text: str) -> list[str]:
        """Find the first match in text.

        Returns:
            The overall match followed by each capture group, or an empty
            list if there is no match. Groups that did not take part in the
            match are returned as empty strings.
        """
        match = self.regex.search(text)
        if match is None:
            return []
        return [match.group(0)] + [group or "" for group in match.groups()]


def compile_patterns(sources: Iterable[str]) -> list[Pattern]:
    """Compile pattern strings in order.

    Raises:
        PatternError: On the first pattern that fails to compile
    """
    patterns: list[Pattern] = []
    for source in sources:
        logger.info("compiling regular expression '%s'", source)
        patterns.append(Pattern.compile(source))
    return patterns


class Highlighter:
    """Wraps pattern matches in their colors.

    Patterns are applied in order and each one runs against the text
    produced by the previous ones, escape codes included. For every match
    only the first match position is used, but each matched substring
    (overall match and capture groups) is then replaced everywhere it
    occurs in the line. A pattern "a" therefore colors every "a" in
    "banana".
    """

    def __init__(self, patterns: list[Pattern], color_map: list[str]) -> None:
        """Initialize highlighter.

        Args:
            patterns: Compiled patterns
            color_map: Escape sequences index-aligned with patterns; must be
                at least as long as patterns (see extend_color_map)
        """
        if len(color_map) < len(patterns):
            raise ValueError(
                f"color map has {len(color_map)} entries for {len(patterns)} patterns"
            )
        self.patterns = patterns
        self.color_map = color_map

    def highlight_line(self, line: str) -> str:
        """Highlight a single line.

        Args:
            line: Input line without the trailing newline

        Returns:
            The line with escape codes inserted
        """
        for pattern, code in zip(self.patterns, self.color_map):
            for substring in pattern.find_substrings(line):
                line = line.replace(substring, f"{code}{substring}{RESET}")
        return line

    def highlight_lines(self, lines: Iterable[str]) -> Iterator[str]:
        """Highlight lines, one output per input, in order."""
        for line in lines:
            yield self.highlight_line(line)
