"""Read, highlight and write a whole input buffer."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import BinaryIO

from colorize.config.schema import Config, RunSettings
from colorize.core.color import RESET, ColorResolver, extend_color_map
from colorize.core.matcher import ColorizeError, Highlighter, compile_patterns

logger = logging.getLogger(__name__)

ENCODING = "utf-8"
# Undecodable bytes round-trip unchanged
ERRORS = "surrogateescape"


class InputError(ColorizeError):
    """The input could not be read."""


def build_highlighter(settings: RunSettings, config: Config | None = None) -> Highlighter:
    """Compile patterns and resolve their colors.

    Preset patterns come first, followed by the command line patterns. The
    preset color map is extended to cover the preset patterns before the
    command line color maps are appended.

    Raises:
        PatternError: If a pattern does not compile
        ValueError: If the preset does not exist
    """
    config = config or Config()
    resolver = ColorResolver(config.shortcuts)

    sources: list[str] = []
    color_map: list[str] = []

    if settings.preset:
        preset = config.get_preset(settings.preset)
        logger.info("using preset '%s'", preset.name)
        sources.extend(preset.patterns)
        color_map = resolver.resolve_all(preset.color_map)
        if preset.patterns:
            color_map = extend_color_map(color_map, len(preset.patterns))

    sources.extend(settings.patterns)
    patterns = compile_patterns(sources)

    color_map = resolver.resolve_all(settings.color_maps, color_map)
    color_map = extend_color_map(color_map, len(patterns))

    logger.info("num patterns : %2d", len(patterns))
    for i, pattern in enumerate(patterns, start=1):
        logger.debug("pattern[%d] : '%s'", i, pattern.source)
    logger.info("num colorMaps : %2d", len(color_map))
    for i, code in enumerate(color_map, start=1):
        logger.debug("color[%d] : '%stest%s'", i, code, RESET)

    return Highlighter(patterns, color_map)


def read_input(path: Path | str | None = None, stream: BinaryIO | None = None) -> str:
    """Read the whole input.

    Args:
        path: File to read; stream is used when not given
        stream: Binary stream, usually sys.stdin.buffer

    Raises:
        InputError: If the input cannot be read
    """
    try:
        if path is not None:
            logger.info("loading from file '%s'", path)
            data = Path(path).read_bytes()
        else:
            if stream is None:
                raise InputError("no input stream")
            logger.info("loading from stdin")
            data = stream.read()
    except OSError as e:
        raise InputError(f"cannot read input: {e}") from e

    return data.decode(ENCODING, ERRORS)


def split_lines(text: str) -> list[str]:
    """Split text on newlines.

    Carriage returns stay in the line and a trailing newline produces a
    final empty line.
    """
    return text.split("\n")


def write_lines(lines: Iterable[str], stream: BinaryIO) -> None:
    """Write each line followed by a newline."""
    for line in lines:
        stream.write(f"{line}\n".encode(ENCODING, ERRORS))
    stream.flush()


def run(
    settings: RunSettings,
    config: Config | None,
    stdin: BinaryIO | None,
    stdout: BinaryIO,
) -> int:
    """Highlight the configured input and write it to stdout.

    Patterns are compiled before any input is read, so a bad pattern
    produces no output at all.

    Returns:
        Exit code
    """
    config = config or Config()
    highlighter = build_highlighter(settings, config)

    lines = split_lines(read_input(settings.input_file, stdin))

    if settings.color and config.config.color:
        logger.info("highlight")
        write_lines(highlighter.highlight_lines(lines), stdout)
    else:
        logger.info("color disabled, passing input through")
        write_lines(lines, stdout)

    logger.info("done")
    return 0
