"""Core functionality: color maps, pattern matching and the pipeline."""

from colorize.core.color import (
    DEFAULT_HIGHLIGHT,
    RESET,
    SHORTCUTS,
    ColorResolver,
    extend_color_map,
    resolve_color_spec,
)
from colorize.core.matcher import (
    ColorizeError,
    Highlighter,
    Pattern,
    PatternError,
    compile_patterns,
)
from colorize.core.pipeline import (
    InputError,
    build_highlighter,
    read_input,
    run,
    split_lines,
    write_lines,
)

__all__ = [
    "DEFAULT_HIGHLIGHT",
    "RESET",
    "SHORTCUTS",
    "ColorResolver",
    "extend_color_map",
    "resolve_color_spec",
    "ColorizeError",
    "Highlighter",
    "Pattern",
    "PatternError",
    "compile_patterns",
    "InputError",
    "build_highlighter",
    "read_input",
    "run",
    "split_lines",
    "write_lines",
]
