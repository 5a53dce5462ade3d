"""Command-line interface for colorize."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import BinaryIO

import yaml

from colorize import logging_setup
from colorize.config.loader import load_config
from colorize.config.schema import Config, RunSettings
from colorize.core.color import SHORTCUT_DESCRIPTIONS, SHORTCUTS
from colorize.core.matcher import ColorizeError
from colorize.core.pipeline import run

__version__ = "0.8.1"

DESCRIPTION = """\
Colorize unstructured text data.

Each line of input is searched for every pattern, in order, and the
matching text is wrapped in an ANSI color. It is useful for highlighting
items of interest in log files and is meant to be used after tools like
cat, tac and grep.

    $ cat foo.txt | colorize 'bbb' '^cc' '(?i)eee'

A single pattern with alternation gives the same result:

    $ cat foo.txt | colorize 'bbb|^cc|(?i)eee'

Patterns use Python regular expression syntax.
"""


def shortcut_table() -> str:
    """Render the shortcut names as a help table."""
    rows = ["     #  Name         Value  Description"]
    for i, name in enumerate(SHORTCUTS, start=1):
        rows.append(
            f"    {i:2d}  {name:<9} {SHORTCUTS[name]:>8}  {SHORTCUT_DESCRIPTIONS.get(name, '')}"
        )
    return "\n".join(rows)


def build_epilog() -> str:
    """Build the COLOR MAP and EXAMPLES help sections."""
    return f"""\
color map:
    By default every pattern uses the same highlight, red+bold.
    A color map gives each pattern its own color. Groups are separated by
    commas, one per pattern, and the parts of a group are joined with a
    plus sign:

        $ cat logfile | colorize -c green+bold,blue+bold 'pattern1' 'pattern2'

    Parts can be shortcut names, numbers or raw ANSI parameters. "red+bold"
    and "31+1" both translate to "\\033[31;1m".

    If there are fewer color map entries than patterns, the last entry is
    used for all of the remaining patterns. The -c option may be given more
    than once; the entries accumulate in order.

{shortcut_table()}

    Shortcuts can be added in the configuration file:

        shortcuts:
          orange: "38;5;208"

examples:
    # highlight "error:", "warning:" and "note:", ignoring case
    $ cat -n logfile | colorize '(?i)error:|warning:|note:'

    # error in red, warning in blue, double quoted strings in green
    $ cat -n logfile | colorize -c red+bold,blue+bold,green+bold \\
          '(?i)error:' '(?i)warning:' '"[^"]*"'

    # change the background color
    $ cat -n logfile | colorize -c greenB+red+bold '(?i)error:'

    # full RGB, reversed
    $ cat -n logfile | colorize -c 'reverse+38;2;255;82;197;48;2;155;106;10' '(?i)error:'

    # highlight the literal text --help
    $ cat -n cli.py | colorize -- --help

    # use the "logs" preset from the configuration
    $ cat -n logfile | colorize -p logs
"""


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        args: Arguments to parse (defaults to sys.argv[1:])

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="colorize",
        description=DESCRIPTION,
        epilog=build_epilog(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--color-map",
        "-c",
        action="append",
        default=[],
        dest="color_maps",
        metavar="MAP",
        help="Color map, e.g. red+bold,blue (may be repeated)",
    )

    parser.add_argument(
        "--input",
        "-i",
        type=Path,
        metavar="FILE",
        dest="input_file",
        help="Read from a file instead of stdin",
    )

    parser.add_argument(
        "--preset",
        "-p",
        metavar="NAME",
        help="Prepend the patterns and colors of a configured preset",
    )

    parser.add_argument(
        "--list-presets",
        action="store_true",
        help="List the configured presets and exit",
    )

    parser.add_argument(
        "--config",
        type=Path,
        metavar="FILE",
        help="Configuration file path (default: ~/.config/colorize/config.yaml)",
    )

    parser.add_argument(
        "--config-dir",
        type=Path,
        metavar="DIR",
        help="Drop-in configuration directory (default: ~/.config/colorize/conf.d/)",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colors",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Increase the level of verbosity (may be repeated)",
    )

    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "patterns",
        nargs="*",
        metavar="PATTERN",
        help="Regular expressions to highlight (use -- to pass patterns starting with -)",
    )

    return parser.parse_args(args)


def list_presets(config: Config) -> None:
    """Print the configured presets."""
    for preset in sorted(config.presets.values(), key=lambda p: p.name.lower()):
        print(f"{preset.name:<12} {preset.description}")
        for pattern in preset.patterns:
            print(f"    {pattern}")


def silence_stdout() -> None:
    """Point stdout at the null device so the final flush at exit cannot fail."""
    try:
        fd = sys.stdout.fileno()
    except (OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def main(
    args: list[str] | None = None,
    stdin: BinaryIO | None = None,
    stdout: BinaryIO | None = None,
) -> int:
    """Main entry point.

    Args:
        args: Command-line arguments
        stdin: Binary input stream (defaults to sys.stdin.buffer)
        stdout: Binary output stream (defaults to sys.stdout.buffer)

    Returns:
        Exit code
    """
    parsed = parse_args(args)
    logging_setup.configure(parsed.verbose)

    # Load configuration
    try:
        config = load_config(
            config_path=parsed.config,
            dropin_dir=parsed.config_dir,
        )
    except (OSError, yaml.YAMLError, ValueError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1

    if parsed.list_presets:
        list_presets(config)
        return 0

    settings = RunSettings(
        patterns=parsed.patterns,
        color_maps=parsed.color_maps,
        input_file=parsed.input_file,
        preset=parsed.preset,
        color=not parsed.no_color,
        verbose=parsed.verbose,
    )

    try:
        return run(
            settings,
            config,
            stdin=stdin if stdin is not None else sys.stdin.buffer,
            stdout=stdout if stdout is not None else sys.stdout.buffer,
        )
    except BrokenPipeError:
        # Reader went away, e.g. `colorize ... | head`
        if stdout is None:
            silence_stdout()
        return 141
    except KeyboardInterrupt:
        return 130
    except (ColorizeError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
