"""Console logging for the pathident CLI.

Generated names are the only thing written to stdout, so every log record is
rendered by Rich on stderr. Verbosity is a position on a short ladder of
levels moved by ``-v`` and ``-q``; the default only shows warnings, such as a
path that is not under the namespace root.
"""

from __future__ import annotations

import logging
import sys
from importlib.metadata import version
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

from pathident import __version__

if TYPE_CHECKING:
    from pathident.domain.value_objects import NamingOptions

# quietest first; -v moves right, -q moves left
LEVEL_LADDER = (
    logging.CRITICAL,
    logging.ERROR,
    logging.WARNING,
    logging.INFO,
    logging.DEBUG,
)
DEFAULT_RUNG = LEVEL_LADDER.index(logging.WARNING)

# rich renders through markdown-it, which is chatty at DEBUG
NOISY_LIBRARIES = ("markdown_it",)


def console_level(verbose: int = 0, quiet: int = 0) -> int:
    """Return the console level for a number of ``-v`` and ``-q`` flags.

    Moves are clamped to the ends of `LEVEL_LADDER`, so ``-vvvv`` is DEBUG and
    ``-qqqq`` is CRITICAL.
    """
    rung = min(max(DEFAULT_RUNG + verbose - quiet, 0), len(LEVEL_LADDER) - 1)
    return LEVEL_LADDER[rung]


def configure_logging(
    level: int, *, color: bool = True, show_source: bool = False
) -> RichHandler:
    """Route all log records to a Rich handler on stderr.

    Args:
        level: Minimum level shown on the console.
        color: Let Rich pick a color system; False renders plain text.
        show_source: Append the emitting module and line to each record.

    Returns:
        The installed handler, mainly for tests.
    """
    console = Console(stderr=True, color_system="auto" if color else None)
    handler = RichHandler(
        level=level,
        console=console,
        show_time=False,
        show_path=show_source,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(level=logging.DEBUG, handlers=[handler], force=True)
    for name in NOISY_LIBRARIES:
        logging.getLogger(name).setLevel(logging.WARNING)
    return handler


def describe_run(
    logger: logging.Logger,
    *,
    command: str,
    namespace_root: str | None,
    options: NamingOptions,
    source: str,
) -> None:
    """Log which settings a naming command runs with.

    One INFO line states what will affect the generated names; the versions
    that could explain a difference between two machines follow at DEBUG.

    Args:
        logger: Logger of the calling command.
        command: Subcommand name, e.g. ``typename``.
        namespace_root: Root stripped from paths, or None for commands that
            take no paths.
        options: Naming options in effect.
        source: Where inputs come from (``arguments`` or ``stdin``).
    """
    settings = [f"casing={'dotted' if options.capitalize_after_dot else 'legacy'}"]
    if namespace_root is not None:
        settings[:0] = [
            f"root={namespace_root!r}",
            f"root-match={options.root_match.value}",
        ]
    logger.info("%s from %s: %s", command, source, ", ".join(settings))
    logger.debug(
        "pathident %s on Python %s (click %s, click-extra %s, rich %s)",
        __version__,
        sys.version.split()[0],
        version("click"),
        version("click-extra"),
        version("rich"),
    )
