"""pathident CLI entry point.

The ``pathident`` group only sets up console logging; the work happens in
the naming subcommands:

- ``pathident typename`` prints ``Namespace.TypeName`` for content paths.
- ``pathident identifier`` prints arbitrary strings as valid identifiers.

Examples
    $ pathident typename --root /sitecore/templates /sitecore/templates/Foo/bar_baz
    Foo.BarBaz
    $ list-templates | pathident -v typename --root /sitecore/templates
"""

import click
import click_extra as clickx

from pathident import __version__
from pathident.logging import configure_logging, console_level

from .naming import identifier, typename

HELP = """Turn content-tree paths into names for generated code.

    Paths such as Sitecore template paths become dotted namespace and type
    names. Names are written to stdout, one per line; log messages go to
    stderr and default to warnings only.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Log more: -v shows the settings in use, -vv every conversion.",
)
@click.option(
    "--quiet",
    "-q",
    count=True,
    help="Log less: -q hides warnings, -qq hides errors too.",
)
@click.option(
    "--show-source/--no-show-source",
    default=False,
    help="Append the emitting module and line to each log message.",
)
@clickx.pass_context
def pathident(ctx: click.Context, verbose: int, quiet: int, show_source: bool) -> None:
    """pathident command-line interface."""
    configure_logging(
        console_level(verbose, quiet),
        color=ctx.color is not False,
        show_source=show_source,
    )


pathident.add_command(typename)
pathident.add_command(identifier)
