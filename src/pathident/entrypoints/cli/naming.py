"""pathident naming commands.

Thin wrappers over `PathIdentifierConverter`: inputs come from arguments (or
stdin for ``typename``), generated names go to **stdout** one per line, and
log messages go to **stderr**.

Failure modes
- No ``--root`` and ``PATHIDENT_NAMESPACE_ROOT`` unset → ``UsageError`` with guidance.
- Root ``/`` or a path with nothing below the root → ``ClickException`` (exit 1).
  Names printed before the failing path stay on stdout.
"""

from __future__ import annotations

import logging

import click

from pathident import config
from pathident.domain.converter import PathIdentifierConverter
from pathident.domain.errors import NamingError
from pathident.domain.identifiers import convert_to_identifier
from pathident.domain.value_objects import MultiSegmentResult, RootMatch
from pathident.logging import describe_run

logger = logging.getLogger(__name__)

MISSING_ROOT_MSG = (
    "No namespace root given.\n\n"
    "Pass --root or set PATHIDENT_NAMESPACE_ROOT, e.g.:\n"
    "  export PATHIDENT_NAMESPACE_ROOT='/sitecore/templates'"
)

legacy_case_option = click.option(
    "--legacy-case",
    is_flag=True,
    default=False,
    help=(
        "Only capitalize letters at the start and after spaces/underscores; "
        "letters after dots are left as they are."
    ),
)


def _resolve_root(root: str | None) -> str:
    # not an option envvar: click ignores empty variables, and "" is a valid root
    if root is not None:
        return root
    try:
        return config.get_namespace_root()
    except config.NamespaceRootNotSetError as e:
        raise click.UsageError(MISSING_ROOT_MSG) from e


def _read_paths(paths: tuple[str, ...]) -> list[str]:
    if paths:
        return list(paths)
    stdin = click.get_text_stream("stdin")
    return [line.strip() for line in stdin if line.strip()]


@click.command()
@click.argument("paths", nargs=-1)
@click.option(
    "--root",
    "root",
    default=None,
    help=(
        "Namespace root path stripped from every content path. "
        "Defaults to $PATHIDENT_NAMESPACE_ROOT, which may be empty."
    ),
)
@click.option(
    "--root-match",
    type=click.Choice([m.value for m in RootMatch], case_sensitive=False),
    default=RootMatch.PREFIX.value,
    show_default=True,
    help=(
        "'prefix' strips the root only from the start of a path and warns "
        "about paths outside it; 'substring' removes every occurrence of it."
    ),
)
@legacy_case_option
@click.option(
    "--show-kind",
    is_flag=True,
    default=False,
    help="Append a tab and 'single' or 'multi' to show which naming branch applied.",
)
def typename(
    paths: tuple[str, ...],
    root: str | None,
    root_match: str,
    legacy_case: bool,
    show_kind: bool,
) -> None:
    """Print the generated type name for each content PATH.

    Reads newline-separated paths from stdin when no PATH is given. Stops at
    the first path that cannot be converted; names printed before it are kept.
    """
    options = config.build_options(root_match=root_match, legacy_case=legacy_case)
    namespace_root = _resolve_root(root)
    try:
        converter = PathIdentifierConverter(namespace_root, options)
    except NamingError as e:
        raise click.ClickException(str(e)) from e

    describe_run(
        logger,
        command="typename",
        namespace_root=namespace_root,
        options=options,
        source="arguments" if paths else "stdin",
    )
    for path in _read_paths(paths):
        try:
            result = converter.resolve(path)
        except NamingError as e:
            raise click.ClickException(str(e)) from e

        if show_kind:
            kind = "multi" if isinstance(result, MultiSegmentResult) else "single"
            click.echo(f"{result.name}\t{kind}")
        else:
            click.echo(result.name)


@click.command()
@click.argument("names", nargs=-1, required=True)
@legacy_case_option
def identifier(names: tuple[str, ...], legacy_case: bool) -> None:
    """Print each NAME converted to a valid identifier."""
    options = config.build_options(legacy_case=legacy_case)
    describe_run(
        logger,
        command="identifier",
        namespace_root=None,
        options=options,
        source="arguments",
    )
    for name in names:
        try:
            converted = convert_to_identifier(
                name, capitalize_after_dot=options.capitalize_after_dot
            )
        except NamingError as e:
            raise click.ClickException(str(e)) from e
        logger.debug("%r -> %r", name, converted)
        click.echo(converted)
