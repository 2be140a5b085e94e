"""Identifier sanitizing.

Turns display-like strings (template names, folder names) into dotted
identifiers made only of ``[A-Za-z0-9_.]``.
"""

import re

from pathident.domain.errors import MalformedInputError

_FIRST_LOWER_RE = re.compile(r"^[a-z]")
_AFTER_SPACE_RE = re.compile(r"(?<= )[a-z]")
_AFTER_SPACE_OR_DOT_RE = re.compile(r"(?<=[ .])[a-z]")
_INVALID_CHARS_RE = re.compile(r"[^a-zA-Z0-9_.]+")


def _upper(match: re.Match[str]) -> str:
    # ASCII only, so the result does not depend on the active locale
    return match.group(0).upper()


def convert_to_identifier(name: str, *, capitalize_after_dot: bool = True) -> str:
    """Convert a string into a valid dotted identifier.

    Snake-case words are Pascal-cased (``lord_flowers`` -> ``LordFlowers``),
    every character outside ``[A-Za-z0-9_.]`` is removed, and a result that
    would start with a digit gets an underscore prefix.

    Args:
        name: The string to convert. Must not be empty.
        capitalize_after_dot: Also capitalize a lowercase letter following a dot,
            so ``foo.bar`` becomes ``Foo.Bar`` instead of ``Foo.bar``.

    Returns:
        The sanitized identifier.

    Raises:
        MalformedInputError: If `name` is empty.
    """
    if not name:
        raise MalformedInputError(name)

    # desnakeify (foo_bar -> "foo bar")
    name = name.replace("_", " ")

    # Pascal-case each word ('lord flowers' -> 'Lord Flowers')
    name = _FIRST_LOWER_RE.sub(_upper, name)
    word_start = _AFTER_SPACE_OR_DOT_RE if capitalize_after_dot else _AFTER_SPACE_RE
    name = word_start.sub(_upper, name)

    # drops the spaces introduced above along with punctuation
    name = _INVALID_CHARS_RE.sub("", name)

    # checked after stripping so " 9x" and "_9x" are guarded too
    if name[:1].isdecimal():
        name = "_" + name
    return name
