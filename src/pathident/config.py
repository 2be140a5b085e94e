"""Configuration utilities for pathident.

This module centralizes the environment lookups and option builders used by the
command-line interface.
"""

import os

from pathident.domain.value_objects import NamingOptions, RootMatch

NAMESPACE_ROOT_ENV = "PATHIDENT_NAMESPACE_ROOT"  # pragma: no mutate


class NamespaceRootNotSetError(Exception):
    """Raised when the PATHIDENT_NAMESPACE_ROOT environment variable is not set."""


def get_namespace_root() -> str:
    """Get the namespace root path from the environment.

    An empty value counts as set, since an empty root is a valid configuration
    (paths are then used whole).

    Returns:
        The value of the `PATHIDENT_NAMESPACE_ROOT` environment variable.

    Raises:
        NamespaceRootNotSetError: If `PATHIDENT_NAMESPACE_ROOT` is not set.
    """
    if (root := os.environ.get(NAMESPACE_ROOT_ENV)) is None:
        raise NamespaceRootNotSetError
    return root


def build_options(root_match: str = "prefix", legacy_case: bool = False) -> NamingOptions:
    """Build `NamingOptions` from CLI-style values.

    Args:
        root_match: ``"prefix"`` or ``"substring"`` (case-insensitive).
        legacy_case: When True, only capitalize letters at the start of the
            string and after spaces, leaving letters after dots untouched.

    Returns:
        The corresponding `NamingOptions`.

    Raises:
        ValueError: If `root_match` is not a known mode.
    """
    return NamingOptions(
        root_match=RootMatch(root_match.lower()),
        capitalize_after_dot=not legacy_case,
    )
