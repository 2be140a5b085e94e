"""Path to type name conversion.

`PathIdentifierConverter` computes the namespace and type name of a generated
type from the content path of the item it is generated for, relative to a
configured namespace root:

    >>> converter = PathIdentifierConverter("/sitecore/templates")
    >>> converter.compute_type_name("/sitecore/templates/Foo/bar_baz")
    'Foo.BarBaz'

Two branches are kept distinct and reported through the result kind:

- a path with a single segment below the root is returned as-is
  (`SingleSegmentResult`), without identifier cleanup;
- a nested path (`MultiSegmentResult`) has its namespace converted to an
  identifier, then the whole name converted again, so the namespace is
  sanitized twice and the type name once.
"""

from __future__ import annotations

import logging

from pathident.domain.errors import ConfigurationError, MalformedInputError
from pathident.domain.identifiers import convert_to_identifier
from pathident.domain.value_objects import (
    MultiSegmentResult,
    NamingOptions,
    RootMatch,
    SingleSegmentResult,
    TypeNameResult,
)
from pathident.interfaces.type_name_generator import TypeNameGenerator

logger = logging.getLogger(__name__)

PATH_DELIMITER = "/"
NAMESPACE_DELIMITER = "."


class PathIdentifierConverter(TypeNameGenerator):
    """Generates type names and relative namespaces from content paths."""

    def __init__(
        self, namespace_root_path: str, options: NamingOptions | None = None
    ) -> None:
        if namespace_root_path == PATH_DELIMITER:
            raise ConfigurationError(namespace_root_path)

        self._namespace_root = namespace_root_path
        self._options = options or NamingOptions()
        logger.debug(
            "Converter configured: root=%r, root_match=%s, capitalize_after_dot=%s",
            self._namespace_root,
            self._options.root_match.value,
            self._options.capitalize_after_dot,
        )

    @property
    def namespace_root(self) -> str:
        return self._namespace_root

    @property
    def options(self) -> NamingOptions:
        return self._options

    def resolve(self, full_path: str) -> TypeNameResult:
        """Calculate the type name for `full_path` and report which branch made it.

        Args:
            full_path: Content path of the item, e.g. ``/sitecore/templates/Foo/Bar``.

        Returns:
            `MultiSegmentResult` when the relative path is nested,
            `SingleSegmentResult` when it is directly under the namespace root.

        Raises:
            MalformedInputError: If nothing is left of the path once the root and
                surrounding delimiters are removed.
        """
        relative = self._strip_root(full_path)
        name = relative.strip(PATH_DELIMITER).replace(
            PATH_DELIMITER, NAMESPACE_DELIMITER
        )

        # splits on the already-replaced delimiter, so this is one part
        name_parts = [
            self._guard_leading_digit(part, full_path)
            for part in name.split(PATH_DELIMITER)
        ]
        name = NAMESPACE_DELIMITER.join(name_parts)

        if NAMESPACE_DELIMITER not in name:
            logger.debug("%r -> %r (single segment)", full_path, name)
            return SingleSegmentResult(name)

        namespace_name, _, type_name = name.rpartition(NAMESPACE_DELIMITER)
        namespace_name = self.convert_to_identifier(namespace_name)
        name = self.convert_to_identifier(
            f"{namespace_name}{NAMESPACE_DELIMITER}{type_name}"
        )
        logger.debug("%r -> %r (multi segment)", full_path, name)
        return MultiSegmentResult(name)

    def convert_to_identifier(self, name: str) -> str:
        """Convert `name` into a valid identifier using this converter's options."""
        return convert_to_identifier(
            name, capitalize_after_dot=self._options.capitalize_after_dot
        )

    def is_under_root(self, full_path: str) -> bool:
        """Return True if `full_path` starts with the namespace root on a segment boundary."""
        root = self._namespace_root
        if not full_path.startswith(root):
            return False
        return (
            not root
            or len(full_path) == len(root)
            or root.endswith(PATH_DELIMITER)
            or full_path[len(root)] == PATH_DELIMITER
        )

    def _strip_root(self, full_path: str) -> str:
        root = self._namespace_root
        if self._options.root_match is RootMatch.SUBSTRING:
            return full_path.replace(root, "") if root else full_path

        if self.is_under_root(full_path):
            return full_path[len(root) :]

        logger.warning("%s is not under namespace root %s", full_path, root)
        return full_path

    @staticmethod
    def _guard_leading_digit(part: str, full_path: str) -> str:
        if not part:
            raise MalformedInputError(full_path, "no path segment below the root")
        if part[0] in "0123456789":
            return "_" + part
        return part
