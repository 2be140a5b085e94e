"""Value objects describing naming options and generated names."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias


class RootMatch(Enum):
    """How the namespace root is removed from a content path."""

    PREFIX = "prefix"
    SUBSTRING = "substring"


@dataclass(frozen=True)
class NamingOptions:
    """Explicit switches for behavior that would otherwise be implicit.

    Attributes:
        root_match: `PREFIX` strips the root only when the path starts with it
            on a segment boundary (other paths pass through unchanged).
            `SUBSTRING` removes every occurrence of the root anywhere in the path.
        capitalize_after_dot: Treat `.` as a word boundary when Pascal-casing,
            so each dotted component starts with an uppercase letter.
    """

    root_match: RootMatch = RootMatch.PREFIX
    capitalize_after_dot: bool = True


@dataclass(frozen=True)
class SingleSegmentResult:
    """A name produced from a path directly under the namespace root.

    The name is returned exactly as segmented; no identifier cleanup is applied.
    """

    name: str

    @property
    def namespace(self) -> str:
        return ""

    @property
    def type_name(self) -> str:
        return self.name


@dataclass(frozen=True)
class MultiSegmentResult:
    """A name produced from a nested path.

    The namespace part went through identifier conversion twice and the type
    name once.
    """

    name: str

    @property
    def namespace(self) -> str:
        return self.name.rpartition(".")[0]

    @property
    def type_name(self) -> str:
        return self.name.rpartition(".")[2]


TypeNameResult: TypeAlias = SingleSegmentResult | MultiSegmentResult
