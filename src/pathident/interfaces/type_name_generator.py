"""Interface for type name generators."""

import abc

from pathident.domain.value_objects import TypeNameResult


class TypeNameGenerator(abc.ABC):
    """Contract for turning content paths into generated type names."""

    @abc.abstractmethod
    def resolve(self, full_path: str) -> TypeNameResult:
        """Compute the generated name for `full_path` along with its kind."""

    def compute_type_name(self, full_path: str) -> str:
        """Compute the dotted ``Namespace.TypeName`` for `full_path`."""
        return self.resolve(full_path).name

    @abc.abstractmethod
    def convert_to_identifier(self, name: str) -> str:
        """Convert an arbitrary string into a valid identifier."""
