"""Domain-layer error definitions."""

# ============================================================================
#                           General naming errors
# ============================================================================


class NamingError(Exception):
    """Base class for errors raised while generating type names."""


# ============================================================================
#                           Configuration errors
# ============================================================================


class ConfigurationError(NamingError):
    """Raised when a converter is constructed with an unusable namespace root."""

    def __init__(self, namespace_root: str) -> None:
        super().__init__(
            f"Namespace root cannot be '{namespace_root}', "
            "please use a sub-path e.g. /sitecore/templates"
        )
        self.namespace_root = namespace_root


# ============================================================================
#                           Input errors
# ============================================================================


class MalformedInputError(NamingError, ValueError):
    """Raised when a path or name leaves nothing to build an identifier from."""

    def __init__(self, value: str, reason: str = "is empty") -> None:
        super().__init__(f"Cannot build an identifier from {value!r}: {reason}.")
        self.value = value
        self.reason = reason
