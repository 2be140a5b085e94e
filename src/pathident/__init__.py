"""pathident

Turns content-tree paths (e.g. Sitecore template paths) into dotted namespace
and type names for generated source code.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
