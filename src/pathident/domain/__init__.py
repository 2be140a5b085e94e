"""Domain layer for pathident.

Contains the naming rules: the path-to-type-name converter, the identifier
sanitizer, the value objects describing options and results, and the errors
they raise. This package is pure and performs no I/O.

Dependency rule: do not import from `pathident.entrypoints`.
"""
