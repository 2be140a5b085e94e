"""Entrypoints (inbound adapters) for pathident.

Expose the naming rules to the outside world. Parse and validate inputs, call
the domain converter, and present results.

Dependency rule: may import `pathident.domain` and `pathident.config`.
"""
