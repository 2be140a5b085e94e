"""Outbound contracts (ports) implemented by pathident's naming strategies."""
