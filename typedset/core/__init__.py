"""Core collection types.

Import public names from the top-level typedset package; this package is
kept import-free so typedset.config can depend on it without a cycle.
"""
