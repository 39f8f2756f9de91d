"""
Core alphabets, positional math, domain models and contracts.

This package is independent of any external system: every operation is a
pure computation over immutable inputs.
"""
