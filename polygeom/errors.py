# polygeom/errors.py
"""Typed errors raised while constructing geometry values.

None of these derive from ValueError: pydantic only wraps ValueError and
AssertionError into ValidationError, so raising these from a validator lets
them reach the caller unchanged.
"""


class GeometryError(Exception):
    """Base error for the library."""


class ArgumentError(GeometryError):
    """Structurally invalid construction input (point count, parity, text shape)."""


class ParseError(ArgumentError):
    """A coordinate fragment is not an integer or decimal number."""
