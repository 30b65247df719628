# polygeom/geometry/numbers.py
import logging
import math
from typing import Union

from pydantic import StrictFloat, StrictInt

from polygeom.errors import ParseError
from polygeom.geometry.constants import NUMBER_PATTERN

logger = logging.getLogger(__name__)

# int and float are kept apart so "(1, 2)" and "(1.0, 2.0)" render differently
Number = Union[StrictInt, StrictFloat]


def parse_number(text: str) -> Union[int, float]:
    """
    Parse an integer or decimal literal.

    A fractional part makes the result a float ("-.5" -> -0.5); without one
    the result is an exact int. Surrounding whitespace is ignored.

    Raises:
        ParseError: If the text is not an integer or decimal number, or
            cannot be represented (a decimal beyond the float range, an
            integer longer than the interpreter's digit limit)
    """
    stripped = text.strip()
    match = NUMBER_PATTERN.fullmatch(stripped)
    if match is None or not any(c.isdigit() for c in stripped):
        raise ParseError(f"The string: {text!r} is not an integer or decimal number")

    try:
        if match.group("fraction") is not None:
            value = float(stripped)
            if math.isinf(value):
                raise ParseError(f"The decimal {stripped[:20]}... is out of range for a float")
        else:
            value = int(match.group("integer"))
    except ValueError as e:
        raise ParseError(f"The number {stripped[:20]}... cannot be represented: {e}") from e

    logger.debug(f"Parsed {stripped[:40]!r} as {type(value).__name__}")
    return value


def as_float(value: Union[int, float]) -> float:
    """Convert to float, saturating to +/-inf where an int exceeds the float range."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf
