"""
Input coercion for form fields.

Everything the user types into a cost or attendance box passes through here
before it reaches the allocation engine. Nothing raises: malformed text,
NaN, infinity and negatives all collapse to 0.
"""

import logging
import math
import re

logger = logging.getLogger(__name__)

# Anything that isn't part of a plain decimal number ("₹", ",", spaces, letters)
_AMOUNT_NOISE = re.compile(r"[^0-9.\-]")
_DECIMAL_PREFIX = re.compile(r"-?([0-9]+(\.[0-9]*)?|\.[0-9]+)")
_INTEGER_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")

# Ceilings for a single field. Two costs at MAX_AMOUNT still sum to a finite
# float, and every count stays printable as a plain int.
MAX_AMOUNT = 1e300
MAX_UNITS = 10 ** 300


def parse_amount(value) -> float:
    """
    Parse a cost field. Handles strings like '500', '1,500', '₹ 2,000.50'.
    Returns a non-negative float; 0.0 for anything unparseable.
    """
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, int):
        number = float(value) if abs(value) <= MAX_AMOUNT else math.inf
    elif isinstance(value, float):
        number = value
    else:
        cleaned = _AMOUNT_NOISE.sub("", str(value))
        match = _DECIMAL_PREFIX.match(cleaned)
        if not match:
            if str(value).strip():
                logger.debug("Discarding non-numeric amount %r", value)
            return 0.0
        number = float(match.group(0))

    if math.isnan(number) or math.isinf(number) or abs(number) > MAX_AMOUNT:
        logger.debug("Discarding out-of-range amount %r", value)
        return 0.0
    if number < 0:
        logger.debug("Clamping negative amount %r to 0", value)
        return 0.0
    return number


def parse_units(value) -> int:
    """
    Parse an attendance field. Only the leading integer counts ('3.9' -> 3,
    '4 sessions' -> 4). Returns a non-negative int; 0 for anything unparseable.
    """
    if value is None or isinstance(value, bool):
        return 0

    if isinstance(value, int):
        number = value
    elif isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            logger.debug("Discarding non-finite attendance %r", value)
            return 0
        number = int(value)
    else:
        match = _INTEGER_PREFIX.match(str(value))
        if not match:
            if str(value).strip():
                logger.debug("Discarding non-numeric attendance %r", value)
            return 0
        digits = match.group(1)
        if len(digits.lstrip("+-").lstrip("0")) > 301:
            logger.debug("Discarding out-of-range attendance %r", value)
            return 0
        number = int(digits)

    if number < 0:
        logger.debug("Clamping negative attendance %r to 0", value)
        return 0
    if number > MAX_UNITS:
        logger.debug("Discarding out-of-range attendance %r", value)
        return 0
    return number
