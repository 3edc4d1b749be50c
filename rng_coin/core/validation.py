"""
Parsing and bounds checking of the ``flips`` path parameter.
"""

import re

from rng_coin.core.exceptions import InputError, RangeError

# Decimal or scientific literal, optionally signed
NUMBER_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)
INTEGER_RE = re.compile(r"[+-]?\d+", re.ASCII)


def parse_flips(raw: str, minimum: int = 2, maximum: int = 101) -> int:
    """
    Turn the raw path segment into a flip count.

    Args:
        raw: Path segment as received
        minimum: Smallest accepted count (inclusive)
        maximum: Upper bound (exclusive)

    Returns:
        The validated count

    Raises:
        InputError: If ``raw`` is not a number or not a plain integer
        RangeError: If the integer is outside [minimum, maximum)
    """
    if not NUMBER_RE.fullmatch(raw):
        raise InputError(f"path param flips={raw} is not a number")

    if not INTEGER_RE.fullmatch(raw):
        raise InputError(f"path param flips={raw} is not an integer")

    # Longer than either bound means out of range; also keeps int() off huge strings
    digits = raw.lstrip("+-").lstrip("0")
    if len(digits) > len(str(max(abs(minimum), abs(maximum)))):
        raise RangeError(
            f"path param flips={raw} out of range [{minimum}, {maximum})"
        )

    flips = int(digits or "0")
    if raw.startswith("-"):
        flips = -flips
    if flips < minimum or flips >= maximum:
        raise RangeError(
            f"path param flips={raw} out of range [{minimum}, {maximum})"
        )

    return flips
