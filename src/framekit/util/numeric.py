"""
Numeric helpers over arbitrary-precision integers.
"""

from ..runtime.errors import RangeViolationError


def big_mod_pos(x: int, n: int) -> int:
    """
    Return x modulo n as a non-negative result in [0, n).

    Args:
        x: The dividend
        n: The modulus, must be positive

    Returns:
        The positive modulus of x mod n

    Raises:
        RangeViolationError: If n is not positive
    """
    if n <= 0:
        raise RangeViolationError("big_mod_pos: modulus must be positive", details={"n": n})
    return ((x % n) + n) % n


def big_cmp(a: int, b: int) -> int:
    """Compare two integers. Returns -1 if a < b, 0 if a == b and 1 if a > b."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


__all__ = [
    "big_mod_pos",
    "big_cmp",
]
