"""Scalar helpers for keeping values inside a range."""


def clamp(value: float, lo: float, hi: float) -> float:
    """Bound ``value`` to ``[lo, hi]``."""
    return max(lo, min(hi, value))


def wrap(value: float, lo: float, hi: float) -> float:
    """Map ``value`` into ``[lo, hi)`` modularly."""
    span = hi - lo
    result = (value - lo) % span + lo
    # float modulo can land exactly on hi for tiny negative inputs
    if result >= hi:
        return lo
    return result
