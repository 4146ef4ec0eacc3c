"""
Mathematical utilities for geoconvert.
"""


def clamp(value: float, min_val: float, max_val: float) -> float:
    """
    Clamp value to [min_val, max_val] range.

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def clamp_index(index: int, length: int) -> int:
    """Clamp an index into [0, length - 1] for a sequence of given length."""
    if length <= 0:
        raise ValueError("Cannot index an empty sequence")
    return int(clamp(index, 0, length - 1))
