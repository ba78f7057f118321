"""
Helper functions for PanelNet aggregation and validation.
"""

from functools import reduce
from typing import Iterable


def fold_sum(values: Iterable[float]) -> float:
    """
    Sum values in sequence order, starting from zero.

    Args:
        values: Child quantities to add

    Returns:
        The running total, 0.0 for an empty sequence
    """
    return sum(values, 0.0)

def fold_min(values: Iterable[float], seed: float) -> float:
    """
    Take the minimum of values, starting from a seed.

    The seed is the identity of the fold: an empty sequence returns it
    unchanged, and nesting an empty composite inside another never
    lowers the outer minimum.

    Args:
        values: Child quantities to compare
        seed: Upper bound returned when values is empty

    Returns:
        The smallest of seed and every value
    """
    return reduce(min, values, seed)

def validate_positive(value: float, name: str) -> None:
    """
    Validate that a value is positive.

    Args:
        value: Value to validate
        name: Name of the value for error messages

    Raises:
        ValueError: If value is not positive
    """
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")

def validate_range(value: float, min_val: float, max_val: float, name: str) -> None:
    """
    Validate that a value is within a specified range.

    Args:
        value: Value to validate
        min_val: Minimum allowed value
        max_val: Maximum allowed value
        name: Name of the value for error messages

    Raises:
        ValueError: If value is outside range
    """
    if not (min_val <= value <= max_val):
        raise ValueError(f"{name} must be between {min_val} and {max_val}, got {value}")

def format_quantity(value: float, precision: int) -> str:
    """Format a value the way printf's %f does, with the given precision."""
    return f"{value:.{precision}f}"
