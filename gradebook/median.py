"""Median of a collection of numbers."""

from collections.abc import Iterable


def median(values: Iterable[float]) -> float:
    """Return the median of ``values``.

    Raises ValueError when there are no values.
    """
    ordered = sorted(values)
    size = len(ordered)
    if size == 0:
        raise ValueError("Median of empty vector!")
    mid = size // 2
    if size % 2 == 0:
        return (ordered[mid] + ordered[mid - 1]) / 2
    return ordered[mid]