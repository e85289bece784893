# topmark:header:start
#
#   project      : UtilCore
#   file         : stats.py
#   file_relpath : src/utilcore/core/stats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Summary statistics over caller-owned numeric sequences."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


def median(values: Sequence[float]) -> float:
    """Return the median of ``values``, or 0.0 when empty.

    For an even number of values the mean of the two middle values is returned.
    The input is not modified.
    """
    size = len(values)
    if size == 0:
        return 0.0
    ordered = sorted(values)
    mid = size // 2
    if size % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) / 2.0
    return float(ordered[mid])


def argmax(values: Sequence[float]) -> int:
    """Return the index of the largest value; the lowest index wins on ties.

    Raises:
        ValueError: If ``values`` is empty.
    """
    if not values:
        raise ValueError("argmax() of an empty sequence")
    best = 0
    for i, value in enumerate(values):
        if value > values[best]:
            best = i
    return best
