"""
Peak Primitives - local maxima with monotonic shoulders.

A peak is a value with at least `interval` rising steps to its left and at
least `interval` falling steps to its right. In non-strict mode plateaus
are tolerated and count toward the shoulder they belong to; in strict mode
any plateau breaks a peak.

Unlike scipy.signal.find_peaks this is a single left-to-right scan with
run counters, so the shoulder requirement is about monotonic runs rather
than prominence or distance.
"""

from typing import List

import numpy as np

from sigframe.core.errors import ArgumentError
from .vector import as_vector


def peaks(array, interval: int, strict: bool = True) -> np.ndarray:
    """
    Find indices of peaks.

    Args:
        array: Vector to scan
        interval: Required number of rising/falling steps on each side
        strict: If True, shoulders must be strictly monotonic (plateaus reset)

    Returns:
        int64 array of peak indices in ascending order
    """
    array = as_vector(array)
    if interval < 0:
        raise ArgumentError("interval must not be negative", data={"interval": interval})

    found: List[int] = []
    increasing = 0
    decreasing = 0
    same = 0
    candidate = -1

    for i in range(1, len(array)):
        previous = array[i - 1]
        current = array[i]
        if previous < current:
            increasing += 1 + same
            same = 0
            decreasing = 0
            candidate = -1
        elif previous == current:
            if strict:
                increasing = 0
                decreasing = 0
                candidate = -1
            else:
                same += 1
                if same == interval and candidate > 0:
                    found.append(candidate)
                    candidate = -1
        else:
            # a plateau right after a rise still belongs to the rising shoulder
            if decreasing == 0:
                increasing += same
                same = 0
            if increasing >= interval:
                candidate = i - 1
            decreasing += same + 1
            same = 0
            increasing = 0
            if decreasing >= interval and candidate > 0:
                found.append(candidate)
                candidate = -1

    return np.asarray(found, dtype=np.int64)
