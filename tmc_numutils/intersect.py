#!/usr/bin/env python
'''
Copyright (c) 2024 TOYOTA MOTOR CORPORATION
All rights reserved.
Redistribution and use in source and binary forms, with or without
modification, are permitted (subject to the limitations in the disclaimer
below) provided that the following conditions are met:
* Redistributions of source code must retain the above copyright notice, this
  list of conditions and the following disclaimer.
* Redistributions in binary form must reproduce the above copyright notice,
  this list of conditions and the following disclaimer in the documentation
  and/or other materials provided with the distribution.
* Neither the name of the copyright holder nor the names of its contributors may be used
  to endorse or promote products derived from this software without specific
  prior written permission.
NO EXPRESS OR IMPLIED LICENSES TO ANY PARTY'S PATENT RIGHTS ARE GRANTED BY THIS
LICENSE. THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS
"AS IS" AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO,
THE IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE
GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION)
HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT
LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT
OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH
DAMAGE.
'''
"""Module that intersects a finite set of values with an interval of the real line.

The values are given as a sequence, the interval by its two bounds and its
form (closed, open or half-open). The intersection with the closed interval
is computed first; its first or last value is then dropped when it lies on
an excluded bound.

The ordering of the values is given by a three-way comparison function
cmp(a, b) returning -1, 0 or 1. Use natural_cmp for exact values and
tmc_numutils.fpcmp.fp_cmp for floating point values.
"""

import bisect
from enum import Enum
from functools import cmp_to_key
import logging

from tmc_numutils.exceptions import ContractViolation

_logger = logging.getLogger(__name__)


class BoundedRealInterval(Enum):
    """Forms of the bounded intervals of the real line."""

    # [a;b]
    CLOSED = 'closed'
    # (a;b)
    OPEN = 'open'
    # [a;b)
    RIGHT_OPEN = 'right_open'
    LEFT_CLOSED = 'right_open'
    # (a;b]
    LEFT_OPEN = 'left_open'
    RIGHT_CLOSED = 'left_open'


class UnboundedRealInterval(Enum):
    """Forms of the unbounded intervals of the real line."""

    # (a;->)
    LEFT_OPEN = 'left_open'
    # (<-;a)
    RIGHT_OPEN = 'right_open'
    # [a;->)
    LEFT_CLOSED = 'left_closed'
    # (<-;a]
    RIGHT_CLOSED = 'right_closed'


def natural_cmp(a, b):
    """Three-way comparison with the native ordering of a and b."""
    return int(a > b) - int(a < b)


def _is_strictly_ascending(seq, cmp):
    return all(cmp(a, b) < 0 for (a, b) in zip(seq, seq[1:]))


def _sorted_unique(seq, cmp):
    """Sort seq with cmp and remove the duplicates."""
    result = []
    for x in sorted(seq, key=cmp_to_key(cmp)):
        if not result or cmp(result[-1], x) != 0:
            result.append(x)
    return result


def _intersection_closed(seq, lower_bound, upper_bound, cmp):
    """Intersection of seq with the closed interval [lower_bound; upper_bound].

    seq must not be empty, its values must be in strictly ascending order and
    lower_bound must not be greater than upper_bound.
    """
    assert len(seq) != 0
    assert _is_strictly_ascending(seq, cmp)
    assert cmp(lower_bound, upper_bound) <= 0
    (seq_min, seq_max) = (seq[0], seq[-1])
    # Limit cases
    if cmp(seq_max, lower_bound) < 0:
        _logger.debug('interval above the values')
        return []
    if cmp(seq_max, lower_bound) == 0:
        _logger.debug('interval touches the largest value')
        return [seq_max]
    if cmp(upper_bound, seq_min) < 0:
        _logger.debug('interval below the values')
        return []
    if cmp(upper_bound, seq_min) == 0:
        _logger.debug('interval touches the smallest value')
        return [seq_min]
    key = cmp_to_key(cmp)
    if cmp(lower_bound, upper_bound) == 0:
        _logger.debug('zero-width interval')
        idx = bisect.bisect_left(seq, key(lower_bound), key=key)
        if idx < len(seq) and cmp(seq[idx], lower_bound) == 0:
            return [lower_bound]
        return []
    # First value >= lower_bound, first value > upper_bound
    lower_idx = bisect.bisect_left(seq, key(lower_bound), key=key)
    upper_idx = bisect.bisect_right(seq, key(upper_bound), key=key)
    # Both are excluded by the limit cases above
    if lower_idx == len(seq) or upper_idx == 0:
        raise ContractViolation('The algorithm did not work as expected.')
    # seq[i] < lower_bound < upper_bound < seq[i + 1]
    if cmp(seq[lower_idx], upper_bound) > 0:
        _logger.debug('interval between two consecutive values')
        return []
    return list(seq[lower_idx:upper_idx])


def intersection(seq, lower_bound, upper_bound, interval, cmp, is_sorted_unique=True):
    """Intersection of the values of seq with a bounded interval.

    Args:
        seq: Values (list, tuple or 1-D array)
        lower_bound, upper_bound: Bounds of the interval, swapped if not in ascending order
        interval (BoundedRealInterval): Form of the interval
        cmp: Three-way comparison function of the values
        is_sorted_unique (bool): True if seq is already in strictly ascending order,
            otherwise a sorted copy without duplicates is used
    Return:
        List of the values of seq inside the interval, in ascending order
    """
    if not isinstance(interval, BoundedRealInterval):
        raise TypeError('BoundedRealInterval is needed.')
    if len(seq) == 0:
        return []
    if cmp(lower_bound, upper_bound) > 0:
        (lower_bound, upper_bound) = (upper_bound, lower_bound)
    if not is_sorted_unique:
        seq = _sorted_unique(seq, cmp)
    result = _intersection_closed(seq, lower_bound, upper_bound, cmp)
    if not result or interval is BoundedRealInterval.CLOSED:
        return result
    if interval in (BoundedRealInterval.RIGHT_OPEN, BoundedRealInterval.OPEN):
        if cmp(result[-1], upper_bound) == 0:
            del result[-1]
    if interval in (BoundedRealInterval.LEFT_OPEN, BoundedRealInterval.OPEN):
        if result and cmp(result[0], lower_bound) == 0:
            del result[0]
    return result


def intersection_unbounded(seq, bound, interval, cmp, is_sorted_unique=True):
    """Intersection of the values of seq with an unbounded interval.

    Args:
        seq: Values (list, tuple or 1-D array)
        bound: Finite bound of the interval
        interval (UnboundedRealInterval): Form of the interval
        cmp: Three-way comparison function of the values
        is_sorted_unique (bool): Same as intersection()
    Return:
        List of the values of seq inside the interval, in ascending order
    """
    if not isinstance(interval, UnboundedRealInterval):
        raise TypeError('UnboundedRealInterval is needed.')
    if len(seq) == 0:
        return []
    if not is_sorted_unique:
        seq = _sorted_unique(seq, cmp)
    assert _is_strictly_ascending(seq, cmp)
    key = cmp_to_key(cmp)
    if interval is UnboundedRealInterval.LEFT_OPEN:
        return list(seq[bisect.bisect_right(seq, key(bound), key=key):])
    if interval is UnboundedRealInterval.LEFT_CLOSED:
        return list(seq[bisect.bisect_left(seq, key(bound), key=key):])
    if interval is UnboundedRealInterval.RIGHT_OPEN:
        return list(seq[:bisect.bisect_left(seq, key(bound), key=key)])
    return list(seq[:bisect.bisect_right(seq, key(bound), key=key)])
