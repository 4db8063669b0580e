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
"""Floating point comparisons.

Two floating point numbers are considered equal when

    |x - y| < eps * max(mpv, min(|x| + |y|, largest finite value))

i.e. the tolerance is relative to the magnitude of the operands, with an
absolute floor of eps * mpv near zero. By default eps is the machine epsilon
and mpv the smallest positive normal value of the operands' float width.

NaN is equal to nothing (not even itself) and an infinity is only equal to
the same infinity. fp_cmp() is the three-way comparison consistent with eq(),
and every other relation is derived from it.
"""

from math import isinf
from math import isnan

import numpy as np

from tmc_numutils.exceptions import ContractViolation


def float_info(x, y):
    """Return the numpy.finfo of the float width used to compare x and y.

    Python floats are double precision. numpy floating scalars keep their
    own width, promoted when the two widths differ.
    """
    dtypes = [v.dtype for v in (x, y) if isinstance(v, np.floating)]
    if not dtypes:
        return np.finfo(np.float64)
    return np.finfo(np.result_type(*dtypes))


def eq(x, y, eps=None, mpv=None):
    """Test if x is equal to y (returns False if x or y is NaN).

    Args:
        x, y (float): Values to compare
        eps (float): Relative tolerance, at least the machine epsilon and less than 1.0
        mpv (float): Absolute tolerance floor, at least the smallest positive normal value
    Return:
        bool
    """
    # limit cases: NaN and infinity
    if isnan(x) or isnan(y):
        return False
    if x == y:
        return True
    if isinf(x) or isinf(y):
        return False
    info = float_info(x, y)
    if eps is None:
        eps = info.eps
    if mpv is None:
        mpv = info.smallest_normal
    if not (info.eps <= eps < 1.0 and mpv >= info.smallest_normal):
        raise ContractViolation(
            'eps=%r must be in [%r, 1.0) and mpv=%r must be >= %r'
            % (eps, info.eps, mpv, info.smallest_normal))
    # |x| + |y| may overflow before being clamped
    with np.errstate(over='ignore'):
        diff = abs(x - y)
        norm = min(abs(x) + abs(y), info.max)
        return bool(diff < eps * max(mpv, norm))


def fp_cmp(x, y, eps=None, mpv=None):
    """Three-way floating point comparison.

    Return:
        0 if eq(x, y), 1 if x > y, -1 otherwise
    Raises:
        ContractViolation: x or y is NaN
    """
    if isnan(x) or isnan(y):
        raise ContractViolation('NaN has no ordering: fp_cmp(%r, %r)' % (x, y))
    if eq(x, y, eps, mpv):
        return 0
    if x > y:
        return 1
    return -1


def neq(x, y, eps=None, mpv=None):
    """Test if x is not equal to y (returns False if x or y is NaN)."""
    if isnan(x) or isnan(y):
        return False
    return fp_cmp(x, y, eps, mpv) != 0


def lt(x, y, eps=None, mpv=None):
    """Test if x is less than y (returns False if x or y is NaN)."""
    if isnan(x) or isnan(y):
        return False
    return fp_cmp(x, y, eps, mpv) < 0


def leq(x, y, eps=None, mpv=None):
    """Test if x is less than or equal to y (returns False if x or y is NaN)."""
    if isnan(x) or isnan(y):
        return False
    return fp_cmp(x, y, eps, mpv) <= 0


def gt(x, y, eps=None, mpv=None):
    """Test if x is greater than y (returns False if x or y is NaN)."""
    if isnan(x) or isnan(y):
        return False
    return fp_cmp(x, y, eps, mpv) > 0


def geq(x, y, eps=None, mpv=None):
    """Test if x is greater than or equal to y (returns False if x or y is NaN)."""
    if isnan(x) or isnan(y):
        return False
    return fp_cmp(x, y, eps, mpv) >= 0
