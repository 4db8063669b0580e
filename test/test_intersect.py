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
"""Intersection with real intervals single test."""

from functools import partial
import itertools
import unittest

import numpy as np

from tmc_numutils.fpcmp import fp_cmp
from tmc_numutils.intersect import BoundedRealInterval
from tmc_numutils.intersect import intersection
from tmc_numutils.intersect import intersection_unbounded
from tmc_numutils.intersect import natural_cmp
from tmc_numutils.intersect import UnboundedRealInterval

CLOSED = BoundedRealInterval.CLOSED
OPEN = BoundedRealInterval.OPEN
RIGHT_OPEN = BoundedRealInterval.RIGHT_OPEN
LEFT_OPEN = BoundedRealInterval.LEFT_OPEN


class IntersectionTestCase(unittest.TestCase):

    def setUp(self):
        self.values = [1.0, 2.0, 3.0, 4.0]

    def check(self, lower_bound, upper_bound, interval, expected):
        for cmp in (natural_cmp, fp_cmp):
            result = intersection(self.values, lower_bound, upper_bound, interval, cmp)
            self.assertEqual(expected, result,
                             '%s %s %s %s' % (lower_bound, upper_bound, interval, cmp.__name__))

    def test_empty(self):
        self.assertEqual([], intersection([], 1.0, 2.0, CLOSED, natural_cmp))
        self.assertEqual([], intersection([], 1.0, 2.0, OPEN, fp_cmp, is_sorted_unique=False))

    def test_closed(self):
        self.check(0.0, 0.5, CLOSED, [])
        self.check(1.0, 0.0, CLOSED, [1.0])
        self.check(0.0, 3.5, CLOSED, [1.0, 2.0, 3.0])
        self.check(3.0, 0.0, CLOSED, [1.0, 2.0, 3.0])
        self.check(4.0, 0.0, CLOSED, self.values)
        self.check(4.5, 0.0, CLOSED, self.values)
        self.check(1.0, 1.0, CLOSED, [1.0])
        self.check(1.0, 1.5, CLOSED, [1.0])
        self.check(1.0, 2.0, CLOSED, [1.0, 2.0])
        self.check(1.0, 3.5, CLOSED, [1.0, 2.0, 3.0])
        self.check(1.0, 4.5, CLOSED, self.values)
        self.check(2.5, 2.75, CLOSED, [])
        self.check(2.5, 3.0, CLOSED, [3.0])
        self.check(2.5, 4.0, CLOSED, [3.0, 4.0])
        self.check(2.5, 4.5, CLOSED, [3.0, 4.0])
        self.check(4.0, 4.0, CLOSED, [4.0])
        self.check(4.0, 4.5, CLOSED, [4.0])

    def test_open(self):
        self.check(0.0, 5.0, OPEN, self.values)
        self.check(0.0, 4.0, OPEN, [1.0, 2.0, 3.0])
        self.check(1.0, 1.0, OPEN, [])
        self.check(1.0, 2.0, OPEN, [])
        self.check(2.5, 3.5, OPEN, [3.0])
        self.check(4.0, 4.5, OPEN, [])
        self.check(4.5, 5.5, OPEN, [])

    def test_half_open(self):
        self.check(0.0, 1.0, LEFT_OPEN, [1.0])
        self.check(0.0, 1.0, RIGHT_OPEN, [])
        self.check(0.0, 3.0, RIGHT_OPEN, [1.0, 2.0])
        self.check(1.0, 2.0, RIGHT_OPEN, [1.0])
        self.check(1.0, 2.0, LEFT_OPEN, [2.0])
        self.check(1.0, 3.0, LEFT_OPEN, [2.0, 3.0])
        self.check(2.5, 3.0, LEFT_OPEN, [3.0])
        self.check(2.5, 3.0, RIGHT_OPEN, [])

    def test_aliases(self):
        self.assertIs(BoundedRealInterval.LEFT_CLOSED, RIGHT_OPEN)
        self.assertIs(BoundedRealInterval.RIGHT_CLOSED, LEFT_OPEN)
        self.check(0.0, 3.0, BoundedRealInterval.LEFT_CLOSED, [1.0, 2.0])
        self.check(1.0, 2.0, BoundedRealInterval.RIGHT_CLOSED, [2.0])

    def test_zero_width(self):
        self.check(2.0, 2.0, CLOSED, [2.0])
        self.check(2.5, 2.5, CLOSED, [])
        self.check(2.0, 2.0, LEFT_OPEN, [])
        self.check(2.0, 2.0, RIGHT_OPEN, [])

    def test_outside(self):
        for interval in BoundedRealInterval:
            self.check(5.0, 6.0, interval, [])
            self.check(-2.0, -1.0, interval, [])
            self.check(-1.0, 0.999, interval, [])

    def test_bound_order(self):
        bounds = [-1.0, 0.0, 1.0, 1.5, 2.0, 2.5, 3.0, 4.0, 4.5]
        for (a, b) in itertools.product(bounds, repeat=2):
            for interval in BoundedRealInterval:
                self.assertEqual(
                    intersection(self.values, a, b, interval, natural_cmp),
                    intersection(self.values, b, a, interval, natural_cmp),
                    (a, b, interval))

    def test_not_sorted(self):
        values = [3.0, 1.0, 4.0, 1.0, 2.0, 4.0, 3.0]
        bounds = [0.0, 1.0, 2.5, 3.0, 4.0, 5.0]
        for (a, b) in itertools.product(bounds, repeat=2):
            for interval in BoundedRealInterval:
                self.assertEqual(
                    intersection(values, a, b, interval, natural_cmp, is_sorted_unique=False),
                    intersection(self.values, a, b, interval, natural_cmp),
                    (a, b, interval))
        # the input is left untouched
        self.assertEqual([3.0, 1.0, 4.0, 1.0, 2.0, 4.0, 3.0], values)

    def test_not_sorted_contract(self):
        with self.assertRaises(AssertionError):
            intersection([2.0, 1.0, 3.0], 0.0, 5.0, CLOSED, natural_cmp)
        with self.assertRaises(AssertionError):
            intersection([1.0, 1.0, 3.0], 0.0, 5.0, CLOSED, natural_cmp)

    def test_tolerance(self):
        values = [0.1, 0.2, 0.1 + 0.2, 0.5]
        # 0.1 + 0.2 is not 0.3 for the native comparison
        self.assertEqual([0.1 + 0.2, 0.5],
                         intersection(values, 0.3, 1.0, LEFT_OPEN, natural_cmp))
        self.assertEqual([0.5],
                         intersection(values, 0.3, 1.0, LEFT_OPEN, fp_cmp))
        self.assertEqual([0.3], intersection(values, 0.3, 0.3, CLOSED, fp_cmp))
        self.assertEqual([], intersection(values, 0.3, 0.3, CLOSED, natural_cmp))

    def test_tolerance_dedup(self):
        values = [0.3, 0.1 + 0.2, 0.7, 0.1]
        self.assertEqual([0.1, 0.3, 0.7],
                         intersection(values, 0.0, 1.0, CLOSED, fp_cmp, is_sorted_unique=False))
        wide_cmp = partial(fp_cmp, eps=1e-3)
        self.assertEqual([1.0, 2.0],
                         intersection([1.0, 1.0001, 2.0], 0.0, 3.0, CLOSED, wide_cmp,
                                      is_sorted_unique=False))

    def test_other_types(self):
        words = ['apple', 'banana', 'cherry', 'date']
        self.assertEqual(['banana', 'cherry'],
                         intersection(words, 'b', 'cz', CLOSED, natural_cmp))
        self.assertEqual([2, 3],
                         intersection(range(1, 5), 1, 3, LEFT_OPEN, natural_cmp))
        self.assertEqual([3, 5],
                         intersection((5, 3, 1, 5), 2, 6, OPEN, natural_cmp, is_sorted_unique=False))

    def test_numpy_array(self):
        values = np.array(self.values)
        self.assertEqual([2.0, 3.0], intersection(values, 1.5, 3.5, CLOSED, fp_cmp))
        self.assertEqual([2.0], intersection(values, 1.0, 3.0, OPEN, fp_cmp))
        self.assertIsInstance(intersection(values, 0.0, 9.0, CLOSED, fp_cmp), list)

    def test_result_is_new_list(self):
        result = intersection(self.values, 0.0, 9.0, CLOSED, natural_cmp)
        self.assertEqual(self.values, result)
        self.assertIsNot(self.values, result)

    def test_invalid_interval(self):
        with self.assertRaises(TypeError):
            intersection(self.values, 0.0, 1.0, 'closed', natural_cmp)
        with self.assertRaises(TypeError):
            intersection(self.values, 0.0, 1.0, UnboundedRealInterval.LEFT_OPEN, natural_cmp)

    def test_logging(self):
        with self.assertLogs('tmc_numutils.intersect', level='DEBUG') as log:
            intersection(self.values, 2.5, 2.75, CLOSED, natural_cmp)
        self.assertIn('interval between two consecutive values', log.output[0])


class UnboundedIntersectionTestCase(unittest.TestCase):

    def setUp(self):
        self.values = [1.0, 2.0, 3.0, 4.0]

    def test_unbounded(self):
        self.assertEqual([3.0, 4.0], intersection_unbounded(
            self.values, 2.0, UnboundedRealInterval.LEFT_OPEN, natural_cmp))
        self.assertEqual([2.0, 3.0, 4.0], intersection_unbounded(
            self.values, 2.0, UnboundedRealInterval.LEFT_CLOSED, natural_cmp))
        self.assertEqual([1.0], intersection_unbounded(
            self.values, 2.0, UnboundedRealInterval.RIGHT_OPEN, natural_cmp))
        self.assertEqual([1.0, 2.0], intersection_unbounded(
            self.values, 2.0, UnboundedRealInterval.RIGHT_CLOSED, natural_cmp))

    def test_unbounded_limits(self):
        self.assertEqual(self.values, intersection_unbounded(
            self.values, 0.0, UnboundedRealInterval.LEFT_OPEN, natural_cmp))
        self.assertEqual([], intersection_unbounded(
            self.values, 4.0, UnboundedRealInterval.LEFT_OPEN, natural_cmp))
        self.assertEqual(self.values, intersection_unbounded(
            self.values, 5.0, UnboundedRealInterval.RIGHT_CLOSED, natural_cmp))
        self.assertEqual([], intersection_unbounded(
            self.values, 1.0, UnboundedRealInterval.RIGHT_OPEN, natural_cmp))
        self.assertEqual([], intersection_unbounded(
            [], 1.0, UnboundedRealInterval.RIGHT_OPEN, natural_cmp))

    def test_unbounded_not_sorted(self):
        self.assertEqual([2.0, 3.0], intersection_unbounded(
            [3.0, 2.0, 1.0, 3.0], 1.0 + 2e-16, UnboundedRealInterval.LEFT_OPEN, fp_cmp,
            is_sorted_unique=False))

    def test_invalid_interval(self):
        with self.assertRaises(TypeError):
            intersection_unbounded(self.values, 0.0, CLOSED, natural_cmp)


if __name__ == '__main__':
    unittest.main()
