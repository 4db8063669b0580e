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
"""Comparison of dates and floating point numbers, intersection with real intervals."""

from tmc_numutils.dates import cmp_date  # noqa: F401
from tmc_numutils.dates import cmp_date_no_zero  # noqa: F401
from tmc_numutils.dates import date_eq  # noqa: F401
from tmc_numutils.dates import date_ge  # noqa: F401
from tmc_numutils.dates import date_gt  # noqa: F401
from tmc_numutils.dates import date_le  # noqa: F401
from tmc_numutils.dates import date_lt  # noqa: F401
from tmc_numutils.dates import date_ne  # noqa: F401
from tmc_numutils.dates import diff_days  # noqa: F401
from tmc_numutils.dates import get_day_of_week  # noqa: F401
from tmc_numutils.dates import gregorian_easter_sunday  # noqa: F401
from tmc_numutils.dates import gregorian_easter_sunday_mmdd  # noqa: F401
from tmc_numutils.dates import is_last_day_of_february  # noqa: F401
from tmc_numutils.dates import is_saturday_or_sunday  # noqa: F401
from tmc_numutils.dates import julian_easter_sunday_mmdd  # noqa: F401
from tmc_numutils.dates import MonthMonthday  # noqa: F401
from tmc_numutils.dates import nth_weekday  # noqa: F401
from tmc_numutils.exceptions import ContractViolation  # noqa: F401
from tmc_numutils.fpcmp import eq  # noqa: F401
from tmc_numutils.fpcmp import float_info  # noqa: F401
from tmc_numutils.fpcmp import fp_cmp  # noqa: F401
from tmc_numutils.fpcmp import geq  # noqa: F401
from tmc_numutils.fpcmp import gt  # noqa: F401
from tmc_numutils.fpcmp import leq  # noqa: F401
from tmc_numutils.fpcmp import lt  # noqa: F401
from tmc_numutils.fpcmp import neq  # noqa: F401
from tmc_numutils.intersect import BoundedRealInterval  # noqa: F401
from tmc_numutils.intersect import intersection  # noqa: F401
from tmc_numutils.intersect import intersection_unbounded  # noqa: F401
from tmc_numutils.intersect import natural_cmp  # noqa: F401
from tmc_numutils.intersect import UnboundedRealInterval  # noqa: F401
