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
"""Module that compares dates without taking the time of day into account.

datetime(2025, 12, 25, 2) and datetime(2025, 12, 25, 4) are both Christmas
2025, but they are not equal because the hours differ. cmp_date() and the
date_eq(), date_ne(), date_lt(), date_le(), date_gt(), date_ge() predicates
only look at the calendar day, so that

    date_eq(datetime(2011, 9, 18, 2), datetime(2011, 9, 18, 5)) is True
    date_lt(datetime(2011, 9, 18, 2), datetime(2011, 10, 18, 1)) is True

MonthMonthday represents the special dates that come back every year
(New Year's Day, Labour Day, Christmas Day). They can be compared with each
other and with datetime objects, the year being ignored:

    date_eq(MonthMonthday(5, 1), datetime(2020, 5, 1, 3)) is True

Months are numbered 1-12 and weekdays follow the calendar module
(calendar.MONDAY == 0 ... calendar.SUNDAY == 6).
"""

import calendar
from datetime import datetime

from tmc_numutils.exceptions import ContractViolation

# Largest day of each month, February 29 included
_MAX_MONTHDAY = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class MonthMonthday:
    """Date that does not change from year to year.

    For example New Year's Day (1, 1), Labour Day (5, 1) or Christmas Day (12, 25).
    """

    __slots__ = ('_month', '_monthday', '_zone')

    def __init__(self, month=1, monthday=1, zone=None):
        """Initialize.

        Args:
            month (int): 1-12
            monthday (int): Day of the month, February 29 is allowed
            zone (tzinfo): Time zone, None if not relevant
        """
        if not 1 <= month <= 12:
            raise ContractViolation('month=%r must be in [1, 12]' % (month,))
        if not 1 <= monthday <= _MAX_MONTHDAY[month - 1]:
            raise ContractViolation(
                'monthday=%r is not a day of month %d' % (monthday, month))
        self._month = month
        self._monthday = monthday
        self._zone = zone

    @property
    def month(self):
        return self._month

    @property
    def monthday(self):
        return self._monthday

    @property
    def zone(self):
        return self._zone

    def __eq__(self, other):
        if not isinstance(other, MonthMonthday):
            return NotImplemented
        return (self._month, self._monthday, self._zone) == (
            other._month, other._monthday, other._zone)

    def __hash__(self):
        return hash((self._month, self._monthday, self._zone))

    def __repr__(self):
        return 'MonthMonthday(month=%d, monthday=%d, zone=%r)' % (
            self._month, self._monthday, self._zone)


def _check_type(dt):
    if not isinstance(dt, (datetime, MonthMonthday)):
        raise TypeError('datetime or MonthMonthday is needed, not %s' % type(dt).__name__)


def _check_same_zone(dt1, dt2):
    if dt1.tzinfo != dt2.tzinfo:
        raise ContractViolation(
            'time zones differ: %r, %r' % (dt1.tzinfo, dt2.tzinfo))


def cmp_date(dt1, dt2):
    """Compare dt1 and dt2 ignoring the time of day.

    A MonthMonthday is compared by (month, monthday): when the other operand
    is a datetime, its year is ignored too.

    Args:
        dt1, dt2 (datetime or MonthMonthday): Dates to compare
    Return:
        -1, 0 or 1
    Raises:
        ContractViolation: the time zones are not the same
    """
    _check_type(dt1)
    _check_type(dt2)
    if isinstance(dt1, MonthMonthday) and isinstance(dt2, MonthMonthday):
        if dt1.zone is not None and dt2.zone is not None and dt1.zone != dt2.zone:
            raise ContractViolation(
                'time zones differ: %r, %r' % (dt1.zone, dt2.zone))
        key1 = (dt1.month, dt1.monthday)
        key2 = (dt2.month, dt2.monthday)
        return int(key1 > key2) - int(key1 < key2)
    if isinstance(dt1, MonthMonthday):
        return -cmp_date(dt2, dt1)
    if isinstance(dt2, MonthMonthday):
        return cmp_date(MonthMonthday(dt1.month, dt1.day, dt1.tzinfo), dt2)
    _check_same_zone(dt1, dt2)
    if (dt1.year, dt1.month, dt1.day) == (dt2.year, dt2.month, dt2.day):
        return 0
    if dt1 < dt2:
        return -1
    return 1


def cmp_date_no_zero(dt1, dt2):
    """Return -1 if cmp_date(dt1, dt2) == -1, 1 otherwise.

    Never returns 0, so it tells strictly increasing dates apart from merely
    increasing ones: a sequence is strictly increasing only if every
    consecutive pair gives -1.
    """
    return -1 if cmp_date(dt1, dt2) == -1 else 1


def date_eq(dt1, dt2):
    """dt1 is the same day as dt2."""
    return cmp_date(dt1, dt2) == 0


def date_ne(dt1, dt2):
    """dt1 is not the same day as dt2."""
    return cmp_date(dt1, dt2) != 0


def date_lt(dt1, dt2):
    """dt1 is a day before dt2."""
    return cmp_date(dt1, dt2) == -1


def date_le(dt1, dt2):
    return cmp_date(dt1, dt2) <= 0


def date_gt(dt1, dt2):
    """dt1 is a day after dt2."""
    return cmp_date(dt1, dt2) == 1


def date_ge(dt1, dt2):
    return cmp_date(dt1, dt2) >= 0


def gregorian_easter_sunday_mmdd(year):
    """Return (month, monthday) of Gregorian Easter Sunday, None before 1583.

    Anonymous Gregorian algorithm (Meeus/Jones/Butcher). The Gregorian
    calendar came into effect on October 15th, 1582, so the date is only
    defined from 1583 on.
    """
    if year < 1583:
        return None
    a = year % 19
    (b, c) = divmod(year, 100)
    (d, e) = divmod(b, 4)
    g = (8 * b + 13) // 25
    h = (19 * a + b - d - g + 15) % 30
    (i, k) = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 19 * l) // 433
    n = (h + l - 7 * m + 90) // 25
    p = (h + l - 7 * m + 33 * n + 19) % 32
    return (n, p)


def gregorian_easter_sunday(year, hour=0, minute=0, second=0, microsecond=0, tzinfo=None):
    """Return Gregorian Easter Sunday of year as a datetime, None before 1583."""
    easter = gregorian_easter_sunday_mmdd(year)
    if easter is None:
        return None
    (month, monthday) = easter
    return datetime(year, month, monthday, hour, minute, second, microsecond, tzinfo=tzinfo)


def julian_easter_sunday_mmdd(year):
    """Return (month, monthday) of Julian Easter Sunday, None before 34.

    Meeus's Julian algorithm. The date is expressed in the Julian calendar.
    """
    if year < 34:
        return None
    a = year % 4
    b = year % 7
    c = year % 19
    d = (19 * c + 15) % 30
    e = (2 * a + 4 * b - d + 34) % 7
    (month, day) = divmod(d + e + 114, 31)
    return (month, day + 1)


def is_last_day_of_february(dt):
    if dt.month != 2:
        return False
    if calendar.isleap(dt.year):
        return dt.day == 29
    return dt.day == 28


def get_day_of_week(dt):
    """Return the day of the week of dt (calendar.MONDAY ... calendar.SUNDAY)."""
    return calendar.weekday(dt.year, dt.month, dt.day)


def is_saturday_or_sunday(dt):
    return get_day_of_week(dt) in (calendar.SATURDAY, calendar.SUNDAY)


def nth_weekday(n, weekday, month, year):
    """Return the day of the month of the n-th weekday of the month.

    Args:
        n (int): Counted from the beginning of the month if n > 0,
            from the end of the month if n < 0
        weekday (int): calendar.MONDAY ... calendar.SUNDAY
        month (int): 1-12
        year (int): Year
    Return:
        Day of the month, None if there is no such day
        (in particular if n == 0 or abs(n) > 5)
    """
    if not 0 <= weekday <= 6:
        raise ContractViolation('weekday=%r must be in [0, 6]' % (weekday,))
    if n == 0 or abs(n) > 5:
        return None
    (weekday_first, days_in_month) = calendar.monthrange(year, month)
    if n > 0:
        monthday = (weekday - weekday_first) % 7 + 7 * (n - 1) + 1
    else:
        weekday_last = calendar.weekday(year, month, days_in_month)
        monthday = days_in_month - (weekday_last - weekday) % 7 + 7 * (n + 1)
    if 1 <= monthday <= days_in_month:
        return monthday
    return None


def diff_days(dt1, dt2):
    """Return the number of nights from dt2 to dt1.

    The time of day is ignored: 23:00 to 01:00 on the next day is one night,
    00:00 to 23:59 on the same day is none. diff_days(dt2, dt1) == -diff_days(dt1, dt2).

    Raises:
        ContractViolation: the time zones are not the same
    """
    _check_same_zone(dt1, dt2)
    return (dt1.date() - dt2.date()).days
