"""Wall-clock time read from CMOS real-time clock registers."""

from __future__ import annotations

import calendar
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import datetime
from enum import IntEnum

_MASK64 = (1 << 64) - 1

SECONDS_REGISTER = 0x00
MINUTES_REGISTER = 0x02
HOURS_REGISTER = 0x04
WEEKDAY_REGISTER = 0x06
DAY_REGISTER = 0x07
MONTH_REGISTER = 0x08
YEAR_REGISTER = 0x09
CENTURY_REGISTER = 0x32

_DAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)
_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class Timezone(IntEnum):
    """Whole-hour offsets from UTC; the clock itself keeps UTC.

    Mumbai is additionally shifted by thirty minutes when applied.
    """

    UTC = 0
    PACIFIC = -7
    MOUNTAIN = -6
    CENTRAL = -5
    EASTERN = -4
    LONDON = 1
    CENTRAL_EUROPE = 2
    BERLIN = 2
    MOSCOW = 3
    DUBAI = 4
    MUMBAI = 5
    SINGAPORE = 8
    BEIJING = 8
    CHINA = 8
    TOKYO = 9
    SYDNEY = 10
    NEW_ZEALAND = 12


@dataclass(frozen=True)
class TimeOfDay:
    """Hours, minutes and seconds, with a PM flag for 12-hour form."""

    seconds: int
    minutes: int
    hours: int
    pm: bool = False


def bcd_to_int(value: int) -> int:
    """Decode a binary-coded decimal byte."""
    return (value & 0x0F) + (value // 16) * 10


def _int_to_bcd(value: int) -> int:
    if not 0 <= value <= 99:
        raise ValueError(f"{value} cannot be stored as two BCD digits")
    return (value // 10) * 16 + value % 10


def day_of_week_name(day: int) -> str:
    """Name of the day, counting Sunday as 0; other values give ``'Unknown'``."""
    return _DAY_NAMES[day] if 0 <= day < len(_DAY_NAMES) else "Unknown"


def to_12_hour(time: TimeOfDay) -> TimeOfDay:
    """The same time on a 12-hour clock with the PM flag set."""
    if time.hours == 0:
        return replace(time, hours=12, pm=False)
    if time.hours == 12:
        return replace(time, pm=True)
    if time.hours > 12:
        return replace(time, hours=time.hours - 12, pm=True)
    return replace(time, pm=False)


def registers_from_datetime(moment: datetime) -> dict[int, int]:
    """CMOS register contents describing ``moment``, Sunday counted as 0."""
    century, year = divmod(moment.year, 100)
    return {
        SECONDS_REGISTER: _int_to_bcd(moment.second),
        MINUTES_REGISTER: _int_to_bcd(moment.minute),
        HOURS_REGISTER: _int_to_bcd(moment.hour),
        WEEKDAY_REGISTER: moment.isoweekday() % 7,
        DAY_REGISTER: _int_to_bcd(moment.day),
        MONTH_REGISTER: _int_to_bcd(moment.month),
        YEAR_REGISTER: _int_to_bcd(year),
        CENTURY_REGISTER: _int_to_bcd(century),
    }


class RealTimeClock:
    """Reads date and time through a function returning a register's byte."""

    def __init__(self, read_register: Callable[[int], int]) -> None:
        self._read = read_register
        self.timezone = Timezone.UTC
        self._boot_time = 0

    def _bcd(self, register: int) -> int:
        return bcd_to_int(self._read(register))

    def seconds(self) -> int:
        return self._bcd(SECONDS_REGISTER)

    def minutes(self) -> int:
        return self._bcd(MINUTES_REGISTER)

    def hours(self) -> int:
        return self._bcd(HOURS_REGISTER)

    def day(self) -> int:
        return self._bcd(DAY_REGISTER)

    def month(self) -> int:
        return self._bcd(MONTH_REGISTER)

    def year(self) -> int:
        """Year within the century."""
        return self._bcd(YEAR_REGISTER)

    def century(self) -> int:
        return self._bcd(CENTURY_REGISTER)

    def day_of_week(self) -> int:
        """The raw weekday register, not BCD decoded."""
        return self._read(WEEKDAY_REGISTER)

    def system_time(self) -> int:
        """Seconds since 1970-01-01 00:00:00, as an unsigned 64-bit value."""
        year = self.year() + self.century() * 100
        month = self.month()
        day = self.day()
        hours = self.hours()
        minutes = self.minutes()
        seconds = self.seconds()

        days_in_month = list(_DAYS_IN_MONTH)
        if calendar.isleap(year):
            days_in_month[1] = 29
        total_days = sum(366 if calendar.isleap(y) else 365 for y in range(1970, year))
        total_days += sum(days_in_month[: max(0, month - 1)])
        total_days += day - 1
        total = total_days * 86400 + hours * 3600 + minutes * 60 + seconds
        return total & _MASK64

    def current_time(self) -> int:
        """Seconds since midnight."""
        return self.seconds() + self.minutes() * 60 + self.hours() * 3600

    def initialize(self) -> None:
        """Record the current time of day as the boot time."""
        self._boot_time = self.current_time()

    def time_since_boot(self) -> int:
        """Seconds elapsed since :meth:`initialize` within the same day."""
        return self.current_time() - self._boot_time

    def time(self, timezone: Timezone | None = None) -> TimeOfDay:
        """24-hour time in ``timezone``, or in the clock's own timezone."""
        if timezone is None:
            timezone = self.timezone
        seconds = self.seconds()
        minutes = self.minutes()
        hours = self.hours() + int(timezone)
        if timezone == Timezone.MUMBAI:
            minutes += 30
            if minutes >= 60:
                minutes -= 60
                hours += 1
        if hours < 0:
            hours += 24
        elif hours >= 24:
            hours -= 24
        return TimeOfDay(seconds, minutes, hours, False)

    def time12(self, timezone: Timezone | None = None) -> TimeOfDay:
        """12-hour time in ``timezone``, or in the clock's own timezone."""
        return to_12_hour(self.time(timezone))