"""Wall-clock time read from a real-time clock's BCD registers."""

from __future__ import annotations

import calendar
from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import IntEnum

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_SECONDS_PER_DAY = 86400
_EPOCH_YEAR = 1970


class RtcRegister(IntEnum):
    """Index of each value in the real-time clock's register file."""

    SECONDS = 0x00
    MINUTES = 0x02
    HOURS = 0x04
    WEEKDAY = 0x06
    DAY = 0x07
    MONTH = 0x08
    YEAR = 0x09
    CENTURY = 0x32


def bcd_decode(value: int) -> int:
    """Decode one binary-coded-decimal byte."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"BCD value out of byte range: {value}")
    return (value & 0x0F) + (value >> 4) * 10


@dataclass(frozen=True)
class TimeOfDay:
    """Hours, minutes and seconds, with a PM flag for the 12-hour form."""

    hours: int
    minutes: int
    seconds: int
    pm: bool = False


def to_12_hour(time: TimeOfDay) -> TimeOfDay:
    """Convert a 24-hour time of day to the 12-hour form."""
    if time.hours == 0:
        return replace(time, hours=12, pm=False)
    if time.hours == 12:
        return replace(time, pm=True)
    if time.hours > 12:
        return replace(time, hours=time.hours - 12, pm=True)
    return replace(time, pm=False)


class Clock:
    """Reads date and time through a function returning a raw register byte."""

    def __init__(self, read_register: Callable[[int], int]) -> None:
        self._read = read_register
        self._boot_time = 0

    def _bcd(self, register: RtcRegister) -> int:
        return bcd_decode(self._read(int(register)))

    def seconds(self) -> int:
        """Seconds of the current minute."""
        return self._bcd(RtcRegister.SECONDS)

    def minutes(self) -> int:
        """Minutes of the current hour."""
        return self._bcd(RtcRegister.MINUTES)

    def hours(self) -> int:
        """Hours of the current day."""
        return self._bcd(RtcRegister.HOURS)

    def century(self) -> int:
        """Century, such as 20."""
        return self._bcd(RtcRegister.CENTURY)

    def year(self) -> int:
        """Year within the century."""
        return self._bcd(RtcRegister.YEAR)

    def month(self) -> int:
        """Month, 1 to 12."""
        return self._bcd(RtcRegister.MONTH)

    def day(self) -> int:
        """Day of the month."""
        return self._bcd(RtcRegister.DAY)

    def weekday(self) -> int:
        """Day of the week as the raw, undecoded register value."""
        return self._read(int(RtcRegister.WEEKDAY))

    def current_time(self) -> int:
        """Seconds elapsed since midnight."""
        return self.seconds() + self.minutes() * 60 + self.hours() * 3600

    def mark_boot(self) -> None:
        """Remember the current time as the boot time."""
        self._boot_time = self.current_time()

    def since_boot(self) -> int:
        """Seconds since :meth:`mark_boot` was last called (or since midnight)."""
        return self.current_time() - self._boot_time

    def system_time(self) -> int:
        """Seconds since 1970-01-01 00:00:00."""
        year = self.year() + self.century() * 100
        month = self.month()
        if not 1 <= month <= 12:
            raise ValueError(f"month out of range: {month}")
        days_in_month = list(_DAYS_IN_MONTH)
        if calendar.isleap(year):
            days_in_month[1] = 29
        total_days = sum(
            366 if calendar.isleap(y) else 365 for y in range(_EPOCH_YEAR, year)
        )
        total_days += sum(days_in_month[: month - 1])
        total_days += self.day() - 1
        return (
            total_days * _SECONDS_PER_DAY
            + self.hours() * 3600
            + self.minutes() * 60
            + self.seconds()
        )

    def time_of_day(self, offset: int = 0, half_hour: bool = False) -> TimeOfDay:
        """Current 24-hour time shifted by ``offset`` hours.

        ``half_hour`` adds a further thirty minutes, for zones offset by a
        half hour. The hour wraps once into the range of a day.
        """
        seconds = self.seconds()
        minutes = self.minutes()
        hours = self.hours() + offset
        if half_hour:
            minutes += 30
            if minutes >= 60:
                minutes -= 60
                hours += 1
        if hours < 0:
            hours += 24
        elif hours >= 24:
            hours -= 24
        return TimeOfDay(hours, minutes, seconds, pm=False)

    def time_of_day_12(self, offset: int = 0, half_hour: bool = False) -> TimeOfDay:
        """Current time as by :meth:`time_of_day`, in the 12-hour form."""
        return to_12_hour(self.time_of_day(offset, half_hour))