import calendar
from datetime import datetime, timedelta

import pytest

from hydrix.clock import (
    HOURS_REGISTER,
    MINUTES_REGISTER,
    SECONDS_REGISTER,
    RealTimeClock,
    TimeOfDay,
    Timezone,
    bcd_to_int,
    day_of_week_name,
    registers_from_datetime,
    to_12_hour,
)

MOMENTS = [
    datetime(2024, 3, 15, 13, 45, 30),
    datetime(2000, 2, 29, 0, 0, 0),
    datetime(1999, 12, 31, 23, 59, 59),
    datetime(2023, 7, 1, 5, 10, 20),
    datetime(2024, 12, 31, 23, 45, 0),
]


def _clock(moment):
    registers = registers_from_datetime(moment)
    return RealTimeClock(registers.__getitem__), registers


@pytest.mark.parametrize("value", [0, 7, 10, 42, 59, 99])
def test_bcd_round_trip_through_registers(value):
    moment = datetime(2000 + value, 1, 1)
    registers = registers_from_datetime(moment)
    assert bcd_to_int(registers[0x09]) == value


def test_bcd_decodes_nibbles():
    assert bcd_to_int(0x59) == 59


def test_day_names():
    assert day_of_week_name(0) == "Sunday"
    assert day_of_week_name(6) == "Saturday"
    assert day_of_week_name(7) == "Unknown"
    assert day_of_week_name(-1) == "Unknown"


@pytest.mark.parametrize("moment", MOMENTS)
def test_fields_read_back(moment):
    clock, _ = _clock(moment)
    assert clock.seconds() == moment.second
    assert clock.minutes() == moment.minute
    assert clock.hours() == moment.hour
    assert clock.day() == moment.day
    assert clock.month() == moment.month
    assert clock.year() + clock.century() * 100 == moment.year
    assert day_of_week_name(clock.day_of_week()) == moment.strftime("%A")


@pytest.mark.parametrize("moment", MOMENTS)
def test_system_time_matches_epoch_seconds(moment):
    clock, _ = _clock(moment)
    assert clock.system_time() == calendar.timegm(moment.timetuple())


@pytest.mark.parametrize("moment", MOMENTS)
def test_current_time_is_seconds_since_midnight(moment):
    clock, _ = _clock(moment)
    midnight = moment.replace(hour=0, minute=0, second=0)
    assert clock.current_time() == int((moment - midnight).total_seconds())


def test_time_since_boot():
    start = datetime(2024, 5, 1, 10, 0, 0)
    later = start + timedelta(minutes=3, seconds=7)
    registers = registers_from_datetime(start)
    clock = RealTimeClock(registers.__getitem__)
    assert clock.time_since_boot() == clock.current_time()
    clock.initialize()
    assert clock.time_since_boot() == 0
    registers.update(registers_from_datetime(later))
    assert clock.time_since_boot() == int((later - start).total_seconds())


@pytest.mark.parametrize("moment", MOMENTS)
@pytest.mark.parametrize(
    "zone",
    [Timezone.UTC, Timezone.PACIFIC, Timezone.EASTERN, Timezone.TOKYO, Timezone.NEW_ZEALAND],
)
def test_time_in_whole_hour_zones(moment, zone):
    clock, _ = _clock(moment)
    shifted = moment + timedelta(hours=int(zone))
    result = clock.time(zone)
    assert (result.hours, result.minutes, result.seconds) == (
        shifted.hour,
        shifted.minute,
        shifted.second,
    )
    assert result.pm is False


@pytest.mark.parametrize("moment", MOMENTS)
def test_time_in_mumbai_adds_half_hour(moment):
    clock, _ = _clock(moment)
    shifted = moment + timedelta(hours=5, minutes=30)
    result = clock.time(Timezone.MUMBAI)
    assert (result.hours, result.minutes, result.seconds) == (
        shifted.hour,
        shifted.minute,
        shifted.second,
    )


def test_default_timezone_is_clock_setting():
    clock, _ = _clock(MOMENTS[0])
    assert clock.time() == clock.time(Timezone.UTC)
    clock.timezone = Timezone.TOKYO
    assert clock.time() == clock.time(Timezone.TOKYO)
    assert clock.time12() == clock.time12(Timezone.TOKYO)


def test_timezone_aliases():
    assert Timezone(2) is Timezone.BERLIN
    assert Timezone(2) is Timezone.CENTRAL_EUROPE
    assert Timezone(8) is Timezone.BEIJING
    assert Timezone(8) is Timezone.SINGAPORE


@pytest.mark.parametrize("hour", range(24))
def test_12_hour_round_trip(hour):
    result = to_12_hour(TimeOfDay(5, 6, hour))
    assert 1 <= result.hours <= 12
    assert result.hours % 12 + (12 if result.pm else 0) == hour
    assert (result.minutes, result.seconds) == (6, 5)


def test_12_hour_midnight_and_noon():
    assert to_12_hour(TimeOfDay(0, 0, 0)) == TimeOfDay(0, 0, 12, False)
    assert to_12_hour(TimeOfDay(0, 0, 12)) == TimeOfDay(0, 0, 12, True)


@pytest.mark.parametrize("moment", MOMENTS)
def test_time12_matches_time(moment):
    clock, _ = _clock(moment)
    assert clock.time12(Timezone.DUBAI) == to_12_hour(clock.time(Timezone.DUBAI))


def test_registers_hold_bcd():
    registers = registers_from_datetime(datetime(2024, 1, 1, 23, 59, 45))
    assert registers[HOURS_REGISTER] == 0x23
    assert registers[MINUTES_REGISTER] == 0x59
    assert registers[SECONDS_REGISTER] == 0x45


def test_registers_hold_two_digit_century():
    assert bcd_to_int(registers_from_datetime(datetime(9999, 1, 1))[0x32]) == 99