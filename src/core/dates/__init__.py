"""
Утилиты дат и времени.

DateUtil (текущее время, строковые форматы) и DateExtended
(конверсия дат и единиц времени).
"""

from src.core.dates.date_extended import (
    DAY_IN_MS,
    HOUR_IN_MS,
    MINUTE_IN_MS,
    MONTH_IN_MS,
    SECOND_IN_MS,
    WEEK_IN_MS,
    YEAR_IN_MS,
    TimeUnits,
    convert_days,
    convert_hours,
    convert_milliseconds,
    convert_minutes,
    convert_months,
    convert_seconds,
    convert_weeks,
    convert_years,
    difference,
    to_local_time,
    to_utc,
)
from src.core.dates.date_util import (
    convert_to_iso_string,
    convert_to_utc_string,
    get_current_time_iso,
    get_current_time_utc,
    get_current_utc_time_in_millisec,
    get_utc_timezone_offset,
)

__all__ = [
    # Constants
    "SECOND_IN_MS",
    "MINUTE_IN_MS",
    "HOUR_IN_MS",
    "DAY_IN_MS",
    "WEEK_IN_MS",
    "MONTH_IN_MS",
    "YEAR_IN_MS",
    # DateExtended
    "TimeUnits",
    "to_local_time",
    "to_utc",
    "difference",
    "convert_milliseconds",
    "convert_seconds",
    "convert_minutes",
    "convert_hours",
    "convert_days",
    "convert_weeks",
    "convert_months",
    "convert_years",
    # DateUtil
    "get_current_time_utc",
    "get_current_time_iso",
    "get_current_utc_time_in_millisec",
    "get_utc_timezone_offset",
    "convert_to_utc_string",
    "convert_to_iso_string",
]
