"""
DateExtended — конверсия дат и единиц времени

Функции-расширения над datetime:
- Приведение к локальному времени / UTC
- Разница между датами во всех единицах
- Конверсия количества (ms, sec, min, hr, day, week, month, year) во все единицы

Невалидный вход возвращает None, исключения не выбрасываются.

Таблица конверсии: month = 4 weeks, year = 12 months. YEAR_IN_MS —
средний григорианский год и в конверсии не участвует.
"""

import math
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from typing import Dict, Final, Optional, Union

TimeUnit = Union[int, float, str]
DateType = Union[datetime, int, float, str]


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

SECOND_IN_MS: Final[int] = 1000
MINUTE_IN_MS: Final[int] = 60000
HOUR_IN_MS: Final[int] = 3600000
DAY_IN_MS: Final[int] = 86400000
WEEK_IN_MS: Final[int] = 604800000
MONTH_IN_MS: Final[int] = 2419200000
YEAR_IN_MS: Final[int] = 31556952000

# Точность разбора строковых значений (знаков после запятой)
STRING_AMOUNT_PRECISION: Final[int] = 4

_UNIT_MS: Final[Dict[str, int]] = {
    "milliseconds": 1,
    "seconds": SECOND_IN_MS,
    "minutes": MINUTE_IN_MS,
    "hours": HOUR_IN_MS,
    "days": DAY_IN_MS,
    "weeks": WEEK_IN_MS,
    "months": MONTH_IN_MS,
    "years": 12 * MONTH_IN_MS,
}


@dataclass(frozen=True)
class TimeUnits:
    """Одна длительность, выраженная во всех единицах."""

    milliseconds: float
    seconds: float
    minutes: float
    hours: float
    days: float
    weeks: float
    months: float
    years: float

    @classmethod
    def from_milliseconds(cls, ms: float) -> "TimeUnits":
        return cls(**{unit: ms / factor for unit, factor in _UNIT_MS.items()})


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# =============================================================================


def _as_utc(date: datetime) -> datetime:
    """Aware UTC datetime; naive значения считаются локальным временем."""
    return date.astimezone(timezone.utc)


def _coerce_date(value: DateType) -> Optional[datetime]:
    """
    Приведение str/number/datetime к datetime.

    - str: ISO 8601 (допускается суффикс 'Z')
    - int/float: epoch миллисекунды → локальное naive время
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            return None
        try:
            return datetime.fromtimestamp(value / 1000)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return None
    return None


def _parse_amount(value: TimeUnit) -> Optional[float]:
    """Число или числовая строка (округляется до 4 знаков); иначе None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        try:
            amount = round(float(value.strip()), STRING_AMOUNT_PRECISION)
        except ValueError:
            return None
        return amount if math.isfinite(amount) else None
    return None


def _convert(value: TimeUnit, unit: str) -> Optional[TimeUnits]:
    amount = _parse_amount(value)
    if amount is None:
        return None
    units = TimeUnits.from_milliseconds(amount * _UNIT_MS[unit])
    # Исходная единица возвращается без погрешности умножения/деления
    return replace(units, **{unit: amount})


# =============================================================================
# ДАТЫ
# =============================================================================


def to_local_time(date: DateType) -> Optional[datetime]:
    """
    Приведение даты к локальному представлению.

    str/number разбираются как дата; для datetime поля wall clock
    (год..секунды) интерпретируются как UTC.

    Returns:
        datetime, либо None для неподдерживаемого входа
    """
    if isinstance(date, datetime):
        return date.replace(microsecond=0, tzinfo=timezone.utc)
    if isinstance(date, (str, int, float)):
        return _coerce_date(date)
    return None


def to_utc(date: DateType) -> Optional[datetime]:
    """
    Приведение локальной даты к UTC.

    Returns:
        Naive datetime с полями UTC wall clock, либо None
    """
    coerced = _coerce_date(date)
    if coerced is None:
        return None
    return _as_utc(coerced).replace(tzinfo=None, microsecond=0)


def difference(recent: datetime, previous: datetime) -> Optional[TimeUnits]:
    """
    Разница между двумя датами во всех единицах.

    Args:
        recent: Более поздняя дата
        previous: Более ранняя дата

    Returns:
        TimeUnits (отрицательные значения если recent < previous), либо None
    """
    if not isinstance(recent, datetime) or not isinstance(previous, datetime):
        return None
    delta = _as_utc(recent) - _as_utc(previous)
    return TimeUnits.from_milliseconds(delta / timedelta(milliseconds=1))


# =============================================================================
# КОНВЕРСИЯ ЕДИНИЦ
# =============================================================================


def convert_milliseconds(ms: TimeUnit) -> Optional[TimeUnits]:
    return _convert(ms, "milliseconds")


def convert_seconds(sec: TimeUnit) -> Optional[TimeUnits]:
    return _convert(sec, "seconds")


def convert_minutes(minutes: TimeUnit) -> Optional[TimeUnits]:
    return _convert(minutes, "minutes")


def convert_hours(hr: TimeUnit) -> Optional[TimeUnits]:
    return _convert(hr, "hours")


def convert_days(days: TimeUnit) -> Optional[TimeUnits]:
    return _convert(days, "days")


def convert_weeks(weeks: TimeUnit) -> Optional[TimeUnits]:
    return _convert(weeks, "weeks")


def convert_months(mo: TimeUnit) -> Optional[TimeUnits]:
    return _convert(mo, "months")


def convert_years(yr: TimeUnit) -> Optional[TimeUnits]:
    return _convert(yr, "years")
