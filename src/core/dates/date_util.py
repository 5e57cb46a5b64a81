"""
DateUtil — текущее время и строковые представления дат

Форматы совпадают с браузерными Date.toUTCString() / Date.toISOString():
- UTC string: 'Mon, 19 Oct 2026 12:00:00 GMT' (RFC 1123)
- ISO string: '2026-10-19T12:00:00.000Z'
"""

import time
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Final, Optional

# Значение смещения для невалидного входа
INVALID_TIMEZONE_OFFSET: Final[int] = -1


def _as_utc(date: datetime) -> datetime:
    return date.astimezone(timezone.utc)


def convert_to_utc_string(date: Optional[datetime] = None) -> Optional[str]:
    """
    datetime → RFC 1123 строка в GMT.

    Naive datetime считается локальным временем.

    Returns:
        Строка, либо None если date не datetime
    """
    if not isinstance(date, datetime):
        return None
    return format_datetime(_as_utc(date), usegmt=True)


def convert_to_iso_string(date: Optional[datetime] = None) -> Optional[str]:
    """
    datetime → ISO 8601 строка в UTC с миллисекундами и суффиксом 'Z'.

    Returns:
        Строка, либо None если date не datetime
    """
    if not isinstance(date, datetime):
        return None
    return _as_utc(date).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def get_current_time_utc() -> str:
    """Текущее время в формате RFC 1123 (GMT)."""
    return convert_to_utc_string(datetime.now(timezone.utc))


def get_current_time_iso() -> str:
    """Текущее время в формате ISO 8601 (UTC)."""
    return convert_to_iso_string(datetime.now(timezone.utc))


def get_current_utc_time_in_millisec() -> int:
    """Текущее время, epoch миллисекунды."""
    return time.time_ns() // 1_000_000


def get_utc_timezone_offset(date: Optional[datetime] = None) -> int:
    """
    Смещение часового пояса даты относительно UTC.

    Знак как у Date.getTimezoneOffset(): UTC минус локальное время,
    т.е. UTC+03:00 → -180.

    Args:
        date: Aware datetime, либо naive (локальное время)

    Returns:
        Смещение в минутах, либо -1 если date не datetime
    """
    if not isinstance(date, datetime):
        return INVALID_TIMEZONE_OFFSET

    offset = date.utcoffset()
    if offset is None:
        offset = date.astimezone().utcoffset()
    return int(round(-offset.total_seconds() / 60))
