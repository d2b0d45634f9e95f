"""Resolve a human-supplied "as of" string into a submission cutoff.

Accepted forms:
    ''                      no cutoff, everything up to now qualifies
    YYYY                    through the end of that year
    YYYY-MM                 through the end of that month
    YYYY-MM-DD              through the end of that day
    YYYY-MM-DD HH:MM[:SS]   strictly before that exact moment

The period forms are inclusive ("through the end of X"), the moment form
is an exclusive upper bound ("up to this moment"). All instants are UTC,
matching the timestamps served by code.golf.
"""

import calendar
import re
from dataclasses import dataclass
from datetime import datetime, timezone

from .errors import ParseError


_YEAR = re.compile(r'^([0-9]{4})$')
_MONTH = re.compile(r'^([0-9]{4})-([0-9]{2})$')
_DAY = re.compile(r'^([0-9]{4})-([0-9]{2})-([0-9]{2})$')
_MOMENT = re.compile(r'^([0-9]{4})-([0-9]{2})-([0-9]{2})[ T]([0-9]{2}):([0-9]{2})(?::([0-9]{2}))?$')

END_OF_DAY = (23, 59, 59, 999999)


@dataclass(frozen=True)
class Cutoff:
    """A resolved upper bound on submission instants."""
    instant: datetime | None = None   # None means no filtering
    inclusive: bool = True
    text: str = ''

    def admits(self, submitted: datetime) -> bool:
        if self.instant is None:
            return True
        if self.inclusive:
            return submitted <= self.instant
        return submitted < self.instant

    def describe(self) -> str:
        if self.instant is None:
            return 'as of now'
        if self.inclusive:
            return f'through {self.text}'
        return f'before {self.text}'


def resolve_cutoff(text: str | None) -> Cutoff:
    """Turn a partial date/time string into a Cutoff.

    Args:
        text: '' or None for no cutoff, else one of the forms in the
              module docstring.

    Raises:
        ParseError: if the string matches no form or names an impossible
                    calendar date or time.
    """
    raw = (text or '').strip()
    if not raw:
        return Cutoff()

    try:
        m = _YEAR.match(raw)
        if m:
            year = int(m.group(1))
            return Cutoff(_end_of_day(year, 12, 31), True, raw)

        m = _MONTH.match(raw)
        if m:
            year, month = int(m.group(1)), int(m.group(2))
            _, last_day = calendar.monthrange(year, month)
            return Cutoff(_end_of_day(year, month, last_day), True, raw)

        m = _DAY.match(raw)
        if m:
            year, month, day = (int(g) for g in m.groups())
            return Cutoff(_end_of_day(year, month, day), True, raw)

        m = _MOMENT.match(raw)
        if m:
            year, month, day, hour, minute = (int(g) for g in m.groups()[:5])
            second = int(m.group(6) or 0)
            instant = datetime(year, month, day, hour, minute, second,
                               tzinfo=timezone.utc)
            return Cutoff(instant, False, raw)
    except ValueError as e:
        raise ParseError(f"Invalid cutoff {raw!r}: {e}") from e

    raise ParseError(
        f"Invalid cutoff {raw!r}: expected YYYY, YYYY-MM, YYYY-MM-DD "
        f"or YYYY-MM-DD HH:MM[:SS]")


def _end_of_day(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, *END_OF_DAY, tzinfo=timezone.utc)


def parse_timestamp(value: str) -> datetime:
    """Parse an API timestamp ("2024-03-01T12:34:56.789Z") as aware UTC.

    Naive timestamps are taken to be UTC.

    Raises:
        ValueError: if the value is not ISO-8601.
    """
    value = str(value).strip()
    if value.endswith('Z'):
        value = value[:-1] + '+00:00'
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)
