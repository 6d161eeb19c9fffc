"""UTC day bucketing shared by diary writes and reads."""

from datetime import UTC, date, datetime, time, timedelta

from nutrition_diary.domain.errors import InvalidInputError


def utc_now() -> datetime:
    """Return the current instant in UTC."""
    return datetime.now(tz=UTC)


def utc_day(moment: datetime) -> date:
    """Return the UTC calendar day of a timestamp.

    Naive timestamps are treated as UTC.
    """
    if moment.tzinfo is None:
        return moment.date()
    return moment.astimezone(UTC).date()


def parse_day(raw: str | date) -> date:
    """Parse a client-supplied date or timestamp into a UTC calendar day.

    Accepts ``2024-09-12`` as well as full ISO timestamps such as
    ``2024-09-12T23:30:00-02:00``, which are normalized to UTC first.
    """
    if isinstance(raw, datetime):
        return utc_day(raw)
    if isinstance(raw, date):
        return raw
    value = raw.strip() if isinstance(raw, str) else ""
    if not value:
        raise InvalidInputError("Date is required")
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as exc:
        raise InvalidInputError(f"Invalid date: {value}") from exc
    return utc_day(parsed)


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """Return the UTC start of ``day`` and the start of the next day."""
    start = datetime.combine(day, time.min, tzinfo=UTC)
    return start, start + timedelta(days=1)


def in_day(moment: datetime, day: date) -> bool:
    """Return True when the timestamp falls on the given UTC day."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    start, end = day_bounds(day)
    return start <= moment < end
