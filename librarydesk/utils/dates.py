from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

DURATION_DAYS = {
    "3-days": 3,
    "1-week": 7,
    "2-week": 14,
}
MONTHLY_DURATIONS = {"1-month": 1}
DURATIONS = tuple(DURATION_DAYS) + tuple(MONTHLY_DURATIONS)


def add_months(start: date, months: int) -> date:
    """Takvim ayı ekler; hedef ayda olmayan gün sonraki aya taşar (31 Ocak + 1 ay -> 2/3 Mart)."""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    return date(year, month, 1) + timedelta(days=start.day - 1)


def due_date_for(duration: str, start: date) -> date:
    if duration in DURATION_DAYS:
        return start + timedelta(days=DURATION_DAYS[duration])
    if duration in MONTHLY_DURATIONS:
        return add_months(start, MONTHLY_DURATIONS[duration])
    raise ValueError(f"Unknown duration '{duration}'. Expected one of: {', '.join(DURATIONS)}")


def date_from_parts(year: int, month: int, day: int) -> datetime:
    # month 1-indexed gelir; geçersiz tarih (ör. 13. ay) ValueError fırlatır, taşma yok
    return datetime(year, month, day)


def parse_due_date(value) -> datetime:
    """newReturnDate: {year, month, day} ya da ISO tarih/zaman string'i."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, dict):
        try:
            parsed = date_from_parts(int(value["year"]), int(value["month"]), int(value["day"]))
        except KeyError as e:
            raise ValueError(f"missing {e.args[0]}") from e
        except TypeError as e:
            raise ValueError("year, month and day must be numbers") from e
        except OverflowError as e:
            raise ValueError("year, month or day is out of range") from e
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    else:
        raise ValueError("expected an ISO date string or a {year, month, day} object")

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed
