"""Domain normalization helpers for backend values."""

from datetime import date, datetime


def normalize_code(value: str | None) -> str | None:
    """Normalize enum-like codes such as kinds and statuses.

    Args:
        value: Raw code from a repository.

    Returns:
        str | None: Upper-cased code, or None when blank.
    """
    if not value:
        return None
    cleaned = value.strip()
    return cleaned.upper() if cleaned else None


def parse_backend_date(value: str | date | datetime) -> date:
    """Return the calendar day of a backend date value.

    ISO timestamps such as ``2025-07-28T00:00:00.000Z`` keep their UTC
    calendar day; plain ``YYYY-MM-DD`` strings are read as-is.

    Args:
        value: Date, datetime, or backend string.

    Returns:
        date: Calendar day of the value.

    Raises:
        TypeError: If the value is neither a date nor a string.
        ValueError: If the string cannot be parsed.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Unsupported date value: {value!r}")
    cleaned = value.strip()
    if "T" in cleaned:
        cleaned = cleaned.split("T", 1)[0]
    return date.fromisoformat(cleaned)


__all__ = ["normalize_code", "parse_backend_date"]
