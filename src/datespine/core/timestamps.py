"""
Clock and epoch helpers (stdlib-only).

The toolkit works in naive UTC datetimes. These helpers are the only places
that read the host clock or convert between epoch numbers and datetimes.

STDLIB ONLY - NO PYDANTIC.
"""

from datetime import UTC, datetime, timedelta

EPOCH = datetime(1970, 1, 1)


def utc_now() -> datetime:
    """Get current UTC datetime (aware)."""
    return datetime.now(UTC)


def naive_utc_now() -> datetime:
    """Get current UTC datetime without tzinfo."""
    return utc_now().replace(tzinfo=None)


def from_epoch_millis(epoch_millis: int) -> datetime:
    """Epoch milliseconds -> naive UTC datetime (exact, no float rounding)."""
    return EPOCH + timedelta(milliseconds=epoch_millis)


def to_epoch_millis(value: datetime) -> int:
    """Naive UTC datetime -> epoch milliseconds, truncated toward negative infinity."""
    delta = value - EPOCH
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


__all__ = [
    "EPOCH",
    "utc_now",
    "naive_utc_now",
    "from_epoch_millis",
    "to_epoch_millis",
]
