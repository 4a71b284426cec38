from datetime import UTC, datetime


def utcnow() -> datetime:
    """Naive UTC timestamp, matching the DateTime columns of every entity."""
    return datetime.now(UTC).replace(tzinfo=None)
