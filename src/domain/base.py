from datetime import UTC, datetime


def utcnow() -> datetime:
    """Naive UTC timestamp, the form every datetime column is stored in"""
    return datetime.now(UTC).replace(tzinfo=None)
