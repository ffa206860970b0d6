from datetime import datetime, timedelta, UTC


def ensure_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime. Naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def compute_deadline(kickoff_time: datetime, cutoff_seconds: int) -> datetime:
    """Latest instant (exclusive) a prediction is accepted for a match."""
    return ensure_utc(kickoff_time) - timedelta(seconds=cutoff_seconds)


def is_open(now: datetime, deadline: datetime) -> bool:
    # Exactly at the deadline is already closed
    return ensure_utc(now) < ensure_utc(deadline)
