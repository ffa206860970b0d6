from datetime import datetime, UTC


def get_now() -> datetime:
    """Current time for deadline checks. Overridden in tests to pin the clock."""
    return datetime.now(UTC)
