from datetime import datetime, timedelta, timezone, UTC

from prode.services.cutoff import compute_deadline, ensure_utc, is_open

KICKOFF = datetime(2026, 3, 1, 18, 0, tzinfo=UTC)


def test_deadline_is_kickoff_minus_cutoff():
    assert compute_deadline(KICKOFF, 600) == datetime(2026, 3, 1, 17, 50, tzinfo=UTC)


def test_zero_cutoff_deadline_is_kickoff():
    assert compute_deadline(KICKOFF, 0) == KICKOFF


def test_naive_kickoff_is_read_as_utc():
    naive = datetime(2026, 3, 1, 18, 0)
    assert compute_deadline(naive, 60) == KICKOFF - timedelta(seconds=60)


def test_other_timezones_are_converted():
    buenos_aires = timezone(timedelta(hours=-3))
    local_kickoff = datetime(2026, 3, 1, 15, 0, tzinfo=buenos_aires)
    assert ensure_utc(local_kickoff) == KICKOFF
    assert ensure_utc(local_kickoff).tzinfo == UTC


def test_exactly_at_deadline_is_closed():
    deadline = compute_deadline(KICKOFF, 600)
    assert is_open(deadline, deadline) is False


def test_one_second_before_deadline_is_open():
    deadline = compute_deadline(KICKOFF, 600)
    assert is_open(deadline - timedelta(seconds=1), deadline) is True


def test_after_deadline_is_closed():
    deadline = compute_deadline(KICKOFF, 600)
    assert is_open(KICKOFF, deadline) is False
