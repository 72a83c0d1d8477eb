from datetime import datetime, timedelta, timezone

from cohesia.maintenance import sweep_expired_sessions
from cohesia.store import SessionStore


class FakeClock:
    def __init__(self):
        self.at = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self):
        return self.at

    def advance(self, **kwargs):
        self.at += timedelta(**kwargs)


def test_create_and_get(session_store):
    token = session_store.create("E1", "HR", "Ann")
    record = session_store.get(token)
    assert record.to_public() == {"name": "Ann", "employeeId": "E1", "role": "HR"}


def test_tokens_are_unique_and_opaque(session_store):
    a = session_store.create("E1", "HR", "Ann")
    b = session_store.create("E1", "HR", "Ann")
    assert a != b
    assert "E1" not in a


def test_unknown_or_empty_token(session_store):
    assert session_store.get(None) is None
    assert session_store.get("") is None
    assert session_store.get("bogus") is None


def test_destroy(session_store):
    token = session_store.create("E1", "HR", "Ann")
    session_store.destroy(token)
    assert session_store.get(token) is None
    session_store.destroy(token)
    session_store.destroy(None)


def test_session_expires_after_ttl_without_renewal():
    clock = FakeClock()
    store = SessionStore(ttl=timedelta(hours=24), clock=clock)
    token = store.create("E1", "HR", "Ann")

    clock.advance(hours=23, minutes=59)
    assert store.get(token) is not None
    clock.advance(minutes=1)
    assert store.get(token) is None
    # reading an expired session does not remove it
    assert len(store) == 1


def test_sweeper_removes_only_expired():
    clock = FakeClock()
    store = SessionStore(ttl=timedelta(hours=1), clock=clock)
    old = store.create("E1", "HR", "Ann")
    clock.advance(minutes=30)
    fresh = store.create("E2", "employee", "Bob")
    clock.advance(minutes=31)

    assert sweep_expired_sessions(store) == 1
    assert len(store) == 1
    assert store.get(old) is None
    assert store.get(fresh) is not None
