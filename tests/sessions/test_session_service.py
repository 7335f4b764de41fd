from __future__ import annotations

import re
from datetime import date, datetime

import pytest

from fakes import (
    CS101,
    CS205,
    MATH110,
    PROF_AHMED,
    PROF_MONA,
    InMemoryCourses,
    InMemorySessions,
    InMemoryStore,
    seed_demo,
)
from session_attendance.core.exceptions import (
    ConflictError,
    CourseNotFoundError,
    InvalidDateError,
    NotOwnerError,
)
from session_attendance.courses.service import EnrollmentService
from session_attendance.sessions.service import SessionService


class ScriptedCodes:
    """Hands out a fixed sequence of codes, then repeats the last one."""

    def __init__(self, *codes: str):
        self.codes = list(codes)
        self.calls = 0

    def generate(self, course_code: str, session_date: date) -> str:
        self.calls += 1
        return self.codes.pop(0) if len(self.codes) > 1 else self.codes[0]


@pytest.fixture
def store() -> InMemoryStore:
    return seed_demo(InMemoryStore())


def _service(store: InMemoryStore, **kwargs) -> SessionService:
    return SessionService(InMemorySessions(store), EnrollmentService(InMemoryCourses(store)), **kwargs)


def test_create_session_generates_course_dated_code(store):
    session = _service(store).create_session(PROF_AHMED, CS101, "2024-03-10")

    assert session.course_id == CS101
    assert session.session_date == date(2024, 3, 10)
    assert re.fullmatch(r"CS101-20240310-[A-Z0-9]{5}", session.session_code)
    assert store.sessions[session.session_id].session_code == session.session_code


@pytest.mark.parametrize(
    "raw",
    ["2024-03-10", "2024-03-10T08:30:00", "2024-03-10T23:30:00-00:00", date(2024, 3, 10), datetime(2024, 3, 10, 18)],
)
def test_session_date_is_reduced_to_a_calendar_day(store, raw):
    assert _service(store).create_session(PROF_AHMED, CS101, raw).session_date == date(2024, 3, 10)


def test_aware_datetimes_are_taken_in_utc(store):
    session = _service(store).create_session(PROF_AHMED, CS101, "2024-03-10T01:00:00+03:00")
    assert session.session_date == date(2024, 3, 9)


@pytest.mark.parametrize("raw", ["", "tomorrow", "2024-13-40", "2024/03/10", "10/03/2024", 20240310, None])
def test_unparseable_date_is_rejected(store, raw):
    with pytest.raises(InvalidDateError):
        _service(store).create_session(PROF_AHMED, CS101, raw)
    assert store.sessions == {}


def test_only_the_owner_may_open_a_session(store):
    with pytest.raises(NotOwnerError):
        _service(store).create_session(PROF_MONA, CS101, "2024-03-10")
    with pytest.raises(CourseNotFoundError):
        _service(store).create_session(PROF_MONA, 999, "2024-03-10")
    assert store.sessions == {}


def test_ownership_is_checked_before_the_date(store):
    with pytest.raises(NotOwnerError):
        _service(store).create_session(PROF_MONA, CS101, "not-a-date")


def test_code_collision_retries_with_a_new_suffix(store):
    store.insert_session(course_id=CS101, session_date=date(2024, 3, 10), session_code="CS101-20240310-AAAAA")
    codes = ScriptedCodes("CS101-20240310-AAAAA", "CS101-20240310-AAAAA", "CS101-20240310-BBBBB")
    sleeps = []

    session = _service(store, code_generator=codes, retry_backoff=0.05, sleep=sleeps.append).create_session(
        PROF_AHMED, CS101, "2024-03-10"
    )

    assert session.session_code == "CS101-20240310-BBBBB"
    assert codes.calls == 3
    assert sleeps == [0.05, 0.05]
    assert len(store.sessions) == 2


def test_gives_up_after_max_attempts(store):
    store.insert_session(course_id=CS101, session_date=date(2024, 3, 10), session_code="CS101-20240310-AAAAA")
    codes = ScriptedCodes("CS101-20240310-AAAAA")
    sleeps = []

    with pytest.raises(ConflictError):
        _service(store, code_generator=codes, max_attempts=4, retry_backoff=0.1, sleep=sleeps.append).create_session(
            PROF_AHMED, CS101, "2024-03-10"
        )

    assert codes.calls == 4
    assert len(sleeps) == 3
    assert len(store.sessions) == 1


def test_max_attempts_must_be_positive(store):
    with pytest.raises(ValueError):
        _service(store, max_attempts=0)


def test_two_sessions_same_course_same_day_get_distinct_codes(store):
    svc = _service(store)
    first = svc.create_session(PROF_AHMED, CS101, "2024-03-10")
    second = svc.create_session(PROF_AHMED, CS101, "2024-03-10")

    assert first.session_id != second.session_id
    assert first.session_code != second.session_code


def test_list_sessions_newest_first_with_counts(store):
    svc = _service(store)
    older = svc.create_session(PROF_AHMED, CS101, "2024-03-03")
    newer = svc.create_session(PROF_AHMED, CS101, "2024-03-10")
    svc.create_session(PROF_AHMED, CS205, "2024-03-11")
    store.insert_attendance(session_id=older.session_id, student_id=3, scanned_at=datetime(2024, 3, 3, 9))
    store.insert_attendance(session_id=older.session_id, student_id=4, scanned_at=datetime(2024, 3, 3, 9, 5))

    listed = svc.list_sessions(PROF_AHMED, CS101)

    assert [s.session_id for s in listed] == [newer.session_id, older.session_id]
    assert [s.attendance_count for s in listed] == [0, 2]


def test_list_sessions_requires_ownership(store):
    with pytest.raises(NotOwnerError):
        _service(store).list_sessions(PROF_AHMED, MATH110)
    with pytest.raises(CourseNotFoundError):
        _service(store).list_sessions(PROF_AHMED, 999)
