from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import date

from fakes import CS101, PROF_AHMED, STUDENT_OMAR, STUDENT_SARA
from session_attendance.core.enums import CheckInStatus

WORKERS = 16


def _race(fn, n: int = WORKERS):
    barrier = threading.Barrier(n)

    def run(_):
        barrier.wait()
        return fn()

    with ThreadPoolExecutor(max_workers=n) as pool:
        return list(pool.map(run, range(n)))


def test_simultaneous_check_ins_record_exactly_once(container, store, fixed_now):
    session = container.session_service.create_session(PROF_AHMED, CS101, date(2024, 3, 10))

    results = _race(
        lambda: container.attendance_service.record_attendance(STUDENT_SARA, session.session_code, now=fixed_now)
    )

    statuses = [r.status for r in results]
    assert statuses.count(CheckInStatus.RECORDED) == 1
    assert statuses.count(CheckInStatus.ALREADY_RECORDED) == WORKERS - 1
    assert len(store.attendance_rows_for(session.session_id, STUDENT_SARA)) == 1


def test_different_students_do_not_block_each_other(container, store, fixed_now):
    session = container.session_service.create_session(PROF_AHMED, CS101, date(2024, 3, 10))
    students = iter([STUDENT_SARA, STUDENT_OMAR] * (WORKERS // 2))
    lock = threading.Lock()

    def next_student():
        with lock:
            return next(students)

    results = _race(
        lambda: container.attendance_service.record_attendance(next_student(), session.session_code, now=fixed_now)
    )

    assert [r.status for r in results].count(CheckInStatus.RECORDED) == 2
    summary = container.session_service.list_sessions(PROF_AHMED, CS101)
    assert summary[0].attendance_count == 2


def test_simultaneous_session_creation_yields_unique_codes(container):
    sessions = _race(lambda: container.session_service.create_session(PROF_AHMED, CS101, "2024-03-10"))

    assert len({s.session_code for s in sessions}) == WORKERS
    assert len({s.session_id for s in sessions}) == WORKERS
