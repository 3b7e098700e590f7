from __future__ import annotations

import threading

import pytest

from src.school_attendance.school_attendance.core.enums import EmptyReason
from src.school_attendance.school_attendance.core.exceptions import RetrievalError, ValidationError
from src.school_attendance.school_attendance.enrollment.resolver import EnrollmentResolver


class InMemoryStudents:
    def __init__(self, by_section):
        self._by_section = by_section
        self.calls = []

    def fetch_by_section_id(self, section_id):
        self.calls.append(section_id)
        return list(self._by_section.get(section_id, []))


class InMemorySubjects:
    def __init__(self, entries=()):
        self._entries = list(entries)
        self.calls = 0

    def fetch_all(self):
        self.calls += 1
        return list(self._entries)


class FailingStudents:
    def __init__(self, failing_section):
        self._failing = failing_section

    def fetch_by_section_id(self, section_id):
        if section_id == self._failing:
            raise RetrievalError("store unavailable", resource="students", key=section_id)
        return []


def _ids(students):
    return [s.id for s in students]


def test_homeroom_returns_every_student_and_skips_catalog(make_student):
    students = [
        make_student("a", subject="Math"),
        make_student("b"),
        make_student("c", subjectEnrollments=[{"subjectName": "Art"}]),
    ]
    subjects = InMemorySubjects()
    resolver = EnrollmentResolver(InMemoryStudents({"sec-a": students}), subjects)

    result = resolver.resolve_enrollment(["sec-a"], "Science", is_homeroom=True)

    assert _ids(result.students) == ["a", "b", "c"]
    assert subjects.calls == 0


def test_homeroom_subject_name_short_circuits(make_student):
    resolver = EnrollmentResolver(InMemoryStudents({"sec-a": [make_student("a"), make_student("b")]}), InMemorySubjects())

    assert _ids(resolver.resolve_students(["sec-a"], "Homeroom")) == ["a", "b"]


def test_normalized_match_without_partial_match(make_student):
    students = [make_student("a", subject="Math"), make_student("b", subject="Math I")]
    resolver = EnrollmentResolver(InMemoryStudents({"sec-a": students}), InMemorySubjects())

    assert _ids(resolver.resolve_students(["sec-a"], "  math  ")) == ["a"]


def test_priority_order_does_not_fall_through(make_student):
    student = make_student("a", subjectEnrollments=[{"subject": "Art"}], subjects=["Music"])
    resolver = EnrollmentResolver(InMemoryStudents({"sec-a": [student]}), InMemorySubjects())

    result = resolver.resolve_enrollment(["sec-a"], "Music")

    assert result.students == []
    assert result.diagnostics.empty_reason == EmptyReason.NO_MATCHING_SUBJECT


def test_scenario_a_six_of_ten_enrolled(make_student):
    students = []
    for i in range(10):
        if i % 5 in (0, 1, 3):
            students.append(make_student(f"s{i}", subjectEnrollments=[{"subjectName": "Science"}]))
        else:
            students.append(make_student(f"s{i}", subjectEnrollments=[{"subjectName": "History"}]))
    resolver = EnrollmentResolver(InMemoryStudents({"sec-a": students}), InMemorySubjects())

    result = resolver.resolve_enrollment(["sec-a"], "Science")

    assert _ids(result.students) == ["s0", "s1", "s3", "s5", "s6", "s8"]
    assert result.diagnostics.matched_count == 6


def test_scenario_b_no_enrollment_data(make_student):
    students = [make_student(f"s{i}") for i in range(5)]
    resolver = EnrollmentResolver(InMemoryStudents({"sec-a": students}), InMemorySubjects())

    result = resolver.resolve_enrollment(["sec-a"], "History")

    assert result.students == []
    assert result.is_empty
    assert result.diagnostics.empty_reason == EmptyReason.NO_ENROLLMENT_DATA
    assert result.diagnostics.total_students == 5


def test_scenario_c_selected_subject_ids(make_student, catalog_entries):
    student = make_student("x", selectedSubjects=["subj_42"])
    subjects = InMemorySubjects(catalog_entries)
    resolver = EnrollmentResolver(InMemoryStudents({"sec-a": [student]}), subjects)

    result = resolver.resolve_enrollment(["sec-a"], "Physical Education")

    assert _ids(result.students) == ["x"]
    assert subjects.calls == 1


def test_scenario_d_duplicate_across_sections_kept_once(make_student):
    x1 = make_student("x", section_id="sec-1", subject="Music")
    x2 = make_student("x", section_id="sec-2", subject="Music")
    y = make_student("y", section_id="sec-2", subject="Music")
    students = InMemoryStudents({"sec-1": [x1], "sec-2": [y, x2]})
    resolver = EnrollmentResolver(students, InMemorySubjects())

    result = resolver.resolve_enrollment(["sec-1", "sec-2"], "Music")

    assert _ids(result.students) == ["x", "y"]
    assert result.students[0].section_id == "sec-1"
    assert [s.matched_count for s in result.diagnostics.sections] == [1, 2]
    assert result.diagnostics.total_students == 2


def test_repeated_section_ids_are_fetched_once(make_student):
    students = InMemoryStudents({"sec-a": [make_student("a", subject="Art")]})
    resolver = EnrollmentResolver(students, InMemorySubjects())

    assert _ids(resolver.resolve_students(["sec-a", "sec-a"], "Art")) == ["a"]
    assert students.calls == ["sec-a"]


def test_resolution_is_idempotent(make_student, catalog_entries):
    students = [
        make_student("a", selectedSubjects=["subj_music"]),
        make_student("b", subjects=["music"]),
        make_student("c", subject="Art"),
    ]
    resolver = EnrollmentResolver(InMemoryStudents({"sec-a": students}), InMemorySubjects(catalog_entries))

    first = resolver.resolve_enrollment(["sec-a"], "Music")
    second = resolver.resolve_enrollment(["sec-a"], "Music")

    assert _ids(first.students) == _ids(second.students) == ["a", "b"]
    assert first.diagnostics == second.diagnostics


def test_malformed_student_data_never_raises(make_student):
    students = [
        make_student("a", subjectEnrollments=None, selectedSubjects="subj_1", subjects=[None, 3], subject=42),
        make_student("b", subjectEnrollments=[{"subjectName": ["Music"]}, "Music"], subject="Music"),
    ]
    resolver = EnrollmentResolver(InMemoryStudents({"sec-a": students}), InMemorySubjects())

    assert _ids(resolver.resolve_students(["sec-a"], "Music")) == ["b"]


def test_retrieval_error_propagates_without_partial_result(make_student):
    resolver = EnrollmentResolver(FailingStudents("sec-2"), InMemorySubjects())

    with pytest.raises(RetrievalError) as exc:
        resolver.resolve_enrollment(["sec-1", "sec-2"], "Music")

    assert exc.value.key == "sec-2"


def test_catalog_failure_propagates(make_student):
    class BrokenSubjects:
        def fetch_all(self):
            raise RetrievalError("catalog unavailable", resource="subjects")

    resolver = EnrollmentResolver(InMemoryStudents({"sec-a": [make_student("a")]}), BrokenSubjects())

    with pytest.raises(RetrievalError):
        resolver.resolve_enrollment(["sec-a"], "Music")


def test_fetches_run_concurrently(make_student):
    # Three parties: two section fetches and the catalog fetch must overlap.
    barrier = threading.Barrier(3, timeout=5)

    class SlowStudents:
        def fetch_by_section_id(self, section_id):
            barrier.wait()
            return [make_student(f"{section_id}-1", section_id=section_id, subject="Art")]

    class SlowSubjects:
        def fetch_all(self):
            barrier.wait()
            return []

    resolver = EnrollmentResolver(SlowStudents(), SlowSubjects(), max_workers=4)

    assert _ids(resolver.resolve_students(["s1", "s2"], "Art")) == ["s1-1", "s2-1"]


@pytest.mark.parametrize("section_ids", [[], [""], ["  "], None])
def test_section_ids_are_required(section_ids):
    resolver = EnrollmentResolver(InMemoryStudents({}), InMemorySubjects())

    with pytest.raises(ValidationError):
        resolver.resolve_enrollment(section_ids, "Music")


def test_subject_is_required_outside_homeroom():
    resolver = EnrollmentResolver(InMemoryStudents({}), InMemorySubjects())

    with pytest.raises(ValidationError):
        resolver.resolve_enrollment(["sec-a"], "  ")


def test_empty_section_is_flagged_no_students():
    resolver = EnrollmentResolver(InMemoryStudents({}), InMemorySubjects())

    result = resolver.resolve_enrollment(["sec-a"], "Music")

    assert result.students == []
    assert result.diagnostics.empty_reason == EmptyReason.NO_STUDENTS
