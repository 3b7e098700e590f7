from __future__ import annotations

import pytest

from src.school_attendance.school_attendance.students.model import StudentRecord
from src.school_attendance.school_attendance.subjects.model import SubjectCatalogEntry


@pytest.fixture
def make_student():
    def _make(student_id: str, section_id: str = "sec-a", **fields) -> StudentRecord:
        data = {"sectionId": section_id, "firstName": student_id.title(), "lastName": "Student"}
        data.update(fields)
        return StudentRecord.from_document(student_id, data)

    return _make


@pytest.fixture
def catalog_entries():
    return [
        SubjectCatalogEntry(id="subj_42", name="Physical Education"),
        SubjectCatalogEntry(id="subj_music", name="Music"),
        SubjectCatalogEntry(id="subj_art", name="Art"),
    ]
