from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..core.enums import EmptyReason, EnrollmentSource


@dataclass(frozen=True)
class StudentDiagnostic:
    student_id: str
    display_name: str
    section_id: str
    source: Optional[EnrollmentSource]
    subject_names: Tuple[str, ...]
    matched: bool
    unresolved_ids: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "studentId": self.student_id,
            "displayName": self.display_name,
            "sectionId": self.section_id,
            "source": self.source.value if self.source else None,
            "subjectNames": list(self.subject_names),
            "unresolvedIds": list(self.unresolved_ids),
            "matched": self.matched,
        }


@dataclass(frozen=True)
class SectionDiagnostic:
    section_id: str
    total_students: int
    matched_count: int

    def to_dict(self) -> dict:
        return {
            "sectionId": self.section_id,
            "totalStudents": self.total_students,
            "matchedCount": self.matched_count,
        }


@dataclass(frozen=True)
class RosterDiagnostics:
    """What the resolver saw, returned next to the roster instead of being logged.

    `students` holds one entry per distinct student, in first-seen order.
    """

    subject_name: str
    is_homeroom: bool
    sections: Tuple[SectionDiagnostic, ...] = ()
    students: Tuple[StudentDiagnostic, ...] = field(default=(), repr=False)

    @property
    def total_students(self) -> int:
        return len(self.students)

    @property
    def with_enrollment_data(self) -> int:
        if self.is_homeroom:
            return self.total_students
        return sum(1 for s in self.students if s.source is not None)

    @property
    def matched_count(self) -> int:
        return sum(1 for s in self.students if s.matched)

    @property
    def is_multi_section(self) -> bool:
        return len(self.sections) > 1

    @property
    def empty_reason(self) -> Optional[EmptyReason]:
        if self.matched_count:
            return None
        if not self.total_students:
            return EmptyReason.NO_STUDENTS
        if not self.with_enrollment_data:
            return EmptyReason.NO_ENROLLMENT_DATA
        return EmptyReason.NO_MATCHING_SUBJECT

    def unmatched(self) -> List[StudentDiagnostic]:
        return [s for s in self.students if not s.matched]

    def message(self) -> Optional[str]:
        reason = self.empty_reason
        if reason is None:
            return None

        subject = self.subject_name
        if self.is_multi_section:
            return (
                f"No students found in any of the {len(self.sections)} sections for {subject}. "
                "This might indicate enrollment issues across multiple sections."
            )
        if reason == EmptyReason.NO_STUDENTS:
            return "No students are assigned to this section. Please check with your administrator."
        if reason == EmptyReason.NO_ENROLLMENT_DATA:
            return (
                f"Expected {self.total_students} students in {subject} but none have subject enrollments "
                "configured. Please ask your administrator to update enrollment data."
            )
        return (
            f"Expected {self.total_students} students in {subject} but found none. "
            "Students may not be properly enrolled in this subject."
        )

    def to_dict(self) -> dict:
        reason = self.empty_reason
        return {
            "subject": self.subject_name,
            "isHomeroom": self.is_homeroom,
            "totalStudents": self.total_students,
            "withEnrollmentData": self.with_enrollment_data,
            "matchedCount": self.matched_count,
            "emptyReason": reason.value if reason else None,
            "message": self.message(),
            "sections": [s.to_dict() for s in self.sections],
            "students": [s.to_dict() for s in self.students],
        }
