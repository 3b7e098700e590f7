from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Tuple

from ..common.text import is_homeroom_subject, subject_key
from ..core.constants import HOMEROOM_SUBJECT
from ..core.exceptions import ValidationError
from ..enrollment.diagnostics import RosterDiagnostics
from ..sections.model import Section
from ..students.model import StudentRecord


def _ids_from(items: Any, key: str) -> List[str]:
    if not isinstance(items, list):
        return []
    out = []
    for item in items:
        value = item.get(key) if isinstance(item, Mapping) else item
        if isinstance(value, str) and value.strip():
            out.append(value.strip())
    return out


@dataclass(frozen=True)
class SectionRef:
    """What a teacher's class card points at: one or more sections and a subject."""

    section_ids: Tuple[str, ...]
    subject: str = HOMEROOM_SUBJECT
    is_homeroom: bool = False

    @property
    def is_multi_section(self) -> bool:
        return len(self.section_ids) > 1

    @property
    def key(self) -> str:
        return subject_key(self.subject, is_homeroom=self.is_homeroom)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "SectionRef":
        """Build from a loose class descriptor as stored by the dashboards.

        Section ids are taken from the first populated of `actualSectionIds`,
        `sectionsInfo[].sectionId`, `sectionsIncluded[].sectionId`, then the
        single `sectionId` / `id`.
        """

        ids = (
            _ids_from(raw.get("actualSectionIds"), "sectionId")
            or _ids_from(raw.get("sectionsInfo"), "sectionId")
            or _ids_from(raw.get("sectionsIncluded"), "sectionId")
            or _ids_from([raw.get("sectionId") or raw.get("id")], "sectionId")
        )
        if not ids:
            raise ValidationError("Class has no section id")

        subject = raw.get("subject")
        subject = subject.strip() if isinstance(subject, str) and subject.strip() else HOMEROOM_SUBJECT
        is_homeroom = bool(raw.get("isHomeroom") or raw.get("isHomeroomSection"))

        return cls(section_ids=tuple(dict.fromkeys(ids)), subject=subject, is_homeroom=is_homeroom)


@dataclass(frozen=True)
class RosterStudent:
    """Read-model for the attendance form: student plus the section it came from."""

    student: StudentRecord
    section_id: str
    section_name: str

    def to_dict(self) -> dict:
        out = self.student.to_dict()
        out["fromSectionId"] = self.section_id
        out["fromSection"] = self.section_name
        return out


@dataclass(frozen=True)
class RosterView:
    ref: SectionRef
    students: List[RosterStudent]
    diagnostics: RosterDiagnostics
    error: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "sectionIds": list(self.ref.section_ids),
            "subject": self.ref.subject,
            "isHomeroom": self.ref.is_homeroom,
            "students": [s.to_dict() for s in self.students],
            "diagnostics": self.diagnostics.to_dict(),
            "error": self.error,
        }


@dataclass(frozen=True)
class SectionAssignment:
    """A section a teacher handles and the subjects they teach there."""

    section: Section
    subjects: Tuple[str, ...]
    is_homeroom_section: bool = False


@dataclass(frozen=True)
class SectionSummary:
    section_id: str
    section_name: str
    student_count: int


@dataclass
class SubjectGroup:
    """One subject across every section a teacher takes it in."""

    subject: str
    sections: List[SectionSummary] = field(default_factory=list)
    students: List[RosterStudent] = field(default_factory=list)

    @property
    def is_homeroom(self) -> bool:
        return is_homeroom_subject(self.subject)

    @property
    def key(self) -> str:
        return subject_key(self.subject)

    @property
    def total_count(self) -> int:
        return len(self.students)

    @property
    def is_multi_section(self) -> bool:
        return len(self.sections) > 1

    def add_student(self, student: RosterStudent) -> None:
        if any(s.student.id == student.student.id for s in self.students):
            return
        self.students.append(student)

    def to_section_ref(self) -> SectionRef:
        return SectionRef(
            section_ids=tuple(s.section_id for s in self.sections),
            subject=self.subject,
            is_homeroom=self.is_homeroom,
        )
