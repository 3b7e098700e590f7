from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from ..common.text import is_homeroom_subject, normalize_subject_name
from ..enrollment.resolver import EnrollmentResolver
from ..sections.repository import SectionRepository
from .model import RosterStudent, RosterView, SectionAssignment, SectionRef, SectionSummary, SubjectGroup

logger = logging.getLogger(__name__)


class RosterService:
    """Use case: build the student lists behind the attendance-taking screens."""

    def __init__(self, resolver: EnrollmentResolver, sections: SectionRepository):
        self._resolver = resolver
        self._sections = sections

    def load_roster(self, ref: SectionRef) -> RosterView:
        result = self._resolver.resolve_enrollment(ref.section_ids, ref.subject, ref.is_homeroom)

        labels: Dict[str, str] = {}
        students: List[RosterStudent] = []
        for student in result.students:
            section_id = student.section_id or ref.section_ids[0]
            if section_id not in labels:
                labels[section_id] = self._section_label(section_id)
            students.append(RosterStudent(student=student, section_id=section_id, section_name=labels[section_id]))

        error = result.diagnostics.message()
        if error:
            logger.warning("Roster for %s (%s) is empty: %s", ref.subject, ", ".join(ref.section_ids), error)

        return RosterView(ref=ref, students=students, diagnostics=result.diagnostics, error=error)

    def load_roster_from_mapping(self, raw) -> RosterView:
        return self.load_roster(SectionRef.from_mapping(raw))

    def build_subject_groups(self, assignments: Sequence[SectionAssignment]) -> List[SubjectGroup]:
        """Group a teacher's sections by subject, keeping first-seen subject order.

        Homeroom only picks up students from sections flagged as the teacher's
        homeroom section.
        """

        groups: Dict[str, SubjectGroup] = {}

        for assignment in assignments:
            section = assignment.section
            for subject in assignment.subjects:
                key = normalize_subject_name(subject)
                if not key:
                    continue
                group = groups.setdefault(key, SubjectGroup(subject=subject.strip()))

                homeroom = is_homeroom_subject(subject)
                if homeroom and not assignment.is_homeroom_section:
                    continue

                found = self._resolver.resolve_students([section.id], subject, homeroom)
                if not found:
                    continue

                group.sections.append(
                    SectionSummary(section_id=section.id, section_name=section.display_name, student_count=len(found))
                )
                for student in found:
                    group.add_student(RosterStudent(student=student, section_id=section.id, section_name=section.display_name))

        return list(groups.values())

    def _section_label(self, section_id: str) -> str:
        section = self._sections.get_by_id(section_id)
        return section.display_name if section else section_id
