from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..common.text import is_homeroom_subject
from ..common.validators import require_non_empty, require_section_ids
from ..core.constants import DEFAULT_FETCH_WORKERS, HOMEROOM_SUBJECT
from ..students.model import StudentRecord
from ..students.repository import StudentRepository
from ..subjects.catalog import SubjectCatalog
from ..subjects.repository import SubjectRepository
from .diagnostics import RosterDiagnostics, SectionDiagnostic, StudentDiagnostic
from .factory import default_strategies
from .normalizer import Enrolled, normalize_enrollment
from .strategies.base import EnrollmentStrategy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RosterResult:
    students: List[StudentRecord]
    diagnostics: RosterDiagnostics

    @property
    def is_empty(self) -> bool:
        return not self.students

    def to_dict(self) -> dict:
        return {
            "students": [s.to_dict() for s in self.students],
            "diagnostics": self.diagnostics.to_dict(),
        }


class EnrollmentResolver:
    """Decide which students of one or more sections sit on a subject's roster.

    Section rosters and the subject catalog are fetched concurrently, then
    every student is matched through the ordered enrollment strategies. The
    combined roster is deduplicated by student id, first occurrence wins.
    A failed fetch propagates as-is; nothing is returned partially.
    """

    def __init__(
        self,
        students: StudentRepository,
        subjects: SubjectRepository,
        *,
        strategies: Optional[Sequence[EnrollmentStrategy]] = None,
        max_workers: int = DEFAULT_FETCH_WORKERS,
    ):
        self._students = students
        self._subjects = subjects
        self._strategies = list(strategies) if strategies is not None else default_strategies()
        self._max_workers = max(1, int(max_workers))

    def resolve_enrollment(
        self,
        section_ids: Iterable[str],
        subject_name: Optional[str],
        is_homeroom: bool = False,
    ) -> RosterResult:
        ids = require_section_ids(section_ids)
        homeroom = bool(is_homeroom) or is_homeroom_subject(subject_name)
        if homeroom:
            subject_name = subject_name.strip() if isinstance(subject_name, str) and subject_name.strip() else HOMEROOM_SUBJECT
        else:
            subject_name = require_non_empty(subject_name, "Subject")

        logger.debug("Resolving %s for sections %s (homeroom=%s)", subject_name, ids, homeroom)
        rosters, catalog = self._fetch(ids, need_catalog=not homeroom)

        students: List[StudentRecord] = []
        roster_ids: set = set()
        by_id: Dict[str, StudentDiagnostic] = {}
        sections: List[SectionDiagnostic] = []

        for section_id, section_students in rosters:
            matched_here = 0
            for student in section_students:
                diag = self._evaluate(student, section_id, subject_name, catalog, homeroom=homeroom)
                if diag.matched:
                    matched_here += 1

                known = by_id.get(student.id)
                if known is None or (diag.matched and not known.matched):
                    by_id[student.id] = diag
                if diag.matched and student.id not in roster_ids:
                    roster_ids.add(student.id)
                    students.append(student)

            sections.append(
                SectionDiagnostic(section_id=section_id, total_students=len(section_students), matched_count=matched_here)
            )

        diagnostics = RosterDiagnostics(
            subject_name=subject_name,
            is_homeroom=homeroom,
            sections=tuple(sections),
            students=tuple(by_id.values()),
        )
        if not students:
            logger.info(
                "Empty roster for %s in sections %s: %s",
                subject_name,
                ids,
                diagnostics.empty_reason.value if diagnostics.empty_reason else "-",
            )
        return RosterResult(students=students, diagnostics=diagnostics)

    def resolve_students(
        self,
        section_ids: Iterable[str],
        subject_name: Optional[str],
        is_homeroom: bool = False,
    ) -> List[StudentRecord]:
        return self.resolve_enrollment(section_ids, subject_name, is_homeroom).students

    def _evaluate(
        self,
        student: StudentRecord,
        section_id: str,
        subject_name: str,
        catalog: SubjectCatalog,
        *,
        homeroom: bool,
    ) -> StudentDiagnostic:
        # Homeroom membership is implicit: being in the section is enough.
        if homeroom:
            return StudentDiagnostic(
                student_id=student.id,
                display_name=student.display_name,
                section_id=section_id,
                source=None,
                subject_names=(),
                matched=True,
            )

        enrollment = normalize_enrollment(student, catalog, self._strategies)
        if isinstance(enrollment, Enrolled):
            return StudentDiagnostic(
                student_id=student.id,
                display_name=student.display_name,
                section_id=section_id,
                source=enrollment.source,
                subject_names=tuple(sorted(enrollment.subject_names)),
                matched=enrollment.includes(subject_name),
                unresolved_ids=enrollment.unresolved_ids,
            )

        return StudentDiagnostic(
            student_id=student.id,
            display_name=student.display_name,
            section_id=section_id,
            source=None,
            subject_names=(),
            matched=False,
        )

    def _fetch(
        self,
        section_ids: List[str],
        *,
        need_catalog: bool,
    ) -> Tuple[List[Tuple[str, List[StudentRecord]]], SubjectCatalog]:
        workers = min(self._max_workers, len(section_ids) + (1 if need_catalog else 0))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            catalog_future = pool.submit(self._subjects.fetch_all) if need_catalog else None
            section_futures = [(sid, pool.submit(self._students.fetch_by_section_id, sid)) for sid in section_ids]

            rosters = [(sid, list(future.result())) for sid, future in section_futures]
            entries = catalog_future.result() if catalog_future is not None else []

        return rosters, SubjectCatalog.from_entries(entries)
