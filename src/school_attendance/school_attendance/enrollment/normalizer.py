from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Sequence, Tuple, Union

from ..common.text import normalize_subject_name
from ..core.enums import EnrollmentSource
from ..students.model import StudentRecord
from ..subjects.catalog import SubjectCatalog
from .factory import default_strategies
from .strategies.base import EnrollmentStrategy


@dataclass(frozen=True)
class Enrolled:
    """Uniform view of a student's enrollment, taken from one authoritative field."""

    source: EnrollmentSource
    subject_names: FrozenSet[str]
    unresolved_ids: Tuple[str, ...] = field(default=())

    def includes(self, subject_name: str) -> bool:
        return normalize_subject_name(subject_name) in self.subject_names


@dataclass(frozen=True)
class Unset:
    """No recognized enrollment field on the student."""

    def includes(self, subject_name: str) -> bool:
        return False


Enrollment = Union[Enrolled, Unset]


def normalize_enrollment(
    student: StudentRecord,
    catalog: SubjectCatalog,
    strategies: Optional[Sequence[EnrollmentStrategy]] = None,
) -> Enrollment:
    for strategy in strategies if strategies is not None else default_strategies():
        extraction = strategy.extract(student.data, catalog)
        if extraction is None:
            continue

        names = frozenset(n for n in (normalize_subject_name(x) for x in extraction.names) if n)
        return Enrolled(source=strategy.source, subject_names=names, unresolved_ids=extraction.unresolved_ids)

    return Unset()
