from __future__ import annotations

from typing import List

from .strategies.base import EnrollmentStrategy
from .strategies.scalar_subject_strategy import ScalarSubjectStrategy
from .strategies.selected_subjects_strategy import SelectedSubjectsStrategy
from .strategies.subject_enrollments_strategy import SubjectEnrollmentsStrategy
from .strategies.subject_list_strategy import SubjectListStrategy


def default_strategies() -> List[EnrollmentStrategy]:
    """Enrollment field strategies in priority order; the first with data wins."""
    return [
        SubjectEnrollmentsStrategy(),
        SelectedSubjectsStrategy(),
        SubjectListStrategy(),
        ScalarSubjectStrategy(),
    ]
