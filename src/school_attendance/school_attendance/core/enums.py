from __future__ import annotations

from enum import Enum


class EnrollmentSource(str, Enum):
    """Legacy student field an enrollment was read from, in priority order."""

    SUBJECT_ENROLLMENTS = "subjectEnrollments"
    SELECTED_SUBJECTS = "selectedSubjects"
    SUBJECTS = "subjects"
    SUBJECT = "subject"


class EmptyReason(str, Enum):
    """Why a resolved roster came back empty."""

    NO_STUDENTS = "NO_STUDENTS"
    NO_ENROLLMENT_DATA = "NO_ENROLLMENT_DATA"
    NO_MATCHING_SUBJECT = "NO_MATCHING_SUBJECT"
