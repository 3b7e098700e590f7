from __future__ import annotations

from typing import Any, Mapping, Optional

from ...core.enums import EnrollmentSource
from ...subjects.catalog import SubjectCatalog
from .base import EnrollmentStrategy, Extraction, usable_name

# Entries were written by several admin screens over time.
_ENTRY_KEYS = ("subjectName", "subject", "name")


class SubjectEnrollmentsStrategy(EnrollmentStrategy):
    """`subjectEnrollments: [{subjectName | subject | name}]`."""

    source = EnrollmentSource.SUBJECT_ENROLLMENTS

    def extract(self, data: Mapping[str, Any], catalog: SubjectCatalog) -> Optional[Extraction]:
        entries = data.get("subjectEnrollments")
        if not isinstance(entries, list):
            return None

        names = []
        for entry in entries:
            if not isinstance(entry, Mapping):
                continue
            for key in _ENTRY_KEYS:
                name = usable_name(entry.get(key))
                if name:
                    names.append(name)
                    break

        return Extraction(names=tuple(names)) if names else None
