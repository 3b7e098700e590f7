from __future__ import annotations

from typing import Any, Mapping, Optional

from ...core.enums import EnrollmentSource
from ...subjects.catalog import SubjectCatalog
from .base import EnrollmentStrategy, Extraction


class SelectedSubjectsStrategy(EnrollmentStrategy):
    """`selectedSubjects: [subject_id]`, resolved through the catalog."""

    source = EnrollmentSource.SELECTED_SUBJECTS

    def extract(self, data: Mapping[str, Any], catalog: SubjectCatalog) -> Optional[Extraction]:
        ids = data.get("selectedSubjects")
        if not isinstance(ids, list):
            return None

        names = []
        unresolved = []
        for subject_id in ids:
            name = catalog.name_for(subject_id)
            if name:
                names.append(name)
            elif isinstance(subject_id, str) and subject_id.strip():
                unresolved.append(subject_id)

        if not names:
            return None
        return Extraction(names=tuple(names), unresolved_ids=tuple(unresolved))
