from __future__ import annotations

from typing import Any, Mapping, Optional

from ...core.enums import EnrollmentSource
from ...subjects.catalog import SubjectCatalog
from .base import EnrollmentStrategy, Extraction, usable_name


class ScalarSubjectStrategy(EnrollmentStrategy):
    """`subject: name`."""

    source = EnrollmentSource.SUBJECT

    def extract(self, data: Mapping[str, Any], catalog: SubjectCatalog) -> Optional[Extraction]:
        name = usable_name(data.get("subject"))
        return Extraction(names=(name,)) if name else None
