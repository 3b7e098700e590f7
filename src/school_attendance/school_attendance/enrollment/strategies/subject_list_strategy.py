from __future__ import annotations

from typing import Any, Mapping, Optional

from ...core.enums import EnrollmentSource
from ...subjects.catalog import SubjectCatalog
from .base import EnrollmentStrategy, Extraction, usable_name


class SubjectListStrategy(EnrollmentStrategy):
    """`subjects: [name]`."""

    source = EnrollmentSource.SUBJECTS

    def extract(self, data: Mapping[str, Any], catalog: SubjectCatalog) -> Optional[Extraction]:
        values = data.get("subjects")
        if not isinstance(values, list):
            return None

        names = [v for v in values if usable_name(v)]
        return Extraction(names=tuple(names)) if names else None
