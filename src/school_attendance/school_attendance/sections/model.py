from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Section:
    """Domain entity: a homeroom/class grouping."""

    id: str
    year: Optional[str] = None
    letter: str = ""
    current_enrollment: int = 0

    @property
    def display_name(self) -> str:
        return f"Grade {self.year or 'N/A'} - {self.letter.upper()}".rstrip(" -")

    @classmethod
    def from_document(cls, doc_id: str, data: Optional[Mapping[str, Any]]) -> "Section":
        data = data or {}
        # Older documents store the year as gradeLevel and the letter as sectionName.
        year = data.get("year", data.get("gradeLevel"))
        letter = data.get("section") or data.get("sectionName") or ""
        try:
            current = int(data.get("currentEnrollment") or 0)
        except (TypeError, ValueError):
            current = 0
        return cls(
            id=str(doc_id),
            year=str(year) if year not in (None, "") else None,
            letter=str(letter).strip(),
            current_enrollment=current,
        )
