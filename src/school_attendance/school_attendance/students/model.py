from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


@dataclass(frozen=True)
class StudentRecord:
    """Domain entity: a student document snapshot read from the store.

    `data` keeps the raw document so the enrollment strategies can sniff the
    legacy fields; it is never written back.
    """

    id: str
    section_id: Optional[str]
    first_name: str = ""
    last_name: str = ""
    data: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def display_name(self) -> str:
        name = f"{self.first_name} {self.last_name}".strip()
        return name or self.id

    @classmethod
    def from_document(cls, doc_id: str, data: Optional[Mapping[str, Any]]) -> "StudentRecord":
        data = dict(data or {})
        section_id = data.get("sectionId")
        return cls(
            id=str(doc_id),
            section_id=str(section_id) if section_id is not None else None,
            first_name=_text(data.get("firstName")),
            last_name=_text(data.get("lastName")),
            data=data,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "sectionId": self.section_id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "displayName": self.display_name,
        }
