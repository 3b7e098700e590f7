from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class SubjectCatalogEntry:
    """Domain entity: a subject offered by the school."""

    id: str
    name: str
    room: Optional[str] = None

    @classmethod
    def from_document(cls, doc_id: str, data: Optional[Mapping[str, Any]]) -> "SubjectCatalogEntry":
        data = data or {}
        name = data.get("name")
        room = data.get("room")
        return cls(
            id=str(doc_id),
            name=name.strip() if isinstance(name, str) else "",
            room=str(room) if room else None,
        )
