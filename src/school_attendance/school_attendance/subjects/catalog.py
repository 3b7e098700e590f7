from __future__ import annotations

from typing import Iterable, Mapping, Optional

from .model import SubjectCatalogEntry


class SubjectCatalog:
    """Read-only id -> name lookup built once per resolution."""

    def __init__(self, names_by_id: Optional[Mapping[str, str]] = None):
        self._names_by_id = dict(names_by_id or {})

    @classmethod
    def from_entries(cls, entries: Iterable[SubjectCatalogEntry]) -> "SubjectCatalog":
        # Entries without a name cannot take part in name matching.
        return cls({e.id: e.name for e in entries if e.name})

    @classmethod
    def empty(cls) -> "SubjectCatalog":
        return cls()

    def name_for(self, subject_id) -> Optional[str]:
        if not isinstance(subject_id, str):
            return None
        return self._names_by_id.get(subject_id)

    def __len__(self) -> int:
        return len(self._names_by_id)
