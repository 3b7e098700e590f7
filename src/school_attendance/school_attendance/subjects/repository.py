from __future__ import annotations

from typing import Protocol, Sequence

from .model import SubjectCatalogEntry


class SubjectRepository(Protocol):
    def fetch_all(self) -> Sequence[SubjectCatalogEntry]:
        raise NotImplementedError
