from __future__ import annotations

from typing import Protocol, Sequence

from .model import StudentRecord


class StudentRepository(Protocol):
    def fetch_by_section_id(self, section_id: str) -> Sequence[StudentRecord]:
        """All students whose `sectionId` equals `section_id`.

        Raises RetrievalError when the store cannot be read.
        """

        raise NotImplementedError
