from __future__ import annotations

from typing import Optional, Protocol

from .model import Section


class SectionRepository(Protocol):
    def get_by_id(self, section_id: str) -> Optional[Section]:
        raise NotImplementedError
