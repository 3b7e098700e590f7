from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ...core.enums import EnrollmentSource
from ...subjects.catalog import SubjectCatalog


@dataclass(frozen=True)
class Extraction:
    """Subject names a strategy read from one student document."""

    names: tuple[str, ...]
    unresolved_ids: tuple[str, ...] = field(default=())


class EnrollmentStrategy(ABC):
    """Strategy Pattern: read enrollment from one legacy field shape.

    `extract` returns None when the field is missing, malformed or holds no
    usable names, so the next strategy in the list is tried.
    """

    source: EnrollmentSource

    @abstractmethod
    def extract(self, data: Mapping[str, Any], catalog: SubjectCatalog) -> Optional[Extraction]:
        raise NotImplementedError


def usable_name(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value
    return None
