from __future__ import annotations

from typing import Iterable

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_section_ids(section_ids: Iterable[str]) -> list[str]:
    """Validate section ids and drop repeats, keeping the given order."""

    if isinstance(section_ids, str):
        section_ids = [section_ids]

    out: list[str] = []
    for sid in section_ids or []:
        sid = require_non_empty(sid, "Section id")
        if sid not in out:
            out.append(sid)

    if not out:
        raise ValidationError("At least one section id is required")
    return out
