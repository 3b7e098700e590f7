from __future__ import annotations

import re
from typing import Any

from ..core.constants import HOMEROOM_KEY, HOMEROOM_SUBJECT

_WHITESPACE = re.compile(r"\s+")


def normalize_subject_name(value: Any) -> str:
    """Lowercase, trim and collapse whitespace runs to one space."""
    if value is None:
        return ""
    return _WHITESPACE.sub(" ", str(value).lower().strip())


def subject_names_match(left: Any, right: Any) -> bool:
    a = normalize_subject_name(left)
    return bool(a) and a == normalize_subject_name(right)


def is_homeroom_subject(name: Any) -> bool:
    return subject_names_match(name, HOMEROOM_SUBJECT)


def subject_key(subject: str, *, is_homeroom: bool = False) -> str:
    """Key under which attendance for a subject is grouped per section."""
    if is_homeroom or is_homeroom_subject(subject):
        return HOMEROOM_KEY
    return normalize_subject_name(subject).replace(" ", "-")
