from __future__ import annotations

from typing import Optional

from ..core.constants import SECTIONS_COLLECTION
from ..database.connection import FirestoreConnection
from ..database.firestore_base import firestore_errors, get_document
from .model import Section


class FirestoreSectionRepository:
    def __init__(self, conn: FirestoreConnection):
        self._conn = conn

    def get_by_id(self, section_id: str) -> Optional[Section]:
        with firestore_errors(SECTIONS_COLLECTION, section_id):
            data = get_document(self._conn.client().collection(SECTIONS_COLLECTION).document(section_id))

        if data is None:
            return None
        return Section.from_document(section_id, data)
