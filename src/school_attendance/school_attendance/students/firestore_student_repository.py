from __future__ import annotations

from typing import Sequence

from google.cloud.firestore_v1.base_query import FieldFilter

from ..core.constants import STUDENTS_COLLECTION
from ..database.connection import FirestoreConnection
from ..database.firestore_base import firestore_errors, stream_documents
from .model import StudentRecord


class FirestoreStudentRepository:
    def __init__(self, conn: FirestoreConnection):
        self._conn = conn

    def fetch_by_section_id(self, section_id: str) -> Sequence[StudentRecord]:
        with firestore_errors(STUDENTS_COLLECTION, section_id):
            query = (
                self._conn.client()
                .collection(STUDENTS_COLLECTION)
                .where(filter=FieldFilter("sectionId", "==", section_id))
            )
            docs = stream_documents(query)

        return [StudentRecord.from_document(doc_id, data) for doc_id, data in docs]
