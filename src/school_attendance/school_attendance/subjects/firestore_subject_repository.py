from __future__ import annotations

from typing import Sequence

from ..core.constants import SUBJECTS_COLLECTION
from ..database.connection import FirestoreConnection
from ..database.firestore_base import firestore_errors, stream_documents
from .model import SubjectCatalogEntry


class FirestoreSubjectRepository:
    def __init__(self, conn: FirestoreConnection):
        self._conn = conn

    def fetch_all(self) -> Sequence[SubjectCatalogEntry]:
        with firestore_errors(SUBJECTS_COLLECTION):
            docs = stream_documents(self._conn.client().collection(SUBJECTS_COLLECTION))

        return [SubjectCatalogEntry.from_document(doc_id, data) for doc_id, data in docs]
