from __future__ import annotations

import json
import threading
from dataclasses import dataclass
from typing import Any, Optional

import firebase_admin
from firebase_admin import credentials, firestore

from ..core.exceptions import RetrievalError


@dataclass
class FirestoreConfig:
    project_id: Optional[str] = None
    credentials_path: Optional[str] = None
    credentials_json: Optional[str] = None
    app_name: str = "[DEFAULT]"


class FirestoreConnection:
    """Singleton-like Firestore client factory.

    Note: The client is created lazily on first use so building the container
    never touches the network.
    """

    _instance: Optional["FirestoreConnection"] = None

    def __init__(self, config: FirestoreConfig):
        self._config = config
        self._client: Any = None
        self._lock = threading.Lock()

    @classmethod
    def get_instance(cls, config: FirestoreConfig) -> "FirestoreConnection":
        if cls._instance is None:
            cls._instance = FirestoreConnection(config)
        return cls._instance

    def _credentials(self):
        if self._config.credentials_json:
            return credentials.Certificate(json.loads(self._config.credentials_json))
        if self._config.credentials_path:
            return credentials.Certificate(self._config.credentials_path)
        # Application default credentials (GOOGLE_APPLICATION_CREDENTIALS, emulator, GCE).
        return None

    def _app(self):
        try:
            return firebase_admin.get_app(self._config.app_name)
        except ValueError:
            options = {"projectId": self._config.project_id} if self._config.project_id else None
            return firebase_admin.initialize_app(self._credentials(), options, name=self._config.app_name)

    def client(self):
        # Called from the resolver's fetch threads; the app may only be initialized once.
        if self._client is None:
            with self._lock:
                if self._client is None:
                    try:
                        self._client = firestore.client(app=self._app())
                    except (ValueError, OSError) as e:
                        raise RetrievalError(
                            f"Firestore client could not be initialized: {e}", resource="firestore"
                        ) from e
        return self._client
