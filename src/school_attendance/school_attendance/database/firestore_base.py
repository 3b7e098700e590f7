from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Tuple

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError

from ..core.exceptions import RetrievalError

logger = logging.getLogger(__name__)


@contextmanager
def firestore_errors(resource: str, key: Optional[str] = None) -> Iterator[None]:
    """Re-raise store/auth failures as a single RetrievalError."""
    try:
        yield
    except (GoogleAPIError, GoogleAuthError) as e:
        target = f"{resource}/{key}" if key else resource
        logger.error("Firestore read failed for %s: %s", target, e)
        raise RetrievalError(f"Failed to read {target}: {e}", resource=resource, key=key) from e


def stream_documents(query) -> List[Tuple[str, Dict[str, Any]]]:
    return [(doc.id, doc.to_dict() or {}) for doc in query.stream()]


def get_document(ref) -> Optional[Dict[str, Any]]:
    snapshot = ref.get()
    if not snapshot.exists:
        return None
    return snapshot.to_dict() or {}
