from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, Protocol

from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

from ..common.ids import new_id
from ..core.exceptions import DocumentStorageError

logger = logging.getLogger(__name__)


class DocumentStore(Protocol):
    """Upload collaborator: stores a supporting document, returns its id.

    Type/size checks belong here, not in the registration workflow.
    """

    def store_document(self, file_ref: Any) -> str:
        raise NotImplementedError


class InMemoryDocumentStore(DocumentStore):
    def __init__(self):
        self._lock = threading.Lock()
        self._documents: dict[str, Any] = {}

    def store_document(self, file_ref: Any) -> str:
        document_id = new_id()
        with self._lock:
            self._documents[document_id] = file_ref
        return document_id

    def get(self, document_id: str) -> Any:
        with self._lock:
            return self._documents.get(document_id)


class LocalDocumentStore(DocumentStore):
    """Saves uploaded files under ``upload_dir`` as ``<document_id>_<filename>``."""

    def __init__(self, upload_dir: str | Path):
        self._upload_dir = Path(upload_dir)

    def store_document(self, file_ref: Any) -> str:
        if not isinstance(file_ref, FileStorage):
            raise DocumentStorageError(f"Unsupported document reference: {type(file_ref).__name__}")

        filename = secure_filename(file_ref.filename or "")
        if not filename:
            raise DocumentStorageError("Document has no usable filename")

        document_id = new_id()
        target = self._upload_dir / f"{document_id}_{filename}"
        try:
            self._upload_dir.mkdir(parents=True, exist_ok=True)
            file_ref.save(target)
        except OSError as e:
            raise DocumentStorageError(f"Could not save document: {e}") from e

        logger.info("Stored document %s at %s", document_id, target)
        return document_id
