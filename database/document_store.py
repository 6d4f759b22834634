"""Key-value document stores.

The app keeps its whole dataset in a single document. Stores only read and
write whole documents: no partial updates, no transactions.
"""

import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

from database.exceptions import DatabaseError

Document = Dict[str, Any]


class DocumentStore(Protocol):
    """Interface for whole-document persistence.

    Any class with matching method signatures satisfies this protocol.
    """

    def get(self, key: str) -> Optional[Document]:
        """Return the document stored under key, or None if there is none."""
        ...

    def set(self, key: str, document: Document) -> None:
        """Replace the document stored under key."""
        ...


class InMemoryDocumentStore:
    """Dict-backed store. Documents are copied in and out."""

    def __init__(self, documents: Optional[Dict[str, Document]] = None):
        self._documents: Dict[str, Document] = copy.deepcopy(documents or {})

    def get(self, key: str) -> Optional[Document]:
        document = self._documents.get(key)
        return copy.deepcopy(document) if document is not None else None

    def set(self, key: str, document: Document) -> None:
        self._documents[key] = copy.deepcopy(document)


class JsonFileDocumentStore:
    """One JSON file per key under a base directory."""

    def __init__(self, base_dir: str | Path | None = None):
        base = Path(base_dir or os.getenv("GOLF_DATA_DIR", "data")).expanduser()
        self._base_dir = base.resolve()

    def _path(self, key: str) -> Path:
        safe = key.replace("/", "_")
        return self._base_dir / f"{safe}.json"

    def get(self, key: str) -> Optional[Document]:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise DatabaseError(f"Could not read document '{key}' from {path}") from exc
        if not isinstance(data, dict):
            raise DatabaseError(f"Document '{key}' in {path} is not a JSON object")
        return data

    def set(self, key: str, document: Document) -> None:
        path = self._path(key)
        try:
            self._base_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(document, indent=2, default=str), encoding="utf-8")
        except (OSError, TypeError) as exc:
            raise DatabaseError(f"Could not write document '{key}' to {path}") from exc
