from database.db_manager import GOLF_DATA_KEY, GolfDataManager
from database.document_store import DocumentStore, InMemoryDocumentStore, JsonFileDocumentStore
from database.exceptions import DatabaseError, NotFoundError, DuplicateError, IntegrityError

__all__ = [
    "GOLF_DATA_KEY",
    "GolfDataManager",
    "DocumentStore",
    "InMemoryDocumentStore",
    "JsonFileDocumentStore",
    "DatabaseError",
    "NotFoundError",
    "DuplicateError",
    "IntegrityError",
]
