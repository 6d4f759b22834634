class DatabaseError(Exception):
    """Base for all database errors."""


class NotFoundError(DatabaseError):
    """Entity not found."""


class DuplicateError(DatabaseError):
    """Entity with the same identity already exists."""


class IntegrityError(DatabaseError):
    """Reference to a different entity than the one being written to."""
