class DomainError(RuntimeError):
    """Base class for errors raised by the fermentation engine."""


class ValidationError(DomainError):
    """Raised when input is malformed or out of range."""

    def __init__(self, field: str, reason: str):
        super().__init__(f"{field}: {reason}")
        self.field = field
        self.reason = reason


class NotFoundError(DomainError):
    """Raised when a record is missing or owned by someone else.

    Both cases produce the same error so callers cannot probe for records
    belonging to other users.
    """

    def __init__(self, resource: str):
        super().__init__(f"{resource.capitalize()} not found")
        self.resource = resource


class ConflictError(DomainError):
    """Raised when a write would violate a uniqueness constraint."""

    def __init__(self, field: str, reason: str):
        super().__init__(f"{field}: {reason}")
        self.field = field
        self.reason = reason


class StorageError(DomainError):
    """Raised when the persistence layer fails."""
