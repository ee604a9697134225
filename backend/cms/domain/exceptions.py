"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class DomainValidationError(Exception):
    """Raised when caller input is missing or invalid."""

    def __init__(self, message: str, fields: list[str] | None = None):
        self.message = message
        self.fields = fields or []
        super().__init__(message)


class AuthenticationError(Exception):
    """Raised when the admin API key is missing or wrong."""

    def __init__(self, message: str = "Unauthorized: Invalid or missing API Key"):
        self.message = message
        super().__init__(message)


class PersistenceError(Exception):
    """Raised when the storage layer fails for a reason other than a conflict.

    Wraps the underlying driver error so callers never depend on SQLAlchemy.
    """

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Storage failure during {operation}{detail}")
