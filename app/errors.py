"""Custom domain exceptions for the application."""

# Stable, machine-readable error codes for API consumers.
NOT_FOUND = "NOT_FOUND"
VALIDATION_ERROR = "VALIDATION_ERROR"


class DomainError(Exception):
    """Base exception for domain/business logic errors."""

    pass


class NotFoundError(DomainError):
    """Raised when a record, or a record it references, does not exist."""

    def __init__(self, entity: str, identifier: int):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} not found with id: {identifier}")


class DomainValidationError(DomainError):
    """Raised when business rules fail (e.g. moving a policy to another client)."""

    pass
