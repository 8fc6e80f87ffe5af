"""Domain-level exceptions.

Business rule violations are subclasses of DomainException so the CLI and
HTTP layers can catch them uniformly and map them to user-facing errors.
Persistence failures are a separate family (StoreError): they are not the
caller's fault and are never translated into a business error.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} with ID {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class StoreError(Exception):
    """The backing store failed for a reason other than a missing record."""

    def __init__(self, message: str, operation: str) -> None:
        super().__init__(message)
        self.operation = operation
