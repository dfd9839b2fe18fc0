"""Custom exceptions for the application."""
from typing import Any


class EntityNotFound(Exception):
    """Raised when an entity that must exist is not in the store."""

    def __init__(self, entity_name: str, entity_id: Any):
        """
        Initialize the exception.

        Args:
            entity_name: Name of the entity that was not found
            entity_id: ID of the entity that was not found
        """
        super().__init__(f"{entity_name} with ID {entity_id} not found")
        self.entity_name = entity_name
        self.entity_id = entity_id


class ConflictingEntityFound(Exception):
    """Raised when an entity with a conflicting field already exists."""

    def __init__(self, entity_name: str, field_name: str, field_value: Any):
        """
        Initialize the exception.

        Args:
            entity_name: Name of the entity
            field_name: Name of the conflicting field
            field_value: Value of the conflicting field
        """
        super().__init__(f"{entity_name} with {field_name} '{field_value}' already exists")
        self.entity_name = entity_name
        self.field_name = field_name
        self.field_value = field_value


class StorageError(Exception):
    """Raised when the storage provider cannot complete an operation."""

    def __init__(self, operation: str, cause: Exception | None = None):
        """
        Initialize the exception.

        Args:
            operation: Name of the storage operation that failed
            cause: Underlying provider exception, if any
        """
        message = f"Storage operation '{operation}' failed"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.operation = operation
        self.cause = cause


class HandlerNotRegistered(Exception):
    """Raised when a request is sent that no handler was registered for."""

    def __init__(self, request_type: type):
        super().__init__(f"No handler registered for request type {request_type.__name__}")
        self.request_type = request_type


class DuplicateHandlerRegistration(Exception):
    """Raised when two handlers are registered for the same request type."""

    def __init__(self, request_type: type):
        super().__init__(f"A handler is already registered for request type {request_type.__name__}")
        self.request_type = request_type
