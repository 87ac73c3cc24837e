"""
Custom exceptions for the marketing dashboard with structured error context.

Each exception carries a human-readable message plus a context dictionary
so that failures can be logged and returned to API clients uniformly.

Exception Hierarchy:
    DashboardException (base)
    ├── StorageError
    ├── AuthenticationError
    ├── AccessDeniedError
    ├── ResourceNotFoundError
    └── ConflictError
        ├── DuplicateUsernameError
        └── ProtectedAccountError
"""

from typing import Optional, Dict, Any
from datetime import datetime


class DashboardException(Exception):
    """
    Base exception for all dashboard errors.

    Attributes:
        message: Human-readable error message
        context: Additional context information (key, entity id, role, etc.)
        original_exception: The original exception that was caught (if any)
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        self.message = message
        self.context = context or {}
        self.original_exception = original_exception
        self.timestamp = datetime.utcnow()

        self.context["error_timestamp"] = self.timestamp.isoformat()

        super().__init__(message)
        if original_exception:
            self.__cause__ = original_exception

    def __str__(self) -> str:
        """Format error message with context."""
        base_msg = f"{self.__class__.__name__}: {self.message}"

        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg += f" | Context: {context_str}"

        if self.original_exception:
            base_msg += f" | Caused by: {type(self.original_exception).__name__}: {str(self.original_exception)}"

        return base_msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/responses."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
            "original_error": str(self.original_exception) if self.original_exception else None
        }


# ============================================================================
# Storage Errors
# ============================================================================

class StorageError(DashboardException):
    """
    Raised when the key-value store cannot be read or written.

    Context should include:
        - key: The store key involved
        - operation: get, set or delete
    """
    pass


# ============================================================================
# Session / Access Errors
# ============================================================================

class AuthenticationError(DashboardException):
    """Raised when no user matches a username/password pair, or nobody is logged in."""
    pass


class AccessDeniedError(DashboardException):
    """
    Raised when a role's capability set does not cover a view or category.

    Context should include:
        - role: Role of the current user
        - view / category: What was requested
    """
    pass


class ResourceNotFoundError(DashboardException):
    """
    Raised when an entity id does not exist in its collection.

    Context should include:
        - collection: users, marketing-records or tasks
        - entity_id: The id that was looked up
    """
    pass


# ============================================================================
# Conflict Errors
# ============================================================================

class ConflictError(DashboardException):
    """Base exception for operations that clash with existing state."""
    pass


class DuplicateUsernameError(ConflictError):
    """Raised when creating or renaming a user to a username already taken."""
    pass


class ProtectedAccountError(ConflictError):
    """Raised when deleting the built-in admin account."""
    pass
