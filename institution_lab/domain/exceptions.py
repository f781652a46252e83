"""
Domain exceptions and error hierarchy.
"""

from typing import Optional, Dict, Any


class InstitutionLabError(Exception):
    """Base exception for institution lab errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (Context: {context_str})"
        return self.message


class InvalidEntity(InstitutionLabError, ValueError):
    """Raised when an institution cannot be constructed from the given fields."""

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Optional[Any] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, context)
        self.field = field
        self.value = value


class InvalidInput(InstitutionLabError, ValueError):
    """Raised when an operation receives an absent sequence."""
    pass


class ConfigurationError(InstitutionLabError):
    """Configuration related errors."""
    pass
