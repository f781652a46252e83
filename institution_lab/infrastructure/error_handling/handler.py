"""
Error handler implementation with structured logging.
"""

import traceback
from typing import Dict, Any
from datetime import datetime

from institution_lab.domain.interfaces.base import ILogger
from institution_lab.domain.exceptions import (
    InstitutionLabError, InvalidEntity, InvalidInput, ConfigurationError
)


class ErrorHandler:
    """Logs errors with their context and turns them into user-facing messages."""

    def __init__(self, logger: ILogger):
        self.logger = logger

    def handle_error(self, error: Exception, context: Dict[str, Any]) -> str:
        """Handle error with logging and return user-friendly message."""
        self.log_error(error, context)
        return self.create_user_message(error)

    def log_error(self, error: Exception, context: Dict[str, Any]) -> None:
        """Log error with structured context."""
        error_context = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            'traceback': ''.join(traceback.format_exception(type(error), error, error.__traceback__)),
            'timestamp': datetime.now().isoformat(),
            **context
        }

        if isinstance(error, InstitutionLabError):
            error_context.update(error.context)

            if isinstance(error, InvalidEntity):
                error_context.update({
                    'field': error.field,
                    'value': repr(error.value) if error.value is not None else None
                })

        if isinstance(error, InvalidEntity):
            # Literal data failing validation is a programming error
            self.logger.critical("Invalid institution data", **error_context)
        elif isinstance(error, (InvalidInput, ConfigurationError)):
            self.logger.warning("Configuration/validation error occurred", **error_context)
        else:
            self.logger.error("Unexpected error occurred", **error_context)

    def create_user_message(self, error: Exception) -> str:
        """Create user-friendly error message."""
        if isinstance(error, InvalidEntity):
            field_hint = f" (field: {error.field})" if error.field else ""
            return f"Invalid institution{field_hint}: {error.message}"

        elif isinstance(error, InvalidInput):
            return f"Invalid input: {error.message}"

        elif isinstance(error, ConfigurationError):
            return f"Configuration error: {error.message}\nCheck the configuration file and LAB_* variables."

        elif isinstance(error, InstitutionLabError):
            return f"Error: {error.message}"

        else:
            return f"Unexpected error: {error}"
