"""Error handling implementation for the Pretty JSON formatter."""

import logging
from typing import Optional
from .types import (
    ErrorHandlerInterface,
    ValidationResult,
    ValidationError,
    ErrorResponse,
    PrettyJsonError,
    ErrorType
)


class ErrorHandler(ErrorHandlerInterface):
    """
    Error handler for formatter operations.

    Validates raw input before it reaches the parser and turns the
    formatter's exceptions into the messages reported to the user.
    """

    _PREFIXES = {
        ErrorType.SYNTAX: "Error parsing JSON input",
        ErrorType.READ: "Error reading JSON input",
        ErrorType.WRITE: "Error writing JSON output",
        ErrorType.STYLE: "Invalid formatting style",
        ErrorType.DEPTH: "Error formatting JSON input",
        ErrorType.USAGE: "Invalid usage",
    }

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, input_data: str) -> ValidationResult:
        """
        Validate raw JSON text before parsing.

        Args:
            input_data: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if not isinstance(input_data, str):
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=f"JSON input must be text, got {type(input_data).__name__}",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        if input_data.startswith("\ufeff"):
            warnings.append("JSON input starts with a byte order mark")
            input_data = input_data[1:]

        if not input_data.strip():
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message="JSON input is empty",
                location="input"
            ))

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    def handle_error(self, error: PrettyJsonError) -> ErrorResponse:
        """
        Build the user facing report for an error.

        Args:
            error: PrettyJsonError to handle

        Returns:
            ErrorResponse with message and exit code
        """
        self.logger.debug(f"Handling {error.error_type.value} error: {error!r}", exc_info=error)

        prefix = self._PREFIXES.get(error.error_type, "Error")
        return ErrorResponse(message=f"{prefix}: {error}", exit_code=1)
