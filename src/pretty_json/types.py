"""Core type definitions for the Pretty JSON formatter."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional


class Style(Enum):
    """Enumeration of the formatting styles."""
    DEFAULT = "default"
    COMPACT = "compact"

    @classmethod
    def from_name(cls, name: str) -> "Style":
        """
        Look up a style by its case-insensitive name.

        Args:
            name: Style name, e.g. "default" or "COMPACT"

        Returns:
            The matching Style

        Raises:
            StyleError: If the name does not denote a known style
        """
        if isinstance(name, str):
            for style in cls:
                if style.value == name.strip().lower():
                    return style
        raise StyleError(f"Unknown formatting style: {name!r}", context={"style": name})


class ValueKind(Enum):
    """Enumeration of JSON value variants."""
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


class ErrorType(Enum):
    """Enumeration of error types."""
    SYNTAX = "syntax"
    READ = "read"
    WRITE = "write"
    STYLE = "style"
    DEPTH = "depth"
    USAGE = "usage"


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class ErrorResponse:
    """User facing report for a handled error."""
    message: str
    exit_code: int = 1


class PrettyJsonError(Exception):
    """Base exception for formatter errors."""

    def __init__(self, message: str, error_type: ErrorType,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.context = context or {}


class ParseError(PrettyJsonError, ValueError):
    """Raised when JSON text is malformed."""

    def __init__(self, message: str, position: int = 0,
                 line: Optional[int] = None, column: Optional[int] = None):
        super().__init__(message, ErrorType.SYNTAX,
                         context={"position": position, "line": line, "column": column})
        self.position = position
        self.line = line
        self.column = column

    def __str__(self) -> str:
        if self.line is not None and self.column is not None:
            return f"{self.message} at line {self.line}, column {self.column} (char {self.position})"
        return f"{self.message} (char {self.position})"


class IOReadError(PrettyJsonError):
    """Raised when the JSON input cannot be read."""

    def __init__(self, message: str, source: str):
        super().__init__(message, ErrorType.READ, context={"source": source})
        self.source = source


class IOWriteError(PrettyJsonError):
    """Raised when the formatted output cannot be written."""

    def __init__(self, message: str, destination: str):
        super().__init__(message, ErrorType.WRITE, context={"destination": destination})
        self.destination = destination


class StyleError(PrettyJsonError, ValueError):
    """Raised when a formatting style is not recognised."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorType.STYLE, context=context)


class NestingDepthError(PrettyJsonError):
    """Raised when a value tree is nested too deeply to be formatted."""

    def __init__(self, message: str):
        super().__init__(message, ErrorType.DEPTH)


# Abstract base classes for interfaces

class JSONFormatterInterface(ABC):
    """Abstract interface for the pretty JSON formatter."""

    @abstractmethod
    def format_value(self, value: Any, indent: int = 0) -> str:
        """Format a JSON value at the given indentation."""
        pass

    @abstractmethod
    def parse_and_format(self, json_string: str) -> str:
        """Parse JSON text and return it pretty formatted."""
        pass


class ErrorHandlerInterface(ABC):
    """Abstract interface for error handling."""

    @abstractmethod
    def validate_input(self, input_data: str) -> ValidationResult:
        """Validate input data."""
        pass

    @abstractmethod
    def handle_error(self, error: PrettyJsonError) -> ErrorResponse:
        """Turn an error into a user facing report."""
        pass
