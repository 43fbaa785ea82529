"""
Pretty JSON - Human readable JSON formatting.

Formats JSON value trees in a default or a compact layout, keeping
object member order and lining up object values in a column.
"""

from .formatter import PrettyJson, format_value
from .parser import JSONParser
from .config import FormatterConfig
from .models import (
    JsonValue,
    JsonNull,
    JsonBool,
    JsonNumber,
    JsonString,
    JsonArray,
    JsonObject,
    to_value,
)
from .types import Style, ParseError, IOReadError, IOWriteError, StyleError, NestingDepthError

__version__ = "1.0.0"
__all__ = [
    "PrettyJson",
    "format_value",
    "JSONParser",
    "FormatterConfig",
    "JsonValue",
    "JsonNull",
    "JsonBool",
    "JsonNumber",
    "JsonString",
    "JsonArray",
    "JsonObject",
    "to_value",
    "Style",
    "ParseError",
    "IOReadError",
    "IOWriteError",
    "StyleError",
    "NestingDepthError",
]
