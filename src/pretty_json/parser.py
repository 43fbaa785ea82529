"""Order preserving JSON parser producing the JSON value model."""

import json
import logging
import re
from typing import Any, Dict, Optional
from .types import ParseError, ValueKind
from .error_handler import ErrorHandler
from .models import JsonValue, JsonArray, JsonObject, JsonNumber, to_value


# String literals are matched first so constants inside them are skipped
_CONSTANT_RE = re.compile(r'"(?:\\.|[^"\\])*"|(-?Infinity|NaN)')


class _MemberPairs(list):
    """Raw (key, value) pairs of a decoded JSON object."""


class JSONParser:
    """
    JSON parser that keeps object member order and number text.

    Decodes with the standard library decoder, hooking object, integer,
    float and constant handling so that the result can be turned into the
    JSON value model without losing information.
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON parser.

        Args:
            error_handler: Optional ErrorHandler instance
            logger: Optional logger instance
        """
        self.error_handler = error_handler or ErrorHandler()
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, json_string: str) -> JsonValue:
        """
        Parse JSON text into a JSON value tree.

        Args:
            json_string: JSON string to parse

        Returns:
            Root JsonValue

        Raises:
            ParseError: If the JSON text is empty or malformed
        """
        validation_result = self.error_handler.validate_input(json_string)
        for warning in validation_result.warnings:
            self.logger.warning(warning)
        if not validation_result.is_valid:
            error_messages = [error.message for error in validation_result.errors]
            raise ParseError("; ".join(error_messages), position=0)

        if json_string.startswith("\ufeff"):
            json_string = json_string[1:]

        def reject_constant(name: str) -> Any:
            raise self._constant_error(json_string, name)

        try:
            raw = json.loads(
                json_string,
                object_pairs_hook=_MemberPairs,
                parse_int=JsonNumber,
                parse_float=JsonNumber,
                parse_constant=reject_constant,
            )
        except json.JSONDecodeError as e:
            raise ParseError(e.msg, position=e.pos, line=e.lineno, column=e.colno) from e
        except RecursionError as e:
            raise ParseError("JSON input is nested too deeply", position=0) from e

        try:
            value = self._build(raw)
            if self.logger.isEnabledFor(logging.DEBUG):
                stats = self.get_structure_statistics(value)
                self.logger.debug(f"Parsed JSON {value.kind.value} with statistics: {stats}")
        except RecursionError as e:
            raise ParseError("JSON input is nested too deeply", position=0) from e
        return value

    @staticmethod
    def _constant_error(json_string: str, name: str) -> ParseError:
        """Locate the first NaN or Infinity literal outside of strings."""
        for match in _CONSTANT_RE.finditer(json_string):
            if match.group(1):
                position = match.start(1)
                line = json_string.count("\n", 0, position) + 1
                column = position - json_string.rfind("\n", 0, position)
                return ParseError(f"Invalid number literal {name!r}", position=position,
                                  line=line, column=column)
        return ParseError(f"Invalid number literal {name!r}", position=0)

    def _build(self, node: Any) -> JsonValue:
        """Convert decoder output into the JSON value model."""
        if isinstance(node, _MemberPairs):
            return JsonObject.from_pairs((key, self._build(value)) for key, value in node)
        if isinstance(node, list):
            return JsonArray(tuple(self._build(item) for item in node))
        return to_value(node)

    def calculate_nesting_depth(self, value: JsonValue, current_depth: int = 0) -> int:
        """Calculate maximum nesting depth of a value tree."""
        if value.is_scalar:
            return current_depth

        children = value.items if isinstance(value, JsonArray) else [v for _, v in value.items()]
        max_child_depth = current_depth + 1
        for child in children:
            max_child_depth = max(max_child_depth,
                                  self.calculate_nesting_depth(child, current_depth + 1))
        return max_child_depth

    def get_structure_statistics(self, value: JsonValue) -> Dict[str, Any]:
        """
        Get statistics about a value tree.

        Args:
            value: Parsed JSON value

        Returns:
            Dictionary with structure statistics
        """
        stats = {
            "max_depth": self.calculate_nesting_depth(value),
            "object_count": 0,
            "array_count": 0,
            "scalar_count": 0,
            "total_members": 0,
            "total_items": 0,
            "root_kind": value.kind.value
        }
        self._count_elements(value, stats)
        return stats

    def _count_elements(self, value: JsonValue, stats: Dict[str, Any]) -> None:
        """Recursively count different types of elements."""
        if value.kind is ValueKind.OBJECT:
            stats["object_count"] += 1
            stats["total_members"] += len(value)
            for _, member in value.items():
                self._count_elements(member, stats)

        elif value.kind is ValueKind.ARRAY:
            stats["array_count"] += 1
            stats["total_items"] += len(value)
            for item in value:
                self._count_elements(item, stats)

        else:
            stats["scalar_count"] += 1
