"""Pretty JSON layout engine."""

import logging
from typing import Any, Optional, Sequence, Tuple
from .types import JSONFormatterInterface, NestingDepthError, Style, StyleError
from .models import (
    JsonValue,
    JsonNull,
    JsonBool,
    JsonNumber,
    JsonString,
    JsonArray,
    JsonObject,
    to_value
)
from .parser import JSONParser
from .utils.escaping import escape_json_string, repeat


# Width of the member indentation inside an object or array
MEMBER_INDENT = 2

# Columns taken by the key quotes and the " : " separator
KEY_PUNCTUATION_WIDTH = len('""') + len(" : ")

# Array items longer than this are always broken onto separate lines
MAX_INLINE_ITEMS = 3


class PrettyJson(JSONFormatterInterface):
    """
    Pretty JSON formatter. Supports two formatting styles:

    - Style.DEFAULT: regular pretty formatting, every array and object
      that spans several lines opens and closes on lines of its own.
    - Style.COMPACT: reduces the number of lines by placing the first
      member of arrays and objects on the line of the opening bracket.

    Arrays holding at most three scalar items are printed on one line.
    Object values are aligned in a column after the longest key.
    Opening brackets are always followed by a space, so in the default
    style a line ending with "{ " or "[ " keeps that trailing space.

    Example Style.DEFAULT output::

        { 
          "name"       : "Alice Wonderland",
          "age"        : 21,
          "friends"    : [ "Bob", "Clair", "Dan" ],
          "dictionary" : { 
                           "one" : "eins",
                           "two" : "zwei"
                         }
        }

    Example Style.COMPACT output::

        { "name"       : "Alice Wonderland",
          "age"        : 21,
          "friends"    : [ "Bob", "Clair", "Dan" ],
          "dictionary" : { "one" : "eins",
                           "two" : "zwei" } }
    """

    def __init__(self, style: Style = Style.DEFAULT,
                 parser: Optional[JSONParser] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the formatter.

        Args:
            style: Formatting style
            parser: Optional JSONParser used by parse_and_format
            logger: Optional logger instance

        Raises:
            StyleError: If style is not a Style member
        """
        self.logger = logger or logging.getLogger(__name__)
        self.parser = parser or JSONParser(logger=self.logger)
        self.style = style

    @property
    def style(self) -> Style:
        """The formatting style."""
        return self._style

    @style.setter
    def style(self, style: Style) -> None:
        if not isinstance(style, Style):
            raise StyleError(f"The style must be a Style member, got {style!r}",
                             context={"style": style})
        self._style = style

    def format_bool(self, value: bool) -> str:
        return "true" if value else "false"

    def format_number(self, number: JsonNumber) -> str:
        return number.text

    def format_string(self, text: str) -> str:
        """Format a string value; special characters are escaped."""
        return '"' + escape_json_string(text) + '"'

    def format_null(self) -> str:
        return "null"

    def format_array(self, items: Sequence[JsonValue], indent: int = 0) -> str:
        """
        Format a JSON array.

        Args:
            items: Array items
            indent: Indentation level (number of characters)

        Returns:
            The formatted array
        """
        if not items:
            return "[ ]"

        # Line break each item if one of them is an array or an object,
        # or if there are more than three of them
        break_items = (any(not item.is_scalar for item in items)
                       or len(items) > MAX_INLINE_ITEMS)

        sub_indent = indent + MEMBER_INDENT
        item_prefix = repeat(" ", indent + MEMBER_INDENT)

        parts = ["[ "]
        if self.style is Style.DEFAULT and break_items:
            parts.append("\n")

        for position, item in enumerate(items):
            if position > 0:
                parts.append(",\n" if break_items else ", ")
            if break_items and (position > 0 or self.style is Style.DEFAULT):
                parts.append(item_prefix)
            parts.append(self.format_value(item, sub_indent))

        if self.style is Style.DEFAULT and break_items:
            parts.append("\n" + repeat(" ", indent) + "]")
        else:
            parts.append(" ]")
        return "".join(parts)

    def format_object(self, members: Sequence[Tuple[str, JsonValue]], indent: int = 0) -> str:
        """
        Format a JSON object.

        Args:
            members: Object members as (key, value) pairs, in order
            indent: Indentation level (number of characters)

        Returns:
            The formatted object
        """
        if not members:
            return "{ }"

        # Keys are measured as printed so that all values line up
        escaped_keys = [escape_json_string(key) for key, _ in members]
        max_key_len = max(len(key) for key in escaped_keys)

        sub_indent = indent + MEMBER_INDENT + max_key_len + KEY_PUNCTUATION_WIDTH
        member_prefix = repeat(" ", indent + MEMBER_INDENT)

        parts = ["{ "]
        if self.style is Style.DEFAULT:
            parts.append("\n")

        for position, (key, (_, value)) in enumerate(zip(escaped_keys, members)):
            if position > 0:
                parts.append(",\n")
            if position > 0 or self.style is Style.DEFAULT:
                parts.append(member_prefix)
            parts.append('"' + key + '"' + repeat(" ", max_key_len - len(key)) + " : ")
            parts.append(self.format_value(value, sub_indent))

        if self.style is Style.DEFAULT:
            parts.append("\n" + repeat(" ", indent) + "}")
        else:
            parts.append(" }")
        return "".join(parts)

    def format_value(self, value: JsonValue, indent: int = 0) -> str:
        """
        Format any JSON value, recursing into arrays and objects.

        Args:
            value: JSON value to format
            indent: Indentation level used by arrays and objects

        Returns:
            The formatted value

        Raises:
            TypeError: If value is not a JsonValue
        """
        if isinstance(value, JsonObject):
            return self.format_object(value.items(), indent)
        elif isinstance(value, JsonArray):
            return self.format_array(value.items, indent)
        elif isinstance(value, JsonString):
            return self.format_string(value.value)
        elif isinstance(value, JsonNumber):
            return self.format_number(value)
        elif isinstance(value, JsonBool):
            return self.format_bool(value.value)
        elif isinstance(value, JsonNull):
            return self.format_null()
        raise TypeError(f"Cannot format object of type {type(value).__name__}")

    def format(self, value: Any) -> str:
        """
        Format a JSON value tree, or plain Python data, at zero indentation.

        Args:
            value: JsonValue, or data accepted by to_value

        Returns:
            The pretty formatted JSON text
        """
        return self._format_root(to_value(value))

    def parse_and_format(self, json_string: str) -> str:
        """
        Parse the JSON text and format it.

        Args:
            json_string: The JSON text

        Returns:
            The pretty formatted JSON text

        Raises:
            ParseError: If the JSON text is malformed
            NestingDepthError: If the value is nested too deeply to format
        """
        value = self.parser.parse(json_string)
        formatted = self._format_root(value)
        line_count = formatted.count("\n") + 1
        self.logger.debug(f"Formatted {len(json_string)} characters of JSON into "
                          f"{line_count} lines ({self.style.value} style)")
        return formatted

    def _format_root(self, value: JsonValue) -> str:
        try:
            return self.format_value(value, 0)
        except RecursionError as e:
            raise NestingDepthError("JSON value is nested too deeply to format") from e


def format_value(root: JsonValue, style: Style = Style.DEFAULT) -> str:
    """Format a JSON value tree with the given style."""
    return PrettyJson(style).format(root)
