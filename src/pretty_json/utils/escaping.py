"""String escaping and padding helpers."""

import json
import re


# Lone surrogates cannot be encoded as UTF-8 and are written as \uXXXX
_SURROGATE_RE = re.compile("[\ud800-\udfff]")


def escape_json_string(text: str) -> str:
    """
    Escape a string for use between JSON double quotes.

    Escapes the double quote, the backslash and all control characters
    below 0x20 (\\b, \\f, \\n, \\r and \\t by name, the rest as \\u00XX).
    Unpaired surrogates (U+D800 to U+DFFF) are escaped as \\uXXXX so the
    result is always encodable. Other non-ASCII characters are left as
    they are.

    Args:
        text: Raw string value

    Returns:
        Escaped text, without the surrounding quotes
    """
    escaped = json.dumps(text, ensure_ascii=False)[1:-1]
    return _SURROGATE_RE.sub(lambda match: "\\u%04x" % ord(match.group()), escaped)


def repeat(char: str, times: int) -> str:
    """Repeat a character; non-positive counts give an empty string."""
    return char * max(times, 0)
