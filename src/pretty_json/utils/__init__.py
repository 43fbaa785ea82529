"""Utility modules for the Pretty JSON formatter."""

from .escaping import escape_json_string, repeat

__all__ = ["escape_json_string", "repeat"]
