"""Tests for error handler."""

import pytest
from pretty_json.error_handler import ErrorHandler
from pretty_json.types import (
    ErrorType,
    IOReadError,
    IOWriteError,
    NestingDepthError,
    ParseError,
    StyleError
)


class TestErrorHandler:
    """Tests for ErrorHandler class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.error_handler = ErrorHandler()

    def test_validate_input_valid_json(self):
        """Test validation of non-empty input."""
        result = self.error_handler.validate_input('{"users": {"user1": {"name": "Alice"}}}')

        assert result.is_valid
        assert len(result.errors) == 0
        assert result.warnings == []

    def test_validate_input_empty(self):
        """Test validation of empty and blank input."""
        for text in ["", "   \n\t"]:
            result = self.error_handler.validate_input(text)

            assert not result.is_valid
            assert result.errors[0].type == ErrorType.SYNTAX
            assert "empty" in result.errors[0].message

    def test_validate_input_not_text(self):
        """Test validation of non-string input."""
        result = self.error_handler.validate_input(b"[1]")

        assert not result.is_valid
        assert "text" in result.errors[0].message

    def test_validate_input_warns_on_bom(self):
        """Test that a byte order mark produces a warning."""
        result = self.error_handler.validate_input("\ufeff[]")

        assert result.is_valid
        assert len(result.warnings) == 1

    def test_validate_input_bom_only_is_empty(self):
        """Test that a lone byte order mark counts as empty input."""
        result = self.error_handler.validate_input("\ufeff")

        assert not result.is_valid

    @pytest.mark.parametrize("error, prefix", [
        (ParseError("Expecting value", position=0, line=1, column=1), "Error parsing JSON input: "),
        (IOReadError("No such file or directory: in.json", source="in.json"), "Error reading JSON input: "),
        (IOWriteError("Permission denied: out.json", destination="out.json"), "Error writing JSON output: "),
        (StyleError("Unknown formatting style: 'wide'"), "Invalid formatting style: "),
        (NestingDepthError("JSON value is nested too deeply to format"), "Error formatting JSON input: "),
    ])
    def test_handle_error_messages(self, error, prefix):
        """Test the user facing message of each error type."""
        response = self.error_handler.handle_error(error)

        assert response.message.startswith(prefix)
        assert response.message == prefix + str(error)
        assert response.exit_code == 1

    def test_parse_error_message_includes_position(self):
        """Test that parse error reports carry the position."""
        error = ParseError("Expecting value", position=7, line=2, column=3)
        response = self.error_handler.handle_error(error)

        assert "line 2, column 3" in response.message
        assert "char 7" in response.message
