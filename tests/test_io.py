"""Tests for file reader and writer."""

import io
import pytest
from pretty_json.io import FileReader, FileWriter
from pretty_json.types import ErrorType, IOReadError, IOWriteError


class TestFileReader:
    """Tests for FileReader class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.reader = FileReader()

    def test_read_file(self, temp_dir):
        """Test reading a complete file."""
        path = temp_dir / "input.json"
        path.write_text('{"a": [1, 2]}', encoding="utf-8")

        assert self.reader.read_file(path) == '{"a": [1, 2]}'

    def test_read_file_normalises_line_endings(self, temp_dir):
        """Test that CRLF and CR line endings become LF."""
        path = temp_dir / "input.json"
        path.write_bytes(b'{\r\n"a":\r1\n}')

        assert self.reader.read_file(path) == '{\n"a":\n1\n}'

    def test_read_file_drops_bom(self, temp_dir):
        """Test that a UTF-8 byte order mark is dropped."""
        path = temp_dir / "input.json"
        path.write_bytes("\ufeff[\"ü\"]".encode("utf-8"))

        assert self.reader.read_file(path) == '["ü"]'

    def test_read_missing_file(self, temp_dir):
        """Test reading a file that does not exist."""
        path = temp_dir / "missing.json"

        with pytest.raises(IOReadError) as exc_info:
            self.reader.read_file(path)

        assert exc_info.value.error_type == ErrorType.READ
        assert exc_info.value.source == str(path)
        assert "missing.json" in str(exc_info.value)

    def test_read_invalid_encoding(self, temp_dir):
        """Test reading a file that is not valid UTF-8."""
        path = temp_dir / "latin1.json"
        path.write_bytes(b'["\xff"]')

        with pytest.raises(IOReadError):
            self.reader.read_file(path)

    def test_read_stream(self):
        """Test reading a stream to its end."""
        stream = io.StringIO("[1,\r\n2]")

        assert self.reader.read_stream(stream) == "[1,\n2]"


class TestFileWriter:
    """Tests for FileWriter class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.writer = FileWriter()

    def test_write_file_appends_newline(self, temp_dir):
        """Test that file output ends with a newline."""
        path = temp_dir / "output.json"
        written = self.writer.write_file(path, "[ 1, 2 ]")

        assert path.read_text(encoding="utf-8") == "[ 1, 2 ]\n"
        assert written == len("[ 1, 2 ]\n")

    def test_write_file_keeps_non_ascii(self, temp_dir):
        """Test that output is written as UTF-8."""
        path = temp_dir / "output.json"
        self.writer.write_file(path, '"日本"')

        assert path.read_bytes() == '"日本"\n'.encode("utf-8")

    def test_write_file_to_missing_directory(self, temp_dir):
        """Test writing into a directory that does not exist."""
        path = temp_dir / "missing" / "output.json"

        with pytest.raises(IOWriteError) as exc_info:
            self.writer.write_file(path, "null")

        assert exc_info.value.error_type == ErrorType.WRITE
        assert exc_info.value.destination == str(path)

    def test_write_stream(self):
        """Test writing to a stream."""
        stream = io.StringIO()
        self.writer.write_stream(stream, "{ }")

        assert stream.getvalue() == "{ }\n"

    def test_write_closed_stream(self):
        """Test writing to a stream that fails."""
        class BrokenStream(io.StringIO):
            def write(self, text):
                raise OSError(32, "Broken pipe")

        with pytest.raises(IOWriteError, match="Broken pipe"):
            self.writer.write_stream(BrokenStream(), "null")
