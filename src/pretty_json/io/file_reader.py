"""Reading raw JSON text from files and streams."""

import logging
from pathlib import Path
from typing import Optional, TextIO, Union
from ..types import IOReadError


class FileReader:
    """
    Reader for raw JSON input.

    Input is read completely into one string; line endings are
    normalised to "\\n".
    """

    def __init__(self, encoding: str = "utf-8-sig", logger: Optional[logging.Logger] = None):
        """
        Initialize the file reader.

        Args:
            encoding: Text encoding of input files; the default drops a leading BOM
            logger: Optional logger instance
        """
        self.encoding = encoding
        self.logger = logger or logging.getLogger(__name__)

    def read_file(self, path: Union[str, Path]) -> str:
        """
        Read the complete content of a file.

        Args:
            path: Path of the file to read

        Returns:
            File content as a string

        Raises:
            IOReadError: If the file cannot be read or decoded
        """
        file_path = Path(path)
        try:
            with open(file_path, "r", encoding=self.encoding, newline=None) as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise IOReadError(describe_io_error(e), source=str(file_path)) from e

        self.logger.debug(f"Read {len(content)} characters from {file_path}")
        return content

    def read_stream(self, stream: TextIO, name: str = "<stdin>") -> str:
        """
        Read a text stream to its end.

        Args:
            stream: Text stream, usually standard input
            name: Name used in error messages

        Returns:
            Stream content as a string

        Raises:
            IOReadError: If the stream cannot be read or decoded
        """
        try:
            content = stream.read()
        except (OSError, UnicodeDecodeError) as e:
            raise IOReadError(describe_io_error(e), source=name) from e

        content = content.replace("\r\n", "\n").replace("\r", "\n")
        self.logger.debug(f"Read {len(content)} characters from {name}")
        return content



def describe_io_error(error: Exception) -> str:
    """Short message for an I/O failure, naming the file where known."""
    if isinstance(error, OSError) and error.strerror:
        target = f": {error.filename}" if error.filename else ""
        return f"{error.strerror}{target}"
    return str(error)
