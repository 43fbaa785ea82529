"""Writing formatted JSON to files and streams."""

import logging
from pathlib import Path
from typing import Optional, TextIO, Union
from ..types import IOWriteError
from .file_reader import describe_io_error


class FileWriter:
    """Writer for formatted JSON output; every output ends with a newline."""

    def __init__(self, encoding: str = "utf-8", logger: Optional[logging.Logger] = None):
        """
        Initialize the file writer.

        Args:
            encoding: Text encoding of output files
            logger: Optional logger instance
        """
        self.encoding = encoding
        self.logger = logger or logging.getLogger(__name__)

    def write_file(self, path: Union[str, Path], text: str) -> int:
        """
        Write formatted text to a file, followed by a newline.

        Args:
            path: Path of the file to write
            text: Formatted JSON text

        Returns:
            Number of characters written

        Raises:
            IOWriteError: If the file cannot be written
        """
        file_path = Path(path)
        content = text + "\n"
        try:
            with open(file_path, "w", encoding=self.encoding) as f:
                f.write(content)
        except (OSError, UnicodeEncodeError) as e:
            raise IOWriteError(describe_io_error(e), destination=str(file_path)) from e

        self.logger.debug(f"Wrote {len(content)} characters to {file_path}")
        return len(content)

    def write_stream(self, stream: TextIO, text: str, name: str = "<stdout>") -> int:
        """
        Write formatted text to a stream, followed by a newline.

        Args:
            stream: Text stream, usually standard output
            text: Formatted JSON text
            name: Name used in error messages

        Returns:
            Number of characters written

        Raises:
            IOWriteError: If the stream cannot be written
        """
        content = text + "\n"
        try:
            stream.write(content)
            stream.flush()
        except (OSError, UnicodeEncodeError) as e:
            raise IOWriteError(describe_io_error(e), destination=name) from e

        self.logger.debug(f"Wrote {len(content)} characters to {name}")
        return len(content)
