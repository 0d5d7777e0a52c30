"""
Delimiter-terminated console input.

Statements end at a delimiter character (';') rather than at end of line,
so a query may span several lines and several queries may share one.
"""

from typing import TextIO

from gabi_cli.core.exceptions import ConsoleReadError


class DelimitedReader:
    """
    Reads statements from a text stream, one delimiter at a time.

    One reader lives for the whole session so anything typed after a
    delimiter stays buffered for the next statement.
    """

    def __init__(self, stream: TextIO, delimiter: str = ";") -> None:
        if len(delimiter) != 1:
            raise ValueError("delimiter must be a single character")
        self._stream = stream
        self.delimiter = delimiter
        self._pending = ""

    def read_statement(self) -> str:
        """
        Block until a delimiter is read.

        Returns:
            The accumulated text, including the delimiter.

        Raises:
            EOFError: The stream ended. Text without a delimiter is dropped.
            ConsoleReadError: Any other read failure.
        """
        buffer = self._pending
        self._pending = ""

        while True:
            index = buffer.find(self.delimiter)
            if index != -1:
                self._pending = buffer[index + 1:]
                return buffer[:index + 1]

            try:
                chunk = self._stream.readline()
            except (OSError, UnicodeDecodeError) as e:
                raise ConsoleReadError(f"console read failed: {e}") from e

            if not chunk:
                raise EOFError
            buffer += chunk

    def discard(self) -> None:
        """Drop any buffered text (after an interrupt)."""
        self._pending = ""
