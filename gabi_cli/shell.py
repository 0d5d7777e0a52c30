"""
Interactive Shell Mode.

REPL that reads ';'-terminated queries, sends each to Gabi, and renders
the result. One query at a time: the next prompt is printed only after
the previous result or error has been written.
"""

import sys
from typing import Protocol, TextIO

from gabi_cli.core.exceptions import QueryError
from gabi_cli.core.logging import get_logger, log_with_source
from gabi_cli.reader import DelimitedReader
from gabi_cli.render import render_result
from gabi_cli.schemas import QueryResponse

logger = get_logger(__name__)


class QueryBackend(Protocol):
    def query(self, query: str) -> QueryResponse: ...


class InteractiveShell:
    """
    Interactive shell for Gabi queries.

    Usage:
        shell = InteractiveShell(client, sys.stdin, sys.stdout, sys.stderr)
        shell.run()
    """

    def __init__(
        self,
        client: QueryBackend,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        *,
        prompt: str = "> ",
        delimiter: str = ";",
    ) -> None:
        """Initialize the interactive shell."""
        self.client = client
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.prompt = prompt
        self.reader = DelimitedReader(stdin or sys.stdin, delimiter)
        self.queries_sent = 0

    def run(self) -> int:
        """
        Run until end of input.

        Leading whitespace is stripped from each statement before it is sent,
        and a statement that is only the delimiter is skipped. Ctrl-C while
        reading discards the partial statement; Ctrl-C during a query abandons
        it. Both return to the prompt.

        Returns:
            Number of queries sent.

        Raises:
            ConsoleReadError: Reading the console failed (fatal)
        """
        while True:
            self.stdout.write(self.prompt)
            self.stdout.flush()

            try:
                statement = self.reader.read_statement()
            except KeyboardInterrupt:
                self.reader.discard()
                self.stdout.write("\n")
                continue
            except EOFError:
                break

            query = statement.lstrip()
            if query == self.reader.delimiter:
                continue

            try:
                self.execute(query)
            except KeyboardInterrupt:
                self.stdout.write("\n")

        log_with_source(logger, "cli", "debug", "End of input", queries_sent=self.queries_sent)
        return self.queries_sent

    def execute(self, query: str) -> None:
        """Send one query and write its result or error."""
        self.queries_sent += 1
        try:
            response = self.client.query(query)
        except QueryError as e:
            self._print_error(e.message)
            return

        if response.error:
            self._print_error(response.error)
            return

        render_result(response.result, self.stdout)
        self.stdout.flush()

    def _print_error(self, message: str) -> None:
        self.stderr.write(f"Error: {message}\n")
        self.stderr.flush()
