"""A text buffer that tracks an indentation depth."""

import re
from collections.abc import Iterator
from contextlib import contextmanager

NEWLINE_RE = re.compile(r"\r?\n")


class IndentedWriter:
    """Accumulates lines of text, indenting each line to the current depth.

    Indentation is written lazily when the first character of a line arrives,
    so empty lines never carry trailing whitespace.
    """

    def __init__(self, indent: str = "  ") -> None:
        """Initialize an empty buffer with the given indent unit."""
        self.indent = indent
        self._depth = 0
        self._chunks: list[str] = []
        self._at_line_start = True

    @property
    def depth(self) -> int:
        """Current indentation depth."""
        return self._depth

    @contextmanager
    def indent_scope(self) -> Iterator["IndentedWriter"]:
        """Indent everything written inside the ``with`` block by one level."""
        self._depth += 1
        try:
            yield self
        finally:
            self._depth -= 1

    def write(self, text: str) -> None:
        """Append text without a trailing line break."""
        lines = NEWLINE_RE.split(text)
        for i, line in enumerate(lines):
            if i > 0:
                self._break_line()
            if line:
                if self._at_line_start:
                    self._chunks.append(self.indent * self._depth)
                    self._at_line_start = False
                self._chunks.append(line)

    def write_line(self, text: str = "") -> None:
        """Append text followed by a line break."""
        self.write(text)
        self._break_line()

    def _break_line(self) -> None:
        self._chunks.append("\n")
        self._at_line_start = True

    def to_string(self) -> str:
        """Return the buffer with every line break normalized to CRLF."""
        return NEWLINE_RE.sub("\r\n", "".join(self._chunks))

    def __str__(self) -> str:
        return self.to_string()
