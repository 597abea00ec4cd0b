"""Line buffer that tracks indentation for generated code."""

from contextlib import contextmanager

from .literals import INDENT


class CodeWriter:
    """Collects source lines, indenting each by the current nesting depth."""

    def __init__(self):
        self._lines: list[str] = []
        self._depth = 0

    def line(self, text: str = "") -> None:
        """Append one line. Blank lines carry no indentation."""
        self._lines.append(INDENT * self._depth + text if text else "")

    def raw(self, text: str) -> None:
        """Append text verbatim, e.g. a multi-line literal at top level."""
        self._lines.append(text)

    @contextmanager
    def indented(self):
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1

    @contextmanager
    def block(self, header: str):
        """Write a compound statement header and indent its body."""
        self.line(header)
        with self.indented():
            yield

    def call(self, head: str, args: list[str], closer: str = ")") -> None:
        """Write a call with one argument per line.

        ``head`` ends with the opening parenthesis. Arguments sit one
        level deeper, separated by commas without a trailing one.
        """
        self.line(head)
        with self.indented():
            for n, arg in enumerate(args):
                self.line(arg + ("," if n < len(args) - 1 else ""))
        self.line(closer)

    def render(self) -> str:
        return "\n".join(self._lines) + "\n"
