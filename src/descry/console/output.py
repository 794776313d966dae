"""Console output sink with inline markup.

Text written through an ``Output`` may carry inline style tags::

    <info>[container]</info> List of parameters
    <comment>Service Id</comment>       mailer

When the sink is decorated the tags become ANSI escape sequences; when
it is not they are removed. Decoration auto-detects from the stream —
no ANSI codes when piped or redirected.
"""

import io
import re
import sys
from typing import TextIO

# tag name -> ANSI SGR parameters
STYLES: dict[str, str] = {
    "info": "32",  # green
    "comment": "33",  # yellow
    "error": "37;41",  # white on red
    "question": "30;46",  # black on cyan
}

_TAG = re.compile(r"<(?:(/?)(info|comment|error|question)|(/))>")
_RESET = "\033[0m"


def strip_tags(text: str) -> str:
    """Remove inline style tags, keeping their content."""
    return _TAG.sub("", text)


def visible_length(text: str) -> int:
    """Length of *text* as displayed, ignoring style tags."""
    return len(strip_tags(text))


def _use_color(stream: object | None = None) -> bool:
    """True if the output stream supports ANSI color."""
    s = stream or sys.stdout
    try:
        return s.isatty()  # type: ignore[union-attr]
    except (AttributeError, ValueError):
        return False


def apply_styles(text: str) -> str:
    """Replace style tags with ANSI sequences. Nested tags restore the outer style."""
    stack: list[str] = []
    parts: list[str] = []
    position = 0
    for match in _TAG.finditer(text):
        parts.append(text[position : match.start()])
        position = match.end()
        closing, name = match.group(1) or match.group(3), match.group(2)
        if closing:
            if stack:
                stack.pop()
            parts.append(_RESET)
            if stack:
                parts.append(f"\033[{stack[-1]}m")
        elif name:
            stack.append(STYLES[name])
            parts.append(f"\033[{STYLES[name]}m")
    parts.append(text[position:])
    return "".join(parts)


class Output:
    """A console-like sink.

    Args:
        stream: Where text goes. Defaults to ``sys.stdout``.
        decorated: Force ANSI styling on/off. ``None`` auto-detects.
    """

    __slots__ = ("_stream", "decorated")

    def __init__(self, stream: TextIO | None = None, *, decorated: bool | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self.decorated = _use_color(self._stream) if decorated is None else decorated

    def format(self, text: str) -> str:
        return apply_styles(text) if self.decorated else strip_tags(text)

    def write(self, text: str, newline: bool = False) -> None:
        self._stream.write(self.format(text))
        if newline:
            self._stream.write("\n")

    def writeln(self, text: str = "") -> None:
        self.write(text, newline=True)


class BufferedOutput(Output):
    """An Output that keeps everything written in memory.

    ``fetch()`` returns the buffered text and empties the buffer.
    """

    __slots__ = ("_buffer",)

    def __init__(self, *, decorated: bool = False) -> None:
        self._buffer = io.StringIO()
        super().__init__(self._buffer, decorated=decorated)

    def fetch(self) -> str:
        content = self._buffer.getvalue()
        self._buffer.seek(0)
        self._buffer.truncate()
        return content
