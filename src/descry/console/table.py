"""Console tables.

Two named styles::

    default (bordered)            compact

    +----------+--------+          Parameter Value
    | Property | Value  |          debug     true
    +----------+--------+          locale    en
    | Path     | /users |
    +----------+--------+

Cells may span several lines; widths ignore inline style tags.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from typing import Any

from descry.console.output import Output, visible_length


@dataclass(frozen=True, slots=True)
class TableStyle:
    """Border characters and cell formats for a Table.

    Formats are ``str.format`` templates with one ``{}`` slot.
    """

    horizontal_border: str = "-"
    vertical_border: str = "|"
    crossing: str = "+"
    cell_header_format: str = "<info>{}</info>"
    cell_row_format: str = "{}"
    cell_content_format: str = " {} "

    def replace(self, **changes: Any) -> "TableStyle":
        return replace(self, **changes)


STYLES: dict[str, TableStyle] = {
    "default": TableStyle(),
    "compact": TableStyle(
        horizontal_border="",
        vertical_border=" ",
        crossing="",
        cell_content_format="{}",
    ),
}


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


class Table:
    """Renders headers and rows to an Output.

    Usage::

        table = Table(output)
        table.set_style("compact")
        table.set_headers(["Parameter", "Value"])
        table.add_row(["locale", "en"])
        table.render()
    """

    __slots__ = ("_headers", "_min_widths", "_output", "_rows", "style")

    def __init__(self, output: Output) -> None:
        self._output = output
        self._headers: list[str] = []
        self._rows: list[list[str]] = []
        self._min_widths: list[int] = []
        self.style = STYLES["default"]

    def set_style(self, style: str | TableStyle) -> "Table":
        """Use a named style or a TableStyle instance.

        Raises ``KeyError`` for an unknown style name.
        """
        self.style = STYLES[style] if isinstance(style, str) else style
        return self

    def set_column_widths(self, widths: Sequence[int]) -> "Table":
        """Minimum content width per column; zero leaves a column auto-sized."""
        self._min_widths = list(widths)
        return self

    def set_headers(self, headers: Sequence[Any]) -> "Table":
        self._headers = [_cell_text(h) for h in headers]
        return self

    def set_rows(self, rows: Iterable[Sequence[Any]]) -> "Table":
        self._rows = []
        return self.add_rows(rows)

    def add_rows(self, rows: Iterable[Sequence[Any]]) -> "Table":
        for row in rows:
            self.add_row(row)
        return self

    def add_row(self, row: Sequence[Any]) -> "Table":
        self._rows.append([_cell_text(cell) for cell in row])
        return self

    def render(self) -> None:
        """Write the table to the output, one physical line per write."""
        for line in self.lines():
            self._output.writeln(line)

    def lines(self) -> list[str]:
        columns = max([len(self._headers), *(len(r) for r in self._rows)], default=0)
        if columns == 0:
            return []

        headers = self._pad(self._headers, columns) if self._headers else []
        rows = [self._pad(r, columns) for r in self._rows]
        widths = self._column_widths([headers, *rows] if headers else rows, columns)
        for index, minimum in enumerate(self._min_widths[:columns]):
            widths[index] = max(widths[index], minimum)

        style = self.style
        separator = self._separator(widths)
        lines: list[str] = []
        if separator:
            lines.append(separator)
        if headers:
            lines.extend(self._row_lines(headers, widths, style.cell_header_format))
            if separator:
                lines.append(separator)
        for row in rows:
            lines.extend(self._row_lines(row, widths, style.cell_row_format))
        if separator and rows:
            lines.append(separator)
        return lines

    @staticmethod
    def _pad(row: list[str], columns: int) -> list[str]:
        return row + [""] * (columns - len(row))

    @staticmethod
    def _column_widths(rows: list[list[str]], columns: int) -> list[int]:
        widths = [0] * columns
        for row in rows:
            for index, cell in enumerate(row):
                for part in cell.split("\n"):
                    widths[index] = max(widths[index], visible_length(part))
        return widths

    def _separator(self, widths: list[int]) -> str:
        style = self.style
        if not style.horizontal_border:
            return ""
        padding = len(style.cell_content_format.format(""))
        segments = [style.horizontal_border * (w + padding) for w in widths]
        return style.crossing + style.crossing.join(segments) + style.crossing

    def _row_lines(self, row: list[str], widths: list[int], cell_format: str) -> list[str]:
        style = self.style
        split = [cell.split("\n") for cell in row]
        height = max(len(parts) for parts in split)
        lines: list[str] = []
        for line_index in range(height):
            cells: list[str] = []
            for column, parts in enumerate(split):
                text = parts[line_index] if line_index < len(parts) else ""
                formatted = cell_format.format(text) if text else ""
                fill = " " * (widths[column] - visible_length(text))
                cells.append(style.cell_content_format.format(formatted + fill))
            border = style.vertical_border
            line = border + border.join(cells) + border
            lines.append(line.rstrip() if not style.horizontal_border else line)
        return lines
