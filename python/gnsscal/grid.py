"""Fixed-width text cells for composing calendar blocks side by side.

Terminal escape sequences used for highlighting take up no columns, so all
widths are measured on the visible text only.
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")

CELL_WIDTH = 34
GUTTER = "    "


def display_width(text: str) -> int:
    """Number of terminal columns text occupies."""
    return len(ANSI_ESCAPE.sub("", text))


def fit(text: str, width: int) -> str:
    """Pad or truncate text to exactly width visible columns.

    Escape sequences are kept when truncating so that attributes are still
    reset.
    """
    visible = display_width(text)
    if visible <= width:
        return text + " " * (width - visible)

    parts = []
    remaining = width
    pos = 0
    for match in ANSI_ESCAPE.finditer(text):
        chunk = text[pos : match.start()][:remaining]
        parts.append(chunk)
        remaining -= len(chunk)
        parts.append(match.group())
        pos = match.end()
    parts.append(text[pos:][:remaining])
    return "".join(parts)


@dataclass(frozen=True)
class TextGrid:
    """Rows of fixed-width cells separated by a constant gutter."""

    cell_width: int = CELL_WIDTH
    gutter: str = GUTTER

    def row(self, cells: Sequence[str]) -> str:
        return self.gutter.join(fit(cell, self.cell_width) for cell in cells)

    def hstack(self, blocks: Sequence[Sequence[str]]) -> list[str]:
        """Place blocks next to each other, one cell per block.

        The result is as tall as the tallest block; shorter blocks are
        filled with blank cells.
        """
        height = max((len(block) for block in blocks), default=0)
        return [
            self.row([block[i] if i < len(block) else "" for block in blocks])
            for i in range(height)
        ]


def vstack(blocks: Sequence[Sequence[str]], separator: str = "") -> list[str]:
    """Concatenate blocks with one separator line between consecutive blocks."""
    lines: list[str] = []
    for i, block in enumerate(blocks):
        if i > 0:
            lines.append(separator)
        lines.extend(block)
    return lines
