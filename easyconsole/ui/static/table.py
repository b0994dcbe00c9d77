#!/usr/bin/env python3
# easyconsole/ui/static/table.py
from __future__ import annotations

import textwrap
from typing import Optional, Sequence

from easyconsole.ui.utils import strip_ansi


def _visible_len(cell: str) -> int:
    return len(strip_ansi(cell))


def _wrap_cells(row: list[str], width: int) -> list[list[str]]:
    """Split one logical row into physical lines, wrapping the last column."""
    *fixed, last = row
    wrapped = textwrap.wrap(last, width) or [""]
    physical = [[*fixed, wrapped[0]]]
    physical.extend([*([""] * len(fixed)), extra] for extra in wrapped[1:])
    return physical


def format_table(
    rows: Sequence[Sequence[object]],
    headers: Optional[Sequence[object]] = None,
    *,
    padding: int = 1,
    border: bool = True,
    max_width: Optional[int] = None,
) -> str:
    """
    Render rows as an ASCII table.

    Column widths ignore ANSI sequences. When `max_width` is given the
    last column is word-wrapped so the table fits in that many columns.
    """
    body = [[str(cell) for cell in row] for row in rows]
    head = [str(h) for h in headers] if headers is not None else None
    sample = ([head] if head else []) + body
    if not sample:
        return ""

    widths = [max(_visible_len(row[i]) for row in sample if i < len(row))
              for i in range(max(len(row) for row in sample))]
    frame = len(widths) + 1 + 2 * padding * len(widths)
    if max_width is not None:
        room = max_width - frame - sum(widths[:-1])
        widths[-1] = max(1, min(widths[-1], room))

    pad = " " * padding

    def line(cells: Sequence[str]) -> str:
        padded = (f"{pad}{c}{' ' * (w - _visible_len(c))}{pad}" for c, w in zip(cells, widths))
        return "|" + "|".join(padded) + "|"

    rule = "-" * (sum(widths) + frame)
    out: list[str] = [rule] if border else []
    if head:
        out.append(line(head))
        out.append(line(["-" * w for w in widths]))
    for row in body:
        row = row + [""] * (len(widths) - len(row))
        if max_width is None or _visible_len(row[-1]) <= widths[-1]:
            out.append(line(row))
        else:
            out.extend(line(cells) for cells in _wrap_cells(row, widths[-1]))
    if border:
        out.append(rule)
    return "\n".join(out)
