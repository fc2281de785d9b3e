"""Presentation helpers for numbers and tables."""

from __future__ import annotations

import time
from typing import Iterable, Sequence

SCIENTIFIC_LOWER = 1e-6
SCIENTIFIC_UPPER = 1e6


def format_number(value: float) -> str:
    """Render *value* for display; stored values are never rounded by this."""

    magnitude = abs(value)
    if magnitude < SCIENTIFIC_LOWER or magnitude >= SCIENTIFIC_UPPER:
        return f"{value:.2e}"
    return f"{value:.6g}"


def format_timestamp(timestamp: float) -> str:
    return time.strftime("%Y-%m-%d %H:%M:%S", time.localtime(timestamp))


def format_result(value: float, source: str, result: float, target: str) -> str:
    return f"{format_number(value)} {source} = {format_number(result)} {target}"


def format_table(headers: Sequence[str], rows: Iterable[Sequence[object]], widths: Sequence[int]) -> str:
    lines = ["".join(f"{str(cell):<{width}}" for cell, width in zip(headers, widths)).rstrip()]
    lines.append("-" * sum(widths))
    for row in rows:
        lines.append("".join(f"{str(cell):<{width}}" for cell, width in zip(row, widths)).rstrip())
    return "\n".join(lines)


__all__ = ["format_number", "format_timestamp", "format_result", "format_table"]
