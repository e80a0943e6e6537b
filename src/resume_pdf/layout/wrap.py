"""Greedy word wrapping."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from resume_pdf.layout.metrics import FontMetrics, FontVariant


def wrap_text(
    text: str,
    font: FontVariant,
    size: float,
    max_width: float,
    metrics: FontMetrics,
) -> list[str]:
    """Split *text* into lines no wider than *max_width*.

    Words are separated by single spaces in the output. A word that is
    wider than *max_width* on its own still gets a line to itself; words
    are never broken.

    Args:
        text: Text to wrap. Any run of whitespace separates words.
        font: Font variant used for measuring.
        size: Font size in points.
        max_width: Maximum line width in points.
        metrics: Width provider.

    Returns:
        The wrapped lines, empty when *text* holds no words.
    """
    lines: list[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if metrics.width(candidate, font, size) <= max_width:
            current = candidate
        else:
            if current:
                lines.append(current)
            current = word
    if current:
        lines.append(current)
    return lines
