"""Output formatting utilities for consistent CLI reporting."""

from typing import Iterable

import click


def section_header(text: str) -> str:
    """Format a section header with color.

    Args:
        text: Header text

    Returns:
        Formatted header string
    """
    return click.style(f"▶ {text}", fg='cyan', bold=True)


def success(text: str, prefix: str = "✓") -> str:
    return f"{click.style(prefix, fg='green')} {text}"


def error(text: str, prefix: str = "✗") -> str:
    return f"{click.style(prefix, fg='red')} {text}"


def info(text: str) -> str:
    return f"  {click.style('•', fg='blue')} {text}"


def highlight(candidate: str, positions: Iterable[int], color: str = 'yellow') -> str:
    """Render ``candidate`` with the matched characters bold and colored.

    Args:
        candidate: Candidate label
        positions: Matched indices into ``candidate`` (presentation only)
        color: Foreground color for matched characters

    Returns:
        Styled string (plain text when click strips ANSI codes)
    """
    marked = set(positions)
    return "".join(
        click.style(ch, fg=color, bold=True) if i in marked else ch
        for i, ch in enumerate(candidate)
    )


def divider() -> str:
    return click.style("─" * 60, fg='bright_black')


__all__ = [
    "section_header",
    "success",
    "error",
    "info",
    "highlight",
    "divider",
]
