"""Logging helper utilities for consistent ranking summaries."""

import click


def format_summary(
    matched: int,
    total: int,
    shown: int | None = None,
    duration_seconds: float = 0.0,
    item_name: str = "candidates"
) -> str:
    """Format a summary line with colored counts.

    Args:
        matched: Candidates that matched the query
        total: Candidates scored
        shown: Results displayed after applying the result limit
        duration_seconds: Total duration in seconds
        item_name: Name of items (e.g., "candidates", "commands")

    Returns:
        Formatted summary string with colors
    """
    parts = [
        click.style('✓', fg='green') if matched else click.style('✗', fg='red'),
        f"{click.style(f'{matched}/{total}', fg='cyan')} {item_name} matched",
    ]

    if shown is not None and shown < matched:
        parts.append(click.style(f'{shown} shown', fg='yellow'))

    if duration_seconds > 0:
        rate = total / duration_seconds
        parts.append(f"in {duration_seconds * 1000:.1f}ms ({rate:.0f} {item_name}/s)")

    return " ".join(parts)


__all__ = ["format_summary"]
