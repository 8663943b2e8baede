import click

from lfm.utils.logging_helpers import format_summary
from lfm.utils.output import highlight


def test_highlight_marks_only_matched_characters():
    styled = highlight("Git Commit", [0, 4, 6])
    assert click.unstyle(styled) == "Git Commit"
    assert styled.count("\x1b[1m") == 3


def test_highlight_without_positions_is_plain():
    assert highlight("Settings", []) == "Settings"


def test_format_summary():
    text = click.unstyle(format_summary(2, 5, shown=1, duration_seconds=0.002))
    assert "2/5 candidates matched" in text
    assert "1 shown" in text
    assert "ms" in text
    assert "shown" not in click.unstyle(format_summary(2, 5, shown=2))
