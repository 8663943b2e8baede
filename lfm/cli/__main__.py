"""Module entry point for `python -m lfm.cli`."""

if __name__ == "__main__":  # pragma: no cover (invocation driven)
    from lfm.cli import cli

    cli()
