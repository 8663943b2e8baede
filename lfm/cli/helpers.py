from __future__ import annotations
import click

from ..config import configure_logging, load_typed_config
from ..config_types import AppConfig
from ..version import __version__


def get_app_config(cfg: dict) -> AppConfig:
    """Build the typed config from the context dict.

    Raises:
        click.UsageError: If the configuration holds invalid values
    """
    try:
        return AppConfig.from_dict(cfg)
    except (TypeError, ValueError) as e:
        raise click.UsageError(f"Invalid configuration: {e}") from e


@click.group()
@click.version_option(version=__version__, prog_name="label-fuzzy-matcher")
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              default=None, help='Override the configured log level')
@click.pass_context
def cli(ctx: click.Context, log_level: str | None):
    """Fuzzy match launcher labels against a typed query.

    \b
    TYPICAL USAGE:

    \b
    Score one candidate:
      lfm match gcm "Git Commit"

    \b
    Rank a list of candidates:
      lfm rank "open set" "Open Settings Dialog" "Open File" "Reset Settings"
      lfm rank gc --file commands.txt --limit 5
      ls | lfm rank rdme --file -

    \b
    Inspect configuration:
      lfm config --section scoring

    \b
    Configuration is read from LFM__* environment variables and an optional
    .env file, e.g. LFM__MATCHING__PRECISION=regular.
    """
    if not isinstance(ctx.obj, dict):
        overrides = {'log_level': log_level} if log_level else None
        try:
            ctx.obj = load_typed_config(overrides).to_dict()
        except (TypeError, ValueError) as e:
            raise click.UsageError(f"Invalid configuration: {e}") from e
    elif log_level:
        ctx.obj['log_level'] = log_level
        configure_logging(log_level)


__all__ = ["cli", "get_app_config"]
