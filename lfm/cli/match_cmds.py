"""Matching and ranking commands."""

from __future__ import annotations
import json as _json
import logging
import time
from typing import List, Tuple

import click

from .helpers import cli, get_app_config
from ..match import SearchPrecision, match, rank_candidates, suggest
from ..utils.logging_helpers import format_summary
from ..utils.output import section_header, success, error, info, highlight, divider

logger = logging.getLogger(__name__)


def _read_candidates(args: Tuple[str, ...], candidates_file) -> List[str]:
    candidates = list(args)
    if candidates_file is not None:
        for line in candidates_file:
            line = line.rstrip("\r\n")
            if line.strip():
                candidates.append(line)
    return candidates


@cli.command(name="match")
@click.argument("query")
@click.argument("candidate")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.pass_context
def match_cmd(ctx: click.Context, query: str, candidate: str, as_json: bool):
    """Score a single CANDIDATE against QUERY.

    \b
    Example:
        lfm match gcm "Git Commit"
    """
    app_cfg = get_app_config(ctx.obj)
    result = match(query, candidate, app_cfg.scoring)

    if as_json:
        click.echo(_json.dumps({
            "query": query,
            "candidate": candidate,
            "success": result.success,
            "score": result.score,
            "matched_positions": list(result.matched_positions),
        }, indent=2, ensure_ascii=False))
        return

    if result.success:
        click.echo(success(f"{highlight(candidate, result.matched_positions)}"))
        click.echo(info(f"Score: {result.score}"))
        click.echo(info(f"Positions: {list(result.matched_positions)}"))
    else:
        click.echo(error(f"No match for {query!r} in {candidate!r}"))


@cli.command(name="rank")
@click.argument("query")
@click.argument("candidates", nargs=-1)
@click.option("--file", "-f", "candidates_file", type=click.File("r", encoding="utf-8"), default=None,
              help="Read candidates from a file, one per line ('-' for stdin)")
@click.option("--limit", "-n", type=click.IntRange(min=0), default=None,
              help="Maximum number of results (default: matching.max_results)")
@click.option("--precision", "-p", type=click.Choice([p.value for p in SearchPrecision], case_sensitive=False),
              default=None, help="Minimum search precision (default: matching.precision)")
@click.option("--suggest/--no-suggest", "suggest_typos", default=None,
              help="Offer typo tolerant suggestions when nothing matches")
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON")
@click.pass_context
def rank(ctx: click.Context, query: str, candidates: Tuple[str, ...], candidates_file,
         limit: int | None, precision: str | None, suggest_typos: bool | None, as_json: bool):
    """Rank CANDIDATES against QUERY, best match first.

    Candidates come from the command line and/or --file. Ties are broken by
    the shorter matched span, the earlier first match, then alphabetically.

    \b
    Example:
        lfm rank "open set" "Open Settings Dialog" "Reset Settings"
        lfm rank gc --file commands.txt --limit 5 --precision regular
    """
    app_cfg = get_app_config(ctx.obj)
    matching = app_cfg.matching
    pool = _read_candidates(candidates, candidates_file)
    if not pool:
        raise click.UsageError("No candidates given. Pass them as arguments or via --file.")

    search_precision = SearchPrecision.parse(precision) if precision else matching.search_precision
    max_results = limit if limit is not None else matching.max_results
    use_suggestions = matching.suggest_typos if suggest_typos is None else suggest_typos

    started = time.perf_counter()
    ranked = rank_candidates(query, pool, app_cfg.scoring, search_precision)
    elapsed = time.perf_counter() - started
    shown = ranked[:max_results]

    suggestions = []
    if not ranked and use_suggestions:
        suggestions = suggest(query, pool, limit=matching.suggest_limit, score_cutoff=matching.suggest_cutoff)
        logger.debug(f"{len(suggestions)} typo suggestion(s) for {query!r}")

    if as_json:
        click.echo(_json.dumps({
            "query": query,
            "precision": search_precision.value,
            "total": len(pool),
            "matched": len(ranked),
            "results": [
                {
                    "candidate": r.candidate,
                    "score": r.score,
                    "matched_positions": list(r.result.matched_positions),
                    "span": r.result.span,
                    "index": r.index,
                }
                for r in shown
            ],
            "suggestions": [
                {"candidate": s.candidate, "similarity": round(s.similarity, 2), "index": s.index}
                for s in suggestions
            ],
        }, indent=2, ensure_ascii=False))
        return

    click.echo(section_header(f"Ranking {len(pool)} candidates for {query!r}"))
    click.echo(divider())
    width = max((len(str(r.score)) for r in shown), default=1)
    for r in shown:
        click.echo(f"  {click.style(str(r.score).rjust(width), fg='cyan')}  "
                   f"{highlight(r.candidate, r.result.matched_positions)}")
    if suggestions:
        click.echo("Did you mean:")
        for s in suggestions:
            click.echo(info(f"{s.candidate} ({s.similarity:.0f}%)"))
    click.echo(divider())
    click.echo(format_summary(len(ranked), len(pool), shown=len(shown), duration_seconds=elapsed))


__all__ = ["match_cmd", "rank"]
