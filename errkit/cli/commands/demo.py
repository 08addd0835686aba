"""Demo command - raise nested errors and show how they are described."""

from __future__ import annotations

import random
from pathlib import Path

import typer

from errkit.chain.walker import ChainWalkError
from errkit.cli.context import build_context
from errkit.core.errors import ErrorCode
from errkit.output.console import Style
from errkit.output.errors import print_chain_report, print_walk_error, walk_error_exit_code
from errkit.reporting import GroupingTracker, log_error
from errkit.services.demo import Genre, MovieError, Scenario, database_for, pick_movies


def demo(
    genre: Genre = typer.Option(Genre.ACTION, "--genre", help="Genre to pick movies from."),
    count: int = typer.Option(5, "--count", min=1, help="Number of movies to pick."),
    scenario: Scenario = typer.Option(Scenario.RANDOM, "--scenario", help="Force a database outcome."),
    seed: int | None = typer.Option(None, "--seed", help="Seed for the random scenario."),
    runs: int = typer.Option(1, "--runs", min=1, help="Repeat and summarize errors by grouping ID."),
    config: Path | None = typer.Option(None, "--config", help="Path to errkit.toml."),
    catalog: Path | None = typer.Option(None, "--catalog", help="Extra message catalog (TOML)."),
) -> None:
    """Pick random movies from a flaky database and describe what went wrong."""
    ctx = build_context(config_path=config, catalog_path=catalog)
    database = database_for(scenario, seed)
    rng = random.Random(seed)

    if runs > 1:
        tracker = GroupingTracker(ctx.diagnostics)
        successes = 0
        for _ in range(runs):
            try:
                pick_movies(database, genre, count, rng)
                successes += 1
            except MovieError as e:
                tracker.record(e)
        ctx.console.header(f"{runs} runs: {successes} ok, {tracker.total} failed")
        for group in tracker.groups():
            ctx.console.print(f"{group.grouping_id}  x{group.count}  {group.skeleton}")
        return

    try:
        movies = pick_movies(database, genre, count, rng)
    except MovieError as e:
        try:
            report = ctx.diagnostics.report(e)
        except ChainWalkError as walk_error:
            print_walk_error(walk_error, ctx.console)
            raise typer.Exit(code=walk_error_exit_code(walk_error))
        log_error(e, "movie demo failed", level="DEBUG", diagnostics=ctx.diagnostics)
        print_chain_report(report, ctx.console)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    ctx.console.success(f"picked {len(movies)} {genre.value} movies")
    for movie in movies:
        ctx.console.print(f"{movie.title} ({movie.release_year})", Style.DIM)
