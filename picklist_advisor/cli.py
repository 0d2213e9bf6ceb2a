"""
Pick-list advisor — CLI entry point.

A thin host around the analysis engine for offline use: scouting leads can
export an event snapshot from the team's database and get the ranked list
in a terminal or as JSON/CSV files.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Load and validate the snapshot.
  4. Run the analysis.
  5. Report result to stdout (and optionally to files).

Install and run::

    pip install -e .
    picklist-advisor --help
    picklist-advisor validate-config
    picklist-advisor analyze --snapshot data/2026casj.json
    picklist-advisor evaluate --snapshot data/2026casj.json --id 254
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="picklist-advisor",
    help="Alliance selection pick-list advisor — ranks next picks from scouting stats.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from pydantic import ValidationError

    from picklist_advisor.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except (ValidationError, ValueError) as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from picklist_advisor.utils.logging import configure_logging
    configure_logging(config.logging)


def _load_snapshot_or_exit(snapshot_path: str):
    """Load an EventSnapshot, printing a friendly error and exiting on failure."""
    from picklist_advisor.ingestion.snapshot import load_snapshot

    try:
        return load_snapshot(Path(snapshot_path))
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except ValueError as exc:
        typer.echo(f"[ERROR] Snapshot invalid:\n{exc}", err=True)
        raise typer.Exit(code=1)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)
    scoring = config.scoring

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Top-N suggestions:   {scoring.top_n}")
    typer.echo(f"  Target roster size:  {scoring.target_roster_size}")
    typer.echo(f"  Min balanced score:  {scoring.min_balanced_score}")
    typer.echo(
        f"  Gap / redundancy:    {scoring.gap_fill_weight} / {scoring.redundancy_weight}"
    )
    typer.echo(f"  Log level:           {config.logging.level}")
    typer.echo(f"  Debug mode:          {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


@app.command("analyze")
def analyze(
    snapshot_path: str = typer.Option(
        ...,
        "--snapshot",
        help="Event snapshot JSON with 'pool' and 'selection' arrays.",
    ),
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to TOML config file.",
    ),
    top_n: Optional[int] = typer.Option(
        None, "--top-n", min=1, help="Override the configured number of suggestions.",
    ),
    min_matches: int = typer.Option(
        0, "--min-matches", min=0, help="Skip teams scouted in fewer matches.",
    ),
    min_avg_score: float = typer.Option(
        0.0, "--min-avg-score", min=0.0, help="Skip teams with a lower average score.",
    ),
    output_dir: Optional[str] = typer.Option(
        None, "--output-dir", help="Also write JSON + CSV reports to this directory.",
    ),
) -> None:
    """Rank the next picks for an event and summarize the current pick list."""
    from picklist_advisor.analysis.roster import CandidateFilter, analyze_roster
    from picklist_advisor.config import ScoringPolicy
    from picklist_advisor.reporting.export import write_analysis_json, write_suggestions_csv
    from picklist_advisor.reporting.formatters import (
        format_roster_summary,
        format_suggestion_table,
    )

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    snapshot = _load_snapshot_or_exit(snapshot_path)

    policy = config.scoring
    if top_n is not None:
        policy = ScoringPolicy(**{**policy.model_dump(), "top_n": top_n})

    suggestions, summary = analyze_roster(
        snapshot.pool,
        snapshot.selection,
        policy=policy,
        candidate_filter=CandidateFilter(
            min_matches=min_matches, min_avg_score=min_avg_score,
        ),
    )

    typer.echo(format_suggestion_table(suggestions, snapshot.event_key))
    typer.echo(format_roster_summary(summary, roster_size=len(snapshot.selection)))

    if output_dir:
        event_key = snapshot.event_key or "event"
        out = Path(output_dir)
        json_path = write_analysis_json(suggestions, summary, out, event_key=event_key)
        csv_path = write_suggestions_csv(suggestions, out, event_key=event_key)
        typer.echo("")
        typer.echo(f"  JSON report: {json_path}")
        typer.echo(f"  CSV report:  {csv_path}")

    typer.echo("")
    typer.echo("[OK] Analysis complete.")


@app.command("evaluate")
def evaluate(
    snapshot_path: str = typer.Option(
        ..., "--snapshot", help="Event snapshot JSON with 'pool' and 'selection' arrays.",
    ),
    team_id: str = typer.Option(..., "--id", help="Pool team id to evaluate."),
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to TOML config file.",
    ),
) -> None:
    """Explain how one pool team scores against the current pick list."""
    from picklist_advisor.analysis.evaluator import evaluate_candidate
    from picklist_advisor.reporting.formatters import format_suggestion_detail

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    snapshot = _load_snapshot_or_exit(snapshot_path)

    candidate = next((c for c in snapshot.pool if str(c.id) == team_id), None)
    if candidate is None:
        typer.echo(f"[ERROR] Team {team_id!r} is not in the snapshot pool.", err=True)
        raise typer.Exit(code=1)

    if any(str(e.id) == team_id for e in snapshot.selection):
        typer.echo(f"[WARN] Team {team_id!r} is already on the pick list.", err=True)

    suggestion = evaluate_candidate(candidate, snapshot.selection, policy=config.scoring)
    typer.echo(format_suggestion_detail(suggestion))


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app()
