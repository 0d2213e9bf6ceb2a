"""
Analysis report writer: JSON and CSV output for ranked suggestions and the
pick-list summary.

All functions are pure I/O around already-computed advisor output.  They
never call the analysis engine themselves.

Output files
------------
  <output_dir>/
    picklist_analysis_{event}_{date}.json     -- suggestions + summary
    picklist_suggestions_{event}_{date}.csv   -- one flat row per suggestion
"""

from __future__ import annotations

import csv
import json
import logging
from datetime import date
from pathlib import Path
from typing import Sequence

from picklist_advisor.models.suggestion import RosterSummary, Suggestion

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "v1"

SUGGESTION_CSV_COLUMNS = [
    "rank", "id", "display_name", "category", "confidence",
    "strategic_value", "compatibility", "pick_score",
    "strengths", "weaknesses", "reasoning",
]


def build_analysis_payload(
    suggestions: Sequence[Suggestion],
    summary:     RosterSummary,
    event_key:   str = "",
    run_date:    date | None = None,
) -> dict:
    """Assemble the JSON-serialisable report dict.

    Coverage and gaps are emitted as sorted lists so repeated runs produce
    byte-identical files.
    """
    if run_date is None:
        run_date = date.today()

    return {
        "schema_version": SCHEMA_VERSION,
        "event_key":      event_key,
        "generated_at":   run_date.isoformat(),
        "suggestions": [
            {
                "rank":       rank,
                **s.model_dump(mode="json"),
                "pick_score": round(s.pick_score, 6),
            }
            for rank, s in enumerate(suggestions, start=1)
        ],
        "summary": {
            "total_potential_score": summary.total_potential_score,
            "balanced_score":        summary.balanced_score,
            "coverage":              sorted(summary.coverage),
            "gaps":                  sorted(summary.gaps),
            "recommendations":       list(summary.recommendations),
        },
    }


def write_analysis_json(
    suggestions: Sequence[Suggestion],
    summary:     RosterSummary,
    output_dir:  Path,
    event_key:   str = "event",
    run_date:    date | None = None,
) -> Path:
    """Write suggestions and summary to a structured JSON file.

    Args:
        suggestions: Ranked output of ``analyze_roster()``.
        summary:     Pick-list summary from ``analyze_roster()``.
        output_dir:  Target directory (created if missing).
        event_key:   Used in filename + metadata.
        run_date:    Date label. Defaults to today.

    Returns:
        Path to the written JSON file.
    """
    if run_date is None:
        run_date = date.today()

    output_dir.mkdir(parents=True, exist_ok=True)
    json_path = output_dir / f"picklist_analysis_{event_key}_{run_date}.json"

    payload = build_analysis_payload(suggestions, summary, event_key, run_date)
    json_path.write_text(json.dumps(payload, indent=2, default=str), encoding="utf-8")

    logger.info("Analysis JSON written: %s (%d suggestions)", json_path, len(suggestions))
    return json_path


def write_suggestions_csv(
    suggestions: Sequence[Suggestion],
    output_dir:  Path,
    event_key:   str = "event",
    run_date:    date | None = None,
) -> Path:
    """Write ranked suggestions as flat CSV rows.

    List fields are joined with ``"; "`` so each suggestion is one row.

    Returns:
        Path to the written CSV file.
    """
    if run_date is None:
        run_date = date.today()

    output_dir.mkdir(parents=True, exist_ok=True)
    csv_path = output_dir / f"picklist_suggestions_{event_key}_{run_date}.csv"

    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=SUGGESTION_CSV_COLUMNS)
        writer.writeheader()
        for rank, s in enumerate(suggestions, start=1):
            writer.writerow(
                {
                    "rank":            rank,
                    "id":              s.id,
                    "display_name":    s.display_name,
                    "category":        s.category.value,
                    "confidence":      round(s.confidence, 4),
                    "strategic_value": round(s.strategic_value, 4),
                    "compatibility":   round(s.compatibility, 4),
                    "pick_score":      round(s.pick_score, 4),
                    "strengths":       "; ".join(s.strengths),
                    "weaknesses":      "; ".join(s.weaknesses),
                    "reasoning":       "; ".join(s.reasoning),
                }
            )

    logger.info("Suggestions CSV written: %s", csv_path)
    return csv_path
