"""
Event snapshot loader: JSON → validated pool + pick list.

Format
------
A single JSON object::

    {
      "event_key": "2026casj",               (optional)
      "pool": [
        {"id": 254, "display_name": "The Cheesy Poofs",
         "stats": {"avg_total_score": 92.5, ..., "consistency_score": 88.0}},
        {"id": 9999, "display_name": "Unscouted", "stats": null}
      ],
      "selection": [
        {"id": 1678, "display_name": "Citrus Circuits", "rank": 1, "stats": {...}}
      ]
    }

``stats`` may be omitted or ``null``.  Every record is validated before
anything is returned; if **any** record fails, a single ``ValueError`` lists
the first 10 failures.  Duplicate ids within ``pool`` or within
``selection`` are rejected.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ValidationError

from picklist_advisor.models.scouting import Candidate, SelectionEntry

logger = logging.getLogger(__name__)

_MAX_ERRORS_SHOWN = 10


@dataclass(frozen=True)
class EventSnapshot:
    """Validated analysis input for one event.

    Attributes:
        pool:      Every team at the event.
        selection: Current pick list, in rank order.
        event_key: Optional event identifier (used in report filenames).
    """

    pool:      list[Candidate] = field(default_factory=list)
    selection: list[SelectionEntry] = field(default_factory=list)
    event_key: Optional[str] = None


def load_snapshot(path: Path) -> EventSnapshot:
    """Read and validate an event snapshot JSON file.

    Args:
        path: Path to the JSON file (must exist).

    Returns:
        ``EventSnapshot`` with the pick list sorted by rank.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: On malformed JSON, wrong top-level shape, duplicate ids,
            or any record failing validation.
    """
    if not path.exists():
        raise FileNotFoundError(f"Snapshot file not found: {path}")

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Snapshot is not valid JSON ({path.name}): {exc}") from exc

    return parse_snapshot(raw, source=path.name)


def parse_snapshot(raw: Any, source: str = "<memory>") -> EventSnapshot:
    """Validate an already-decoded snapshot payload.

    Raises:
        ValueError: See ``load_snapshot``.
    """
    if not isinstance(raw, dict):
        raise ValueError(f"Snapshot must be a JSON object, got {type(raw).__name__}.")

    pool_raw = raw.get("pool", [])
    selection_raw = raw.get("selection", [])
    if not isinstance(pool_raw, list) or not isinstance(selection_raw, list):
        raise ValueError("Snapshot 'pool' and 'selection' must both be arrays.")

    errors: list[str] = []
    pool = _validate_records(Candidate, pool_raw, "pool", errors)
    selection = _validate_records(SelectionEntry, selection_raw, "selection", errors)

    errors.extend(_duplicate_id_errors(pool, "pool"))
    errors.extend(_duplicate_id_errors(selection, "selection"))

    if errors:
        detail = "\n".join(f"  {msg}" for msg in errors[:_MAX_ERRORS_SHOWN])
        suffix = (
            f"\n  … and {len(errors) - _MAX_ERRORS_SHOWN} more"
            if len(errors) > _MAX_ERRORS_SHOWN else ""
        )
        raise ValueError(
            f"{len(errors)} problem(s) found in {source}:\n{detail}{suffix}"
        )

    selection.sort(key=lambda e: e.rank)
    event_key = raw.get("event_key")

    logger.info(
        "Loaded snapshot %s: %d pool teams, %d picks",
        source, len(pool), len(selection),
    )
    return EventSnapshot(
        pool=pool,
        selection=selection,
        event_key=str(event_key) if event_key else None,
    )


# ── Private helpers ────────────────────────────────────────────────────────────

def _validate_records(
    model:   type[BaseModel],
    records: list[Any],
    label:   str,
    errors:  list[str],
) -> list:
    validated = []
    for idx, record in enumerate(records):
        try:
            validated.append(model.model_validate(record))
        except ValidationError as exc:
            errors.append(f"{label}[{idx}]: {exc}")
    return validated


def _duplicate_id_errors(records: list, label: str) -> list[str]:
    seen: set = set()
    errors: list[str] = []
    for record in records:
        if record.id in seen:
            errors.append(f"{label}: duplicate id {record.id!r}")
        seen.add(record.id)
    return errors
