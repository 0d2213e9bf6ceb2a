"""
Scouting input models: per-team aggregate stats, pool candidates, and
already-picked selection entries.

``StatsRecord`` holds averages that are computed upstream from raw match
scouting records.  The advisor never recomputes or mutates them.

All three models are frozen.  Range checks live here so that a host which
builds these models has already validated its input before any analysis
runs; the analysis functions themselves assume well-formed records.

Validation policy for out-of-range stats
----------------------------------------
Values outside the plausible range are **rejected**, not clamped:
  - every ``avg_*`` points field must be >= 0
  - ``avg_defense_rating`` must be in [0, 10]
  - ``consistency_score`` must be in [0, 100]
  - ``total_matches`` must be >= 0
  - ``win_rate`` (optional) must be in [0, 1]
There is no upper bound on the points averages.
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

TeamId = Union[int, str]


class StatsRecord(BaseModel):
    """Aggregate scouting statistics for one team.

    Attributes:
        avg_total_score: Mean total points contributed per match.
        avg_autonomous_points: Mean autonomous-period points.
        avg_teleop_points: Mean teleop-period points.
        avg_endgame_points: Mean endgame points.
        avg_defense_rating: Mean scout-assigned defense rating, 0–10.
        total_matches: Number of scouted matches behind the averages.
        consistency_score: 0–100 volatility metric computed upstream
            (higher = steadier scoring).
        win_rate: Optional match win fraction; carried, not scored.
    """

    model_config = ConfigDict(frozen=True)

    avg_total_score: float
    avg_autonomous_points: float
    avg_teleop_points: float
    avg_endgame_points: float
    avg_defense_rating: float
    total_matches: int
    consistency_score: float
    win_rate: Optional[float] = None

    @field_validator(
        "avg_total_score",
        "avg_autonomous_points",
        "avg_teleop_points",
        "avg_endgame_points",
    )
    @classmethod
    def validate_points_non_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"points averages must be non-negative, got {v}.")
        return v

    @field_validator("avg_defense_rating")
    @classmethod
    def validate_defense_range(cls, v: float) -> float:
        if not 0.0 <= v <= 10.0:
            raise ValueError(f"avg_defense_rating must be in [0, 10], got {v}.")
        return v

    @field_validator("total_matches")
    @classmethod
    def validate_matches_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"total_matches must be non-negative, got {v}.")
        return v

    @field_validator("consistency_score")
    @classmethod
    def validate_consistency_range(cls, v: float) -> float:
        if not 0.0 <= v <= 100.0:
            raise ValueError(f"consistency_score must be in [0, 100], got {v}.")
        return v

    @field_validator("win_rate")
    @classmethod
    def validate_win_rate_range(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and not 0.0 <= v <= 1.0:
            raise ValueError(f"win_rate must be in [0, 1], got {v}.")
        return v


class Candidate(BaseModel):
    """A team in the event pool that may be recommended.

    Attributes:
        id: Team identifier (team number or slug).
        display_name: Human-readable team name.
        stats: Aggregate stats, or ``None`` when the team was never scouted.
    """

    model_config = ConfigDict(frozen=True)

    id: TeamId
    display_name: str
    stats: Optional[StatsRecord] = None

    @field_validator("display_name")
    @classmethod
    def validate_display_name_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("display_name must not be empty.")
        return v.strip()


class SelectionEntry(BaseModel):
    """A team already placed on the pick list.

    ``rank`` is the 1-based position on the list.  It is kept for display and
    export only; no score depends on it.
    """

    model_config = ConfigDict(frozen=True)

    id: TeamId
    display_name: str
    stats: Optional[StatsRecord] = None
    rank: int
    notes: Optional[str] = None

    @field_validator("display_name")
    @classmethod
    def validate_display_name_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("display_name must not be empty.")
        return v.strip()

    @field_validator("rank")
    @classmethod
    def validate_rank_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"rank must be >= 1, got {v}.")
        return v
