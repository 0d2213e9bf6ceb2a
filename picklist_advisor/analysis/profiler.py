"""
Performance profiling: converts one ``StatsRecord`` into four sub-scores.

    overall_score        = min(100, avg_total_score) * specialization_score
    specialization_score = mean(auto_mult, teleop_mult, endgame_mult, defense_mult)
    consistency_factor   = min(1, total_matches / 10)
    reliability_score    = 0.6 * consistency_factor + 0.4 * consistency_score / 100

``consistency_factor`` is a linear ramp that saturates at ten scouted
matches.  ``reliability_score`` blends that sample-size trust with the
upstream volatility metric.

Pure functions, no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from picklist_advisor.analysis import thresholds as th
from picklist_advisor.config import DEFAULT_POLICY, ScoringPolicy
from picklist_advisor.models.scouting import StatsRecord


@dataclass(frozen=True)
class PerformanceProfile:
    """Sub-scores derived from one team's stats.

    Attributes:
        overall_score:        Capped total score scaled by specialization (0–~130).
        consistency_factor:   Sample-size trust, 0–1.
        specialization_score: Mean of the four dimension multipliers, 1.0–1.2.
        reliability_score:    Blend of sample-size trust and volatility metric.
    """

    overall_score:        float
    consistency_factor:   float
    specialization_score: float
    reliability_score:    float


def specialization_multipliers(stats: StatsRecord) -> tuple[float, float, float, float]:
    """Return the (autonomous, teleop, endgame, defense) multipliers."""
    auto = (
        th.AUTO_SPECIALIZATION_MULTIPLIER
        if stats.avg_autonomous_points > th.AUTO_SPECIALIZATION_ABOVE
        else th.NO_SPECIALIZATION_MULTIPLIER
    )
    teleop = (
        th.TELEOP_SPECIALIZATION_MULTIPLIER
        if stats.avg_teleop_points > th.TELEOP_SPECIALIZATION_ABOVE
        else th.NO_SPECIALIZATION_MULTIPLIER
    )
    endgame = (
        th.ENDGAME_SPECIALIZATION_MULTIPLIER
        if stats.avg_endgame_points > th.ENDGAME_SPECIALIZATION_ABOVE
        else th.NO_SPECIALIZATION_MULTIPLIER
    )
    defense = (
        th.DEFENSE_SPECIALIZATION_MULTIPLIER
        if stats.avg_defense_rating > th.DEFENSE_SPECIALIZATION_ABOVE
        else th.NO_SPECIALIZATION_MULTIPLIER
    )
    return auto, teleop, endgame, defense


def profile_performance(
    stats:  StatsRecord,
    policy: Optional[ScoringPolicy] = None,
) -> PerformanceProfile:
    """Compute the performance profile for one team.

    Args:
        stats:  Aggregate scouting stats.
        policy: Blend weights; defaults to ``DEFAULT_POLICY``.

    Returns:
        PerformanceProfile with all four sub-scores.
    """
    policy = policy or DEFAULT_POLICY

    multipliers = specialization_multipliers(stats)
    specialization_score = sum(multipliers) / len(multipliers)

    base_score = min(th.MAX_BASE_SCORE, stats.avg_total_score)
    consistency_factor = min(1.0, stats.total_matches / th.MATCHES_FOR_FULL_CONFIDENCE)

    reliability_score = (
        policy.reliability_match_count_weight * consistency_factor
        + policy.reliability_volatility_weight
        * (stats.consistency_score / th.CONSISTENCY_SCALE)
    )

    return PerformanceProfile(
        overall_score=base_score * specialization_score,
        consistency_factor=consistency_factor,
        specialization_score=specialization_score,
        reliability_score=reliability_score,
    )
