"""
Strength / weakness extraction.

Each of the six ``TraitDimension`` values has one strength bar and one
weakness bar (see ``thresholds.STRENGTH_ABOVE`` / ``WEAKNESS_BELOW``).  Every
check is independent, so a team can report up to six strengths and six
weaknesses, and a team that sits between the bars reports neither.

Dimensions are returned in a fixed order (``TraitDimension`` declaration
order).  Phrase lists follow the same order.
"""

from __future__ import annotations

from picklist_advisor.analysis import thresholds as th
from picklist_advisor.models.scouting import StatsRecord
from picklist_advisor.taxonomy.pick_taxonomy import (
    STRENGTH_PHRASES,
    WEAKNESS_PHRASES,
    TraitDimension,
)


def dimension_values(stats: StatsRecord) -> dict[TraitDimension, float]:
    """Map each trait dimension to the stat it is judged on."""
    return {
        TraitDimension.OVERALL:     stats.avg_total_score,
        TraitDimension.AUTONOMOUS:  stats.avg_autonomous_points,
        TraitDimension.TELEOP:      stats.avg_teleop_points,
        TraitDimension.ENDGAME:     stats.avg_endgame_points,
        TraitDimension.DEFENSE:     stats.avg_defense_rating,
        TraitDimension.CONSISTENCY: stats.consistency_score,
    }


def strength_dimensions(stats: StatsRecord) -> list[TraitDimension]:
    """Dimensions where the team clears the strength bar."""
    values = dimension_values(stats)
    return [dim for dim in TraitDimension if values[dim] > th.STRENGTH_ABOVE[dim]]


def weakness_dimensions(stats: StatsRecord) -> list[TraitDimension]:
    """Dimensions where the team falls under the weakness bar."""
    values = dimension_values(stats)
    return [dim for dim in TraitDimension if values[dim] < th.WEAKNESS_BELOW[dim]]


def identify_strengths(stats: StatsRecord) -> list[str]:
    """Human-readable strength phrases; ``[]`` when none apply."""
    return [STRENGTH_PHRASES[dim] for dim in strength_dimensions(stats)]


def identify_weaknesses(stats: StatsRecord) -> list[str]:
    """Human-readable weakness phrases; ``[]`` when none apply."""
    return [WEAKNESS_PHRASES[dim] for dim in weakness_dimensions(stats)]
