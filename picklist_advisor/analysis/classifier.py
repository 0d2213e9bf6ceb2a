"""
Team classification by ordered threshold rules.

Rules (evaluated in order — first match wins):
    1. PRIMARY    : total > 80 AND defense > 6
    2. SPECIALIST : autonomous > 20 OR endgame > 25
    3. DEFENSIVE  : defense > 7 AND total > 50
    4. SECONDARY  : total > 60
    5. BALANCED   : everything else

The order is load-bearing: an all-rounder that also clears the specialist
bar is PRIMARY, and a high-defense team with a big endgame is SPECIALIST.
"""

from __future__ import annotations

from picklist_advisor.analysis import thresholds as th
from picklist_advisor.models.scouting import StatsRecord
from picklist_advisor.taxonomy.pick_taxonomy import TeamCategory


def classify_team(stats: StatsRecord) -> TeamCategory:
    """Return the single ``TeamCategory`` for a team's stats."""
    if (
        stats.avg_total_score > th.PRIMARY_TOTAL_ABOVE
        and stats.avg_defense_rating > th.PRIMARY_DEFENSE_ABOVE
    ):
        return TeamCategory.PRIMARY
    if (
        stats.avg_autonomous_points > th.SPECIALIST_AUTO_ABOVE
        or stats.avg_endgame_points > th.SPECIALIST_ENDGAME_ABOVE
    ):
        return TeamCategory.SPECIALIST
    if (
        stats.avg_defense_rating > th.DEFENSIVE_DEFENSE_ABOVE
        and stats.avg_total_score > th.DEFENSIVE_TOTAL_ABOVE
    ):
        return TeamCategory.DEFENSIVE
    if stats.avg_total_score > th.SECONDARY_TOTAL_ABOVE:
        return TeamCategory.SECONDARY
    return TeamCategory.BALANCED
