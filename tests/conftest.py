"""
Shared pytest fixtures for the pick-list advisor test suite.

Provides:
  - ``neutral_stats``: a StatsRecord that sits between every strength and
    weakness bar (no traits, BALANCED category, all multipliers 1.0).
  - ``sample_pool`` / ``sample_selection``: a small event for roster tests.
"""

from __future__ import annotations

import pytest

from picklist_advisor.models.scouting import Candidate, SelectionEntry, StatsRecord

# Values strictly between each dimension's weakness and strength bars.
NEUTRAL_STATS: dict = {
    "avg_total_score":       60.0,
    "avg_autonomous_points": 12.0,
    "avg_teleop_points":     35.0,
    "avg_endgame_points":    17.0,
    "avg_defense_rating":     6.0,
    "total_matches":            8,
    "consistency_score":     70.0,
}


@pytest.fixture
def neutral_stats() -> StatsRecord:
    """Stats that trigger no strength, no weakness and no specialization."""
    return StatsRecord(**NEUTRAL_STATS)


@pytest.fixture
def sample_pool() -> list[Candidate]:
    """Five pool teams: three scouted profiles, one unscouted, one picked."""
    return [
        Candidate(
            id=254,
            display_name="The Cheesy Poofs",
            stats=StatsRecord(**{**NEUTRAL_STATS, "avg_total_score": 92.0,
                                 "avg_defense_rating": 8.0, "total_matches": 12,
                                 "consistency_score": 88.0}),
        ),
        Candidate(
            id=1678,
            display_name="Citrus Circuits",
            stats=StatsRecord(**{**NEUTRAL_STATS, "avg_autonomous_points": 24.0}),
        ),
        Candidate(id=9999, display_name="Unscouted Rookies", stats=None),
        Candidate(
            id=971,
            display_name="Spartan Robotics",
            stats=StatsRecord(**{**NEUTRAL_STATS, "avg_defense_rating": 9.0,
                                 "avg_total_score": 55.0}),
        ),
        Candidate(
            id=118,
            display_name="Robonauts",
            stats=StatsRecord(**{**NEUTRAL_STATS, "avg_total_score": 75.0}),
        ),
    ]


@pytest.fixture
def sample_selection() -> list[SelectionEntry]:
    """One pick already made (team 118 from ``sample_pool``)."""
    return [
        SelectionEntry(
            id=118,
            display_name="Robonauts",
            stats=StatsRecord(**{**NEUTRAL_STATS, "avg_total_score": 75.0}),
            rank=1,
        ),
    ]
