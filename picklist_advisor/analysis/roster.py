"""
Roster analysis: ranks the pool against the current pick list and
summarizes the list built so far.

Usage flow
----------
1. filter_pool(pool, selection, candidate_filter)
   -> list[Candidate]   (unpicked, de-duplicated, optionally filtered)

2. rank_suggestions([evaluate_candidate(c, selection) for c in ...], top_n)
   -> list[Suggestion]  (sorted by confidence × strategic_value, desc)

3. summarize_roster(selection)
   -> RosterSummary     (totals, coverage, gaps, strategic recommendations)

``analyze_roster()`` runs all three and returns ``(suggestions, summary)``.

Ranking ties keep pool order (stable sort), so identical inputs always
produce identical output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from picklist_advisor.analysis.evaluator import evaluate_candidate
from picklist_advisor.analysis.traits import (
    identify_strengths,
    identify_weaknesses,
    strength_dimensions,
)
from picklist_advisor.config import DEFAULT_POLICY, ScoringPolicy
from picklist_advisor.models.scouting import Candidate, SelectionEntry, StatsRecord
from picklist_advisor.models.suggestion import RosterSummary, Suggestion
from picklist_advisor.taxonomy.pick_taxonomy import TraitDimension

logger = logging.getLogger(__name__)

RECOMMEND_PRIMARY = "Consider adding a high-scoring primary team for alliance leadership"
RECOMMEND_AUTONOMOUS = "Add a team with strong autonomous capabilities"
RECOMMEND_ENDGAME = "Consider adding an endgame specialist for match-closing ability"
RECOMMEND_DEFENSE = "Add defensive capabilities to protect alliance scoring"
RECOMMEND_HIGHER_SCORING = "Focus on teams with higher average scoring potential"

# Coverage checks, evaluated in this order.
_COVERAGE_RECOMMENDATIONS: list[tuple[TraitDimension, str]] = [
    (TraitDimension.AUTONOMOUS, RECOMMEND_AUTONOMOUS),
    (TraitDimension.ENDGAME,    RECOMMEND_ENDGAME),
    (TraitDimension.DEFENSE,    RECOMMEND_DEFENSE),
]


@dataclass(frozen=True)
class CandidateFilter:
    """Optional pool pre-filter.

    A threshold of 0 is inactive.  Once any threshold is active, teams
    without stats are excluded because they cannot demonstrate either bar.

    Attributes:
        min_matches:   Minimum ``total_matches``.
        min_avg_score: Minimum ``avg_total_score``.
    """

    min_matches:   int = 0
    min_avg_score: float = 0.0

    @property
    def is_active(self) -> bool:
        return self.min_matches > 0 or self.min_avg_score > 0

    def accepts(self, candidate: Candidate) -> bool:
        if not self.is_active:
            return True
        stats = candidate.stats
        if stats is None:
            return False
        return (
            stats.total_matches >= self.min_matches
            and stats.avg_total_score >= self.min_avg_score
        )


def filter_pool(
    pool:             Sequence[Candidate],
    selection:        Sequence[SelectionEntry],
    candidate_filter: Optional[CandidateFilter] = None,
) -> list[Candidate]:
    """Return pool teams eligible for suggestion, in pool order.

    Drops teams already on the pick list, repeated pool ids (first wins), and
    teams rejected by ``candidate_filter``.
    """
    picked = {entry.id for entry in selection}
    seen: set = set()
    eligible: list[Candidate] = []

    for candidate in pool:
        if candidate.id in picked or candidate.id in seen:
            continue
        seen.add(candidate.id)
        if candidate_filter is not None and not candidate_filter.accepts(candidate):
            continue
        eligible.append(candidate)

    return eligible


def rank_suggestions(suggestions: Sequence[Suggestion], top_n: int) -> list[Suggestion]:
    """Sort by ``confidence × strategic_value`` descending and keep ``top_n``.

    ``sorted`` is stable, so equal keys keep their input order.
    """
    ranked = sorted(suggestions, key=lambda s: -s.pick_score)
    return ranked[:top_n]


def summarize_roster(
    selection: Sequence[SelectionEntry],
    policy:    Optional[ScoringPolicy] = None,
) -> RosterSummary:
    """Aggregate the current pick list into a ``RosterSummary``.

    Only picks with stats contribute to totals, coverage and gaps.  The
    roster-size recommendation counts every pick.
    """
    policy = policy or DEFAULT_POLICY
    scouted: list[StatsRecord] = [e.stats for e in selection if e.stats is not None]

    total_potential_score = sum(s.avg_total_score for s in scouted)
    balanced_score = total_potential_score / len(scouted) if scouted else 0.0

    coverage: set[str] = set()
    gaps: set[str] = set()
    covered_dims: set[TraitDimension] = set()
    for stats in scouted:
        coverage.update(identify_strengths(stats))
        gaps.update(identify_weaknesses(stats))
        covered_dims.update(strength_dimensions(stats))

    return RosterSummary(
        total_potential_score=total_potential_score,
        balanced_score=balanced_score,
        coverage=frozenset(coverage),
        gaps=frozenset(gaps),
        recommendations=build_strategic_recommendations(
            roster_size=len(selection),
            covered=covered_dims,
            balanced_score=balanced_score,
            policy=policy,
        ),
    )


def build_strategic_recommendations(
    roster_size:    int,
    covered:        set[TraitDimension],
    balanced_score: float,
    policy:         Optional[ScoringPolicy] = None,
) -> list[str]:
    """Run the fixed recommendation checklist.

    Checks are independent; any subset may fire.  Order:
        1. roster smaller than target size   → add a primary team
        2. no autonomous strength on list     → add autonomous
        3. no endgame strength on list        → add endgame specialist
        4. no defense strength on list        → add defense
        5. balanced score under the minimum   → focus on higher scoring
    """
    policy = policy or DEFAULT_POLICY
    recommendations: list[str] = []

    if roster_size < policy.target_roster_size:
        recommendations.append(RECOMMEND_PRIMARY)

    for dim, text in _COVERAGE_RECOMMENDATIONS:
        if dim not in covered:
            recommendations.append(text)

    if balanced_score < policy.min_balanced_score:
        recommendations.append(RECOMMEND_HIGHER_SCORING)

    return recommendations


def analyze_roster(
    pool:             Sequence[Candidate],
    selection:        Sequence[SelectionEntry],
    policy:           Optional[ScoringPolicy] = None,
    candidate_filter: Optional[CandidateFilter] = None,
) -> tuple[list[Suggestion], RosterSummary]:
    """Rank next-pick suggestions and summarize the current pick list.

    Args:
        pool:             Every team at the event (picked teams are skipped).
        selection:        Teams already on the pick list.
        policy:           Blend weights and limits; defaults to ``DEFAULT_POLICY``.
        candidate_filter: Optional pool pre-filter.

    Returns:
        ``(suggestions, summary)`` — at most ``policy.top_n`` suggestions.
    """
    policy = policy or DEFAULT_POLICY

    eligible = filter_pool(pool, selection, candidate_filter)
    evaluated = [evaluate_candidate(c, selection, policy) for c in eligible]
    suggestions = rank_suggestions(evaluated, policy.top_n)
    summary = summarize_roster(selection, policy)

    logger.debug(
        "Evaluated %d of %d pool teams against %d picks; returning top %d",
        len(evaluated), len(pool), len(selection), len(suggestions),
    )
    return suggestions, summary
