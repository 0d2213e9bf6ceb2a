"""
Candidate evaluation: turns one pool team into an explained ``Suggestion``.

Pipeline (run in this order so reasoning text is reproducible)
--------------------------------------------------------------
    profile_performance() → classify_team() → traits → compute_compatibility()

Blends (both clamped to [0, 1])
-------------------------------
    confidence      = 0.4 * reliability_score
                    + 0.3 * consistency_factor
                    + 0.3 * compatibility

    strategic_value = 0.4 * overall_score / 100
                    + 0.3 * specialization_score
                    + 0.3 * compatibility

Teams without stats skip the pipeline and get a fixed low-scoring
suggestion, so they remain rankable instead of disappearing from the list.

Reasoning order
---------------
    1. scouting depth tier        (always)
    2. consistency tier           (consistency_score > 60)
    3. scoring tier               (avg_total_score > 60)
    4. specialization phrases     (autonomous > 15, endgame > 20, defense > 7)
    5. category closing phrase    (always, exactly one)
"""

from __future__ import annotations

from typing import Optional, Sequence

from picklist_advisor.analysis import thresholds as th
from picklist_advisor.analysis.classifier import classify_team
from picklist_advisor.analysis.compatibility import compute_compatibility
from picklist_advisor.analysis.profiler import profile_performance
from picklist_advisor.analysis.traits import identify_strengths, identify_weaknesses
from picklist_advisor.config import DEFAULT_POLICY, ScoringPolicy
from picklist_advisor.models.scouting import Candidate, SelectionEntry, StatsRecord
from picklist_advisor.models.suggestion import Suggestion
from picklist_advisor.taxonomy.pick_taxonomy import (
    CATEGORY_CLOSING_PHRASES,
    NO_DATA_REASONING,
    NO_DATA_WEAKNESS,
    TeamCategory,
)

NO_DATA_CONFIDENCE = 0.3
NO_DATA_STRATEGIC_VALUE = 0.3
NO_DATA_COMPATIBILITY = 0.5


def evaluate_candidate(
    candidate: Candidate,
    selection: Sequence[SelectionEntry],
    policy:    Optional[ScoringPolicy] = None,
) -> Suggestion:
    """Evaluate one candidate against the current pick list.

    Args:
        candidate: Pool team to evaluate.
        selection: Teams already on the pick list.
        policy:    Blend weights; defaults to ``DEFAULT_POLICY``.

    Returns:
        A fully populated ``Suggestion``.
    """
    if candidate.stats is None:
        return _no_data_suggestion(candidate)

    policy = policy or DEFAULT_POLICY
    stats = candidate.stats

    profile       = profile_performance(stats, policy)
    category      = classify_team(stats)
    strengths     = identify_strengths(stats)
    weaknesses    = identify_weaknesses(stats)
    compatibility = compute_compatibility(selection, stats, policy)

    confidence = _clamp01(
        policy.confidence_reliability_weight * profile.reliability_score
        + policy.confidence_consistency_weight * profile.consistency_factor
        + policy.confidence_compatibility_weight * compatibility
    )
    strategic_value = _clamp01(
        policy.strategic_overall_weight * (profile.overall_score / th.MAX_BASE_SCORE)
        + policy.strategic_specialization_weight * profile.specialization_score
        + policy.strategic_compatibility_weight * compatibility
    )

    return Suggestion(
        id=candidate.id,
        display_name=candidate.display_name,
        confidence=confidence,
        strategic_value=strategic_value,
        category=category,
        compatibility=compatibility,
        reasoning=build_reasoning(stats, category),
        strengths=strengths,
        weaknesses=weaknesses,
    )


def build_reasoning(stats: StatsRecord, category: TeamCategory) -> list[str]:
    """Assemble the ordered explanation phrases for a scouted team.

    Returns:
        Non-empty list; the last element is always the category closing phrase.
    """
    reasons: list[str] = []

    # Scouting depth
    matches = stats.total_matches
    if matches > th.WELL_SCOUTED_MATCHES_ABOVE:
        reasons.append(f"Well-scouted with {matches} matches")
    elif matches > th.MODERATE_SCOUTED_MATCHES_ABOVE:
        reasons.append(f"Moderate scouting data ({matches} matches)")
    else:
        reasons.append(f"Limited scouting data ({matches} matches)")

    # Consistency
    consistency = stats.consistency_score
    if consistency > th.HIGHLY_CONSISTENT_ABOVE:
        reasons.append(f"Highly consistent performance ({consistency:.1f}%)")
    elif consistency > th.RELIABLE_CONSISTENCY_ABOVE:
        reasons.append(f"Reliable performance ({consistency:.1f}%)")

    # Scoring
    total = stats.avg_total_score
    if total > th.HIGH_SCORING_ABOVE:
        reasons.append(f"High scoring potential ({total:.1f} avg)")
    elif total > th.SOLID_SCORING_ABOVE:
        reasons.append(f"Solid scoring ability ({total:.1f} avg)")

    # Specialization
    if stats.avg_autonomous_points > th.AUTO_SPECIALIZATION_ABOVE:
        reasons.append(
            f"Strong autonomous performance ({stats.avg_autonomous_points:.1f} pts)"
        )
    if stats.avg_endgame_points > th.ENDGAME_SPECIALIZATION_ABOVE:
        reasons.append(
            f"Excellent endgame capability ({stats.avg_endgame_points:.1f} pts)"
        )
    if stats.avg_defense_rating > th.DEFENSE_SPECIALIZATION_ABOVE:
        reasons.append(f"Strong defensive play ({stats.avg_defense_rating:.1f}/10)")

    reasons.append(CATEGORY_CLOSING_PHRASES[category])
    return reasons


def _no_data_suggestion(candidate: Candidate) -> Suggestion:
    return Suggestion(
        id=candidate.id,
        display_name=candidate.display_name,
        confidence=NO_DATA_CONFIDENCE,
        strategic_value=NO_DATA_STRATEGIC_VALUE,
        category=TeamCategory.BALANCED,
        compatibility=NO_DATA_COMPATIBILITY,
        reasoning=[NO_DATA_REASONING],
        strengths=[],
        weaknesses=[NO_DATA_WEAKNESS],
    )


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))
