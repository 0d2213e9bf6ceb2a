"""
Compatibility of a candidate against the current pick list.

Score formula (clamped to [0, 1])
---------------------------------
    compatibility = 0.5
                  + (filled_gaps / 5) * 0.3     # candidate strengths that cover list weaknesses
                  - (redundant   / 5) * 0.2     # candidate strengths the list already has

``filled_gaps`` and ``redundant`` count candidate strength dimensions found
in the union of weakness / strength dimensions across picks that have stats.
Picks without stats contribute nothing.  Matching is by dimension equality.

An empty pick list returns 1.0: there is nothing to complement or duplicate.
"""

from __future__ import annotations

from typing import Optional, Sequence

from picklist_advisor.analysis.traits import strength_dimensions, weakness_dimensions
from picklist_advisor.config import DEFAULT_POLICY, ScoringPolicy
from picklist_advisor.models.scouting import SelectionEntry, StatsRecord
from picklist_advisor.taxonomy.pick_taxonomy import TraitDimension

EMPTY_SELECTION_COMPATIBILITY = 1.0


def selection_strengths(selection: Sequence[SelectionEntry]) -> set[TraitDimension]:
    """Union of strength dimensions over picks with stats."""
    dims: set[TraitDimension] = set()
    for entry in selection:
        if entry.stats is not None:
            dims.update(strength_dimensions(entry.stats))
    return dims


def selection_weaknesses(selection: Sequence[SelectionEntry]) -> set[TraitDimension]:
    """Union of weakness dimensions over picks with stats."""
    dims: set[TraitDimension] = set()
    for entry in selection:
        if entry.stats is not None:
            dims.update(weakness_dimensions(entry.stats))
    return dims


def compute_compatibility(
    selection: Sequence[SelectionEntry],
    stats:     StatsRecord,
    policy:    Optional[ScoringPolicy] = None,
) -> float:
    """Score how well a candidate complements the current pick list.

    Args:
        selection: Teams already on the pick list (may be empty).
        stats:     The candidate's stats.
        policy:    Base, gap and redundancy weights; defaults to ``DEFAULT_POLICY``.

    Returns:
        Compatibility in [0, 1].
    """
    if not selection:
        return EMPTY_SELECTION_COMPATIBILITY

    policy = policy or DEFAULT_POLICY

    candidate_strengths = strength_dimensions(stats)
    current_weaknesses  = selection_weaknesses(selection)
    current_strengths   = selection_strengths(selection)

    filled_gaps = sum(1 for dim in candidate_strengths if dim in current_weaknesses)
    redundant   = sum(1 for dim in candidate_strengths if dim in current_strengths)

    compatibility = (
        policy.compatibility_base
        + (filled_gaps / policy.trait_normalizer) * policy.gap_fill_weight
        - (redundant / policy.trait_normalizer) * policy.redundancy_weight
    )
    return _clamp01(compatibility)


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))
