"""
Named thresholds shared by the profiler, classifier, trait extractor and
reasoning builder.

Every comparison is strict (``>`` for the ``*_ABOVE`` bars, ``<`` for the
``*_BELOW`` bars).  A team sitting exactly on a bar does not clear it.

Profiler specialization bars and multipliers
--------------------------------------------
    autonomous > 15  → ×1.2
    teleop     > 40  → ×1.1
    endgame    > 20  → ×1.3
    defense    > 7   → ×1.2
The four multipliers are averaged, not stacked.

Classification (first match wins)
---------------------------------
    1. PRIMARY    : total > 80 AND defense > 6
    2. SPECIALIST : autonomous > 20 OR endgame > 25
    3. DEFENSIVE  : defense > 7 AND total > 50
    4. SECONDARY  : total > 60
    5. BALANCED   : otherwise

Trait bars
----------
    dimension     strength   weakness
    overall       > 70       < 50
    autonomous    > 15       < 10
    teleop        > 40       < 30
    endgame       > 20       < 15
    defense       > 7        < 5
    consistency   > 75       < 60
"""

from __future__ import annotations

from picklist_advisor.taxonomy.pick_taxonomy import TraitDimension

# ── Score caps / saturation ───────────────────────────────────────────────────

MAX_BASE_SCORE = 100.0
MATCHES_FOR_FULL_CONFIDENCE = 10
CONSISTENCY_SCALE = 100.0

# ── Profiler specialization ───────────────────────────────────────────────────

AUTO_SPECIALIZATION_ABOVE = 15.0
TELEOP_SPECIALIZATION_ABOVE = 40.0
ENDGAME_SPECIALIZATION_ABOVE = 20.0
DEFENSE_SPECIALIZATION_ABOVE = 7.0

AUTO_SPECIALIZATION_MULTIPLIER = 1.2
TELEOP_SPECIALIZATION_MULTIPLIER = 1.1
ENDGAME_SPECIALIZATION_MULTIPLIER = 1.3
DEFENSE_SPECIALIZATION_MULTIPLIER = 1.2
NO_SPECIALIZATION_MULTIPLIER = 1.0

# ── Classification ────────────────────────────────────────────────────────────

PRIMARY_TOTAL_ABOVE = 80.0
PRIMARY_DEFENSE_ABOVE = 6.0
SPECIALIST_AUTO_ABOVE = 20.0
SPECIALIST_ENDGAME_ABOVE = 25.0
DEFENSIVE_DEFENSE_ABOVE = 7.0
DEFENSIVE_TOTAL_ABOVE = 50.0
SECONDARY_TOTAL_ABOVE = 60.0

# ── Traits ────────────────────────────────────────────────────────────────────

STRENGTH_ABOVE: dict[TraitDimension, float] = {
    TraitDimension.OVERALL:     70.0,
    TraitDimension.AUTONOMOUS:  15.0,
    TraitDimension.TELEOP:      40.0,
    TraitDimension.ENDGAME:     20.0,
    TraitDimension.DEFENSE:      7.0,
    TraitDimension.CONSISTENCY: 75.0,
}

WEAKNESS_BELOW: dict[TraitDimension, float] = {
    TraitDimension.OVERALL:     50.0,
    TraitDimension.AUTONOMOUS:  10.0,
    TraitDimension.TELEOP:      30.0,
    TraitDimension.ENDGAME:     15.0,
    TraitDimension.DEFENSE:      5.0,
    TraitDimension.CONSISTENCY: 60.0,
}

# ── Reasoning tiers ───────────────────────────────────────────────────────────

WELL_SCOUTED_MATCHES_ABOVE = 10
MODERATE_SCOUTED_MATCHES_ABOVE = 5
HIGHLY_CONSISTENT_ABOVE = 80.0
RELIABLE_CONSISTENCY_ABOVE = 60.0
HIGH_SCORING_ABOVE = 80.0
SOLID_SCORING_ABOVE = 60.0
