"""
Pick-list taxonomy: team categories and trait dimensions.

``TeamCategory`` is the single behavioral archetype assigned to every
evaluated team.  ``TraitDimension`` names the six performance dimensions that
strengths and weaknesses are reported on.

Trait phrases are looked up from the dimension, never parsed back out of the
phrase.  Compatibility scoring compares dimensions by equality, so the
wording of a phrase can change without affecting any score.

The phrase maps below are the integrity contract:
  - Every ``TraitDimension`` has exactly one strength and one weakness phrase.
  - Every ``TeamCategory`` has exactly one closing reasoning phrase.

Run ``tests/test_taxonomy/test_pick_taxonomy.py`` to verify this contract.

This module has NO imports from any other ``picklist_advisor`` package.
"""

from enum import StrEnum


class TeamCategory(StrEnum):
    """Behavioral archetype assigned by the ordered classification rules."""

    PRIMARY = "primary"
    """High overall scoring with credible defense; first-pick material."""

    SECONDARY = "secondary"
    """Solid all-around scorer without a standout specialty."""

    SPECIALIST = "specialist"
    """Exceptional in autonomous or endgame."""

    DEFENSIVE = "defensive"
    """High defense rating with moderate scoring."""

    BALANCED = "balanced"
    """Fallback: nothing above clears its bar."""


class TraitDimension(StrEnum):
    """Performance dimension a strength or weakness refers to."""

    OVERALL = "overall"
    AUTONOMOUS = "autonomous"
    TELEOP = "teleop"
    ENDGAME = "endgame"
    DEFENSE = "defense"
    CONSISTENCY = "consistency"


STRENGTH_PHRASES: dict[TraitDimension, str] = {
    TraitDimension.OVERALL:     "High scoring potential",
    TraitDimension.AUTONOMOUS:  "Strong autonomous phase",
    TraitDimension.TELEOP:      "Effective teleop performance",
    TraitDimension.ENDGAME:     "Excellent endgame execution",
    TraitDimension.DEFENSE:     "Strong defensive capabilities",
    TraitDimension.CONSISTENCY: "Consistent performance",
}

WEAKNESS_PHRASES: dict[TraitDimension, str] = {
    TraitDimension.OVERALL:     "Lower scoring potential",
    TraitDimension.AUTONOMOUS:  "Weak autonomous phase",
    TraitDimension.TELEOP:      "Limited teleop effectiveness",
    TraitDimension.ENDGAME:     "Poor endgame performance",
    TraitDimension.DEFENSE:     "Limited defensive capabilities",
    TraitDimension.CONSISTENCY: "Inconsistent performance",
}

CATEGORY_CLOSING_PHRASES: dict[TeamCategory, str] = {
    TeamCategory.PRIMARY:    "Well-rounded team suitable for first pick",
    TeamCategory.SPECIALIST: "Specialized capabilities for specific strategies",
    TeamCategory.DEFENSIVE:  "Strong defensive capabilities for alliance protection",
    TeamCategory.SECONDARY:  "Solid backup option for alliance depth",
    TeamCategory.BALANCED:   "Balanced performance across all game aspects",
}

# Canned text for teams with no scouting data at all.
NO_DATA_REASONING = "Limited scouting data available"
NO_DATA_WEAKNESS = "No performance data available"
