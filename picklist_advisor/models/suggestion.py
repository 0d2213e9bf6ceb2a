"""
Advisor output models.

``Suggestion`` is one explained recommendation for a candidate team.
``RosterSummary`` is the holistic assessment of the current pick list.

Both are frozen and produced fresh on every call; nothing here is persisted
by the advisor itself.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from picklist_advisor.models.scouting import TeamId
from picklist_advisor.taxonomy.pick_taxonomy import TeamCategory


class Suggestion(BaseModel):
    """Ranked, explained pick recommendation for one candidate.

    Attributes:
        id: Candidate team identifier.
        display_name: Candidate team name.
        confidence: How much the recommendation can be trusted, [0, 1].
        strategic_value: How much the team would add to the alliance, [0, 1].
        category: Behavioral archetype of the team.
        compatibility: Fit against the current pick list, [0, 1].
        reasoning: Ordered explanation phrases.
        strengths: Strength phrases (may be empty).
        weaknesses: Weakness phrases (may be empty).
    """

    model_config = ConfigDict(frozen=True)

    id: TeamId
    display_name: str
    confidence: float
    strategic_value: float
    category: TeamCategory
    compatibility: float
    reasoning: list[str] = Field(default_factory=list)
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)

    @field_validator("confidence", "strategic_value", "compatibility")
    @classmethod
    def validate_unit_interval(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError(f"score must be in [0.0, 1.0], got {v}.")
        return v

    @property
    def pick_score(self) -> float:
        """Ranking key: confidence × strategic value."""
        return self.confidence * self.strategic_value


class RosterSummary(BaseModel):
    """Aggregate view of the teams already on the pick list.

    Attributes:
        total_potential_score: Sum of ``avg_total_score`` over scouted picks.
        balanced_score: Mean ``avg_total_score`` over scouted picks (0 if none).
        coverage: Strength phrases present anywhere on the list.
        gaps: Weakness phrases present anywhere on the list.
        recommendations: Ordered strategic advice for the next pick.
    """

    model_config = ConfigDict(frozen=True)

    total_potential_score: float = 0.0
    balanced_score: float = 0.0
    coverage: frozenset[str] = frozenset()
    gaps: frozenset[str] = frozenset()
    recommendations: list[str] = Field(default_factory=list)
