"""Tests for pick taxonomy integrity — phrase map contract."""

from __future__ import annotations

from picklist_advisor.taxonomy.pick_taxonomy import (
    CATEGORY_CLOSING_PHRASES,
    NO_DATA_REASONING,
    NO_DATA_WEAKNESS,
    STRENGTH_PHRASES,
    WEAKNESS_PHRASES,
    TeamCategory,
    TraitDimension,
)


class TestTeamCategoryEnum:
    def test_all_values_are_strings(self):
        for member in TeamCategory:
            assert isinstance(member.value, str)

    def test_exactly_five_categories(self):
        assert {m.value for m in TeamCategory} == {
            "primary", "secondary", "specialist", "defensive", "balanced",
        }


class TestTraitDimensionEnum:
    def test_no_duplicate_values(self):
        values = [m.value for m in TraitDimension]
        assert len(values) == len(set(values)), "TraitDimension has duplicate values"

    def test_declaration_order(self):
        assert list(TraitDimension) == [
            TraitDimension.OVERALL,
            TraitDimension.AUTONOMOUS,
            TraitDimension.TELEOP,
            TraitDimension.ENDGAME,
            TraitDimension.DEFENSE,
            TraitDimension.CONSISTENCY,
        ]


class TestPhraseMaps:
    def test_every_dimension_has_strength_phrase(self):
        missing = set(TraitDimension) - set(STRENGTH_PHRASES)
        assert not missing, f"Dimensions without a strength phrase: {missing}"

    def test_every_dimension_has_weakness_phrase(self):
        missing = set(TraitDimension) - set(WEAKNESS_PHRASES)
        assert not missing, f"Dimensions without a weakness phrase: {missing}"

    def test_every_category_has_closing_phrase(self):
        missing = set(TeamCategory) - set(CATEGORY_CLOSING_PHRASES)
        assert not missing, f"Categories without a closing phrase: {missing}"

    def test_phrases_unique(self):
        phrases = list(STRENGTH_PHRASES.values()) + list(WEAKNESS_PHRASES.values())
        assert len(phrases) == len(set(phrases))

    def test_strength_and_weakness_never_collide(self):
        assert not set(STRENGTH_PHRASES.values()) & set(WEAKNESS_PHRASES.values())

    def test_key_phrases(self):
        assert STRENGTH_PHRASES[TraitDimension.DEFENSE] == "Strong defensive capabilities"
        assert WEAKNESS_PHRASES[TraitDimension.DEFENSE] == "Limited defensive capabilities"
        assert CATEGORY_CLOSING_PHRASES[TeamCategory.PRIMARY] \
            == "Well-rounded team suitable for first pick"

    def test_no_data_text(self):
        assert NO_DATA_REASONING == "Limited scouting data available"
        assert NO_DATA_WEAKNESS == "No performance data available"
