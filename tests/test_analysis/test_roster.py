"""
Tests for picklist_advisor/analysis/roster.py.

What we test
------------
filter_pool():
  - Teams already on the pick list are excluded (by id).
  - Repeated pool ids: first occurrence wins.
  - CandidateFilter thresholds are inclusive; unscouted teams are dropped
    once any threshold is active.

rank_suggestions():
  - Sorted by confidence × strategic_value descending.
  - At most top_n results.
  - Ties keep input order.

summarize_roster():
  - Totals and mean count scouted picks only.
  - Coverage / gaps are unions of strength / weakness phrases.
  - Recommendation checklist fires in fixed order.
  - Empty pick list → all five recommendations.

analyze_roster():
  - End-to-end ordering on the sample event.
  - policy.top_n bounds the output.
  - Identical inputs give identical outputs.
"""

from __future__ import annotations

import pytest

from picklist_advisor.analysis.evaluator import evaluate_candidate
from picklist_advisor.analysis.roster import (
    RECOMMEND_AUTONOMOUS,
    RECOMMEND_DEFENSE,
    RECOMMEND_ENDGAME,
    RECOMMEND_HIGHER_SCORING,
    RECOMMEND_PRIMARY,
    CandidateFilter,
    analyze_roster,
    build_strategic_recommendations,
    filter_pool,
    rank_suggestions,
    summarize_roster,
)
from picklist_advisor.config import ScoringPolicy
from picklist_advisor.models.scouting import Candidate, SelectionEntry, StatsRecord
from picklist_advisor.taxonomy.pick_taxonomy import TraitDimension


# ── Helpers ────────────────────────────────────────────────────────────────────

def _stats(**overrides) -> StatsRecord:
    base = dict(
        avg_total_score=60.0,
        avg_autonomous_points=12.0,
        avg_teleop_points=35.0,
        avg_endgame_points=17.0,
        avg_defense_rating=6.0,
        total_matches=8,
        consistency_score=70.0,
    )
    base.update(overrides)
    return StatsRecord(**base)


def _cand(team_id, stats: StatsRecord | None = None, name: str | None = None) -> Candidate:
    return Candidate(id=team_id, display_name=name or f"Team {team_id}", stats=stats)


def _pick(team_id, rank: int, stats: StatsRecord | None = None) -> SelectionEntry:
    return SelectionEntry(id=team_id, display_name=f"Team {team_id}", stats=stats, rank=rank)


ALL_RECOMMENDATIONS = [
    RECOMMEND_PRIMARY,
    RECOMMEND_AUTONOMOUS,
    RECOMMEND_ENDGAME,
    RECOMMEND_DEFENSE,
    RECOMMEND_HIGHER_SCORING,
]


# ── filter_pool ───────────────────────────────────────────────────────────────

class TestFilterPool:
    def test_excludes_picked_teams(self, sample_pool, sample_selection):
        ids = [c.id for c in filter_pool(sample_pool, sample_selection)]
        assert 118 not in ids
        assert ids == [254, 1678, 9999, 971]

    def test_empty_selection_keeps_pool_order(self, sample_pool):
        assert [c.id for c in filter_pool(sample_pool, [])] == [254, 1678, 9999, 971, 118]

    def test_duplicate_pool_id_first_wins(self):
        pool = [_cand(1, _stats(), "First"), _cand(2, _stats()), _cand(1, _stats(), "Second")]
        eligible = filter_pool(pool, [])
        assert [c.id for c in eligible] == [1, 2]
        assert eligible[0].display_name == "First"

    def test_inactive_filter_keeps_unscouted(self, sample_pool):
        ids = [c.id for c in filter_pool(sample_pool, [], CandidateFilter())]
        assert 9999 in ids

    def test_min_matches(self, sample_pool):
        f = CandidateFilter(min_matches=10)
        assert [c.id for c in filter_pool(sample_pool, [], f)] == [254]

    def test_min_avg_score_is_inclusive(self, sample_pool):
        f = CandidateFilter(min_avg_score=60.0)
        assert [c.id for c in filter_pool(sample_pool, [], f)] == [254, 1678, 118]

    def test_active_filter_drops_unscouted(self):
        f = CandidateFilter(min_matches=1)
        assert f.is_active
        assert not f.accepts(_cand(5))

    def test_default_filter_inactive(self):
        assert not CandidateFilter().is_active


# ── rank_suggestions ──────────────────────────────────────────────────────────

class TestRankSuggestions:
    def test_sorted_descending(self, sample_pool):
        evaluated = [evaluate_candidate(c, []) for c in sample_pool]
        ranked = rank_suggestions(evaluated, top_n=10)
        scores = [s.pick_score for s in ranked]
        assert scores == sorted(scores, reverse=True)

    def test_top_n_bound(self, sample_pool):
        evaluated = [evaluate_candidate(c, []) for c in sample_pool]
        assert len(rank_suggestions(evaluated, top_n=2)) == 2

    def test_top_n_larger_than_input(self, sample_pool):
        evaluated = [evaluate_candidate(c, []) for c in sample_pool]
        assert len(rank_suggestions(evaluated, top_n=50)) == len(sample_pool)

    def test_ties_keep_input_order(self):
        pool = [_cand(i, _stats()) for i in (30, 10, 20)]
        ranked = rank_suggestions([evaluate_candidate(c, []) for c in pool], top_n=10)
        assert [s.id for s in ranked] == [30, 10, 20]

    def test_empty_input(self):
        assert rank_suggestions([], top_n=5) == []


# ── summarize_roster ──────────────────────────────────────────────────────────

class TestSummarizeRoster:
    def test_empty_selection(self):
        summary = summarize_roster([])
        assert summary.total_potential_score == 0.0
        assert summary.balanced_score == 0.0
        assert summary.coverage == frozenset()
        assert summary.gaps == frozenset()
        assert summary.recommendations == ALL_RECOMMENDATIONS

    def test_sample_selection(self, sample_selection):
        summary = summarize_roster(sample_selection)
        assert summary.total_potential_score == pytest.approx(75.0)
        assert summary.balanced_score == pytest.approx(75.0)
        assert summary.coverage == frozenset({"High scoring potential"})
        assert summary.gaps == frozenset()
        assert summary.recommendations == [
            RECOMMEND_PRIMARY,
            RECOMMEND_AUTONOMOUS,
            RECOMMEND_ENDGAME,
            RECOMMEND_DEFENSE,
        ]

    def test_unscouted_picks_skip_totals_but_count_for_size(self):
        sel = [
            _pick(1, 1, _stats(avg_total_score=80.0)),
            _pick(2, 2, _stats(avg_total_score=60.0)),
            _pick(3, 3),
        ]
        summary = summarize_roster(sel)
        assert summary.total_potential_score == pytest.approx(140.0)
        assert summary.balanced_score == pytest.approx(70.0)
        assert summary.coverage == frozenset({"High scoring potential"})
        # three picks reach the target size, so no primary recommendation
        assert summary.recommendations == [
            RECOMMEND_AUTONOMOUS,
            RECOMMEND_ENDGAME,
            RECOMMEND_DEFENSE,
        ]

    def test_all_unscouted(self):
        sel = [_pick(i, i) for i in (1, 2, 3)]
        summary = summarize_roster(sel)
        assert summary.total_potential_score == 0.0
        assert summary.balanced_score == 0.0
        assert summary.coverage == frozenset()
        assert summary.recommendations == [
            RECOMMEND_AUTONOMOUS,
            RECOMMEND_ENDGAME,
            RECOMMEND_DEFENSE,
            RECOMMEND_HIGHER_SCORING,
        ]

    def test_fully_covered_list(self):
        stats = _stats(
            avg_total_score=75.0,
            avg_autonomous_points=18.0,
            avg_endgame_points=22.0,
            avg_defense_rating=8.0,
        )
        sel = [_pick(i, i, stats) for i in (1, 2, 3)]
        assert summarize_roster(sel).recommendations == []

    def test_gaps_union(self):
        sel = [
            _pick(1, 1, _stats(avg_defense_rating=2.0)),
            _pick(2, 2, _stats(consistency_score=30.0)),
        ]
        assert summarize_roster(sel).gaps == frozenset(
            {"Limited defensive capabilities", "Inconsistent performance"}
        )

    def test_custom_target_size(self, sample_selection):
        policy = ScoringPolicy(target_roster_size=1)
        assert RECOMMEND_PRIMARY not in summarize_roster(sample_selection, policy).recommendations


class TestBuildStrategicRecommendations:
    def test_order_is_fixed(self):
        assert build_strategic_recommendations(0, set(), 0.0) == ALL_RECOMMENDATIONS

    def test_balanced_bar_is_strict_minimum(self):
        covered = {TraitDimension.AUTONOMOUS, TraitDimension.ENDGAME, TraitDimension.DEFENSE}
        assert build_strategic_recommendations(3, covered, 60.0) == []
        assert build_strategic_recommendations(3, covered, 59.9) == [RECOMMEND_HIGHER_SCORING]


# ── analyze_roster ────────────────────────────────────────────────────────────

class TestAnalyzeRoster:
    def test_sample_event_ordering(self, sample_pool, sample_selection):
        suggestions, summary = analyze_roster(sample_pool, sample_selection)
        assert [s.id for s in suggestions] == [254, 1678, 971, 9999]
        assert summary.balanced_score == pytest.approx(75.0)

    def test_redundant_strength_lowers_compatibility(self, sample_pool, sample_selection):
        suggestions, _ = analyze_roster(sample_pool, sample_selection)
        by_id = {s.id: s for s in suggestions}
        # 254 repeats the list's scoring strength
        assert by_id[254].compatibility == pytest.approx(0.46)
        assert by_id[1678].compatibility == pytest.approx(0.5)

    def test_unscouted_team_scores(self, sample_pool, sample_selection):
        suggestions, _ = analyze_roster(sample_pool, sample_selection)
        last = suggestions[-1]
        assert last.id == 9999
        assert last.pick_score == pytest.approx(0.09)

    def test_top_n_from_policy(self, sample_pool):
        suggestions, _ = analyze_roster(sample_pool, [], ScoringPolicy(top_n=2))
        assert [s.id for s in suggestions] == [254, 118]

    def test_filter_applied(self, sample_pool, sample_selection):
        suggestions, _ = analyze_roster(
            sample_pool, sample_selection, candidate_filter=CandidateFilter(min_matches=10)
        )
        assert [s.id for s in suggestions] == [254]

    def test_empty_pool(self, sample_selection):
        suggestions, summary = analyze_roster([], sample_selection)
        assert suggestions == []
        assert summary.total_potential_score == pytest.approx(75.0)

    def test_everyone_picked(self, sample_pool):
        sel = [_pick(c.id, i + 1, c.stats) for i, c in enumerate(sample_pool)]
        suggestions, _ = analyze_roster(sample_pool, sel)
        assert suggestions == []

    def test_deterministic(self, sample_pool, sample_selection):
        first = analyze_roster(sample_pool, sample_selection)
        second = analyze_roster(sample_pool, sample_selection)
        assert first == second
