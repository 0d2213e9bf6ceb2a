"""
Pick-list advisor: deterministic next-pick ranking for alliance selection.

Host applications call one of two entry points::

    from picklist_advisor import analyze_roster, evaluate_candidate

    suggestions, summary = analyze_roster(pool, selection)
    suggestion = evaluate_candidate(candidate, selection)
"""

from picklist_advisor.analysis.evaluator import evaluate_candidate
from picklist_advisor.analysis.roster import analyze_roster

__all__ = ["analyze_roster", "evaluate_candidate"]
__version__ = "0.1.0"
