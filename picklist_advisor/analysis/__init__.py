"""
Pick-list analysis engine: ranks pool teams as next picks and summarizes the
pick list built so far.

Modules
-------
thresholds    : named bars shared by every rule below.
profiler      : PerformanceProfile + profile_performance() — four sub-scores.
classifier    : classify_team() — ordered first-match category rules.
traits        : strength / weakness dimensions and phrases.
compatibility : compute_compatibility() — gap-filling vs. redundancy.
evaluator     : evaluate_candidate() + build_reasoning() — one Suggestion.
roster        : analyze_roster() + summarize_roster() — ranked list + summary.

Everything here is pure: no I/O, no shared state.
"""
