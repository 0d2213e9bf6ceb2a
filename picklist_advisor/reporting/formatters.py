"""
ASCII terminal formatters for CLI reporting commands.

All formatters accept advisor output models and return plain multi-line
strings suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``).
"""

from __future__ import annotations

from typing import Sequence

from picklist_advisor.models.suggestion import RosterSummary, Suggestion


# ── Suggestions ───────────────────────────────────────────────────────────────


def format_suggestion_table(
    suggestions: Sequence[Suggestion],
    event_key:   str | None = None,
) -> str:
    """Format ranked suggestions as an ASCII table.

    Example::

        Rank  Team                           Category    Conf  Value  Compat   Pick
        -----------------------------------------------------------------------------
           1  254 The Cheesy Poofs           primary     0.86   0.79    1.00  0.679

    Returns:
        Multi-line string.
    """
    lines: list[str] = []
    lines.append("")
    lines.append("=== Next-Pick Suggestions ===")
    if event_key:
        lines.append(f"  Event: {event_key}")

    if not suggestions:
        lines.append("")
        lines.append("  (no eligible teams left in the pool)")
        return "\n".join(lines)

    header = (
        f"  {'Rank':>4}  {'Team':<30}  {'Category':<10}  "
        f"{'Conf':>5}  {'Value':>5}  {'Compat':>6}  {'Pick':>6}"
    )
    lines.append("")
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))
    for rank, s in enumerate(suggestions, start=1):
        team = f"{s.id} {s.display_name}"[:30]
        lines.append(
            f"  {rank:>4}  {team:<30}  {s.category.value:<10}  "
            f"{s.confidence:>5.2f}  {s.strategic_value:>5.2f}  "
            f"{s.compatibility:>6.2f}  {s.pick_score:>6.3f}"
        )
    return "\n".join(lines)


def format_suggestion_detail(suggestion: Suggestion) -> str:
    """Format one suggestion with its full reasoning, strengths and weaknesses."""
    s = suggestion
    lines: list[str] = []
    lines.append("")
    lines.append(f"=== {s.id} {s.display_name} ===")
    lines.append(f"  Category:        {s.category.value}")
    lines.append(f"  Confidence:      {s.confidence:.3f}")
    lines.append(f"  Strategic value: {s.strategic_value:.3f}")
    lines.append(f"  Compatibility:   {s.compatibility:.3f}")
    lines.append("")
    lines.append("  Reasoning:")
    lines.extend(f"    - {r}" for r in s.reasoning)
    lines.append("  Strengths:")
    if s.strengths:
        lines.extend(f"    + {r}" for r in s.strengths)
    else:
        lines.append("    (none)")
    lines.append("  Weaknesses:")
    if s.weaknesses:
        lines.extend(f"    ! {r}" for r in s.weaknesses)
    else:
        lines.append("    (none)")
    return "\n".join(lines)


# ── Roster summary ────────────────────────────────────────────────────────────


def format_roster_summary(summary: RosterSummary, roster_size: int) -> str:
    """Format the pick-list summary block.

    Coverage and gaps are sorted so output is stable between runs.
    """
    lines: list[str] = []
    lines.append("")
    lines.append("=== Current Pick List ===")
    lines.append(f"  Teams picked:          {roster_size}")
    lines.append(f"  Total potential score: {summary.total_potential_score:.1f}")
    lines.append(f"  Balanced score:        {summary.balanced_score:.1f}")

    lines.append("  Coverage:")
    if summary.coverage:
        lines.extend(f"    + {c}" for c in sorted(summary.coverage))
    else:
        lines.append("    (none)")

    lines.append("  Gaps:")
    if summary.gaps:
        lines.extend(f"    ! {g}" for g in sorted(summary.gaps))
    else:
        lines.append("    (none)")

    lines.append("  Recommendations:")
    if summary.recommendations:
        lines.extend(f"    * {r}" for r in summary.recommendations)
    else:
        lines.append("    (pick list looks well covered)")
    return "\n".join(lines)
