"""
ASCII terminal formatters for the CLI.

All formatters accept models from ``niche_radar.models`` and return plain
multi-line strings suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``).  The colour band
and heatmap tiers are shown as bracketed tags rather than ANSI colours::

  Threat level:   High Pressure  [RED]
  Asymmetry:      40/100

Heatmap
-------
``format_heatmap()`` draws one bar per Big 4 service line.  Bar length is
proportional to intensity (20 chars = 1.0); the tier tag repeats the
dark/mid/light banding used by HTML renderers.
"""

from __future__ import annotations

import textwrap

from niche_radar.models.result import Archetype, AssessmentReport, HeatmapCell, Narrative
from niche_radar.wizard.steps import Step

_WRAP = 76


# ── Questionnaire ─────────────────────────────────────────────────────────────


def format_step(step: Step, index: int, total: int) -> str:
    """Render one question with numbered options.

    Args:
        step:  The step to show.
        index: 1-based position of the step.
        total: Number of steps.
    """
    lines: list[str] = []
    lines.append("")
    lines.append(f"=== Step {index}/{total}: {step.title} ===")
    lines.append(f"  {step.prompt}")
    lines.append("")
    for n, opt in enumerate(step.options, start=1):
        hint = f"  -- {opt.hint}" if opt.hint else ""
        lines.append(f"    {n}. {opt.label}{hint}")
    return "\n".join(lines)


# ── Results ───────────────────────────────────────────────────────────────────


def format_score_summary(report: AssessmentReport) -> str:
    score = report.score
    sel = report.selection
    lines: list[str] = []
    lines.append("")
    lines.append("=== Competitive Position ===")
    lines.append(
        f"  Profile:        {sel.spec} | {sel.size} | {sel.intl} | {sel.pricing}"
    )
    lines.append(
        f"  Threat level:   {score.threat_level.value}  [{score.color_band.value.upper()}]"
    )
    lines.append(f"                  {score.threat_text}")
    lines.append(f"  Threat score:   {score.threat_score:.3f}")
    lines.append(f"  Asymmetry:      {score.asymmetry_score}/100")
    lines.append(f"  Field density:  {score.density_label}")
    return "\n".join(lines)


def format_narrative(narrative: Narrative) -> str:
    lines: list[str] = ["", "=== Strategic Narrative ==="]
    for para in narrative.to_text().split("\n\n"):
        lines.append("")
        lines.extend(
            textwrap.wrap(para, width=_WRAP, initial_indent="  ", subsequent_indent="  ")
        )
    return "\n".join(lines)


def format_consortium(archetypes: list[Archetype]) -> str:
    lines: list[str] = ["", "=== Suggested Consortium ==="]
    for n, arch in enumerate(archetypes, start=1):
        lines.append(f"  {n}. {arch.name:<32}  {arch.role}")
    return "\n".join(lines)


def format_heatmap(cells: list[HeatmapCell]) -> str:
    """Horizontal bar chart of Big 4 service intensity."""
    lines: list[str] = ["", "=== Big 4 Service Heatmap ==="]
    header = f"    {'Service':<10}  {'Intensity':>9}  {'':<20}  {'Tier':>5}"
    lines.append(header)
    lines.append("    " + "-" * (len(header) - 4))
    for cell in cells:
        bar = "#" * round(cell.intensity * 20)
        lines.append(
            f"    {cell.service:<10}  {cell.intensity:>9.2f}  {bar:<20}  {cell.tier.value:>5}"
        )
    return "\n".join(lines)


def format_assessment(report: AssessmentReport, show_heatmap: bool = True) -> str:
    """Full results screen: score summary, narrative, consortium, heatmap."""
    parts = [
        format_score_summary(report),
        format_narrative(report.narrative),
        format_consortium(report.consortium),
    ]
    if show_heatmap:
        parts.append(format_heatmap(report.heatmap))
    return "\n".join(parts)
