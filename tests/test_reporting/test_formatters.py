"""Tests for niche_radar.reporting.formatters."""

from __future__ import annotations

import pytest

from niche_radar.reporting.formatters import (
    format_assessment,
    format_consortium,
    format_heatmap,
    format_narrative,
    format_score_summary,
    format_step,
)
from niche_radar.scoring.assessment import build_assessment
from niche_radar.scoring.heatmap import build_heatmap
from niche_radar.wizard.steps import STEPS


@pytest.fixture
def report(complete_selection):
    return build_assessment(complete_selection)


# ── format_step ───────────────────────────────────────────────────────────────


def test_step_lists_numbered_options() -> None:
    """Options are numbered from 1 with their hints."""
    out = format_step(STEPS[1], 2, 4)
    assert "Step 2/4: Firm size" in out
    assert "1. Small" in out
    assert "3. Large" in out
    assert "Fewer than 10 professionals" in out


# ── results sections ──────────────────────────────────────────────────────────


def test_score_summary_shows_level_band_and_scores(report) -> None:
    out = format_score_summary(report)
    assert "High Pressure  [RED]" in out
    assert "Active competition on key accounts." in out
    assert "0.860" in out
    assert "40/100" in out
    assert "Field density:  High" in out
    assert "corporate_ma | medium | mixed | standard" in out


def test_narrative_is_plain_and_wrapped(report) -> None:
    out = format_narrative(report.narrative)
    assert "<strong>" not in out
    assert "Strategic Recommendation:" in out
    assert all(len(line) <= 76 for line in out.splitlines())


def test_consortium_lists_three_rows(report) -> None:
    out = format_consortium(report.consortium)
    assert "1. Niche Technical Firm" in out
    assert "3. IT Advisory Specialist" in out
    assert "4." not in out


def test_heatmap_rows_and_bars() -> None:
    out = format_heatmap(build_heatmap())
    rows = [line for line in out.splitlines() if line.strip().startswith(("Audit", "Legal"))]
    assert len(rows) == 2
    audit, legal = rows
    assert "#" * 18 in audit and "dark" in audit
    assert "#" * 10 in legal and "light" in legal


def test_assessment_can_omit_heatmap(report) -> None:
    assert "Heatmap" in format_assessment(report)
    assert "Heatmap" not in format_assessment(report, show_heatmap=False)
