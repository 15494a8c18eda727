"""Tests for niche_radar/scoring/assessment.py."""

from __future__ import annotations

import pytest

from niche_radar.scoring.assessment import build_assessment
from niche_radar.scoring.consortium import match_consortium
from niche_radar.scoring.engine import InvalidInputError
from niche_radar.taxonomy.selection_taxonomy import ThreatLevel


class TestBuildAssessment:
    def test_bundles_all_outputs(self, complete_selection):
        report = build_assessment(complete_selection)
        assert report.score.threat_level == ThreatLevel.HIGH
        assert report.consortium == match_consortium("corporate_ma")
        assert len(report.heatmap) == 8
        assert report.narrative_html == report.narrative.to_html()

    def test_narrative_follows_scores(self, make_selection):
        report = build_assessment(
            make_selection(spec="esg_advisory", size="small", pricing="premium")
        )
        assert report.score.asymmetry_score == 85
        assert "consortium" in report.narrative.recommendation

    def test_selection_is_copied(self, complete_selection):
        report = build_assessment(complete_selection)
        complete_selection.reset()
        assert report.selection.spec == "corporate_ma"

    def test_identical_selections_give_equal_reports(self, make_selection):
        assert build_assessment(make_selection()) == build_assessment(make_selection())

    def test_invalid_selection_propagates(self, make_selection):
        with pytest.raises(InvalidInputError):
            build_assessment(make_selection(size="xl"))

    def test_json_dump_shape(self, complete_selection):
        data = build_assessment(complete_selection).model_dump(mode="json")
        assert set(data) == {
            "selection", "score", "narrative", "narrative_html", "consortium", "heatmap",
        }
        assert data["score"]["threat_level"] == "High Pressure"
        assert data["score"]["color_band"] == "red"
        assert data["consortium"][0] == {
            "name": "Niche Technical Firm",
            "role": "Deep sector expertise (e.g. Pharma, Fintech)",
        }
        assert data["heatmap"][0]["tier"] == "dark"
