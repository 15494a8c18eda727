"""Tests for niche_radar/scoring/narrative.py and Narrative rendering."""

from __future__ import annotations

import pytest

from niche_radar.scoring.narrative import build_narrative


class TestAnalysisBranch:
    def test_high_threat_is_encirclement(self):
        n = build_narrative(0.81, 60)
        assert "encirclement" in n.analysis
        assert "absorb the mid-market" in n.analysis

    def test_mid_threat_is_structured_competition(self):
        n = build_narrative(0.8, 60)
        assert "active but structured competition" in n.analysis

    def test_low_threat_is_niche_defense(self):
        n = build_narrative(0.5, 60)
        assert "natural defense" in n.analysis

    @pytest.mark.parametrize("threat", [-1.0, 0.0, 3.5])
    def test_total_over_out_of_range_scores(self, threat):
        assert build_narrative(threat, 0).analysis


class TestRecommendationBranch:
    def test_high_asymmetry_recommends_consortium(self):
        n = build_narrative(0.3, 75)
        assert "consortium" in n.recommendation
        assert "circumvention" in n.recommendation

    def test_asymmetry_70_is_not_high(self):
        n = build_narrative(0.3, 70)
        assert "price war" in n.recommendation

    def test_branches_are_independent(self):
        assert build_narrative(0.9, 85).analysis == build_narrative(0.9, 40).analysis
        assert (
            build_narrative(0.1, 85).recommendation
            == build_narrative(0.95, 85).recommendation
        )


class TestNarrativeRendering:
    def test_html_has_two_emphasised_paragraphs(self):
        html = build_narrative(0.9, 85).to_html()
        assert html.startswith("<strong>Analysis:</strong> ")
        assert html.count("<strong>") == 2
        assert "<br><br><strong>Strategic Recommendation:</strong> " in html

    def test_text_has_no_markup(self):
        text = build_narrative(0.9, 85).to_text()
        assert "<" not in text
        assert text.startswith("Analysis: ")
        assert "\n\nStrategic Recommendation: " in text
