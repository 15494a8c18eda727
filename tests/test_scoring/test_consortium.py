"""Tests for niche_radar/scoring/consortium.py."""

from __future__ import annotations

import pytest

from niche_radar.reference.tables import ARCHETYPE_CATALOG
from niche_radar.scoring.consortium import match_consortium


def _names(spec):
    return [a.name for a in match_consortium(spec)]


class TestMatchConsortium:
    def test_tax_litigation(self):
        assert _names("tax_litigation") == [
            "Independent ESG Advisory",
            "IT Advisory Specialist",
            "Independent Corporate Finance",
        ]

    def test_corporate_ma(self):
        assert _names("corporate_ma") == [
            "Niche Technical Firm",
            "Tax Litigation Boutique",
            "IT Advisory Specialist",
        ]

    def test_esg_advisory(self):
        assert _names("esg_advisory") == [
            "Niche Technical Firm",
            "Tax Litigation Boutique",
            "Independent Corporate Finance",
        ]

    def test_audit_assurance_uses_default(self):
        assert match_consortium("audit_assurance") == [
            ARCHETYPE_CATALOG[0], ARCHETYPE_CATALOG[1], ARCHETYPE_CATALOG[4],
        ]

    @pytest.mark.parametrize("spec", ["forensics", "", None])
    def test_unknown_spec_uses_default(self, spec):
        assert match_consortium(spec) == match_consortium("audit_assurance")

    @pytest.mark.parametrize(
        "spec", ["tax_litigation", "corporate_ma", "esg_advisory", "audit_assurance", "x"]
    )
    def test_always_three_distinct_archetypes(self, spec):
        result = match_consortium(spec)
        assert len(result) == 3
        assert len({a.name for a in result}) == 3

    def test_returns_fresh_list(self):
        first = match_consortium("corporate_ma")
        first.clear()
        assert len(match_consortium("corporate_ma")) == 3
