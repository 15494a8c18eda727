"""Tests for the question catalogue."""

from __future__ import annotations

from niche_radar.taxonomy.selection_taxonomy import (
    SELECTION_FIELDS,
    FirmSize,
    IntlExposure,
    Specialization,
)
from niche_radar.wizard.steps import STEPS, TOTAL_STEPS


class TestStepCatalogue:
    def test_four_steps_in_field_order(self):
        assert TOTAL_STEPS == 4
        assert tuple(s.category for s in STEPS) == SELECTION_FIELDS

    def test_spec_options_cover_all_specializations(self):
        assert {o.value for o in STEPS[0].options} == set(Specialization)

    def test_size_and_intl_options_cover_enums(self):
        assert {o.value for o in STEPS[1].options} == set(FirmSize)
        assert {o.value for o in STEPS[2].options} == set(IntlExposure)

    def test_pricing_offers_premium_first(self):
        assert STEPS[3].options[0].value == "premium"

    def test_every_option_has_a_label(self):
        for step in STEPS:
            for opt in step.options:
                assert opt.label

    def test_option_lookup(self):
        assert STEPS[1].option("large").label == "Large"
        assert STEPS[1].option("gigantic") is None
