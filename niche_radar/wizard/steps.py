"""
Question catalogue for the four-step questionnaire.

``STEPS[i]`` is asked at ``current_step == i + 1``.  Each option carries the
value stored in the ``SelectionSet`` plus the label and hint shown to the
user.
"""

from __future__ import annotations

from dataclasses import dataclass

from niche_radar.taxonomy.selection_taxonomy import (
    FirmSize,
    IntlExposure,
    PricingModel,
    Specialization,
)


@dataclass(frozen=True)
class StepOption:
    value: str
    label: str
    hint: str = ""


@dataclass(frozen=True)
class Step:
    """One questionnaire screen.

    Attributes:
        category: ``SelectionSet`` field this step fills.
        title:    Short heading.
        prompt:   Question shown to the user.
        options:  Choices in display order.
    """

    category: str
    title: str
    prompt: str
    options: tuple[StepOption, ...]

    def option(self, value: str) -> StepOption | None:
        for opt in self.options:
            if opt.value == value:
                return opt
        return None


STEPS: tuple[Step, ...] = (
    Step(
        category="spec",
        title="Specialization",
        prompt="What is your firm's core specialization?",
        options=(
            StepOption(Specialization.TAX_LITIGATION, "Tax Litigation",
                       "Tax controversy, rulings, cross-border disputes"),
            StepOption(Specialization.CORPORATE_MA, "Corporate / M&A",
                       "Transactions, due diligence, valuations"),
            StepOption(Specialization.ESG_ADVISORY, "ESG Advisory",
                       "CSRD reporting, sustainability due diligence"),
            StepOption(Specialization.AUDIT_ASSURANCE, "Audit & Assurance",
                       "Statutory audit, assurance engagements"),
        ),
    ),
    Step(
        category="size",
        title="Firm size",
        prompt="How large is your firm?",
        options=(
            StepOption(FirmSize.SMALL, "Small", "Fewer than 10 professionals"),
            StepOption(FirmSize.MEDIUM, "Medium", "10 to 50 professionals"),
            StepOption(FirmSize.LARGE, "Large", "More than 50 professionals"),
        ),
    ),
    Step(
        category="intl",
        title="International exposure",
        prompt="How international is your client base?",
        options=(
            StepOption(IntlExposure.GLOBAL, "Global", "Mostly cross-border mandates"),
            StepOption(IntlExposure.LOCAL, "Local", "Mostly domestic clients"),
            StepOption(IntlExposure.MIXED, "Mixed", "A balance of both"),
        ),
    ),
    Step(
        category="pricing",
        title="Pricing model",
        prompt="How do you position your fees?",
        options=(
            StepOption(PricingModel.PREMIUM, "Premium", "Value-based, above market rates"),
            StepOption(PricingModel.STANDARD, "Standard", "In line with market rates"),
            StepOption(PricingModel.VOLUME, "Volume", "Competitive rates, high throughput"),
        ),
    ),
)

TOTAL_STEPS = len(STEPS)
