"""
Selection taxonomy for the positioning questionnaire.

Four orthogonal dimensions describe every firm profile:
  - ``Specialization`` — the *what*: the firm's core practice area.
  - ``FirmSize``       — the *how big*: headcount bracket.
  - ``IntlExposure``   — the *where*: share of cross-border work.
  - ``PricingModel``   — the *how much*: fee positioning.

Derived display vocabularies (``Density``, ``ThreatLevel``, ``ColorBand``,
``HeatTier``) live here as well so renderers and the scoring engine share one
set of symbols.

``PricingModel`` lists the options offered by the questionnaire, but pricing
is an open vocabulary: any other string is accepted and simply never matches
the premium rule.

This module has NO imports from any other ``niche_radar`` package.
"""

from enum import StrEnum


class Specialization(StrEnum):
    """Core practice area of the independent firm."""

    TAX_LITIGATION = "tax_litigation"
    """Tax controversy and litigation; low network pressure."""

    CORPORATE_MA = "corporate_ma"
    """Mid-market M&A and transaction services."""

    ESG_ADVISORY = "esg_advisory"
    """CSRD reporting, sustainability due diligence. Field still fragmented."""

    AUDIT_ASSURANCE = "audit_assurance"
    """Statutory audit and assurance; the most saturated segment."""


class FirmSize(StrEnum):
    """Headcount bracket of the firm."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class IntlExposure(StrEnum):
    """Share of the client book that is international."""

    GLOBAL = "global"
    LOCAL = "local"
    MIXED = "mixed"


class PricingModel(StrEnum):
    """Fee positioning offered in the questionnaire."""

    PREMIUM = "premium"
    STANDARD = "standard"
    VOLUME = "volume"


class Density(StrEnum):
    """Qualitative crowding of a specialization's competitive field."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "very_high"


class ThreatLevel(StrEnum):
    """Classification of the final threat score."""

    STRUCTURAL = "Structural Threat"
    HIGH = "High Pressure"
    MODERATE = "Moderate Pressure"
    LOW = "Low Pressure"


class ColorBand(StrEnum):
    """Three-level display hint for the threat score."""

    RED = "red"
    AMBER = "amber"
    GREEN = "green"

    @property
    def hex(self) -> str:
        return _COLOR_HEX[self]


class HeatTier(StrEnum):
    """Intensity tier of a heatmap cell."""

    DARK = "dark"
    MID = "mid"
    LIGHT = "light"

    @property
    def hex(self) -> str:
        return _TIER_HEX[self]


_COLOR_HEX: dict[ColorBand, str] = {
    ColorBand.RED:   "#ef4444",
    ColorBand.AMBER: "#f59e0b",
    ColorBand.GREEN: "#10b981",
}

_TIER_HEX: dict[HeatTier, str] = {
    HeatTier.DARK:  "#000887",
    HeatTier.MID:   "#4a5fd9",
    HeatTier.LIGHT: "#a5b0e8",
}


# ── Step order ────────────────────────────────────────────────────────────────

SELECTION_FIELDS: tuple[str, ...] = ("spec", "size", "intl", "pricing")
"""Questionnaire field names in the order the steps ask for them."""
