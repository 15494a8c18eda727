"""
Scoring engine: converts a complete ``SelectionSet`` into a ``ScoreResult``.

Threat score
------------
    base         = big4_pressure * 0.6 + moore_pressure * 0.4
    threat_score = base * size_multiplier
    global exposure  → threat_score * 1.2
    local exposure   → threat_score * 0.8
    anything else    → unchanged

The score is a modelled probability-like measure and is unbounded above 1.0
(audit_assurance / large / global reaches ~1.45).

Asymmetry score (priority order, first match wins)
--------------------------------------------------
    1. 85 : pricing == premium AND size == small   (defensible premium niche)
    2. 75 : spec == esg_advisory AND size != large (field still fragmented)
    3. 40 : threat_score > 0.8                     (saturated market)
    4. 60 : everything else

Threat level (priority order, first match wins)
-----------------------------------------------
    > 0.9 Structural Threat | > 0.6 High Pressure | > 0.4 Moderate Pressure
    otherwise Low Pressure

Colour band
-----------
    > 0.8 red | > 0.5 amber | otherwise green

The colour band deliberately uses different cut points from the threat
level; renderers depend on both.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from niche_radar.models.result import ScoreResult, SpecProfile
from niche_radar.models.selection import SelectionSet
from niche_radar.reference.tables import SIZE_MULTIPLIERS, SPEC_PROFILES
from niche_radar.taxonomy.selection_taxonomy import (
    ColorBand,
    Density,
    FirmSize,
    IntlExposure,
    PricingModel,
    Specialization,
    ThreatLevel,
)

logger = logging.getLogger(__name__)

BIG4_WEIGHT = 0.6
MOORE_WEIGHT = 0.4

_INTL_ADJUSTMENT: dict[str, float] = {
    IntlExposure.GLOBAL: 1.2,
    IntlExposure.LOCAL:  0.8,
}


# ── Custom exceptions ─────────────────────────────────────────────────────────


class InvalidInputError(ValueError):
    """Raised when scoring is attempted with an unset or unknown selection.

    Attributes:
        field: Selection field at fault (``"spec"``, ``"size"``, ...).
        value: The offending value; ``None`` when the field is unset.
    """

    def __init__(self, field: str, value: str | None) -> None:
        self.field = field
        self.value = value
        if value is None:
            msg = f"Selection '{field}' is not set; all four steps must be answered before scoring."
        else:
            msg = f"Unrecognized {field} '{value}'."
        super().__init__(msg)


# ── Ordered rule tables ───────────────────────────────────────────────────────


@dataclass(frozen=True)
class _Facts:
    """Inputs visible to the asymmetry rules."""

    spec: Specialization
    size: FirmSize
    pricing: str
    threat_score: float


AsymmetryRule = tuple[Callable[[_Facts], bool], int]

_ASYMMETRY_RULES: tuple[AsymmetryRule, ...] = (
    (lambda f: f.pricing == PricingModel.PREMIUM and f.size == FirmSize.SMALL, 85),
    (lambda f: f.spec == Specialization.ESG_ADVISORY and f.size != FirmSize.LARGE, 75),
    (lambda f: f.threat_score > 0.8, 40),
)
_ASYMMETRY_FALLBACK = 60

ThreatRule = tuple[Callable[[float], bool], ThreatLevel, str]

_THREAT_RULES: tuple[ThreatRule, ...] = (
    (lambda s: s > 0.9, ThreatLevel.STRUCTURAL, "High vulnerability to Big 4 tenders."),
    (lambda s: s > 0.6, ThreatLevel.HIGH, "Active competition on key accounts."),
    (lambda s: s > 0.4, ThreatLevel.MODERATE,
     "Relative comfort zone, but monitoring required."),
)
_THREAT_FALLBACK = (ThreatLevel.LOW, "Solid defensive position within the niche.")


# ── Public API ────────────────────────────────────────────────────────────────


def compute_threat_score(profile: SpecProfile, size_multiplier: float, intl: str | None) -> float:
    """Weighted network pressure scaled by firm size and international exposure."""
    base = profile.big4_pressure * BIG4_WEIGHT + profile.moore_pressure * MOORE_WEIGHT
    threat_score = base * size_multiplier
    adjustment = _INTL_ADJUSTMENT.get(intl or "")
    if adjustment is not None:
        threat_score *= adjustment
    return threat_score


def determine_asymmetry(
    spec: Specialization,
    size: FirmSize,
    pricing: str | None,
    threat_score: float,
) -> int:
    """Asymmetry (opportunity) score; rules evaluated in order, first match wins.

    Returns:
        One of 85, 75, 40, 60.
    """
    facts = _Facts(spec=spec, size=size, pricing=pricing or "", threat_score=threat_score)
    for predicate, score in _ASYMMETRY_RULES:
        if predicate(facts):
            return score
    return _ASYMMETRY_FALLBACK


def classify_threat(threat_score: float) -> tuple[ThreatLevel, str]:
    """Return ``(threat_level, threat_text)`` for a threat score."""
    for predicate, level, text in _THREAT_RULES:
        if predicate(threat_score):
            return level, text
    return _THREAT_FALLBACK


def density_label(density: Density | str) -> str:
    """Display label for a density value; unknown values read as "Moderate"."""
    match density:
        case Density.VERY_HIGH:
            return "Very High (Saturated)"
        case Density.HIGH:
            return "High"
        case Density.MEDIUM:
            return "Moderate"
        case Density.LOW:
            return "Low (Opportunity)"
        case _:
            return "Moderate"


def color_band(threat_score: float) -> ColorBand:
    if threat_score > 0.8:
        return ColorBand.RED
    if threat_score > 0.5:
        return ColorBand.AMBER
    return ColorBand.GREEN


def score_selection(selection: SelectionSet) -> ScoreResult:
    """Score a complete selection.

    Args:
        selection: All four fields must be set; ``spec`` and ``size`` must be
            known taxonomy values.

    Returns:
        A fresh ``ScoreResult``.  Identical selections give equal results.

    Raises:
        InvalidInputError: If a field is unset, or ``spec``/``size`` is unknown.
    """
    spec, size = _resolve_keys(selection)
    for field in ("intl", "pricing"):
        if getattr(selection, field) is None:
            raise InvalidInputError(field, None)

    profile = SPEC_PROFILES[spec]
    threat_score = compute_threat_score(profile, SIZE_MULTIPLIERS[size], selection.intl)
    asymmetry = determine_asymmetry(spec, size, selection.pricing, threat_score)
    level, text = classify_threat(threat_score)

    logger.debug(
        "Scored selection | spec=%s size=%s intl=%s pricing=%s | threat=%.4f asymmetry=%d",
        spec, size, selection.intl, selection.pricing, threat_score, asymmetry,
    )

    return ScoreResult(
        threat_score=threat_score,
        threat_level=level,
        threat_text=text,
        asymmetry_score=asymmetry,
        density=profile.density,
        density_label=density_label(profile.density),
        color_band=color_band(threat_score),
    )


# ── Helpers ───────────────────────────────────────────────────────────────────


def _resolve_keys(selection: SelectionSet) -> tuple[Specialization, FirmSize]:
    if selection.spec is None:
        raise InvalidInputError("spec", None)
    if selection.size is None:
        raise InvalidInputError("size", None)
    try:
        spec = Specialization(selection.spec)
    except ValueError:
        raise InvalidInputError("spec", selection.spec) from None
    try:
        size = FirmSize(selection.size)
    except ValueError:
        raise InvalidInputError("size", selection.size) from None
    return spec, size
