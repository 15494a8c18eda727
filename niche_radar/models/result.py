"""
Reference-data and result models.

All models here are frozen: reference rows (``SpecProfile``, ``Archetype``)
are shared module-level constants, and results (``ScoreResult``,
``Narrative``, ``AssessmentReport``) are computed fresh for every run and
never updated in place.

``AssessmentReport`` is the single object handed to renderers.  Its
``model_dump(mode="json")`` is the machine-readable output of
``niche-radar score --json``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from niche_radar.models.selection import SelectionSet
from niche_radar.taxonomy.selection_taxonomy import (
    ColorBand,
    Density,
    HeatTier,
    ThreatLevel,
)

VALID_ASYMMETRY_SCORES = frozenset({40, 60, 75, 85})


class SpecProfile(BaseModel):
    """Competitive pressure profile for one specialization.

    Attributes:
        big4_pressure:  Pressure from the Big 4 networks, in [0.0, 1.0].
        moore_pressure: Pressure from second-tier international networks, in [0.0, 1.0].
        density:        Crowding of the specialization's competitive field.
    """

    model_config = ConfigDict(frozen=True)

    big4_pressure: float
    moore_pressure: float
    density: Density

    @field_validator("big4_pressure", "moore_pressure")
    @classmethod
    def validate_pressure_range(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError(f"Pressure weights must be in [0.0, 1.0], got {v}.")
        return v


class Archetype(BaseModel):
    """A partner-firm archetype suggested for a consortium."""

    model_config = ConfigDict(frozen=True)

    name: str
    role: str


class HeatmapCell(BaseModel):
    """One Big 4 service line on the heatmap."""

    model_config = ConfigDict(frozen=True)

    service: str
    intensity: float
    tier: HeatTier


class ScoreResult(BaseModel):
    """Output of the scoring engine for one complete selection.

    Attributes:
        threat_score:    Competitive pressure; unbounded above 1.0.
        threat_level:    Classification of ``threat_score``.
        threat_text:     One-sentence explanation of ``threat_level``.
        asymmetry_score: Niche defensibility index, one of 40/60/75/85.
        density:         Raw density of the chosen specialization.
        density_label:   Display label for ``density``.
        color_band:      Display hint; uses different cut points than
                         ``threat_level``.
    """

    model_config = ConfigDict(frozen=True)

    threat_score: float
    threat_level: ThreatLevel
    threat_text: str
    asymmetry_score: int
    density: Density
    density_label: str
    color_band: ColorBand

    @field_validator("asymmetry_score")
    @classmethod
    def validate_asymmetry(cls, v: int) -> int:
        if v not in VALID_ASYMMETRY_SCORES:
            raise ValueError(
                f"asymmetry_score must be one of {sorted(VALID_ASYMMETRY_SCORES)}, got {v}."
            )
        return v


class Narrative(BaseModel):
    """Two-paragraph strategic narrative."""

    model_config = ConfigDict(frozen=True)

    analysis: str
    recommendation: str

    def to_html(self) -> str:
        """Render with ``<strong>`` headings and a ``<br><br>`` paragraph break."""
        return (
            f"<strong>Analysis:</strong> {self.analysis}"
            f"<br><br><strong>Strategic Recommendation:</strong> {self.recommendation}"
        )

    def to_text(self) -> str:
        return (
            f"Analysis: {self.analysis.strip()}\n\n"
            f"Strategic Recommendation: {self.recommendation.strip()}"
        )


class AssessmentReport(BaseModel):
    """Everything a renderer needs for the results screen.

    Attributes:
        selection:      Copy of the answers the report was computed from.
        score:          Scoring engine output.
        narrative:      Structured narrative paragraphs.
        narrative_html: ``narrative.to_html()``, kept for HTML renderers.
        consortium:     Exactly three suggested partner archetypes, in order.
        heatmap:        Static Big 4 service heatmap (eight cells).
    """

    model_config = ConfigDict(frozen=True)

    selection: SelectionSet
    score: ScoreResult
    narrative: Narrative
    narrative_html: str
    consortium: list[Archetype]
    heatmap: list[HeatmapCell]

    @field_validator("consortium")
    @classmethod
    def validate_consortium_size(cls, v: list[Archetype]) -> list[Archetype]:
        if len(v) != 3:
            raise ValueError(f"consortium must hold exactly 3 archetypes, got {len(v)}.")
        return v
