"""Static Big 4 service heatmap.  Does not depend on the user's selections."""

from __future__ import annotations

from niche_radar.models.result import HeatmapCell
from niche_radar.reference.tables import HEATMAP_SERVICES
from niche_radar.taxonomy.selection_taxonomy import HeatTier


def heat_tier(intensity: float) -> HeatTier:
    """``> 0.8`` dark, ``> 0.6`` mid, otherwise light."""
    if intensity > 0.8:
        return HeatTier.DARK
    if intensity > 0.6:
        return HeatTier.MID
    return HeatTier.LIGHT


def build_heatmap() -> list[HeatmapCell]:
    return [
        HeatmapCell(service=name, intensity=intensity, tier=heat_tier(intensity))
        for name, intensity in HEATMAP_SERVICES
    ]
