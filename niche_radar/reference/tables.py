"""
Static reference data for the scoring engine.

Pressure weights reflect public market signals for the Belgian advisory
market: how aggressively the Big 4 (``big4_pressure``) and the next tier of
international networks such as Moore or Baker Tilly (``moore_pressure``)
recruit and tender in each specialization.

Tables are module-level constants built from frozen models and must not be
mutated.  ``SPEC_PROFILES`` has exactly one entry per ``Specialization``;
``tests/test_taxonomy/test_selection_taxonomy.py`` verifies that contract.
"""

from __future__ import annotations

from niche_radar.models.result import Archetype, SpecProfile
from niche_radar.taxonomy.selection_taxonomy import Density, FirmSize, Specialization

SPEC_PROFILES: dict[Specialization, SpecProfile] = {
    Specialization.TAX_LITIGATION: SpecProfile(
        big4_pressure=0.3, moore_pressure=0.2, density=Density.MEDIUM,
    ),
    Specialization.CORPORATE_MA: SpecProfile(
        big4_pressure=0.9, moore_pressure=0.8, density=Density.HIGH,
    ),
    Specialization.ESG_ADVISORY: SpecProfile(
        big4_pressure=0.8, moore_pressure=0.4, density=Density.HIGH,
    ),
    Specialization.AUDIT_ASSURANCE: SpecProfile(
        big4_pressure=0.95, moore_pressure=0.9, density=Density.VERY_HIGH,
    ),
}

SIZE_MULTIPLIERS: dict[FirmSize, float] = {
    FirmSize.SMALL:  0.7,
    FirmSize.MEDIUM: 1.0,
    FirmSize.LARGE:  1.3,
}

# Order is significant: the consortium matcher selects by index.
ARCHETYPE_CATALOG: tuple[Archetype, ...] = (
    Archetype(
        name="Niche Technical Firm",
        role="Deep sector expertise (e.g. Pharma, Fintech)",
    ),
    Archetype(
        name="Independent ESG Advisory",
        role="CSRD reporting & due diligence",
    ),
    Archetype(
        name="Tax Litigation Boutique",
        role="Complex cross-border tax litigation",
    ),
    Archetype(
        name="IT Advisory Specialist",
        role="Cybersecurity & data compliance",
    ),
    Archetype(
        name="Independent Corporate Finance",
        role="Mid-market M&A and fundraising",
    ),
)

# Big 4 service-line intensity, independent of any selection.
HEATMAP_SERVICES: tuple[tuple[str, float], ...] = (
    ("Audit",    0.9),
    ("Tax",      0.7),
    ("Advisory", 0.8),
    ("ESG",      0.6),
    ("Risk",     0.75),
    ("Data",     0.85),
    ("Legal",    0.5),
    ("M&A",      0.9),
)
