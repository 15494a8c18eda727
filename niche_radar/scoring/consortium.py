"""
Consortium matcher: picks three complementary partner archetypes.

Each specialization is paired with the archetypes that cover its gaps; the
index triples below point into ``ARCHETYPE_CATALOG`` and their order is the
display order.  Any specialization without an entry (``audit_assurance``,
``None``, or a value added later) gets the default triple.
"""

from __future__ import annotations

from niche_radar.models.result import Archetype
from niche_radar.reference.tables import ARCHETYPE_CATALOG
from niche_radar.taxonomy.selection_taxonomy import Specialization

_CONSORTIUM_INDICES: dict[str, tuple[int, int, int]] = {
    Specialization.TAX_LITIGATION: (1, 3, 4),
    Specialization.CORPORATE_MA:   (0, 2, 3),
    Specialization.ESG_ADVISORY:   (0, 2, 4),
}
DEFAULT_CONSORTIUM_INDICES: tuple[int, int, int] = (0, 1, 4)


def match_consortium(spec: str | None) -> list[Archetype]:
    """Return the three suggested archetypes for ``spec``, in display order."""
    indices = _CONSORTIUM_INDICES.get(spec or "", DEFAULT_CONSORTIUM_INDICES)
    return [ARCHETYPE_CATALOG[i] for i in indices]
