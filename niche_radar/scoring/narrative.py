"""
Narrative generator: two independent branches, concatenated.

Analysis paragraph (by threat score)
------------------------------------
    > 0.8 : encirclement by the large networks
    > 0.5 : active but structured competition
    else  : niche defense

Recommendation paragraph (by asymmetry score)
---------------------------------------------
    > 70  : circumvent generalist tenders through a consortium
    else  : deepen technical specialization, avoid the price war

Total over all floats and ints; never raises.
"""

from __future__ import annotations

from niche_radar.models.result import Narrative

_ENCIRCLEMENT = (
    "Your current positioning sits directly in the line of fire of the large "
    "networks' encirclement strategies. "
    "The density of public hiring in your specialization signals an intent to "
    "absorb the mid-market. "
)
_STRUCTURED_COMPETITION = (
    "You operate in a zone of active but structured competition. "
)
_NICHE_DEFENSE = (
    "Your niche positioning provides a natural defense against Big 4 "
    "standardization. "
)

_CIRCUMVENTION = (
    "Your high asymmetry index suggests a circumvention opportunity. "
    "Rather than competing head-on in generalist tenders, focus your efforts on "
    "building a consortium of excellence (see the simulation below) to offer a "
    "credible alternative to the international networks."
)
_SPECIALIZATION = (
    "Differentiation through highly specialized technical expertise remains "
    "your best defense. Avoid the price war on generalist segments."
)


def build_narrative(threat_score: float, asymmetry_score: int) -> Narrative:
    """Build the analysis and recommendation paragraphs."""
    if threat_score > 0.8:
        analysis = _ENCIRCLEMENT
    elif threat_score > 0.5:
        analysis = _STRUCTURED_COMPETITION
    else:
        analysis = _NICHE_DEFENSE

    recommendation = _CIRCUMVENTION if asymmetry_score > 70 else _SPECIALIZATION
    return Narrative(analysis=analysis, recommendation=recommendation)
