"""
Assessment assembler: runs the full results pipeline for one selection.

    score_selection → build_narrative → match_consortium → build_heatmap

The returned ``AssessmentReport`` holds a copy of the selection, so a later
session reset does not alter a report that has already been produced.
"""

from __future__ import annotations

import logging

from niche_radar.models.result import AssessmentReport
from niche_radar.models.selection import SelectionSet
from niche_radar.scoring.consortium import match_consortium
from niche_radar.scoring.engine import score_selection
from niche_radar.scoring.heatmap import build_heatmap
from niche_radar.scoring.narrative import build_narrative

logger = logging.getLogger(__name__)


def build_assessment(selection: SelectionSet) -> AssessmentReport:
    """Compute every result field for ``selection``.

    Raises:
        InvalidInputError: Propagated from ``score_selection()``.
    """
    score = score_selection(selection)
    narrative = build_narrative(score.threat_score, score.asymmetry_score)
    consortium = match_consortium(selection.spec)

    logger.info(
        "Assessment built | spec=%s | level=%s | asymmetry=%d",
        selection.spec, score.threat_level.value, score.asymmetry_score,
    )

    return AssessmentReport(
        selection=selection.model_copy(),
        score=score,
        narrative=narrative,
        narrative_html=narrative.to_html(),
        consortium=consortium,
        heatmap=build_heatmap(),
    )
