"""
Shared pytest fixtures for the niche-radar test suite.

Provides:
  - ``make_selection``: factory for ``SelectionSet`` instances with sensible
    defaults (corporate_ma / medium / mixed / standard).
  - ``complete_selection``: one such instance.
  - ``session``: a ``WizardSession`` with no step delay.
  - ``run_wizard``: drives a session through all four answers.
"""

from __future__ import annotations

import asyncio
from typing import Callable

import pytest

from niche_radar.models.result import AssessmentReport
from niche_radar.models.selection import SelectionSet
from niche_radar.wizard.session import WizardSession


@pytest.fixture
def make_selection() -> Callable[..., SelectionSet]:
    def _make(
        spec: str | None = "corporate_ma",
        size: str | None = "medium",
        intl: str | None = "mixed",
        pricing: str | None = "standard",
    ) -> SelectionSet:
        return SelectionSet(spec=spec, size=size, intl=intl, pricing=pricing)

    return _make


@pytest.fixture
def complete_selection(make_selection) -> SelectionSet:
    return make_selection()


@pytest.fixture
def session() -> WizardSession:
    """A fresh session that advances immediately after each answer."""
    return WizardSession(step_delay_ms=0)


@pytest.fixture
def run_wizard() -> Callable[[WizardSession, list[str]], AssessmentReport | None]:
    """Start ``session`` if needed and answer every value in order.

    Returns the value of the last ``select()`` call.
    """

    def _run(session: WizardSession, answers: list[str]) -> AssessmentReport | None:
        if session.current_step == 0:
            session.start()
        result = None
        for value in answers:
            result = asyncio.run(session.select(value))
        return result

    return _run
