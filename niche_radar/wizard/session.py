"""
Wizard session: the questionnaire's step machine.

One ``WizardSession`` per user run; there is no module-level state.

Phases::

    intro ──start()──▶ question (steps 1..4) ──select() × 4──▶ results
      ▲                                                            │
      └───────────────────────────── reset() ◀────────────────────┘

``select()`` records the answer immediately, then waits ``step_delay_ms``
before advancing (a pacing pause so the user sees the choice register).
Only one selection can be pending at a time; the delay cannot be cancelled,
but ``reset()`` is unconditional and is always allowed.

Usage::

    session = WizardSession(step_delay_ms=0)
    session.start()
    for value in ("corporate_ma", "medium", "mixed", "standard"):
        report = asyncio.run(session.select(value))
"""

from __future__ import annotations

import asyncio
import logging
from enum import StrEnum
from typing import Optional

from niche_radar.models.result import AssessmentReport
from niche_radar.models.selection import SelectionLockedError, SelectionSet
from niche_radar.scoring.assessment import build_assessment
from niche_radar.wizard.steps import STEPS, TOTAL_STEPS, Step

logger = logging.getLogger(__name__)


class WizardStateError(RuntimeError):
    """Raised when a session operation is not valid in the current phase."""


class Phase(StrEnum):
    INTRO = "intro"
    QUESTION = "question"
    RESULTS = "results"


class WizardSession:
    """State of one questionnaire run.

    Attributes:
        step_delay_ms: Pause between a selection and the next step.
        selection:     Answers collected so far.
        current_step:  0 on the intro screen, 1..4 while answering.
        phase:         Current ``Phase``.
        result:        The assessment, once step 4 has been answered.
    """

    def __init__(self, step_delay_ms: int = 400) -> None:
        if step_delay_ms < 0:
            raise ValueError(f"step_delay_ms must be >= 0, got {step_delay_ms}.")
        self.step_delay_ms = step_delay_ms
        self.selection = SelectionSet()
        self.current_step = 0
        self.phase = Phase.INTRO
        self.result: Optional[AssessmentReport] = None
        self._pending = False
        self._run_id = 0

    @property
    def current(self) -> Step | None:
        """The step being asked, or ``None`` outside the question phase."""
        if self.phase is not Phase.QUESTION:
            return None
        return STEPS[self.current_step - 1]

    @property
    def pending(self) -> bool:
        return self._pending

    def start(self) -> Step:
        """Leave the intro screen and show step 1."""
        if self.phase is not Phase.INTRO:
            raise WizardStateError(f"Cannot start from phase '{self.phase}'.")
        self._advance()
        return STEPS[0]

    async def select(self, value: str) -> Optional[AssessmentReport]:
        """Answer the current step.

        Returns:
            The ``AssessmentReport`` after the final step; ``None`` otherwise.

        Raises:
            WizardStateError: Outside the question phase, while another
                selection is still pending, or when the current step's field
                already holds an answer.
            InvalidInputError: From scoring, if a recorded ``spec`` or
                ``size`` is not a known value.  No result is stored and the
                session stays on the final step; call ``reset()`` to continue.
        """
        step = self.current
        if step is None:
            raise WizardStateError(f"No question is active (phase '{self.phase}').")
        if self._pending:
            raise WizardStateError("A selection is already pending.")

        try:
            self.selection.set(step.category, value)
        except SelectionLockedError as exc:
            raise WizardStateError(
                f"Step {self.current_step} ('{exc.field}') is already answered; reset first."
            ) from exc
        logger.debug("Step %d/%d | %s=%s", self.current_step, TOTAL_STEPS, step.category, value)

        self._pending = True
        run_id = self._run_id
        try:
            await asyncio.sleep(self.step_delay_ms / 1000.0)
        finally:
            # A reset during the delay may have handed the flag to a newer run.
            if run_id == self._run_id:
                self._pending = False

        if run_id != self._run_id:
            # Reset while waiting; the answer belongs to a discarded run.
            return None

        if self.current_step < TOTAL_STEPS:
            self._advance()
            return None
        return self._finish()

    def reset(self) -> None:
        """Discard all answers and return to the intro screen."""
        self.selection.reset()
        self.current_step = 0
        self.phase = Phase.INTRO
        self.result = None
        self._pending = False
        self._run_id += 1
        logger.debug("Session reset")

    # ── Internals ─────────────────────────────────────────────────────────────

    def _advance(self) -> None:
        self.current_step += 1
        self.phase = Phase.QUESTION

    def _finish(self) -> AssessmentReport:
        self.result = build_assessment(self.selection)
        self.phase = Phase.RESULTS
        return self.result
