# questionnaire/session.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from questionnaire.rules.messages import VERDICT_TITLES
from questionnaire.rules.rule_engine import QuestionnaireEvaluator
from questionnaire.schemas.response import EvaluationResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DisplayState:
    """What the form should show after the latest answer change."""
    result: Optional[EvaluationResult] = None
    show_overlay: bool = False
    show_summary: bool = False
    summary_title: Optional[str] = None


class FormSession:
    """
    Answer map plus the display state derived from it.

    Every change goes answer update -> re-evaluate -> derive display state.
    Disqualifiers are surfaced as soon as they are selected; any other verdict
    only once every question has an answer. A dismissed overlay stays hidden
    until a disqualifier with a different message comes up.
    """

    def __init__(self, evaluator: QuestionnaireEvaluator):
        self.evaluator = evaluator
        self._answers: Dict[str, str] = {}
        self._dismissed_message: Optional[str] = None
        self.state = DisplayState()

    @property
    def answers(self) -> Dict[str, str]:
        return dict(self._answers)

    def set_answer(self, question_id: str, value: str) -> DisplayState:
        answers = dict(self._answers)
        answers[question_id] = value
        self._answers = answers
        self.state = self._derive_state()
        return self.state

    def dismiss_overlay(self) -> DisplayState:
        result = self.state.result
        if result is not None and result.is_immediate:
            self._dismissed_message = result.message
            self.state = self._derive_state()
        return self.state

    def reset(self) -> DisplayState:
        self._answers = {}
        self._dismissed_message = None
        self.state = DisplayState()
        return self.state

    def current_result(self) -> Optional[EvaluationResult]:
        if not self._answers:
            return None

        result = self.evaluator.evaluate(self._answers)
        if result.is_immediate or self.evaluator.is_complete(self._answers):
            return result
        return None

    def _derive_state(self) -> DisplayState:
        result = self.current_result()
        if result is None:
            return DisplayState()

        if result.is_immediate:
            show = result.message != self._dismissed_message
            if show:
                logger.debug("Showing disqualifier overlay: %s", result.message)
            return DisplayState(result=result, show_overlay=show)

        return DisplayState(
            result=result,
            show_summary=True,
            summary_title=VERDICT_TITLES.get(result.verdict),
        )
