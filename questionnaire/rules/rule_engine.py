# questionnaire/rules/rule_engine.py
import logging
from typing import Dict, List, Mapping, Optional, Sequence

from questionnaire.rules.messages import (
    FALLBACK_MESSAGE,
    check_template,
    render_disqualifier,
)
from questionnaire.schemas.question import AnswerOption, Question
from questionnaire.schemas.questionnaire import QuestionnaireConfig
from questionnaire.schemas.response import DISQUALIFIED_SCORE, EvaluationResult
from questionnaire.schemas.rule import EvaluationRule, RuleCondition

logger = logging.getLogger(__name__)


class QuestionnaireEvaluator:
    """
    Deterministic evaluation of an answer map against a question catalog and
    an ordered rule set. Safe to call repeatedly; holds no per-call state.
    """

    def __init__(
        self,
        questions: Sequence[Question],
        rules: Sequence[EvaluationRule],
        disqualifier_messages: Optional[Mapping[str, str]] = None,
    ):
        self.questions: List[Question] = list(questions)
        question_ids = [q.id for q in self.questions]
        dupes = sorted({qid for qid in question_ids if question_ids.count(qid) > 1})
        if dupes:
            raise ValueError(f"Duplicate question ids: {', '.join(dupes)}")
        self._by_id: Dict[str, Question] = {q.id: q for q in self.questions}

        # Stable: equal priorities keep their authored order
        self.rules: List[EvaluationRule] = sorted(rules, key=lambda r: r.priority, reverse=True)

        self.disqualifier_messages: Dict[str, str] = {
            qid: check_template(t) for qid, t in (disqualifier_messages or {}).items()
        }

        for rule in self.rules:
            for cond in rule.conditions:
                if cond.is_noop():
                    logger.warning(
                        "Rule '%s' has a condition on '%s' with no matcher; it will never match.",
                        rule.id, cond.question_id,
                    )

    @classmethod
    def from_config(cls, config: QuestionnaireConfig) -> "QuestionnaireEvaluator":
        return cls(config.questions, config.rules, config.disqualifier_messages)

    def _selected_option(self, question_id: str, answer: str) -> Optional[AnswerOption]:
        question = self._by_id.get(question_id)
        if question is None:
            return None
        return question.find_option(answer)

    def check_immediate_disqualifiers(self, answers: Mapping[str, str]) -> Optional[EvaluationResult]:
        for question in self.questions:
            answer = answers.get(question.id)
            if not answer:
                continue

            option = question.find_option(answer)
            if option is not None and option.immediate_disqualifier:
                logger.debug("Immediate disqualifier: %s=%s", question.id, answer)
                return EvaluationResult(
                    verdict="immediate_no",
                    message=render_disqualifier(question, option, self.disqualifier_messages),
                    is_immediate=True,
                    score=DISQUALIFIED_SCORE,
                )

        return None

    def get_answer_tags(self, question_id: str, answer: str) -> List[str]:
        option = self._selected_option(question_id, answer)
        return list(option.tags) if option is not None else []

    def get_answer_weight(self, question_id: str, answer: str) -> int:
        option = self._selected_option(question_id, answer)
        return option.weight if option is not None else 0

    def calculate_score(self, answers: Mapping[str, str]) -> int:
        total = 0
        for question in self.questions:
            answer = answers.get(question.id)
            if answer:
                total += self.get_answer_weight(question.id, answer)
        return total

    def is_condition_met(self, condition: RuleCondition, answers: Mapping[str, str]) -> bool:
        answer = answers.get(condition.question_id)
        # Unanswered questions never satisfy a condition, not even a negative max_score
        if not answer:
            return False

        if condition.value is not None:
            return answer == condition.value

        if condition.has_tag is not None:
            return condition.has_tag in self.get_answer_tags(condition.question_id, answer)

        if condition.min_score is not None or condition.max_score is not None:
            weight = self.get_answer_weight(condition.question_id, answer)
            if condition.min_score is not None and weight < condition.min_score:
                return False
            if condition.max_score is not None and weight > condition.max_score:
                return False
            return True

        return False

    def does_rule_apply(self, rule: EvaluationRule, score: float, answers: Mapping[str, str]) -> bool:
        if rule.min_score is not None and score < rule.min_score:
            return False
        if rule.max_score is not None and score > rule.max_score:
            return False
        return all(self.is_condition_met(c, answers) for c in rule.conditions)

    def evaluate(self, answers: Mapping[str, str]) -> EvaluationResult:
        immediate = self.check_immediate_disqualifiers(answers)
        if immediate is not None:
            return immediate

        score = self.calculate_score(answers)

        for rule in self.rules:
            if self.does_rule_apply(rule, score, answers):
                logger.debug("Rule '%s' matched at score %s", rule.id, score)
                return EvaluationResult(
                    verdict=rule.verdict,
                    message=rule.message,
                    is_immediate=rule.verdict == "immediate_no",
                    score=score,
                )

        # Only reachable when the rule set has no catch-all
        logger.warning("No rule matched score %s; returning fallback verdict.", score)
        return EvaluationResult(
            verdict="conditional",
            message=FALLBACK_MESSAGE,
            is_immediate=False,
            score=score,
        )

    def is_complete(self, answers: Mapping[str, str]) -> bool:
        return all(answers.get(q.id) for q in self.questions)
