import pytest

from questionnaire.catalog.default import DEFAULT_QUESTIONNAIRE
from questionnaire.rules.rule_engine import QuestionnaireEvaluator
from questionnaire.schemas.rule import EvaluationRule


@pytest.fixture
def evaluator():
    return QuestionnaireEvaluator.from_config(DEFAULT_QUESTIONNAIRE)


@pytest.fixture
def make_evaluator():
    """Evaluator over the default catalog with a custom rule set."""
    def _make(rules):
        parsed = [r if isinstance(r, EvaluationRule) else EvaluationRule(**r) for r in rules]
        return QuestionnaireEvaluator(
            DEFAULT_QUESTIONNAIRE.questions,
            parsed,
            DEFAULT_QUESTIONNAIRE.disqualifier_messages,
        )
    return _make


@pytest.fixture
def full_answers():
    return {
        "football_team": "steelers",
        "pineapple_pizza": "no",
        "ketchup_hotdog": "no",
        "lutheran": "no",
    }
