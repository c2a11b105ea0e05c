# questionnaire/rules/messages.py
from typing import Dict, Optional

from questionnaire.schemas.question import AnswerOption, Question

GENERIC_DISQUALIFIER_TEMPLATE = "Absolutely not. {label} is a deal-breaker."
FALLBACK_MESSAGE = "Unable to determine compatibility. Please review your answers."

# Headline shown above the summary panel for each non-immediate verdict
VERDICT_TITLES = {
    "approved": "Approved",
    "conditional": "Conditional Approval",
    "rejected": "Rejected",
}


def check_template(template: str) -> str:
    """
    Disqualifier templates may only reference {label} (the selected option)
    and {question} (the question text). Raises ValueError otherwise.
    """
    try:
        template.format(label="", question="")
    except (KeyError, IndexError, ValueError) as e:
        raise ValueError(f"Invalid disqualifier template {template!r}: {e!r}") from e
    return template


def render_disqualifier(
    question: Question,
    option: AnswerOption,
    templates: Optional[Dict[str, str]] = None,
) -> str:
    template = (templates or {}).get(question.id, GENERIC_DISQUALIFIER_TEMPLATE)
    return template.format(label=option.label, question=question.text)
