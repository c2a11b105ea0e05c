from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Dict, List

from questionnaire.rules.messages import check_template
from questionnaire.schemas.question import Question
from questionnaire.schemas.rule import EvaluationRule


class QuestionnaireConfig(BaseModel):
    """
    Everything the evaluator needs: the question catalog, the rule set and
    optional per-question disqualifier message templates.
    """
    model_config = ConfigDict(frozen=True)

    questions: List[Question] = Field(min_length=1)
    rules: List[EvaluationRule] = Field(default_factory=list)
    disqualifier_messages: Dict[str, str] = Field(default_factory=dict)

    @field_validator("disqualifier_messages")
    @classmethod
    def _check_templates(cls, v: Dict[str, str]) -> Dict[str, str]:
        for template in v.values():
            check_template(template)
        return v

    @model_validator(mode="after")
    def _unique_ids(self):
        question_ids = [q.id for q in self.questions]
        dupes = sorted({qid for qid in question_ids if question_ids.count(qid) > 1})
        if dupes:
            raise ValueError(f"Duplicate question ids: {', '.join(dupes)}")

        rule_ids = [r.id for r in self.rules]
        dupes = sorted({rid for rid in rule_ids if rule_ids.count(rid) > 1})
        if dupes:
            raise ValueError(f"Duplicate rule ids: {', '.join(dupes)}")
        return self
