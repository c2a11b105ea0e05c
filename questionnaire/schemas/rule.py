from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional

Verdict = Literal["approved", "conditional", "rejected", "immediate_no"]


class RuleCondition(BaseModel):
    """
    Matches one question's answer. Exactly one matcher is expected:
    value (exact), has_tag (tag membership) or min_score/max_score
    (range over the selected option's weight). With none set the
    condition never matches.
    """
    model_config = ConfigDict(frozen=True)

    question_id: str
    value: Optional[str] = None
    has_tag: Optional[str] = None
    min_score: Optional[float] = None
    max_score: Optional[float] = None

    def is_noop(self) -> bool:
        return (
            self.value is None
            and self.has_tag is None
            and self.min_score is None
            and self.max_score is None
        )


class EvaluationRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    description: str = ""
    # All conditions must hold; an empty list always holds
    conditions: List[RuleCondition] = Field(default_factory=list)
    verdict: Verdict
    message: str
    # Higher priority rules are evaluated first
    priority: float = 0
    # Aggregate score bounds, both inclusive
    min_score: Optional[float] = None
    max_score: Optional[float] = None
