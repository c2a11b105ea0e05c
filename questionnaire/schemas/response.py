from pydantic import BaseModel, ConfigDict

from questionnaire.schemas.rule import Verdict

# Score reported for an immediate disqualification ("worst possible")
DISQUALIFIED_SCORE = float("-inf")


class EvaluationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    verdict: Verdict
    message: str
    is_immediate: bool
    score: float
