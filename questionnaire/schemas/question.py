from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import List, Literal

# "select" is a dropdown, "radio" an exclusive group of options
QuestionType = Literal["select", "radio"]


class AnswerOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    label: str
    weight: int = 0
    # Forces an immediate_no verdict regardless of weight or other answers
    immediate_disqualifier: bool = False
    tags: List[str] = Field(default_factory=list)


class Question(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    type: QuestionType
    options: List[AnswerOption] = Field(min_length=1)

    @model_validator(mode="after")
    def _unique_option_values(self):
        seen = set()
        for opt in self.options:
            if opt.value in seen:
                raise ValueError(f"Duplicate option value '{opt.value}' in question '{self.id}'.")
            seen.add(opt.value)
        return self

    def find_option(self, value: str):
        for opt in self.options:
            if opt.value == value:
                return opt
        return None
