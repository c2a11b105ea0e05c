# questionnaire/core/loader.py
import logging
from pathlib import Path
from typing import Optional

from questionnaire.catalog.default import DEFAULT_QUESTIONNAIRE
from questionnaire.core.config import settings
from questionnaire.rules.rule_engine import QuestionnaireEvaluator
from questionnaire.schemas.questionnaire import QuestionnaireConfig

logger = logging.getLogger(__name__)


def load_questionnaire(path: Optional[str] = None) -> QuestionnaireConfig:
    """
    Loads the questionnaire from `path`, else from QUESTIONNAIRE_CONFIG_PATH,
    else returns the built-in one. Raises FileNotFoundError for a missing
    file, ValueError for an unsupported format and pydantic's
    ValidationError for malformed content.
    """
    path = path or settings.QUESTIONNAIRE_CONFIG_PATH
    if not path:
        return DEFAULT_QUESTIONNAIRE

    p = Path(path)
    if p.suffix.lower() != ".json":
        raise ValueError(f"Unsupported questionnaire config format: {path}")
    if not p.is_file():
        raise FileNotFoundError(f"Questionnaire config not found: {path}")

    config = QuestionnaireConfig.model_validate_json(p.read_text(encoding="utf-8"))
    logger.info(
        "Loaded %d questions and %d rules from %s",
        len(config.questions), len(config.rules), path,
    )
    return config


def build_evaluator(config: Optional[QuestionnaireConfig] = None) -> QuestionnaireEvaluator:
    return QuestionnaireEvaluator.from_config(config or load_questionnaire())
