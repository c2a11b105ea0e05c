from dotenv import load_dotenv
from pydantic import BaseModel
import os

load_dotenv()


class Settings(BaseModel):
    # JSON file holding questions, rules and disqualifier messages.
    # Empty means the built-in questionnaire.
    QUESTIONNAIRE_CONFIG_PATH: str = os.getenv("QUESTIONNAIRE_CONFIG_PATH", "")

settings = Settings()
