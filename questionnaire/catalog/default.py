"""
Built-in questionnaire: "Who can my daughter date?"

Weight system (out of 100 points):
- Steelers: +40, most teams: 0, Browns/Ravens/Bengals: immediate disqualifier
- Pineapple NO: +25, neutral: 0, YES: immediate disqualifier
- Ketchup NO: +25, neutral: 0, YES: -35
- Lutheran YES: +10, NO: 0

Score bands used by the rules:
- 60+ with the Steelers: approved
- 30-59: conditional
- 0-29: needs major improvement
- below 0: rejected
"""

from questionnaire.schemas.question import AnswerOption, Question
from questionnaire.schemas.questionnaire import QuestionnaireConfig
from questionnaire.schemas.rule import EvaluationRule, RuleCondition

_TEAMS = [
    ("", "Select a team...", 0),
    ("cardinals", "Arizona Cardinals", 0),
    ("falcons", "Atlanta Falcons", 0),
    ("ravens", "Baltimore Ravens", -100),
    ("bills", "Buffalo Bills", 0),
    ("panthers", "Carolina Panthers", 0),
    ("bears", "Chicago Bears", 0),
    ("bengals", "Cincinnati Bengals", -100),
    ("browns", "Cleveland Browns", -100),
    ("cowboys", "Dallas Cowboys", 0),
    ("broncos", "Denver Broncos", 0),
    ("lions", "Detroit Lions", 0),
    ("packers", "Green Bay Packers", 0),
    ("texans", "Houston Texans", 0),
    ("colts", "Indianapolis Colts", 0),
    ("jaguars", "Jacksonville Jaguars", 0),
    ("chiefs", "Kansas City Chiefs", 0),
    ("raiders", "Las Vegas Raiders", 0),
    ("chargers", "Los Angeles Chargers", 0),
    ("rams", "Los Angeles Rams", 0),
    ("dolphins", "Miami Dolphins", 0),
    ("vikings", "Minnesota Vikings", 0),
    ("patriots", "New England Patriots", 0),
    ("saints", "New Orleans Saints", 0),
    ("giants", "New York Giants", 0),
    ("jets", "New York Jets", 0),
    ("eagles", "Philadelphia Eagles", 0),
    ("steelers", "Pittsburgh Steelers", 40),
    ("49ers", "San Francisco 49ers", 0),
    ("seahawks", "Seattle Seahawks", 0),
    ("buccaneers", "Tampa Bay Buccaneers", 0),
    ("titans", "Tennessee Titans", 0),
    ("commanders", "Washington Commanders", 0),
]


DIVISION_RIVALS = {"ravens", "bengals", "browns"}


def _team_option(value: str, label: str, weight: int) -> AnswerOption:
    tags = [value] if value == "steelers" else []
    return AnswerOption(
        value=value,
        label=label,
        weight=weight,
        immediate_disqualifier=value in DIVISION_RIVALS,
        tags=tags,
    )


NFL_TEAMS = [_team_option(*t) for t in _TEAMS]

QUESTIONS = [
    Question(
        id="football_team",
        text="Their football team is",
        type="select",
        options=NFL_TEAMS,
    ),
    Question(
        id="pineapple_pizza",
        text="Pineapple belongs on pizza",
        type="radio",
        options=[
            AnswerOption(value="yes", label="Yes", weight=-100,
                         immediate_disqualifier=True, tags=["pineapple-yes"]),
            AnswerOption(value="no", label="No", weight=25, tags=["pineapple-no"]),
            AnswerOption(value="can-live-without", label="I can live with never having it again",
                         weight=0, tags=["pineapple-neutral"]),
        ],
    ),
    Question(
        id="ketchup_hotdog",
        text="Ketchup belongs on a hot dog",
        type="radio",
        options=[
            AnswerOption(value="yes", label="Yes", weight=-35, tags=["ketchup-yes"]),
            AnswerOption(value="no", label="No", weight=25, tags=["ketchup-no"]),
            AnswerOption(value="can-live-without", label="I can live with never having it again",
                         weight=0, tags=["ketchup-neutral"]),
        ],
    ),
    Question(
        id="lutheran",
        text="Are they Lutheran?",
        type="radio",
        options=[
            AnswerOption(value="yes", label="Yes", weight=10, tags=["lutheran"]),
            AnswerOption(value="no", label="No", weight=0, tags=["not-lutheran"]),
        ],
    ),
]

DISQUALIFIER_MESSAGES = {
    "football_team": "Absolutely not. Being a {label} fan is a fundamental character flaw.",
    "pineapple_pizza": "Absolutely not. Putting pineapple on pizza shows a catastrophic lack of judgment.",
}

# Hand-ordered most specific first; equal priorities keep this order
RULES = [
    EvaluationRule(
        id="perfect-match",
        description="Perfect Lutheran Steelers fan",
        conditions=[
            RuleCondition(question_id="football_team", value="steelers"),
            RuleCondition(question_id="pineapple_pizza", value="no"),
            RuleCondition(question_id="ketchup_hotdog", value="no"),
            RuleCondition(question_id="lutheran", value="yes"),
        ],
        verdict="approved",
        message="Outstanding! As a Lutheran Steelers fan with impeccable food opinions, "
                "they have my highest approval!",
        priority=100,
    ),
    EvaluationRule(
        id="excellent-steelers",
        description="Steelers fan with excellent food opinions",
        conditions=[
            RuleCondition(question_id="football_team", value="steelers"),
            RuleCondition(question_id="pineapple_pizza", value="no"),
            RuleCondition(question_id="ketchup_hotdog", value="no"),
        ],
        verdict="approved",
        message="As a Steelers fan with impeccable food opinions, they have my strong approval!",
        priority=95,
    ),
    EvaluationRule(
        id="good-steelers",
        description="Steelers fan with good taste",
        # 40 points on the team question means the Steelers
        conditions=[RuleCondition(question_id="football_team", min_score=40)],
        min_score=60,
        verdict="approved",
        message="As a Steelers fan with good taste, they stand a strong chance at approval.",
        priority=90,
    ),
    EvaluationRule(
        id="good-food-opinions",
        description="Excellent food opinions compensate for team choice",
        conditions=[
            RuleCondition(question_id="pineapple_pizza", value="no"),
            RuleCondition(question_id="ketchup_hotdog", value="no"),
        ],
        min_score=50,
        verdict="conditional",
        message="They have excellent food opinions, which is redeeming. The team choice could be better.",
        priority=60,
    ),
    EvaluationRule(
        id="acceptable-score",
        description="Acceptable score but room for improvement",
        min_score=30,
        max_score=59,
        verdict="conditional",
        message="They have some redeeming qualities, but need to make improvements "
                "to be a strong candidate.",
        priority=50,
    ),
    EvaluationRule(
        id="low-score",
        description="Low score - needs improvement",
        min_score=0,
        max_score=29,
        verdict="conditional",
        message="Significant concerns about their choices. Major improvements needed to be considered.",
        priority=45,
    ),
    EvaluationRule(
        id="negative-score",
        description="Below acceptable threshold",
        max_score=-1,
        verdict="rejected",
        message="Their questionable life choices (especially regarding hot dog condiments) "
                "are concerning. Major changes needed.",
        priority=40,
    ),
    EvaluationRule(
        id="default-fallback",
        description="Catch-all",
        verdict="conditional",
        message="Evaluation complete. Review their answers carefully.",
        priority=1,
    ),
]

DEFAULT_QUESTIONNAIRE = QuestionnaireConfig(
    questions=QUESTIONS,
    rules=RULES,
    disqualifier_messages=DISQUALIFIER_MESSAGES,
)
