import pytest

from questionnaire.session import DisplayState, FormSession


@pytest.fixture
def session(evaluator):
    return FormSession(evaluator)


def _answer_all(session, **answers):
    state = None
    for qid, value in answers.items():
        state = session.set_answer(qid, value)
    return state


def test_nothing_shown_while_incomplete(session):
    state = session.set_answer("football_team", "steelers")

    assert state == DisplayState()
    assert state.result is None


def test_summary_shown_once_complete(session):
    state = _answer_all(
        session,
        football_team="steelers",
        pineapple_pizza="no",
        ketchup_hotdog="no",
        lutheran="yes",
    )

    assert state.show_summary is True
    assert state.show_overlay is False
    assert state.summary_title == "Approved"
    assert state.result.score == 100


def test_disqualifier_overlay_shown_before_completion(session):
    state = session.set_answer("football_team", "browns")

    assert state.show_overlay is True
    assert state.show_summary is False
    assert state.result.is_immediate is True


def test_dismissed_overlay_is_not_reannounced(session):
    session.set_answer("football_team", "browns")
    state = session.dismiss_overlay()
    assert state.show_overlay is False
    assert state.result.is_immediate is True

    # Same disqualifier after further answers stays dismissed
    state = session.set_answer("ketchup_hotdog", "no")
    assert state.show_overlay is False

    # A different disqualifier message brings the overlay back
    state = session.set_answer("football_team", "ravens")
    assert state.show_overlay is True
    assert "Baltimore Ravens" in state.result.message


def test_recovering_from_disqualifier(session):
    session.set_answer("pineapple_pizza", "yes")
    session.dismiss_overlay()

    state = _answer_all(
        session,
        pineapple_pizza="no",
        football_team="packers",
        ketchup_hotdog="yes",
        lutheran="no",
    )
    assert state.show_summary is True
    assert state.summary_title == "Rejected"


def test_dismiss_without_overlay_is_a_noop(session):
    state = session.dismiss_overlay()
    assert state == DisplayState()


def test_answers_are_copied(session):
    session.set_answer("football_team", "steelers")
    answers = session.answers
    answers["football_team"] = "browns"

    assert session.answers == {"football_team": "steelers"}


def test_reset(session):
    session.set_answer("football_team", "browns")
    session.dismiss_overlay()

    assert session.reset() == DisplayState()
    assert session.answers == {}
    assert session.set_answer("football_team", "browns").show_overlay is True


def test_complete_answers_evaluated_once_per_change(session, monkeypatch):
    _answer_all(session, football_team="steelers", pineapple_pizza="no", ketchup_hotdog="no")

    calls = []
    evaluate = session.evaluator.evaluate

    def counting_evaluate(answers):
        calls.append(dict(answers))
        return evaluate(answers)

    monkeypatch.setattr(session.evaluator, "evaluate", counting_evaluate)
    state = session.set_answer("lutheran", "no")

    assert state.summary_title == "Approved"
    assert len(calls) == 1
