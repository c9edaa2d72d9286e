"""
Test fixtures shared across all Risk Check tests.
"""

import pytest

from riskcheck.core.catalog import QUESTIONS
from riskcheck.models.quiz_models import Answer, AnswerValue


def safe_value(question):
    """The definite answer that is NOT a risk for this question."""
    return AnswerValue.from_bool(not question.risk_answer)


def risk_value(question):
    return AnswerValue.from_bool(question.risk_answer)


@pytest.fixture
def safe_answers():
    """Every catalog question answered with its non-risk value."""
    return [Answer(question_id=q.id, value=safe_value(q)) for q in QUESTIONS]


@pytest.fixture
def risky_answers():
    """Every catalog question answered with its risk value."""
    return [Answer(question_id=q.id, value=risk_value(q)) for q in QUESTIONS]


@pytest.fixture
def answers_with_unknowns(safe_answers):
    """Build a safe answer set where the given question ids are 'unknown'."""
    def _build(*unknown_ids):
        return [
            Answer(question_id=a.question_id, value=AnswerValue.UNKNOWN)
            if a.question_id in unknown_ids else a
            for a in safe_answers
        ]
    return _build


@pytest.fixture
def sample_lead_payload():
    return {
        "form_type": "contact-form",
        "name": "Max Mustermann",
        "email": "max@example.com",
        "phone": "+49 89 123456",
        "plz": "80331",
        "screen_width": 1920,
        "screen_height": 1080,
        "platform": "MacIntel",
        "additional_data": {"riskScore": 72},
    }
