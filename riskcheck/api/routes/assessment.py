"""
Assessment Routes — GET /questions, POST /assessment

Serves the question catalog to the quiz UI and scores completed quizzes.
The postal code travels either as `plz` or as the synthetic `plz_input`
answer; the scoring engine ignores that answer either way.
"""

from __future__ import annotations

import logging
import re

from fastapi import APIRouter
from pydantic import BaseModel, Field

from riskcheck.core.catalog import PLZ_ANSWER_ID, QUESTIONS
from riskcheck.core.region import get_crime_stats
from riskcheck.core.risk_scorer import calculate_score
from riskcheck.models.quiz_models import CATEGORY_LABELS, Answer, Category, Question
from riskcheck.models.region_models import CrimeStats
from riskcheck.models.result_models import ScoringResult

logger = logging.getLogger("riskcheck.api.assessment")

PLZ_PATTERN = r"^[0-9]{5}$"
_PLZ_RE = re.compile(PLZ_PATTERN)

router = APIRouter()


class CatalogResponse(BaseModel):
    questions: list[Question]
    categories: dict[Category, str]


class AssessmentRequest(BaseModel):
    answers: list[Answer] = Field(default_factory=list)
    plz: str | None = Field(default=None, pattern=PLZ_PATTERN)


class AssessmentResponse(BaseModel):
    result: ScoringResult
    region: CrimeStats | None = None


@router.get("/questions", response_model=CatalogResponse)
async def list_questions():
    """The quiz catalog in display order."""
    return CatalogResponse(questions=list(QUESTIONS), categories=CATEGORY_LABELS)


@router.post("/assessment", response_model=AssessmentResponse)
async def assess(request: AssessmentRequest):
    """Score a completed quiz and attach the regional statistics."""
    result = calculate_score(request.answers)

    plz = request.plz or _plz_from_answers(request.answers)
    region = None
    if plz:
        result = result.model_copy(update={"plz": plz})
        region = get_crime_stats(plz)

    logger.info(
        f"Assessment scored {result.total_score}/100 ({result.risk_level.value}) "
        f"from {len(request.answers)} answers"
    )
    return AssessmentResponse(result=result, region=region)


def _plz_from_answers(answers: list[Answer]) -> str | None:
    """The most recent well-formed postal code given as a `plz_input` answer."""
    for a in reversed(answers):
        if a.question_id == PLZ_ANSWER_ID and a.extra and _PLZ_RE.fullmatch(a.extra):
            return a.extra
    return None
