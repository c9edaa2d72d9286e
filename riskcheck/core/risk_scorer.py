"""
Risk Scoring Engine — Computes the home-security risk score from quiz answers.

Risk Score = (Σ risk weights + compound penalties + uncertainty penalty)
             / Σ possible weights × 100, capped at 100

Penalties raise the numerator only, so they can push a score to the cap
on their own. The engine is pure: no I/O, no shared mutable state, and
it never raises for any list of answers.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from riskcheck.core.catalog import QUESTIONS, SECURITY_CHECK_URL
from riskcheck.core.combinations import RISK_COMBINATIONS, combination_fires, is_risk
from riskcheck.models.quiz_models import (
    Answer,
    AnswerValue,
    Category,
    Question,
    RiskCombination,
)
from riskcheck.models.result_models import RiskLevel, ScoringResult

HIGH_RISK_WEIGHT = 4
UNCERTAINTY_THRESHOLD = 2
UNCERTAINTY_POINTS_PER_UNKNOWN = 2
UNCERTAINTY_FINDING_WEIGHT = 6
MAX_TOP_RISKS = 5

CRITICAL_THRESHOLD = 65
MEDIUM_THRESHOLD = 35


class _Tally:
    __slots__ = ("current", "total")

    def __init__(self) -> None:
        self.current = 0
        self.total = 0

    def score(self) -> int:
        if self.total <= 0:
            return 0
        return min(100, _round_half_up(self.current / self.total * 100))


def calculate_score(
    answers: Iterable[Answer],
    questions: Sequence[Question] = QUESTIONS,
    combinations: Sequence[RiskCombination] = RISK_COMBINATIONS,
) -> ScoringResult:
    """
    Score a completed quiz.

    Args:
        answers: Submitted answers in any order. For duplicate question ids
            the last answer wins. Ids without a catalog question (such as
            the postal-code entry) are ignored.
        questions: Question catalog; defaults to the built-in one.
        combinations: Compound risk rules; defaults to the built-in ones.

    Returns:
        ScoringResult with total score, risk level, per-category scores
        and up to five findings ordered by descending weight.
    """
    answers_by_id: dict[str, Answer] = {}
    for a in answers:
        answers_by_id[a.question_id] = a
    questions_by_id = {q.id: q for q in questions}

    overall = _Tally()
    categories: dict[Category, _Tally] = {c: _Tally() for c in Category}
    candidates: list[Question] = []
    unknown_count = 0

    # 1. Base pass
    for q in questions:
        overall.total += q.weight
        categories[q.category].total += q.weight

        answer = answers_by_id.get(q.id)
        if answer is not None and answer.value is AnswerValue.UNKNOWN:
            unknown_count += 1

        if not is_risk(q, answer):
            continue

        overall.current += q.weight
        categories[q.category].current += q.weight
        if q.weight >= HIGH_RISK_WEIGHT:
            candidates.append(q)

    # 2. Compound risk penalties
    for combo in combinations:
        if not combination_fires(combo, answers_by_id, questions_by_id):
            continue
        overall.current += combo.weight_penalty
        categories[combo.category].current += combo.weight_penalty
        candidates.append(combo.as_finding())

    # 3. Uncertainty penalty
    if unknown_count > UNCERTAINTY_THRESHOLD:
        penalty = unknown_count * UNCERTAINTY_POINTS_PER_UNKNOWN
        overall.current += penalty
        categories[Category.ORGANIZATION].current += penalty
        candidates.append(_uncertainty_finding(unknown_count))

    # 4. Normalize
    total_score = overall.score()

    # sorted() is stable: equal weights keep accumulation order
    top_risks = sorted(candidates, key=lambda f: f.weight, reverse=True)[:MAX_TOP_RISKS]

    return ScoringResult(
        total_score=total_score,
        risk_level=risk_level_for(total_score),
        category_scores={c: t.score() for c, t in categories.items()},
        top_risks=top_risks,
    )


def risk_level_for(score: int) -> RiskLevel:
    """Map a 0-100 score to its verbal risk level."""
    if score >= CRITICAL_THRESHOLD:
        return RiskLevel.CRITICAL
    elif score >= MEDIUM_THRESHOLD:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def _uncertainty_finding(unknown_count: int) -> Question:
    return Question(
        id="uncertainty_penalty",
        category=Category.ORGANIZATION,
        text="Unklarer Sicherheitsstatus",
        subtext=f'Sie haben {unknown_count} Fragen mit "Weiß nicht" beantwortet.',
        weight=UNCERTAINTY_FINDING_WEIGHT,
        risk_answer=True,
        recommendation=(
            "Unwissenheit schützt nicht vor Schaden. Eine professionelle "
            "Bestandsaufnahme ist dringend ratsam."
        ),
        product_match="Kostenloser Sicherheits-Check vor Ort",
        product_url=SECURITY_CHECK_URL,
    )


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
