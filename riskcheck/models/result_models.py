"""
Scoring Result Models — Output of the risk scoring engine.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from riskcheck.models.quiz_models import Category, Question


class RiskLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    CRITICAL = "Critical"


class ScoringResult(BaseModel):
    """Normalized score, per-category breakdown and ranked findings."""

    total_score: int = Field(..., ge=0, le=100, description="0 (safe) to 100 (high risk)")
    risk_level: RiskLevel
    category_scores: dict[Category, int] = Field(default_factory=dict)
    top_risks: list[Question] = Field(
        default_factory=list, description="Up to 5 findings, highest weight first"
    )
    plz: str | None = Field(default=None, description="Postal code captured by the quiz flow")
