"""
Quiz Data Models — Categories, questions, answers and compound risk rules.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Category(str, Enum):
    PERIMETER = "perimeter"
    LIGHTING = "lighting"
    ACCESS = "access"
    MECHANICS = "mechanics"
    ELECTRONICS = "electronics"
    ORGANIZATION = "organization"
    VALUABLES = "valuables"


CATEGORY_LABELS: dict[Category, str] = {
    Category.PERIMETER: "Grundstück & Perimeter",
    Category.ACCESS: "Zugänge & Gebäudehülle",
    Category.LIGHTING: "Beleuchtung & Sicht",
    Category.MECHANICS: "Mechanischer Schutz",
    Category.ELECTRONICS: "Elektronische Sicherheit",
    Category.ORGANIZATION: "Organisation & Prozesse",
    Category.VALUABLES: "Wertsachen & Risiko",
}


class AnswerValue(str, Enum):
    YES = "yes"
    NO = "no"
    UNKNOWN = "unknown"

    @classmethod
    def from_bool(cls, value: bool) -> AnswerValue:
        return cls.YES if value else cls.NO

    def as_bool(self) -> bool | None:
        """Definite answers map to a bool; UNKNOWN has no boolean value."""
        if self is AnswerValue.UNKNOWN:
            return None
        return self is AnswerValue.YES


class Question(BaseModel):
    """A catalog question, or a synthetic finding shaped like one."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique question key, e.g. 'q_acc_1'")
    category: Category
    text: str
    subtext: str = ""
    weight: int = Field(..., ge=1, description="Severity; 1 (low) to 5 (high) for catalog questions")
    risk_answer: bool = Field(
        ..., description="The answer that counts as a risk finding for this question"
    )
    recommendation: str = ""
    product_match: str = Field(default="", description="Display label of the matching product")
    product_url: str = ""


class Answer(BaseModel):
    """A single quiz answer. `question_id` is not required to exist in the catalog."""

    model_config = ConfigDict(frozen=True)

    question_id: str
    value: AnswerValue = AnswerValue.UNKNOWN
    extra: str | None = Field(
        default=None, description="Free-form payload, e.g. the postal code on 'plz_input'"
    )

    @field_validator("value", mode="before")
    @classmethod
    def _coerce_legacy_value(cls, v):
        # Legacy clients send true / false / null
        if v is None:
            return AnswerValue.UNKNOWN
        if isinstance(v, bool):
            return AnswerValue.from_bool(v)
        return v


@dataclass(frozen=True)
class RiskCombination:
    """A compound risk: fires when every referenced question is in its risk state."""

    id: str
    category: Category
    name: str
    description: str
    required_risks: tuple[str, ...]
    weight_penalty: int
    recommendation: str
    product_match: str
    product_url: str

    def as_finding(self) -> Question:
        return Question(
            id=self.id,
            category=self.category,
            text=self.name,
            subtext=self.description,
            weight=self.weight_penalty,
            risk_answer=True,
            recommendation=self.recommendation,
            product_match=self.product_match,
            product_url=self.product_url,
        )
