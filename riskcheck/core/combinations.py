"""
Compound Risk Rules — Combinations of answers that are riskier together.

Each rule lists the question ids that must all be in their risk state.
Missing and "unknown" answers count as risk, the same as in the base pass.
"""

from __future__ import annotations

from typing import Mapping

from riskcheck.models.quiz_models import (
    Answer,
    AnswerValue,
    Category,
    Question,
    RiskCombination,
)


RISK_COMBINATIONS: tuple[RiskCombination, ...] = (
    RiskCombination(
        id="combo_dark_hidden",
        category=Category.PERIMETER,
        name="Kritisch: Dunkelheit & Verstecke",
        description=(
            "Ihr Grundstück ist nachts dunkel und bietet gleichzeitig Sichtschutz "
            "für Täter. Eine ideale Einladung."
        ),
        required_risks=("q_per_2", "q_light_1"),
        weight_penalty=10,
        recommendation="Kombinieren Sie Bewegungsmelder mit Videoüberwachung in toten Winkeln.",
        product_match="Videoüberwachung & Außenlicht",
        product_url="https://www.blockalarm.de/videoueberwachung/",
    ),
    RiskCombination(
        id="combo_easy_entry",
        category=Category.ACCESS,
        name="Hohes Einbruchrisiko",
        description=(
            "Fenster sind mechanisch ungesichert und es fehlt eine Alarmanlage "
            "zur Abschreckung."
        ),
        required_risks=("q_acc_1", "q_elec_1"),
        weight_penalty=15,
        recommendation=(
            "Mechanische Sicherung verzögert nur. Ohne Alarm haben Täter zu viel Zeit. "
            "Dringend nachrüsten!"
        ),
        product_match="Qolsys IQ Panel 4",
        product_url="https://www.blockalarm.de/qolsys-iq-panel-4/",
    ),
    RiskCombination(
        id="combo_value_protection",
        category=Category.VALUABLES,
        name="Wertsachen akut gefährdet",
        description="Offen gelagerte Wertsachen ohne Alarmüberwachung sind leichte Beute.",
        required_risks=("q_val_1", "q_elec_1"),
        weight_penalty=12,
        recommendation="Installieren Sie einen Tresor und sichern Sie den Raum elektronisch.",
        product_match="Objektschutz & Alarm",
        product_url="https://www.blockalarm.de/gewerbe-alarmanlagen/",
    ),
)


def is_risk(question: Question, answer: Answer | None) -> bool:
    """Whether an answer puts its question in the risk state.

    No answer and an "unknown" answer are both treated as risk.
    """
    if answer is None or answer.value is AnswerValue.UNKNOWN:
        return True
    return answer.value.as_bool() == question.risk_answer


def answer_matches_risk(
    answers_by_id: Mapping[str, Answer],
    questions_by_id: Mapping[str, Question],
    question_id: str,
) -> bool:
    """Risk check for a question referenced by id.

    A reference to a question that is not in the catalog resolves to
    "not found" and is treated as risk, like a missing answer.
    """
    question = questions_by_id.get(question_id)
    if question is None:
        return True
    return is_risk(question, answers_by_id.get(question_id))


def combination_fires(
    combo: RiskCombination,
    answers_by_id: Mapping[str, Answer],
    questions_by_id: Mapping[str, Question],
) -> bool:
    return all(
        answer_matches_risk(answers_by_id, questions_by_id, qid)
        for qid in combo.required_risks
    )
