"""Checklist questions answered YES/NO on the line after a blank line."""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence

from wooma_import.extraction.sections import require_text
from wooma_import.models.parsed import Checklist, FieldAnswer, QuestionAnswer

logger = logging.getLogger(__name__)

YES_NO_QUESTIONS = (
    "Valid gas safety record present?",
    "Smoke alarms and CO detectors present?",
)


def match_yes_no(text: str, question: str) -> Optional[QuestionAnswer]:
    pattern = re.compile(
        "(" + re.escape(question) + r")\s*\n\s*\n\s*(YES|NO)\b",
        re.IGNORECASE,
    )
    match = pattern.search(text)
    if not match:
        return None
    return QuestionAnswer(
        question_text=match.group(1).strip(),
        answer_option=match.group(2).upper(),
        answer_text=None,
    )


def parse_checklist(text: str, questions: Sequence[str] = YES_NO_QUESTIONS) -> Checklist:
    require_text(text)
    answers: List[QuestionAnswer] = []
    for question in questions:
        answer = match_yes_no(text, question)
        if answer is None:
            logger.debug("Checklist question not answered: %s", question)
            continue
        answers.append(answer)
    # No HelloReport free-text field has a matching rule yet.
    fields: List[FieldAnswer] = []
    return Checklist(question_answers=answers, field_answers=fields)
