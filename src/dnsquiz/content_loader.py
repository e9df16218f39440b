"""Load declarative question content from bundled JSON resources."""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any

from .models import QuestionSet, QuestionTemplate

CONTENT_PACKAGE = "dnsquiz.content"
CONTENT_FILE = "questions.json"
OPTION_COUNT = 4


def _template_from_dict(raw: dict[str, Any]) -> QuestionTemplate:
    """Build a question template from raw JSON content."""
    question_id = str(raw.get("id", "")).strip()
    if not question_id:
        raise ValueError("Question is missing an id.")
    text = str(raw.get("question", "")).strip()
    if not text:
        raise ValueError(f"Question '{question_id}' has no text.")

    options = [str(value) for value in raw.get("options", [])]
    if len(options) != OPTION_COUNT:
        raise ValueError(f"Question '{question_id}' must have {OPTION_COUNT} options, got {len(options)}.")

    try:
        correct = int(raw["correct"])
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"Question '{question_id}' has no valid correct index.") from exc
    if not (0 <= correct < OPTION_COUNT):
        raise ValueError(f"Question '{question_id}' correct index {correct} is out of range.")

    return QuestionTemplate(
        id=question_id,
        text=text,
        options=tuple(options),
        correct_index=correct,
        explanation=str(raw.get("explanation", "")),
    )


def _question_set_from_dict(raw: dict[str, Any]) -> QuestionSet:
    """Build the question set from raw JSON content."""
    templates = tuple(_template_from_dict(item) for item in raw.get("questions", []))
    if not templates:
        raise ValueError(f"Question set '{raw.get('id', '<unknown>')}' has no questions.")
    _validate_unique_question_ids(templates)
    return QuestionSet(
        id=str(raw["id"]),
        title=str(raw.get("title", "")),
        description=str(raw.get("description", "")),
        content_version=int(raw.get("content_version", 1)),
        templates=templates,
    )


def load_question_set() -> QuestionSet:
    """Load the bundled question set."""
    entry = resources.files(CONTENT_PACKAGE).joinpath(CONTENT_FILE)
    raw = json.loads(entry.read_text(encoding="utf-8-sig"))
    return _question_set_from_dict(raw)


def load_question_set_from_path(path: Path) -> QuestionSet:
    """Load a question set from a JSON file for tests/tools."""
    raw = json.loads(path.read_text(encoding="utf-8-sig"))
    return _question_set_from_dict(raw)


def _validate_unique_question_ids(templates: tuple[QuestionTemplate, ...]) -> None:
    """Validate that question IDs are unique within the set."""
    seen: set[str] = set()
    for template in templates:
        if template.id in seen:
            raise ValueError(f"Duplicate question id: {template.id}")
        seen.add(template.id)
