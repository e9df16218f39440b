"""Build a session's question bank by substituting domains into templates."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from .content_loader import load_question_set
from .models import DomainSet, Question, QuestionTemplate

logger = logging.getLogger(__name__)

PLACEHOLDER_PREFIX = "${domains."
_LEFTOVER = re.compile(r"\$\{domains\.[^}]*\}?")


def render(text: str, domains: DomainSet) -> str:
    """Replace every ``${domains.<field>}`` marker in ``text``."""
    if PLACEHOLDER_PREFIX not in text:
        return text
    rendered = text
    for name, value in domains.placeholders().items():
        rendered = rendered.replace(f"{PLACEHOLDER_PREFIX}{name}}}", value)
    leftover = _LEFTOVER.search(rendered)
    if leftover is not None:
        raise ValueError(f"Unknown domain placeholder: {leftover.group(0)}")
    return rendered


def build_question(template: QuestionTemplate, domains: DomainSet) -> Question:
    """Render one template into a question."""
    return Question(
        id=template.id,
        text=render(template.text, domains),
        options=tuple(render(option, domains) for option in template.options),
        correct_index=template.correct_index,
        explanation=render(template.explanation, domains),
    )


def build_question_bank(
    domains: DomainSet, templates: Sequence[QuestionTemplate] | None = None
) -> tuple[Question, ...]:
    """Render all templates in authored order."""
    if templates is None:
        templates = load_question_set().templates
    bank = tuple(build_question(template, domains) for template in templates)
    logger.debug("Built question bank with %d questions for %s", len(bank), domains.primary)
    return bank
