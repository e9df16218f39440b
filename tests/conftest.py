from __future__ import annotations

import random
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from dnsquiz.domains import DomainGenerator  # noqa: E402
from dnsquiz.models import QuestionTemplate  # noqa: E402


def make_templates(count: int) -> tuple[QuestionTemplate, ...]:
    """Build simple templates whose correct index cycles through 0..3."""
    return tuple(
        QuestionTemplate(
            id=f"q{index}",
            text=f"Question {index} about ${{domains.primary}}?",
            options=("a", "b", "c", "d"),
            correct_index=index % 4,
            explanation=f"Explanation {index} for ${{domains.cluster}}.",
        )
        for index in range(count)
    )


@pytest.fixture
def generator() -> DomainGenerator:
    return DomainGenerator(random.Random(1234))


@pytest.fixture
def templates() -> tuple[QuestionTemplate, ...]:
    return make_templates(5)


@pytest.fixture
def template_factory():
    return make_templates
