"""Quiz session state machine: sequencing, scoring, reveal and restart."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from .content_loader import OPTION_COUNT, load_question_set
from .domains import DomainGenerator
from .models import DomainSet, Question, QuestionTemplate
from .question_bank import build_question_bank

logger = logging.getLogger(__name__)

OPTION_NEUTRAL = "neutral"
OPTION_SELECTED = "selected"
OPTION_CORRECT = "correct"
OPTION_INCORRECT = "incorrect"

# (minimum percent, tier, message), checked highest first.
SCORE_TIERS: tuple[tuple[int, str, str], ...] = (
    (100, "perfect", "Perfect! You've mastered DNS!"),
    (80, "excellent", "Excellent work! You have a strong grasp of DNS concepts."),
    (60, "good", "Good job! You understand the fundamentals. Keep practicing!"),
    (40, "not bad", "Not bad! Review the explanations and try again."),
    (0, "keep learning", "Keep learning! DNS takes time to master. Review and retry!"),
)


class QuizStateError(RuntimeError):
    """Raised when an operation is not legal in the session's current state."""


@dataclass(frozen=True)
class QuizState:
    """Snapshot of the mutable part of a session."""

    current_index: int
    score: int
    selected_answer: int | None
    answer_revealed: bool
    complete: bool


@dataclass(frozen=True)
class OptionView:
    """One answer option with its display state."""

    index: int
    text: str
    state: str


@dataclass(frozen=True)
class QuizView:
    """Read-only render instructions for the current question."""

    question_number: int
    total: int
    text: str
    options: tuple[OptionView, ...]
    explanation: str | None
    answered_correctly: bool | None
    progress: float
    score: int
    answered: int
    is_last_question: bool

    @property
    def score_display(self) -> str:
        return f"{self.score}/{self.answered}"


@dataclass(frozen=True)
class ScoreSummary:
    """Final result of a completed session."""

    score: int
    total: int
    percentage: int
    tier: str
    message: str


def percentage_of(score: int, total: int) -> int:
    """Return ``100 * score / total`` rounded half up."""
    if total <= 0:
        raise ValueError("total must be positive.")
    return (200 * score + total) // (2 * total)


def score_tier(score: int, total: int) -> tuple[str, str]:
    """Return (tier, message) for a final score using the exact ratio."""
    if total <= 0:
        raise ValueError("total must be positive.")
    for minimum, tier, message in SCORE_TIERS:
        if 100 * score >= minimum * total:
            return tier, message
    return SCORE_TIERS[-1][1], SCORE_TIERS[-1][2]


class QuizSession:
    """Drives one quiz from the first question to completion.

    Every command checks that it is legal in the current state and raises
    ``QuizStateError`` otherwise. Front ends should consult ``can_submit``,
    ``can_advance`` and ``is_complete`` and only offer legal commands.
    """

    def __init__(
        self,
        generator: DomainGenerator | None = None,
        templates: Sequence[QuestionTemplate] | None = None,
    ) -> None:
        """Start a session with fresh domains and question bank."""
        self.generator = generator if generator is not None else DomainGenerator()
        if templates is None:
            templates = load_question_set().templates
        if not templates:
            raise ValueError("A quiz needs at least one question.")
        for template in templates:
            if len(template.options) != OPTION_COUNT:
                raise ValueError(
                    f"Question '{template.id}' must have {OPTION_COUNT} options, got {len(template.options)}."
                )
            if not (0 <= template.correct_index < OPTION_COUNT):
                raise ValueError(f"Question '{template.id}' correct index {template.correct_index} is out of range.")
        self.templates = tuple(templates)
        self.domains: DomainSet
        self.questions: tuple[Question, ...] = ()
        self._current_index = 0
        self._score = 0
        self._selected_answer: int | None = None
        self._answer_revealed = False
        self._complete = False
        self._start()

    def _start(self) -> None:
        self.domains = self.generator.generate()
        self.questions = build_question_bank(self.domains, self.templates)
        self._current_index = 0
        self._score = 0
        self._selected_answer = None
        self._answer_revealed = False
        self._complete = False

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def state(self) -> QuizState:
        """Return an immutable snapshot of the session state."""
        return QuizState(
            current_index=self._current_index,
            score=self._score,
            selected_answer=self._selected_answer,
            answer_revealed=self._answer_revealed,
            complete=self._complete,
        )

    @property
    def is_complete(self) -> bool:
        return self._complete

    @property
    def can_submit(self) -> bool:
        """Whether an answer may be submitted for the current question."""
        return not self._complete and not self._answer_revealed

    @property
    def can_advance(self) -> bool:
        """Whether the session may move past the current question."""
        return not self._complete and self._answer_revealed

    @property
    def current_question(self) -> Question:
        if self._complete:
            raise QuizStateError("Quiz is complete; there is no current question.")
        return self.questions[self._current_index]

    def submit_answer(self, option_index: int) -> bool:
        """Reveal the current question with the chosen option; return correctness."""
        if self._complete:
            raise QuizStateError("Cannot submit an answer: quiz is complete.")
        if self._answer_revealed:
            raise QuizStateError("Cannot submit an answer: current question is already answered.")
        question = self.questions[self._current_index]
        if not (0 <= option_index < len(question.options)):
            raise QuizStateError(
                f"Option index {option_index} is out of range 0..{len(question.options) - 1}."
            )

        correct = option_index == question.correct_index
        self._selected_answer = option_index
        self._answer_revealed = True
        if correct:
            self._score += 1
        logger.debug(
            "Question %s answered with %d (correct=%s), score %d",
            question.id,
            option_index,
            correct,
            self._score,
        )
        return correct

    def advance(self) -> None:
        """Move to the next question, or complete the quiz after the last one."""
        if self._complete:
            raise QuizStateError("Cannot advance: quiz is complete.")
        if not self._answer_revealed:
            raise QuizStateError("Cannot advance: current question has not been answered.")

        if self._current_index >= self.total - 1:
            self._complete = True
            logger.debug("Quiz complete with score %d/%d", self._score, self.total)
            return
        self._current_index += 1
        self._selected_answer = None
        self._answer_revealed = False

    def restart(self) -> None:
        """Discard all progress and start over with freshly generated domains."""
        logger.debug("Restarting quiz at question %d with score %d", self._current_index, self._score)
        self._start()

    def current_view(self) -> QuizView:
        """Return render instructions for the current question."""
        question = self.current_question
        revealed = self._answer_revealed
        options = tuple(
            OptionView(index=index, text=text, state=self._option_state(question, index))
            for index, text in enumerate(question.options)
        )
        return QuizView(
            question_number=self._current_index + 1,
            total=self.total,
            text=question.text,
            options=options,
            explanation=question.explanation if revealed else None,
            answered_correctly=(self._selected_answer == question.correct_index) if revealed else None,
            progress=(self._current_index + 1) / self.total,
            score=self._score,
            answered=self._current_index + (1 if revealed else 0),
            is_last_question=self._current_index == self.total - 1,
        )

    def _option_state(self, question: Question, index: int) -> str:
        if not self._answer_revealed:
            return OPTION_SELECTED if index == self._selected_answer else OPTION_NEUTRAL
        if index == question.correct_index:
            return OPTION_CORRECT
        if index == self._selected_answer:
            return OPTION_INCORRECT
        return OPTION_NEUTRAL

    def score_summary(self) -> ScoreSummary:
        """Return the final score, percentage and message."""
        if not self._complete:
            raise QuizStateError("Score summary is only available once the quiz is complete.")
        tier, message = score_tier(self._score, self.total)
        return ScoreSummary(
            score=self._score,
            total=self.total,
            percentage=percentage_of(self._score, self.total),
            tier=tier,
            message=message,
        )
