"""Core domain models for the DNS knowledge quiz."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DomainSet:
    """Placeholder domains substituted into question text for one session."""

    primary: str
    cluster: str
    secondary: str
    example: str
    subdomain: str
    tld: str

    @property
    def secondary_name(self) -> str:
        """Label of the secondary domain before its first dot."""
        return self.secondary.split(".", 1)[0]

    @property
    def secondary_tld(self) -> str:
        """TLD of the secondary domain without the leading dot."""
        parts = self.secondary.split(".", 1)
        return parts[1] if len(parts) > 1 else ""

    def placeholders(self) -> dict[str, str]:
        """Return every substitutable field by name."""
        return {
            "primary": self.primary,
            "cluster": self.cluster,
            "secondary": self.secondary,
            "example": self.example,
            "subdomain": self.subdomain,
            "tld": self.tld,
            "secondary_name": self.secondary_name,
            "secondary_tld": self.secondary_tld,
        }


@dataclass(frozen=True)
class QuestionTemplate:
    """Authored question with ``${domains.<field>}`` slots."""

    id: str
    text: str
    options: tuple[str, ...]
    correct_index: int
    explanation: str


@dataclass(frozen=True)
class Question:
    """One question ready to present, domains already substituted."""

    id: str
    text: str
    options: tuple[str, ...]
    correct_index: int
    explanation: str

    @property
    def correct_option(self) -> str:
        return self.options[self.correct_index]


@dataclass(frozen=True)
class QuestionSet:
    """Bundled question content with its metadata."""

    id: str
    title: str
    description: str
    content_version: int
    templates: tuple[QuestionTemplate, ...]
