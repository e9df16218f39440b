"""Randomized placeholder domains for quiz sessions."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Sequence

from .models import DomainSet

logger = logging.getLogger(__name__)

DOMAIN_WORDS: tuple[str, ...] = (
    "stellar",
    "quantum",
    "nexus",
    "apex",
    "zenith",
    "vertex",
    "pulse",
    "forge",
    "orbit",
    "prism",
)
TLDS: tuple[str, ...] = (".com", ".org", ".net", ".pro", ".cloud", ".tech", ".io", ".dev", ".app", ".site")
CLUSTER_PREFIX = "okd."
DEFAULT_MAX_ATTEMPTS = 1000

# primary, secondary and example must all be distinct.
_DISTINCT_DOMAINS = 3


class DomainGenerationExhausted(RuntimeError):
    """Raised when no unused domain could be drawn."""


class DomainGenerator:
    """Draws word + TLD combinations to build a session's DomainSet."""

    def __init__(
        self,
        rng: random.Random | None = None,
        *,
        words: Sequence[str] = DOMAIN_WORDS,
        tlds: Sequence[str] = TLDS,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        if not words or not tlds:
            raise ValueError("Domain words and TLDs must not be empty.")
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.rng = rng if rng is not None else random.Random()
        self.words = tuple(words)
        self.tlds = tuple(tlds)
        if self.space_size <= _DISTINCT_DOMAINS:
            raise ValueError(
                f"Need more than {_DISTINCT_DOMAINS} distinct word/TLD combinations, got {self.space_size}."
            )
        self.max_attempts = max_attempts

    @property
    def space_size(self) -> int:
        """Number of distinct domains this generator can produce."""
        return len(set(self.words)) * len(set(self.tlds))

    def pick_domain(self) -> str:
        """Return one random ``word + tld`` combination."""
        return self.rng.choice(self.words) + self.rng.choice(self.tlds)

    def pick_unique_domain(self, excluding: Iterable[str]) -> str:
        """Return a random domain that is not in ``excluding``."""
        taken = set(excluding)
        if self.space_size <= len(taken):
            raise DomainGenerationExhausted(
                f"Only {self.space_size} domains available, {len(taken)} already taken."
            )
        for _ in range(self.max_attempts):
            domain = self.pick_domain()
            if domain not in taken:
                return domain
        raise DomainGenerationExhausted(
            f"Could not draw a domain outside {sorted(taken)} after {self.max_attempts} attempts."
        )

    def generate(self) -> DomainSet:
        """Draw a fresh DomainSet with distinct primary, secondary and example."""
        primary = self.pick_domain()
        secondary = self.pick_unique_domain({primary})
        example = self.pick_unique_domain({primary, secondary})
        subdomain, _, suffix = primary.partition(".")
        domains = DomainSet(
            primary=primary,
            cluster=CLUSTER_PREFIX + primary,
            secondary=secondary,
            example=example,
            subdomain=subdomain,
            tld="." + suffix if suffix else "",
        )
        logger.debug("Generated domains primary=%s secondary=%s example=%s", primary, secondary, example)
        return domains
