import random

import pytest

from dnsquiz.domains import DOMAIN_WORDS, TLDS, DomainGenerationExhausted, DomainGenerator


class FixedRandom:
    """Random stand-in that always picks the first element."""

    def choice(self, seq):
        return seq[0]


def test_pick_domain_combines_word_and_tld(generator: DomainGenerator) -> None:
    for _ in range(50):
        domain = generator.pick_domain()
        word, _, suffix = domain.partition(".")
        assert word in DOMAIN_WORDS
        assert "." + suffix in TLDS


def test_generate_domains_are_distinct_and_derived(generator: DomainGenerator) -> None:
    for _ in range(200):
        domains = generator.generate()
        assert len({domains.primary, domains.secondary, domains.example}) == 3
        assert domains.cluster == "okd." + domains.primary
        assert domains.subdomain + domains.tld == domains.primary
        assert domains.tld.startswith(".")
        assert domains.secondary_name + "." + domains.secondary_tld == domains.secondary


def test_generate_is_deterministic_for_seeded_random() -> None:
    first = DomainGenerator(random.Random(42)).generate()
    second = DomainGenerator(random.Random(42)).generate()
    assert first == second


def test_pick_unique_domain_avoids_excluded() -> None:
    generator = DomainGenerator(random.Random(3), words=("a", "b"), tlds=(".x", ".y"))
    excluded = {"a.x", "b.x", "a.y"}
    for _ in range(20):
        assert generator.pick_unique_domain(excluded) == "b.y"


def test_pick_unique_domain_raises_when_space_is_used_up() -> None:
    generator = DomainGenerator(random.Random(3), words=("a", "b"), tlds=(".x", ".y"))
    with pytest.raises(DomainGenerationExhausted):
        generator.pick_unique_domain({"a.x", "b.x", "a.y", "b.y"})


def test_pick_unique_domain_is_bounded() -> None:
    generator = DomainGenerator(FixedRandom(), words=("a", "b"), tlds=(".x", ".y"), max_attempts=25)
    with pytest.raises(DomainGenerationExhausted, match="25 attempts"):
        generator.pick_unique_domain({"a.x"})


def test_generator_rejects_too_small_space() -> None:
    with pytest.raises(ValueError):
        DomainGenerator(words=("a",), tlds=(".x", ".y", ".z"))
    with pytest.raises(ValueError):
        DomainGenerator(words=(), tlds=(".x",))


def test_generator_rejects_non_positive_attempts() -> None:
    with pytest.raises(ValueError):
        DomainGenerator(max_attempts=0)


def test_generator_counts_only_distinct_combinations() -> None:
    with pytest.raises(ValueError, match="distinct word/TLD combinations, got 1"):
        DomainGenerator(words=("a", "a"), tlds=(".x", ".x"))
    with pytest.raises(ValueError, match="got 2"):
        DomainGenerator(words=("a", "b", "a"), tlds=(".x", ".x"))
