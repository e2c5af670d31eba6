"""Tests for the placeholder verdict, source and reference strategies."""

import random

import pytest

from core.references import MockReferenceGenerator
from core.sources import SourceCatalog
from core.verdict import KeywordVerdictStrategy
from model.evaluation import Source


@pytest.mark.parametrize(
    "question",
    [
        "Is Berlin the capital of Germany?",
        "IS BERLIN THE CAPITAL OF GERMANY",
        "paris is the capital of france, right?",
        "Is London the capital of the UK?",
    ],
)
def test_known_facts_are_true(question: str) -> None:
    strategy = KeywordVerdictStrategy(rng=random.Random(0))
    assert strategy.matches_known_fact(question)
    assert strategy.decide(question) is True


def test_partial_match_is_not_a_known_fact() -> None:
    strategy = KeywordVerdictStrategy()
    assert not strategy.matches_known_fact("Is Berlin in Germany?")


def test_unknown_question_uses_rng() -> None:
    seed = 42
    expected = random.Random(seed).random() > 0.5
    strategy = KeywordVerdictStrategy(rng=random.Random(seed))
    assert strategy.decide("Is the moon made of cheese?") is expected


def test_custom_facts() -> None:
    strategy = KeywordVerdictStrategy(facts=[("Rome", "Italy")])
    assert strategy.matches_known_fact("rome is in italy")
    assert not strategy.matches_known_fact("Is Berlin the capital of Germany?")


def test_sources_for_berlin() -> None:
    sources = SourceCatalog().lookup("Tell me about BERLIN")
    assert [s.title for s in sources] == ["Berlin like a local"]


def test_sources_for_paris() -> None:
    sources = SourceCatalog().lookup("Is Paris the capital of France?")
    assert sources[0].url == "https://example.com/paris-guide"


def test_sources_empty_for_unknown_topic() -> None:
    assert SourceCatalog().lookup("Is London the capital of the UK?") == []


def test_sources_first_keyword_wins() -> None:
    sources = SourceCatalog().lookup("Paris or Berlin?")
    assert sources[0].title == "Berlin like a local"


def test_sources_are_copies() -> None:
    catalog = SourceCatalog({"rome": [Source(title="Rome", url="https://example.com/rome")]})
    first = catalog.lookup("rome")
    first[0].title = "changed"
    assert catalog.lookup("rome")[0].title == "Rome"


def test_reference_url_embeds_tx_hash() -> None:
    ref = MockReferenceGenerator(rng=random.Random(1)).generate()
    assert ref.tx_hash.startswith("0x")
    assert len(ref.tx_hash) == 66
    assert ref.explorer_url == f"https://sepolia.etherscan.io/tx/{ref.tx_hash}"


def test_reference_uses_configured_explorer() -> None:
    gen = MockReferenceGenerator(explorer_tx_url="https://explorer.test/tx/")
    assert gen.generate().explorer_url.startswith("https://explorer.test/tx/0x")


def test_references_differ_between_calls() -> None:
    gen = MockReferenceGenerator(rng=random.Random(3))
    assert gen.generate().tx_hash != gen.generate().tx_hash
