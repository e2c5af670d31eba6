# core/verdict.py
import random
from typing import Final, Protocol, Sequence

# Each entry is a set of keywords that must all appear in the lowercased question.
KNOWN_FACTS: Final[tuple[tuple[str, ...], ...]] = (
    ("berlin", "capital", "germany"),
    ("paris", "capital", "france"),
    ("london", "capital", "uk"),
)


class VerdictStrategy(Protocol):
    def decide(self, question: str) -> bool: ...


class KeywordVerdictStrategy:
    """
    Placeholder verdict: true for a few hardcoded capital-city facts,
    a coin flip for everything else.

    The fallback is NOT reproducible unless a seeded ``random.Random`` is given.
    """

    def __init__(
        self,
        facts: Sequence[Sequence[str]] = KNOWN_FACTS,
        rng: random.Random | None = None,
    ) -> None:
        self._facts = [tuple(k.lower() for k in fact) for fact in facts]
        self._rng = rng or random.Random()

    def matches_known_fact(self, question: str) -> bool:
        lowered = question.lower()
        return any(all(k in lowered for k in fact) for fact in self._facts)

    def decide(self, question: str) -> bool:
        if self.matches_known_fact(question):
            return True
        return self._rng.random() > 0.5
