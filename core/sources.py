# core/sources.py
from typing import Final, Mapping, Sequence
from model.evaluation import Source

DEFAULT_SOURCES: Final[dict[str, tuple[Source, ...]]] = {
    "berlin": (
        Source(
            title="Berlin like a local",
            url="https://www.reuters.com/city-memo/berlin-like-local-2024-11-23/?utm_source=openai",
        ),
    ),
    "paris": (
        Source(
            title="Paris Travel Guide",
            url="https://example.com/paris-guide",
        ),
    ),
}


class SourceCatalog:
    """
    Keyword -> citations lookup. The first keyword (in insertion order)
    found in the lowercased question wins.
    """

    def __init__(
        self, entries: Mapping[str, Sequence[Source]] = DEFAULT_SOURCES
    ) -> None:
        self._entries = {k.lower(): tuple(v) for k, v in entries.items()}

    def lookup(self, question: str) -> list[Source]:
        lowered = question.lower()
        for keyword, sources in self._entries.items():
            if keyword in lowered:
                return [s.model_copy() for s in sources]
        return []
