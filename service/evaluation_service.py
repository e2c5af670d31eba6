# service/evaluation_service.py
from core.hashing import rolling_hash
from core.references import ReferenceGenerator
from core.sources import SourceCatalog
from core.verdict import VerdictStrategy
from model.api import EvaluationResponse
from model.evaluation import EvaluationStatus
from util.enums import ErrorMessage
from util.errors import AppError
from util.logger import get_logger

log = get_logger(__name__)


class EvaluationService:
    """
    Flow:
    - Reject a missing or empty question before touching any strategy.
    - Verdict, citations and content hash are derived from the question.
    - One ledger reference is generated and used for both tx_hash and explorer_url.
    """

    def __init__(
        self,
        verdicts: VerdictStrategy,
        sources: SourceCatalog,
        references: ReferenceGenerator,
    ) -> None:
        self._verdicts = verdicts
        self._sources = sources
        self._references = references

    @staticmethod
    def validate(question: str | None) -> str:
        if not question:
            raise AppError.of(ErrorMessage.QUESTION_REQUIRED)
        return question

    def evaluate(self, question: str | None) -> EvaluationResponse:
        question = self.validate(question)

        content_hash = rolling_hash(question)
        answer = self._verdicts.decide(question)
        sources = self._sources.lookup(question)
        reference = self._references.generate()

        log.info(
            "Evaluated question hash=%s answer=%s sources=%d",
            content_hash[-8:],
            answer,
            len(sources),
        )
        return EvaluationResponse(
            question=question,
            sources=sources,
            answer=answer,
            hash=content_hash,
            status=EvaluationStatus.evaluated,
            tx_hash=reference.tx_hash,
            explorer_url=reference.explorer_url,
        )
