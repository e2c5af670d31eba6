# util/deps.py
from config.settings import settings
from core.references import MockReferenceGenerator
from core.sources import SourceCatalog
from core.verdict import KeywordVerdictStrategy
from service.evaluation_service import EvaluationService


def get_evaluation_service() -> EvaluationService:
    _verdicts = KeywordVerdictStrategy()
    _sources = SourceCatalog()
    _references = MockReferenceGenerator(explorer_tx_url=settings.EXPLORER_TX_URL)
    _service = EvaluationService(_verdicts, _sources, _references)
    return _service
