"""Shared fixtures for service and client tests."""

import random

import pytest
from fastapi.testclient import TestClient

from core.references import MockReferenceGenerator
from core.sources import SourceCatalog
from core.verdict import KeywordVerdictStrategy
from main import app
from model.api import EvaluationResponse
from model.evaluation import EvaluationStatus, Source
from service.evaluation_service import EvaluationService
from util.deps import get_evaluation_service


@pytest.fixture
def service() -> EvaluationService:
    return EvaluationService(
        KeywordVerdictStrategy(rng=random.Random(7)),
        SourceCatalog(),
        MockReferenceGenerator(rng=random.Random(11)),
    )


@pytest.fixture
def api(service: EvaluationService):
    app.dependency_overrides[get_evaluation_service] = lambda: service
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def evaluation_result() -> EvaluationResponse:
    tx = "0x" + "ab" * 32
    return EvaluationResponse(
        question="Is Berlin the capital of Germany?",
        sources=[Source(title="Berlin like a local", url="https://example.com/berlin")],
        answer=True,
        hash="0" * 56 + "1a2b3c4d",
        status=EvaluationStatus.evaluated,
        tx_hash=tx,
        explorer_url=f"https://sepolia.etherscan.io/tx/{tx}",
    )
