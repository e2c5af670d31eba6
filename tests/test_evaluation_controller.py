"""Tests for POST /api/evaluate and the app wiring."""

import re

from fastapi.testclient import TestClient

from core.references import MockReferenceGenerator
from core.sources import SourceCatalog
from main import app
from service.evaluation_service import EvaluationService
from util.deps import get_evaluation_service

EVALUATE = "/api/evaluate"


class ExplodingVerdicts:
    def decide(self, question: str) -> bool:
        raise RuntimeError("database password is hunter2")


def test_healthz(api: TestClient) -> None:
    res = api.get("/healthz")
    assert res.status_code == 200
    assert res.json() == {"ok": True}


def test_evaluate_berlin(api: TestClient) -> None:
    res = api.post(EVALUATE, json={"question": "Is Berlin the capital of Germany?"})

    assert res.status_code == 200
    body = res.json()
    assert body["answer"] is True
    assert body["status"] == "evaluated"
    assert body["question"] == "Is Berlin the capital of Germany?"
    assert body["sources"][0]["title"] == "Berlin like a local"
    assert re.fullmatch(r"[0-9a-f]{64}", body["hash"])
    assert body["tx_hash"].startswith("0x")
    assert body["tx_hash"] in body["explorer_url"]


def test_response_has_every_field(api: TestClient) -> None:
    body = api.post(EVALUATE, json={"question": "Is the sky green?"}).json()
    assert set(body) == {
        "question",
        "sources",
        "answer",
        "hash",
        "status",
        "tx_hash",
        "explorer_url",
    }
    assert body["sources"] == []
    assert isinstance(body["answer"], bool)


def test_empty_question_is_400(api: TestClient) -> None:
    res = api.post(EVALUATE, json={"question": ""})
    assert res.status_code == 400
    assert res.json() == {"error": "Question is required"}


def test_missing_question_is_400(api: TestClient) -> None:
    res = api.post(EVALUATE, json={})
    assert res.status_code == 400
    assert res.json() == {"error": "Question is required"}


def test_non_string_question_is_400(api: TestClient) -> None:
    res = api.post(EVALUATE, json={"question": 42})
    assert res.status_code == 400
    assert res.json() == {"error": "Question is required"}


def test_malformed_body_is_400(api: TestClient) -> None:
    res = api.post(
        EVALUATE, content=b"not json", headers={"content-type": "application/json"}
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Question is required"}


def test_unexpected_failure_is_500_without_details() -> None:
    broken = EvaluationService(ExplodingVerdicts(), SourceCatalog(), MockReferenceGenerator())
    app.dependency_overrides[get_evaluation_service] = lambda: broken
    try:
        with TestClient(app) as client:
            res = client.post(EVALUATE, json={"question": "anything"})
    finally:
        app.dependency_overrides.clear()

    assert res.status_code == 500
    assert res.json() == {"error": "Internal server error"}
    assert "hunter2" not in res.text


def test_default_dependency_serves_requests() -> None:
    with TestClient(app) as client:
        res = client.post(EVALUATE, json={"question": "Is Paris the capital of France?"})
    assert res.status_code == 200
    assert res.json()["answer"] is True
