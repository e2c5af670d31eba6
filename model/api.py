# model/api.py
from pydantic import BaseModel, Field
from model.evaluation import EvaluationStatus, Source

HASH_PATTERN = r"^[0-9a-f]{64}$"


class EvaluationRequest(BaseModel):
    # Optional here so that a missing field reaches the service's own check.
    question: str | None = None


class EvaluationResponse(BaseModel):
    question: str
    sources: list[Source] = Field(default_factory=list)
    answer: bool
    hash: str = Field(pattern=HASH_PATTERN)
    status: EvaluationStatus
    tx_hash: str
    explorer_url: str


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    ok: bool
