# model/entities.py
"""
Row shapes for a relational store of questions and their evaluations.

Nothing in this service reads or writes them yet; they document the schema
shared with whatever persists evaluation history.
"""
from datetime import datetime
from pydantic import BaseModel
from model.evaluation import EvaluationStatus


class QuestionEntity(BaseModel):
    id: int
    question_text: str
    question_hash: str
    created_at: datetime
    updated_at: datetime


class EvaluationEntity(BaseModel):
    id: int
    question_id: int
    answer: bool
    status: EvaluationStatus
    tx_hash: str | None = None
    explorer_url: str | None = None
    created_at: datetime
    updated_at: datetime


class SourceEntity(BaseModel):
    id: int
    evaluation_id: int
    title: str
    url: str
    created_at: datetime


class EvaluationWithSources(EvaluationEntity):
    question: QuestionEntity
    sources: list[SourceEntity]
