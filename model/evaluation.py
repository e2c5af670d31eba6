# model/evaluation.py
from enum import Enum
from pydantic import BaseModel


class EvaluationStatus(str, Enum):
    pending = "pending"
    evaluated = "evaluated"
    failed = "failed"


class Source(BaseModel):
    title: str
    url: str
