# model/chat.py
from datetime import datetime
from enum import Enum
from typing import Annotated, Literal, Union
from uuid import uuid4
from pydantic import BaseModel, ConfigDict, Field
from model.api import EvaluationResponse


class MessageType(str, Enum):
    question = "question"
    response = "response"
    verification = "verification"


class QuestionContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["question"] = "question"
    text: str


class ResponseContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["response"] = "response"
    result: EvaluationResponse


class ErrorContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["error"] = "error"
    message: str


class VerificationContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["verification"] = "verification"
    explorer_url: str


MessageContent = Annotated[
    Union[QuestionContent, ResponseContent, ErrorContent, VerificationContent],
    Field(discriminator="kind"),
]

_TYPE_BY_KIND: dict[str, MessageType] = {
    "question": MessageType.question,
    "response": MessageType.response,
    "error": MessageType.response,
    "verification": MessageType.verification,
}


class ChatMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    type: MessageType
    content: MessageContent
    timestamp: datetime

    @classmethod
    def create(cls, content: MessageContent) -> "ChatMessage":
        return cls(
            id=uuid4().hex,
            type=_TYPE_BY_KIND[content.kind],
            content=content,
            timestamp=datetime.now(),
        )

    @property
    def is_error(self) -> bool:
        return isinstance(self.content, ErrorContent)
