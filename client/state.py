# client/state.py
from typing import Final, Protocol, Sequence
from model.api import EvaluationResponse
from model.chat import (
    ChatMessage,
    ErrorContent,
    MessageContent,
    QuestionContent,
    ResponseContent,
    VerificationContent,
)
from util.logger import get_logger

log = get_logger(__name__)

FAILED_MESSAGE: Final[str] = "Error: Failed to evaluate question"


class Evaluator(Protocol):
    async def evaluate(self, question: str) -> EvaluationResponse: ...


class ChatState:
    """
    Owns the ordered message log. Messages can only be appended; the log is
    exposed as an immutable snapshot. The loading flag and pending input are
    read-only outside the container and change only through its methods.
    """

    def __init__(self) -> None:
        self._messages: list[ChatMessage] = []
        self._loading: bool = False
        self._input: str = ""

    @property
    def messages(self) -> Sequence[ChatMessage]:
        return tuple(self._messages)

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def input(self) -> str:
        return self._input

    def __len__(self) -> int:
        return len(self._messages)

    def append(self, content: MessageContent) -> ChatMessage:
        message = ChatMessage.create(content)
        self._messages.append(message)
        return message

    def set_input(self, text: str) -> None:
        # Input is disabled while a request is in flight.
        if not self._loading:
            self._input = text

    def can_submit(self) -> bool:
        return bool(self._input.strip()) and not self._loading

    def begin_request(self) -> str:
        """Record the pending input as a question and enter the loading state."""
        question = self._input
        self.append(QuestionContent(text=question))
        self._loading = True
        return question

    def end_request(self) -> None:
        self._loading = False
        self._input = ""


class ChatSession:
    """
    Flow:
    - question is appended, loading set, evaluator awaited
    - success: response then verification (explorer link) appended
    - any failure: a single error response appended
    - loading and input cleared either way
    """

    def __init__(self, evaluator: Evaluator, state: ChatState | None = None) -> None:
        self._evaluator = evaluator
        self.state = state or ChatState()

    async def submit(self, text: str | None = None) -> bool:
        """Returns False when the submit was ignored (blank input or busy)."""
        if text is not None:
            self.state.set_input(text)
        if not self.state.can_submit():
            return False

        question = self.state.begin_request()
        try:
            result = await self._evaluator.evaluate(question)
            self.state.append(ResponseContent(result=result))
            self.state.append(VerificationContent(explorer_url=result.explorer_url))
        except Exception as e:
            # Every failure stays inside the chat log; the session carries on.
            log.warning("Evaluation request failed: %r", e)
            self.state.append(ErrorContent(message=FAILED_MESSAGE))
        finally:
            self.state.end_request()
        return True
