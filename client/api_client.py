# client/api_client.py
import httpx
from config.settings import settings
from model.api import EvaluationRequest, EvaluationResponse
from util.constants import InternalURIs
from util.errors import NetworkError


class EvaluationClient:
    """
    Calls POST /api/evaluate on the configured service. Every failure mode
    (transport, non-2xx, unreadable body) surfaces as NetworkError.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = (base_url or settings.EVALUATION_API_URL).rstrip("/")
        # No timeout unless configured; a hung request keeps the session loading.
        self._timeout = timeout if timeout is not None else settings.CLIENT_TIMEOUT_SECONDS
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    async def evaluate(self, question: str) -> EvaluationResponse:
        payload = EvaluationRequest(question=question)
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=httpx.Timeout(self._timeout),
                transport=self._transport,
            ) as client:
                res = await client.post(
                    InternalURIs.EVALUATE,
                    headers={"content-type": "application/json"},
                    json=payload.model_dump(),
                )
        except (httpx.HTTPError, httpx.InvalidURL, OSError, OverflowError) as e:
            raise NetworkError(f"Request to {self._base_url} failed: {e}") from e

        if res.status_code // 100 != 2:
            raise NetworkError(
                f"Evaluation endpoint returned {res.status_code}",
                status_code=res.status_code,
            )

        try:
            return EvaluationResponse.model_validate(res.json())
        except ValueError as e:
            raise NetworkError("Evaluation endpoint returned an invalid body") from e
