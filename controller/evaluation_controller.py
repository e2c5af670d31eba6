# controller/evaluation_controller.py
from fastapi import APIRouter, Depends, status
from model.api import ErrorResponse, EvaluationRequest, EvaluationResponse
from service.evaluation_service import EvaluationService
from util.constants import InternalURIs
from util.deps import get_evaluation_service
from util.enums import ErrorMessage
from util.errors import AppError
from util.logger import get_logger

log = get_logger(__name__)

evaluation_router = APIRouter()


@evaluation_router.post(
    InternalURIs.EVALUATE,
    response_model=EvaluationResponse,
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def evaluate(
    payload: EvaluationRequest,
    service: EvaluationService = Depends(get_evaluation_service),
) -> EvaluationResponse:
    try:
        return service.evaluate(payload.question)
    except AppError:
        raise
    except Exception:
        log.exception("Evaluation failed")
        raise AppError.of(ErrorMessage.INTERNAL_ERROR)
