# inference_gateway/routes/qa.py
import logging

import httpx
from fastapi import APIRouter, Depends

from inference_gateway import service
from inference_gateway.core.dependencies import get_http_client, get_inference
from inference_gateway.core.errors import GatewayError, UnknownError
from inference_gateway.core.hf_client import InferenceService
from inference_gateway.schemas import QARequest, QAResponse

logger = logging.getLogger(__name__)
router = APIRouter(tags=["qa"])


@router.post("/qa", response_model=QAResponse)
async def qa_endpoint(
    req: QARequest,
    inference: InferenceService = Depends(get_inference),
    http_client: httpx.AsyncClient = Depends(get_http_client),
):
    """Answer a question using the text of the page at `url` as context."""
    service.require_fields(req.url, req.question)
    try:
        answer = await service.answer_from_url(inference, http_client, req.url, req.question)
    except GatewayError:
        logger.exception("QA failed for %s", req.url)
        raise
    except Exception as e:
        logger.exception("QA failed for %s", req.url)
        raise UnknownError() from e
    return QAResponse(answer=answer)
