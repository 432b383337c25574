# inference_gateway/routes/summarize.py
import logging

import httpx
from fastapi import APIRouter, Depends

from inference_gateway import service
from inference_gateway.core.dependencies import get_http_client, get_inference
from inference_gateway.core.errors import GatewayError, UnknownError
from inference_gateway.core.hf_client import InferenceService
from inference_gateway.schemas import (
    SummarizeTextRequest,
    SummarizeTextResponse,
    SummarizeUrlRequest,
    SummarizeUrlResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(tags=["summarize"])


@router.post("/summarize-text", response_model=SummarizeTextResponse)
async def summarize_text_endpoint(
    req: SummarizeTextRequest,
    inference: InferenceService = Depends(get_inference),
):
    service.require_fields(req.text, req.tgtLang)
    try:
        translated = await service.summarize_and_translate(inference, req.text, req.tgtLang)
    except GatewayError:
        logger.exception("Summarize-text failed")
        raise
    except Exception as e:
        logger.exception("Summarize-text failed")
        raise UnknownError() from e
    return SummarizeTextResponse(translatedSummary=translated)


@router.post("/summarize", response_model=SummarizeUrlResponse)
async def summarize_url_endpoint(
    req: SummarizeUrlRequest,
    inference: InferenceService = Depends(get_inference),
    http_client: httpx.AsyncClient = Depends(get_http_client),
):
    """
    Fetch a page, summarize its text and translate the summary.
    Note the response key is `summary`, unlike /summarize-text.
    """
    service.require_fields(req.url, req.tgtLang)
    try:
        translated = await service.summarize_url(inference, http_client, req.url, req.tgtLang)
    except GatewayError:
        logger.exception("Summarize failed for %s", req.url)
        raise
    except Exception as e:
        logger.exception("Summarize failed for %s", req.url)
        raise UnknownError() from e
    return SummarizeUrlResponse(summary=translated)
