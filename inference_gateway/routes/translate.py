# inference_gateway/routes/translate.py
import logging

from fastapi import APIRouter, Depends

from inference_gateway import service
from inference_gateway.core.dependencies import get_inference
from inference_gateway.core.errors import TranslationError
from inference_gateway.core.hf_client import InferenceService
from inference_gateway.schemas import TranslateRequest, TranslateResponse

logger = logging.getLogger(__name__)
router = APIRouter(tags=["translate"])


@router.post("/translate", response_model=TranslateResponse)
async def translate_endpoint(
    req: TranslateRequest,
    inference: InferenceService = Depends(get_inference),
):
    service.require_fields(req.text, req.srcLang, req.tgtLang)
    try:
        translated = await inference.translate(req.text, req.srcLang, req.tgtLang)
    except Exception as e:
        # clients only ever see the generic message
        logger.exception("Translation Error")
        raise TranslationError() from e
    return TranslateResponse(translatedText=translated)
