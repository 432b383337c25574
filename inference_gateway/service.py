# inference_gateway/service.py
import logging
from typing import Optional

import httpx

from inference_gateway import config
from inference_gateway.core.content_fetcher import fetch_and_extract
from inference_gateway.core.errors import EmptyContentError, ValidationError
from inference_gateway.core.hf_client import InferenceService

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def require_fields(*values: Optional[str], message: str = ValidationError.message) -> None:
    if not all(values):
        raise ValidationError(message)


async def load_page_text(http_client: httpx.AsyncClient, url: str) -> str:
    text = await fetch_and_extract(url, http_client)
    if not text:
        logger.warning("No text left after extracting %s", url)
        raise EmptyContentError()
    return text


async def summarize_and_translate(inference: InferenceService, text: str, tgt_lang: str) -> str:
    """
    Summarize English text, then translate the summary into tgt_lang.
    The two calls run one after the other.
    """
    logger.info("Summarizing %d chars for translation into %s", len(text), tgt_lang)
    summary = await inference.summarize(text)
    return await inference.translate(summary, config.SUMMARY_SOURCE_LANG, tgt_lang)


async def summarize_url(
    inference: InferenceService,
    http_client: httpx.AsyncClient,
    url: str,
    tgt_lang: str,
) -> str:
    text = await load_page_text(http_client, url)
    return await summarize_and_translate(inference, text, tgt_lang)


async def answer_from_url(
    inference: InferenceService,
    http_client: httpx.AsyncClient,
    url: str,
    question: str,
) -> str:
    context = await load_page_text(http_client, url)
    logger.info("Answering question against %s (%d chars)", url, len(context))
    return await inference.answer(question, context)
