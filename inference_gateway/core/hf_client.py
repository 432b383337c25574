# inference_gateway/core/hf_client.py
import asyncio
import logging
from typing import Any, Optional

from huggingface_hub import InferenceClient

from inference_gateway import config
from inference_gateway.core.errors import (
    QAError,
    SummarizationError,
    TranscriptionError,
    TranslationError,
)

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def build_client(token: str) -> InferenceClient:
    return InferenceClient(token=token, timeout=config.INFERENCE_TIMEOUT)


def pick_field(result: Any, name: str) -> Optional[str]:
    """
    Pull one field out of a hub response. Hub outputs are dict subclasses,
    QA may come back as a list of candidates; only the first one is used.
    """
    if isinstance(result, list):
        result = result[0] if result else None
    if result is None:
        return None
    if isinstance(result, dict):
        return result.get(name)
    return getattr(result, name, None)


class InferenceService:
    """Calls the Hugging Face inference API, one method per task."""

    def __init__(self, client: InferenceClient):
        self.client = client

    async def _call(self, fn, *args, **kwargs) -> Any:
        # InferenceClient is blocking; keep it off the event loop
        return await asyncio.to_thread(fn, *args, **kwargs)

    async def summarize(self, text: str) -> str:
        result = await self._call(
            self.client.summarization,
            text,
            model=config.SUMMARIZATION_MODEL,
            generate_parameters={
                "min_length": config.SUMMARY_MIN_LENGTH,
                "max_length": config.SUMMARY_MAX_LENGTH,
            },
        )
        summary = pick_field(result, "summary_text")
        if not summary:
            logger.error("Summarization returned no summary_text: %r", result)
            raise SummarizationError()
        return summary

    async def translate(self, text: str, src_lang: str, tgt_lang: str) -> str:
        result = await self._call(
            self.client.translation,
            text,
            model=config.TRANSLATION_MODEL,
            src_lang=src_lang,
            tgt_lang=tgt_lang,
        )
        translation = pick_field(result, "translation_text")
        if not translation:
            logger.error("Translation returned no translation_text: %r", result)
            raise TranslationError()
        return translation

    async def transcribe(self, audio: bytes) -> str:
        result = await self._call(
            self.client.automatic_speech_recognition,
            audio,
            model=config.SPEECH_MODEL,
        )
        text = pick_field(result, "text")
        if not text:
            logger.error("Speech recognition returned no text: %r", result)
            raise TranscriptionError()
        return text

    async def answer(self, question: str, context: str) -> str:
        result = await self._call(
            self.client.question_answering,
            question=question,
            context=context,
            model=config.QA_MODEL,
        )
        answer = pick_field(result, "answer")
        if not answer:
            logger.error("Question answering returned no answer: %r", result)
            raise QAError()
        return answer
