# inference_gateway/routes/speech.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from inference_gateway.core.dependencies import get_inference
from inference_gateway.core.errors import TranscriptionError, ValidationError
from inference_gateway.core.hf_client import InferenceService
from inference_gateway.core.uploads import saved_upload
from inference_gateway.schemas import TranscriptionResponse

logger = logging.getLogger(__name__)
router = APIRouter(tags=["speech"])


@router.post("/speech-to-text", response_model=TranscriptionResponse)
async def speech_to_text_endpoint(
    audio: Optional[UploadFile] = File(None),
    inference: InferenceService = Depends(get_inference),
):
    if audio is None:
        raise ValidationError("No audio file uploaded")

    async with saved_upload(audio) as path:
        try:
            with open(path, "rb") as fh:
                audio_data = fh.read()
            transcription = await inference.transcribe(audio_data)
        except TranscriptionError:
            logger.exception("Speech-to-Text Error")
            raise
        except Exception as e:
            logger.exception("Speech-to-Text Error")
            raise TranscriptionError("Speech-to-text conversion failed") from e

    logger.info("Transcription: %s", transcription)
    return TranscriptionResponse(transcription=transcription)
