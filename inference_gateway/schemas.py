# inference_gateway/schemas.py
from pydantic import BaseModel
from typing import Optional

# Request fields are optional here; routes check them and answer 400 themselves.


class SummarizeTextRequest(BaseModel):
    text: Optional[str] = None
    tgtLang: Optional[str] = None


class SummarizeUrlRequest(BaseModel):
    url: Optional[str] = None
    tgtLang: Optional[str] = None


class TranslateRequest(BaseModel):
    text: Optional[str] = None
    srcLang: Optional[str] = None
    tgtLang: Optional[str] = None


class QARequest(BaseModel):
    url: Optional[str] = None
    question: Optional[str] = None


class SummarizeTextResponse(BaseModel):
    translatedSummary: str


class SummarizeUrlResponse(BaseModel):
    summary: str


class TranslateResponse(BaseModel):
    translatedText: str


class TranscriptionResponse(BaseModel):
    transcription: str


class QAResponse(BaseModel):
    answer: str


class ErrorResponse(BaseModel):
    error: str
