# inference_gateway/core/errors.py
"""
Errors raised by the gateway. Each one knows the HTTP status and the message
the client sees; the app renders them as {"error": message}.
"""
from typing import Optional


class GatewayError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(GatewayError):
    status_code = 400
    message = "Missing required fields"


class FetchError(GatewayError):
    message = "Failed to fetch URL"


class EmptyContentError(GatewayError):
    message = "No content found"


class SummarizationError(GatewayError):
    message = "Summarization failed"


class TranslationError(GatewayError):
    message = "Translation failed"


class TranscriptionError(GatewayError):
    message = "Speech-to-text failed"


class QAError(GatewayError):
    message = "Question answering failed"


class UnknownError(GatewayError):
    message = "An unexpected error occurred"
