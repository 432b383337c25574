# inference_gateway/config.py
import os

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 9001))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Hugging Face models
SUMMARIZATION_MODEL = os.getenv("SUMMARIZATION_MODEL", "facebook/bart-large-cnn")
TRANSLATION_MODEL = os.getenv("TRANSLATION_MODEL", "facebook/nllb-200-distilled-600M")
SPEECH_MODEL = os.getenv("SPEECH_MODEL", "facebook/wav2vec2-large-960h")
QA_MODEL = os.getenv("QA_MODEL", "deepset/roberta-base-squad2")

# Summaries are written in English, then translated
SUMMARY_MIN_LENGTH = int(os.getenv("SUMMARY_MIN_LENGTH", 50))
SUMMARY_MAX_LENGTH = int(os.getenv("SUMMARY_MAX_LENGTH", 70))
SUMMARY_SOURCE_LANG = os.getenv("SUMMARY_SOURCE_LANG", "eng_Latn")

# Uploaded audio lands here until the request finishes
UPLOAD_DIR = os.getenv("UPLOAD_DIR", "uploads")

# Timeouts in seconds (unset inference timeout = wait forever)
FETCH_TIMEOUT = float(os.getenv("FETCH_TIMEOUT", 30))
INFERENCE_TIMEOUT = float(os.getenv("INFERENCE_TIMEOUT")) if os.getenv("INFERENCE_TIMEOUT") else None


def require_hf_token() -> str:
    token = os.getenv("HF_TOKEN")
    if not token:
        raise RuntimeError("Missing Hugging Face API token! Set HF_TOKEN in the environment")
    return token
