from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
import pytest
from fastapi.testclient import TestClient

from inference_gateway import config
from inference_gateway.core.dependencies import get_http_client, get_inference
from inference_gateway.main import app


class FakeInference:
    """Stands in for InferenceService; records every call it receives."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []
        self.summary = "A short English summary."
        self.translation = "Un court résumé."
        self.transcription = "hello world"
        self.answer_text = "Paris"
        self.failures: Dict[str, Exception] = {}
        self.on_transcribe: Optional[Callable[[bytes], None]] = None

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))
        if name in self.failures:
            raise self.failures[name]

    async def summarize(self, text: str) -> str:
        self._record("summarize", text)
        return self.summary

    async def translate(self, text: str, src_lang: str, tgt_lang: str) -> str:
        self._record("translate", text, src_lang, tgt_lang)
        return self.translation

    async def transcribe(self, audio: bytes) -> str:
        if self.on_transcribe:
            self.on_transcribe(audio)
        self._record("transcribe", audio)
        return self.transcription

    async def answer(self, question: str, context: str) -> str:
        self._record("answer", question, context)
        return self.answer_text


class FakeWeb:
    """Serves canned pages through httpx.MockTransport."""

    def __init__(self) -> None:
        self.pages: Dict[str, Tuple[int, str]] = {}
        self.requests: List[str] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests.append(url)
        if url not in self.pages:
            raise httpx.ConnectError("unreachable", request=request)
        status, body = self.pages[url]
        return httpx.Response(status, text=body, headers={"content-type": "text/html"})


@pytest.fixture
def fake_inference() -> FakeInference:
    return FakeInference()


@pytest.fixture
def fake_web() -> FakeWeb:
    return FakeWeb()


@pytest.fixture
def upload_dir(tmp_path, monkeypatch) -> str:
    path = str(tmp_path / "uploads")
    monkeypatch.setattr(config, "UPLOAD_DIR", path)
    return path


@pytest.fixture
def client(fake_inference: FakeInference, fake_web: FakeWeb, upload_dir: str):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(fake_web.handler))
    app.dependency_overrides[get_inference] = lambda: fake_inference
    app.dependency_overrides[get_http_client] = lambda: http_client
    # no lifespan: dependencies are overridden, no token needed
    yield TestClient(app)
    app.dependency_overrides.clear()
