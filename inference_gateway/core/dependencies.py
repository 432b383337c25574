# inference_gateway/core/dependencies.py
import httpx
from fastapi import Request

from inference_gateway.core.hf_client import InferenceService


def get_inference(request: Request) -> InferenceService:
    return request.app.state.inference


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client
