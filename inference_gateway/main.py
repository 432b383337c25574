# inference_gateway/main.py
import logging
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from inference_gateway import config
from inference_gateway.core.errors import GatewayError, UnknownError, ValidationError
from inference_gateway.core.hf_client import InferenceService, build_client
from inference_gateway.routes import qa, speech, summarize, translate
from inference_gateway.schemas import ErrorResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Refuse to start without a token
    token = config.require_hf_token()
    app.state.inference = InferenceService(build_client(token))
    app.state.http_client = httpx.AsyncClient(follow_redirects=True, timeout=config.FETCH_TIMEOUT)
    logger.info("Inference gateway ready")
    try:
        yield
    finally:
        await app.state.http_client.aclose()


app = FastAPI(title="Hugging Face Inference Gateway", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}

# Register routes
app.include_router(summarize.router, responses=ERROR_RESPONSES)
app.include_router(speech.router, responses=ERROR_RESPONSES)
app.include_router(translate.router, responses=ERROR_RESPONSES)
app.include_router(qa.router, responses=ERROR_RESPONSES)


@app.exception_handler(GatewayError)
async def gateway_error_handler(request: Request, exc: GatewayError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning("Rejected body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": ValidationError.message})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(status_code=500, content={"error": UnknownError.message})


@app.get("/")
async def root():
    return {"ok": True, "message": "Hugging Face inference gateway"}


def run():
    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
