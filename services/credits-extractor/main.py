"""FastAPI credits extractor: music metadata extraction via Claude.

Accepts one POST with text, image or PDF content, forwards it to the
Messages API with a fixed extraction prompt and returns the parsed JSON.
Stateless: no storage, no retries. File content is never logged.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from claude_client import ClaudeClient
from config import settings
from errors import ExtractionError, UnexpectedInternalError
from extraction import extract_metadata
from models import ErrorResponse, ExtractionRequest, ExtractionResponse
from prompts import SCHEMA_VERSION

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

_claude_client: ClaudeClient | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the Claude client on startup if a credential is configured."""
    global _claude_client

    if not settings.ANTHROPIC_API_KEY:
        logger.warning("ANTHROPIC_API_KEY is empty, extraction requests will fail with fallback")
    else:
        logger.info("Using Claude model %s (max_tokens=%d)", settings.ANTHROPIC_MODEL, settings.MAX_OUTPUT_TOKENS)
        _claude_client = ClaudeClient()

    yield

    if _claude_client is not None:
        _claude_client.close()
        _claude_client = None


app = FastAPI(title="Credits Extractor", version="1.0.0", lifespan=lifespan)


def get_claude_client() -> ClaudeClient | None:
    return _claude_client


@app.exception_handler(ExtractionError)
async def extraction_error_handler(request: Request, exc: ExtractionError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    message = "Method not allowed" if exc.status_code == 405 else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request body") if errors else "Invalid request body"
    logger.info("Rejected request body: %s", message)
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error", exc_info=exc)
    error = UnexpectedInternalError(str(exc) or "Internal error")
    return JSONResponse(status_code=error.status_code, content=error.to_content())


@app.post(
    "/",
    response_model=ExtractionResponse,
    responses={
        400: {"model": ErrorResponse},
        405: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def extract(
    body: ExtractionRequest,
    client: ClaudeClient | None = Depends(get_claude_client),
):
    """Extract music metadata from credits text, an image or a PDF."""
    try:
        metadata = extract_metadata(body, client)
    except ExtractionError:
        raise
    except Exception as e:
        logger.exception("Extraction error")
        raise UnexpectedInternalError(str(e) or "Internal error") from e

    return ExtractionResponse(metadata=metadata, schemaVersion=SCHEMA_VERSION)


@app.get("/health")
async def health():
    """Return service status and whether the credential is configured."""
    return {
        "status": "healthy",
        "configured": bool(settings.ANTHROPIC_API_KEY),
        "model": settings.ANTHROPIC_MODEL,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
