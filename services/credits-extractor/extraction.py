"""Extraction orchestrator: build content blocks, call Claude, parse JSON.

One upstream call per request. The reply is accepted only if it is a JSON
object once markdown code fences are removed.
"""

import json
import logging
import re

from pydantic import ValidationError

from claude_client import ClaudeAPIError, ClaudeClient
from errors import BadRequest, InvalidFormat, ServiceMisconfigured, UpstreamCallFailed
from models import ExtractionRequest, FileType, MusicMetadata
from prompts import EXTRACTION_PROMPT, TEXT_CONTENT_PREFIX

logger = logging.getLogger(__name__)

_FENCE_JSON = re.compile(r"```json\n?")
_FENCE = re.compile(r"```\n?")


def resolve_media_type(file_type: FileType, file_name: str | None) -> str:
    """Media type sent upstream for a file type and optional file name."""
    if file_type == FileType.PDF:
        return "application/pdf"
    if file_type == FileType.IMAGE:
        if file_name and file_name.lower().endswith(".png"):
            return "image/png"
        return "image/jpeg"
    return "text/plain"


def build_content_blocks(request: ExtractionRequest) -> list[dict]:
    """File content block followed by the fixed extraction instructions."""
    if request.fileType == FileType.TEXT:
        file_block = {
            "type": "text",
            "text": TEXT_CONTENT_PREFIX + request.fileData,
        }
    else:
        file_block = {
            "type": "image" if request.fileType == FileType.IMAGE else "document",
            "source": {
                "type": "base64",
                "media_type": resolve_media_type(request.fileType, request.fileName),
                "data": request.fileData,
            },
        }

    return [file_block, {"type": "text", "text": EXTRACTION_PROMPT}]


def strip_code_fences(raw: str) -> str:
    """Remove every ```json / ``` marker and surrounding whitespace."""
    return _FENCE.sub("", _FENCE_JSON.sub("", raw)).strip()


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant: {name}")


def parse_metadata(raw: str) -> dict:
    """Parse the model reply into a metadata object.

    Raises InvalidFormat if the cleaned text is not a JSON object. The raw
    text is logged for diagnosis, never returned.
    """
    cleaned = strip_code_fences(raw)

    try:
        parsed = json.loads(cleaned, parse_constant=_reject_constant)
    except ValueError as e:
        logger.error("JSON parse error: %s", e)
        logger.error("Raw response: %s", cleaned)
        raise InvalidFormat() from e

    if not isinstance(parsed, dict):
        logger.error("Model reply is JSON but not an object: %s", cleaned)
        raise InvalidFormat()

    check_schema(parsed)
    return parsed


def check_schema(metadata: dict) -> None:
    """Log a warning when the object drifts from the v3 metadata schema."""
    try:
        MusicMetadata.model_validate(metadata)
    except ValidationError as e:
        logger.warning(
            "Extracted metadata does not match schema (%d issues): %s",
            e.error_count(),
            "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors()),
        )


def extract_metadata(request: ExtractionRequest, client: ClaudeClient | None) -> dict:
    """Run extraction: validate input -> one Claude call -> parse."""
    if not request.fileData:
        raise BadRequest()

    if client is None or not client.configured:
        logger.error("ANTHROPIC_API_KEY is not set, extraction unavailable")
        raise ServiceMisconfigured()

    content = build_content_blocks(request)

    # Never log file content, only its shape
    logger.info(
        "Processing extraction: type=%s name=%s size=%d chars",
        request.fileType.value,
        request.fileName,
        len(request.fileData),
    )

    try:
        raw_text = client.create_message(content)
    except ClaudeAPIError as e:
        logger.warning("Upstream call failed, returning fallback: %s", e)
        raise UpstreamCallFailed() from e

    return parse_metadata(raw_text)
