"""Error taxonomy for the extraction endpoint.

Each error knows its HTTP status and whether the caller should fall back to
manual entry. ``main.py`` renders them as ``{"error": ..., "fallback": ...}``.
"""


class ExtractionError(Exception):
    """Base class for errors surfaced to the caller."""

    status_code = 500
    message = "Extraction error"
    fallback = True

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_content(self) -> dict:
        content = {"error": self.message}
        if self.fallback:
            content["fallback"] = True
        return content


class BadRequest(ExtractionError):
    status_code = 400
    message = "No file data provided"
    fallback = False


class ServiceMisconfigured(ExtractionError):
    """Server credential is missing (configuration error, not a user error)."""

    message = "API key not configured"


class UpstreamCallFailed(ExtractionError):
    message = "Extraction failed"


class InvalidFormat(ExtractionError):
    """Model reply could not be parsed as a JSON object."""

    message = "Invalid extraction format"


class UnexpectedInternalError(ExtractionError):
    pass
