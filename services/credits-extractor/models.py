"""Pydantic models for the extraction endpoint and the metadata schema."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator


class FileType(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    PDF = "pdf"


class ExtractionRequest(BaseModel):
    fileData: str | None = None
    fileType: FileType = FileType.TEXT
    fileName: str | None = None

    @field_validator("fileType", mode="before")
    @classmethod
    def _null_file_type_is_text(cls, value):
        return FileType.TEXT if value is None else value


# Metadata schema v3. Used to detect drift in model output; the parsed
# object itself is returned to the caller unchanged.

class Artist(BaseModel):
    name: str | None = None
    email: str | None = None


class Release(BaseModel):
    title: str = "Untitled Release"
    type: Literal["EP", "Single", "Album", "UNKNOWN"] = "UNKNOWN"
    year: str | None = None
    tracks: list[str] = []


class Rights(BaseModel):
    masterOwnership: Literal["OWNS", "DOES_NOT_OWN", "PARTIAL", "CONFLICTED", "UNKNOWN"] = "UNKNOWN"
    masterOwnershipNotes: str | None = None
    composition: Literal["SOLE", "CO_WRITTEN", "CONFLICTED", "UNKNOWN"] = "UNKNOWN"
    compositionNotes: str | None = None


class MusicMetadata(BaseModel):
    model_config = ConfigDict(extra="allow")

    artist: Artist
    releases: list[Release] = []
    rights: Rights
    clarificationNeeded: list[str] = []
    parsingErrors: list[str] = []


class ExtractionResponse(BaseModel):
    success: bool = True
    metadata: dict
    schemaVersion: str


class ErrorResponse(BaseModel):
    error: str
    fallback: bool | None = None
