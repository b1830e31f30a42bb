from dataclasses import dataclass
from datetime import datetime

CONTENT_TYPES: dict[str, str] = {
    "txt": "text/plain; charset=utf-8",
    "srt": "application/x-subrip; charset=utf-8",
    "vtt": "text/vtt; charset=utf-8",
    "pdf": "application/pdf",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}
DEFAULT_CONTENT_TYPE = "application/octet-stream"


def content_type_for(extension: str) -> str:
    return CONTENT_TYPES.get(extension.lower().lstrip("."), DEFAULT_CONTENT_TYPE)


@dataclass(frozen=True)
class Artifact:
    """Metadata of a persisted artifact. The output kind is its extension."""

    id: str
    output_kind: str
    created_at: datetime


@dataclass(frozen=True)
class RetrievedArtifact:
    """Artifact bytes plus a content-type hint for the transport layer."""

    artifact: Artifact
    data: bytes
    content_type: str
