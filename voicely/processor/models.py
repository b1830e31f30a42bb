from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path

from voicely.extraction.models import file_extension
from voicely.text_utils import code_unit_length, truncate_code_units

PREVIEW_LENGTH = 500
ELLIPSIS = "..."


def truncate_preview(text: str, limit: int = PREVIEW_LENGTH) -> str:
    """Cap text at `limit` UTF-16 code units, marking a cut with an ellipsis."""
    if code_unit_length(text) <= limit:
        return text
    return truncate_code_units(text, limit) + ELLIPSIS


@dataclass(frozen=True)
class UploadedFile:
    """A staged upload owned by exactly one pipeline run."""

    path: Path
    original_name: str
    kind: str
    size_bytes: int

    @property
    def extension(self) -> str:
        return file_extension(self.original_name)


@dataclass(frozen=True)
class PipelineOutcome:
    """Descriptor returned to the caller after a successful run."""

    artifact_id: str
    truncated_original_text: str
    truncated_translated_text: str
    source_file_name: str
    source_kind: str
    target_language_code: str
    output_kind: str
    completed_at: datetime
    provider_used: str | None = None
    detected_source_language: str | None = None

    def to_dict(self) -> dict[str, object]:
        payload = asdict(self)
        payload["completed_at"] = self.completed_at.isoformat()
        return payload
