from dataclasses import dataclass
from pathlib import Path

AUDIO = "audio"
DOCUMENT = "document"

AUDIO_EXTENSIONS = frozenset({"mp3", "wav", "m4a", "aac"})
DOCUMENT_EXTENSIONS = frozenset({"pdf", "docx", "doc", "txt"})

EMPTY_CONTENT_PLACEHOLDER = (
    "No readable text was found in the uploaded file. "
    "The file appears to be empty or to contain only non-text content."
)


def extraction_failed_placeholder(file_name: str) -> str:
    """Fallback text used when a document parser fails."""
    return (
        f"Text extraction failed for the document '{file_name}'. "
        "The file may be damaged or password protected."
    )


@dataclass(frozen=True)
class ExtractionResult:
    """Text pulled out of one upload. `text` is never empty."""

    text: str
    kind: str


def file_extension(file_name: str) -> str:
    """Lower-cased extension without the dot, '' when there is none."""
    return Path(file_name).suffix.lower().lstrip(".")
