from collections.abc import Mapping
from pathlib import Path

from voicely.extraction.base import BaseDocumentExtractor, BaseTranscriber
from voicely.extraction.exceptions import UnsupportedFormatError
from voicely.extraction.models import (
    AUDIO,
    DOCUMENT,
    EMPTY_CONTENT_PLACEHOLDER,
    ExtractionResult,
    extraction_failed_placeholder,
    file_extension,
)
from voicely.logging.logger import Log


class TextExtractor:
    """Turns a staged upload into text.

    Document parsers that fail are replaced by an explanatory placeholder so
    the pipeline keeps running; only an unsupported sub-type or a failed
    transcription is reported as an error.
    """

    def __init__(
        self,
        document_extractors: Mapping[str, BaseDocumentExtractor],
        transcriber: BaseTranscriber,
    ) -> None:
        self._document_extractors = dict(document_extractors)
        self._transcriber = transcriber

    def extract(self, path: Path, kind: str, file_name: str | None = None) -> ExtractionResult:
        """Extract trimmed, non-empty text from the file at `path`.

        Args:
            path: Location of the staged upload.
            kind: `audio` or `document`.
            file_name: Original upload name; its extension selects the
                document sub-type. Defaults to the staged file's name.

        Raises:
            UnsupportedFormatError: no extractor for the document extension.
            TranscriptionFailedError: the transcriber could not produce text.
        """
        name = file_name or path.name
        if kind == AUDIO:
            text = self._transcriber.transcribe(path.read_bytes(), name)
        elif kind == DOCUMENT:
            text = self._extract_document(path, name)
        else:
            raise ValueError(f"Unknown source kind '{kind}'")

        text = text.strip()
        if not text:
            Log.warning(f"No text extracted from {name}, using placeholder")
            text = EMPTY_CONTENT_PLACEHOLDER
        return ExtractionResult(text=text, kind=kind)

    def _extract_document(self, path: Path, name: str) -> str:
        extension = file_extension(name)
        extractor = self._document_extractors.get(extension)
        if extractor is None:
            raise UnsupportedFormatError(extension)

        content = path.read_bytes()
        try:
            return extractor.extract(content)
        except Exception as exc:
            Log.warning(f"Extraction of {name} failed, using fallback text: {exc}")
            return extraction_failed_placeholder(name)

    def close(self) -> None:
        self._transcriber.close()
