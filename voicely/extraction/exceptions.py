from voicely.exceptions import VoicelyError


class ExtractionError(VoicelyError):
    """Base exception for text extraction failures reported to callers."""

    kind = "ExtractionError"


class UnsupportedFormatError(ExtractionError):
    """Raised when a document sub-type has no extractor."""

    kind = "UnsupportedFormat"

    def __init__(self, extension: str) -> None:
        super().__init__(f"Unsupported document format '.{extension}'")
        self.extension = extension


class TranscriptionFailedError(ExtractionError):
    """Raised when audio cannot be turned into text and no fallback exists."""

    kind = "TranscriptionFailed"


class DocumentParseError(Exception):
    """Raised by a document parser on malformed or unreadable content.

    Never leaves the extraction package: TextExtractor turns it into
    fallback text.
    """
