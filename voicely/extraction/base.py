from abc import ABC, abstractmethod


class BaseDocumentExtractor(ABC):
    """Contract for all document text extraction adapters."""

    @abstractmethod
    def extract(self, content: bytes) -> str:
        """Extract plain text from raw document bytes.

        Args:
            content: Raw file content.

        Returns:
            Extracted text, stripped of surrounding whitespace.

        Raises:
            DocumentParseError: if the content cannot be parsed.
        """


class BaseTranscriber(ABC):
    """Contract for speech-to-text adapters."""

    @abstractmethod
    def transcribe(self, audio: bytes, file_name: str) -> str:
        """Turn audio bytes into text.

        Raises:
            TranscriptionFailedError: if no text can be produced.
        """

    def close(self) -> None:
        """Release network resources. Local transcribers keep the no-op."""
