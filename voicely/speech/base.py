from abc import ABC, abstractmethod

from voicely.speech.models import SpeechRequest, Voice


class BaseSpeechSynthesizer(ABC):
    """Contract for text-to-speech adapters."""

    @abstractmethod
    def synthesize(self, request: SpeechRequest) -> bytes:
        """Render the request as audio in `request.audio_encoding`.

        Raises:
            SpeechSynthesisFailedError: the engine produced no audio.
        """

    @abstractmethod
    def list_voices(self) -> list[Voice]:
        """Return every voice the engine offers.

        Raises:
            VoiceListingFailedError: the catalogue could not be fetched.
        """

    def close(self) -> None:
        """Release network resources. Local synthesizers keep the no-op."""
