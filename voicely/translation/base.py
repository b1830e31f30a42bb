from abc import ABC, abstractmethod
from typing import ClassVar

from voicely.translation.models import ProviderTranslation

USER_AGENT = "VoicelyApp/1.0"


class BaseTranslationProvider(ABC):
    """Contract for every translation backend."""

    name: ClassVar[str] = ""

    @abstractmethod
    def submit(
        self,
        text: str,
        target: str,
        source: str | None = None,
    ) -> ProviderTranslation:
        """Translate text with this provider only.

        Args:
            text: Source text, already validated by the gateway.
            target: Target language code, e.g. "tr".
            source: Optional source language code; detected when omitted.

        Returns:
            ProviderTranslation with the translated text.

        Raises:
            ProviderError: on non-2xx responses, network errors, timeouts
                or malformed payloads.
        """

    def close(self) -> None:
        """Release network resources. Providers without any keep the no-op."""
