import io
import time
from typing import ClassVar

import httpx
import openai

from voicely.extraction.base import BaseTranscriber
from voicely.extraction.exceptions import TranscriptionFailedError
from voicely.logging.logger import Log


class PlaceholderTranscriber(BaseTranscriber):
    """Stand-in transcriber that never calls a speech service.

    Waits for a short artificial latency and returns a fixed description so
    the rest of the pipeline (translation, subtitle timing) can run end to end.
    """

    PLACEHOLDER_TEXT: ClassVar[str] = (
        "This is a placeholder transcription of the uploaded audio recording. "
        "Speech recognition is not enabled for this deployment. "
        "Configure a real transcription engine to receive the spoken words."
    )

    def __init__(self, delay_seconds: float = 2.0) -> None:
        self._delay_seconds = max(0.0, delay_seconds)

    def transcribe(self, audio: bytes, file_name: str) -> str:
        Log.debug(f"Placeholder transcription for {file_name} ({len(audio)} bytes)")
        if self._delay_seconds:
            time.sleep(self._delay_seconds)
        return self.PLACEHOLDER_TEXT


class OpenAITranscriber(BaseTranscriber):
    """Speech-to-text through the OpenAI audio transcription API."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: int,
        base_url: str | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        # one HTTP attempt per call; no SDK retries
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
            http_client=http_client,
        )
        self._model = model

    def transcribe(self, audio: bytes, file_name: str) -> str:
        buffer = io.BytesIO(audio)
        buffer.name = file_name
        try:
            response = self._client.audio.transcriptions.create(
                model=self._model,
                file=buffer,
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise TranscriptionFailedError(
                f"Transcription service network error: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise TranscriptionFailedError(
                f"Transcription service API error: {exc}"
            ) from exc
        return getattr(response, "text", None) or ""

    def close(self) -> None:
        self._client.close()
