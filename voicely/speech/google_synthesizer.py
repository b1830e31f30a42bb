import base64
import binascii
from typing import Any

import httpx

from voicely.speech.base import BaseSpeechSynthesizer
from voicely.speech.exceptions import (
    SpeechError,
    SpeechSynthesisFailedError,
    VoiceListingFailedError,
)
from voicely.speech.models import SpeechRequest, Voice
from voicely.translation.base import USER_AGENT


class GoogleTextToSpeechSynthesizer(BaseSpeechSynthesizer):
    """Google Cloud Text-to-Speech v1 REST API (API-key auth)."""

    def __init__(
        self,
        *,
        api_key: str,
        api_url: str,
        timeout_seconds: float,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._api_key = api_key
        self._api_url = api_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._owns_client = http_client is None
        self._client = http_client if http_client is not None else httpx.Client()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def synthesize(self, request: SpeechRequest) -> bytes:
        body = {
            "input": {"text": request.text},
            "voice": {"languageCode": request.language_code, "name": request.voice_name},
            "audioConfig": {
                "audioEncoding": request.audio_encoding,
                "speakingRate": request.speaking_rate,
                "pitch": request.pitch,
            },
        }
        payload = self._call("POST", "text:synthesize", SpeechSynthesisFailedError, json=body)
        content = payload.get("audioContent")
        if not content:
            raise SpeechSynthesisFailedError("No audio content received from Google TTS")
        try:
            return base64.b64decode(content, validate=True)
        except (binascii.Error, TypeError) as exc:
            raise SpeechSynthesisFailedError("Google TTS returned malformed audio") from exc

    def list_voices(self) -> list[Voice]:
        payload = self._call("GET", "voices", VoiceListingFailedError)
        voices = payload.get("voices") or []
        if not isinstance(voices, list):
            raise VoiceListingFailedError("Google TTS returned a malformed voice list")
        return [
            Voice(
                name=entry.get("name", ""),
                gender=entry.get("ssmlGender", "SSML_VOICE_GENDER_UNSPECIFIED"),
                natural_sample_rate_hertz=int(entry.get("naturalSampleRateHertz") or 0),
                language_codes=tuple(entry.get("languageCodes") or ()),
            )
            for entry in voices
            if isinstance(entry, dict)
        ]

    def _call(
        self,
        method: str,
        path: str,
        error_cls: type[SpeechError],
        **kwargs: Any,
    ) -> dict[str, Any]:
        try:
            response = self._client.request(
                method,
                f"{self._api_url}/{path}",
                params={"key": self._api_key},
                headers={"User-Agent": USER_AGENT},
                timeout=self._timeout_seconds,
                **kwargs,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise error_cls(
                f"Google TTS returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.TimeoutException as exc:
            raise error_cls(f"Google TTS timed out after {self._timeout_seconds}s") from exc
        except httpx.HTTPError as exc:
            raise error_cls(f"Google TTS network error: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise error_cls("Google TTS response is not valid JSON") from exc
        if not isinstance(payload, dict):
            raise error_cls("Google TTS response must be a JSON object")
        return payload
