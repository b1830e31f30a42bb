import json
import time
from collections.abc import Callable
from typing import Any

import httpx

from voicely.translation.base import USER_AGENT, BaseTranslationProvider
from voicely.translation.exceptions import ProviderError


class HttpTranslationProvider(BaseTranslationProvider):
    """Shared request/response handling for REST translation APIs.

    The body is streamed against an overall deadline of `timeout_seconds`;
    httpx also applies it to each connect, write and read phase.
    """

    def __init__(
        self,
        *,
        api_key: str,
        api_url: str,
        timeout_seconds: float,
        http_client: httpx.Client | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._api_key = api_key
        self._api_url = api_url
        self._timeout_seconds = timeout_seconds
        self._owns_client = http_client is None
        self._client = http_client if http_client is not None else httpx.Client()
        self._clock = clock

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def _post(self, **kwargs: Any) -> dict[str, Any]:
        """POST to the provider and return the decoded JSON object."""
        deadline = self._clock() + self._timeout_seconds
        try:
            with self._client.stream(
                "POST",
                self._api_url,
                headers={"User-Agent": USER_AGENT},
                timeout=self._timeout_seconds,
                **kwargs,
            ) as response:
                response.raise_for_status()
                body = self._read_body(response, deadline)
        except httpx.HTTPStatusError as exc:
            raise ProviderError(
                self.name,
                f"HTTP {exc.response.status_code} {exc.response.reason_phrase}",
            ) from exc
        except httpx.TimeoutException as exc:
            raise ProviderError(self.name, self._timed_out()) from exc
        except httpx.HTTPError as exc:
            raise ProviderError(self.name, f"network error: {exc}") from exc

        try:
            payload = json.loads(body)
        except ValueError as exc:
            raise ProviderError(self.name, "response is not valid JSON") from exc
        if not isinstance(payload, dict):
            raise ProviderError(self.name, "response must be a JSON object")
        return payload

    def _read_body(self, response: httpx.Response, deadline: float) -> bytes:
        chunks = []
        for chunk in response.iter_bytes():
            chunks.append(chunk)
            if self._clock() > deadline:
                raise ProviderError(self.name, self._timed_out())
        return b"".join(chunks)

    def _timed_out(self) -> str:
        return f"timed out after {self._timeout_seconds}s"

    def _first_translation(self, translations: object) -> dict[str, Any]:
        if not isinstance(translations, list) or not translations:
            raise ProviderError(self.name, "response contains no translations")
        first = translations[0]
        if not isinstance(first, dict):
            raise ProviderError(self.name, "malformed translation entry")
        return first
