from typing import ClassVar

import httpx
import openai

from voicely.translation.base import BaseTranslationProvider
from voicely.translation.exceptions import ProviderError
from voicely.translation.models import ProviderTranslation


class OpenAITranslationProvider(BaseTranslationProvider):
    """Translation through an OpenAI-compatible chat completion API."""

    name = "openai"

    SYSTEM_PROMPT: ClassVar[str] = (
        "You are a professional translator. Return only the translated text, "
        "without explanations, quotes or notes."
    )
    PROMPT_TEMPLATE: ClassVar[str] = (
        "Translate the following text {source_clause}into the language with "
        "code '{target}'. Keep sentence boundaries and punctuation.\n\n{text}"
    )

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: float,
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

    def submit(
        self,
        text: str,
        target: str,
        source: str | None = None,
    ) -> ProviderTranslation:
        source_clause = f"from the language with code '{source}' " if source else ""
        prompt = self.PROMPT_TEMPLATE.format(
            source_clause=source_clause,
            target=target,
            text=text,
        )
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": self.SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ProviderError(self.name, f"network error: {exc}") from exc
        except openai.APIError as exc:
            raise ProviderError(self.name, f"API error: {exc}") from exc

        if not response.choices:
            raise ProviderError(self.name, "model returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise ProviderError(self.name, "model returned an empty response")
        return ProviderTranslation(
            translated_text=content.strip(),
            detected_source_language=source,
        )

    def close(self) -> None:
        self._client.close()
