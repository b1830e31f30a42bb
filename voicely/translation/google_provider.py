from voicely.translation.http_provider import HttpTranslationProvider
from voicely.translation.models import ProviderTranslation


class GoogleTranslateProvider(HttpTranslationProvider):
    """Google Cloud Translation v2 REST API (API-key auth)."""

    name = "google"

    def submit(
        self,
        text: str,
        target: str,
        source: str | None = None,
    ) -> ProviderTranslation:
        # format=text stops the API from HTML-escaping quotes in the result
        body = {"q": text, "target": target, "format": "text"}
        if source:
            body["source"] = source

        payload = self._post(params={"key": self._api_key}, json=body)
        data = payload.get("data")
        translations = data.get("translations") if isinstance(data, dict) else None
        first = self._first_translation(translations)
        return ProviderTranslation(
            translated_text=first.get("translatedText") or "",
            detected_source_language=first.get("detectedSourceLanguage") or source,
        )
