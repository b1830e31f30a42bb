from voicely.translation.http_provider import HttpTranslationProvider
from voicely.translation.models import ProviderTranslation


class DeepLProvider(HttpTranslationProvider):
    """DeepL v2 form-encoded translation API."""

    name = "deepl"

    def submit(
        self,
        text: str,
        target: str,
        source: str | None = None,
    ) -> ProviderTranslation:
        form = {
            "auth_key": self._api_key,
            "text": text,
            "target_lang": target.upper(),
        }
        if source:
            form["source_lang"] = source.upper()

        payload = self._post(data=form)
        first = self._first_translation(payload.get("translations"))
        detected = first.get("detected_source_language") or source
        return ProviderTranslation(
            translated_text=first.get("text") or "",
            detected_source_language=detected.lower() if detected else None,
        )
