"""Example translation provider.

Use this module as a reference when implementing new providers: subclass
BaseTranslationProvider and register the name in TranslationGatewayFactory.
"""

from voicely.translation.base import BaseTranslationProvider
from voicely.translation.models import ProviderTranslation


class ExampleTranslationProvider(BaseTranslationProvider):
    """Network-free provider that tags the text with the target language.

    Useful for local development and tests; "Hello." becomes "[tr] Hello.".
    """

    name = "example"

    def submit(
        self,
        text: str,
        target: str,
        source: str | None = None,
    ) -> ProviderTranslation:
        return ProviderTranslation(
            translated_text=f"[{target}] {text}",
            detected_source_language=source,
        )
