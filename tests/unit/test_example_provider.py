from voicely.translation.example_provider import ExampleTranslationProvider


class TestExampleTranslationProvider:
    def test_tags_text_with_target_language(self) -> None:
        result = ExampleTranslationProvider().submit("Hello.", "tr")
        assert result.translated_text == "[tr] Hello."

    def test_echoes_source_language(self) -> None:
        result = ExampleTranslationProvider().submit("Hello.", "tr", "en")
        assert result.detected_source_language == "en"

    def test_has_registered_name(self) -> None:
        assert ExampleTranslationProvider.name == "example"
