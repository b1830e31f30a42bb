from voicely.config.settings import Settings
from voicely.exceptions import ConfigurationError
from voicely.extraction.base import BaseDocumentExtractor, BaseTranscriber
from voicely.extraction.pdf_extractors import PdfPlumberExtractor, PyMuPdfExtractor
from voicely.extraction.plain_text_extractor import PlainTextExtractor
from voicely.extraction.text_extractor import TextExtractor
from voicely.extraction.transcription import OpenAITranscriber, PlaceholderTranscriber
from voicely.extraction.word_extractor import WordDocumentExtractor


class PdfExtractorFactory:
    """Creates the correct PDF extractor based on settings."""

    ADAPTERS: dict[str, type[BaseDocumentExtractor]] = {
        "pdfplumber": PdfPlumberExtractor,
        "pymupdf": PyMuPdfExtractor,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseDocumentExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ConfigurationError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()


class TranscriberFactory:
    """Creates the configured speech-to-text adapter."""

    ENGINES = ("placeholder", "openai")

    @classmethod
    def create(cls, settings: Settings) -> BaseTranscriber:
        engine = settings.transcription_engine.lower()
        if engine == "placeholder":
            return PlaceholderTranscriber(
                delay_seconds=settings.placeholder_transcription_delay_seconds
            )
        if engine == "openai":
            if not settings.openai_api_key:
                raise ConfigurationError(
                    "openai_api_key is required for transcription_engine=openai"
                )
            return OpenAITranscriber(
                api_key=settings.openai_api_key,
                model=settings.openai_transcription_model,
                timeout_seconds=settings.openai_timeout_seconds,
                base_url=settings.openai_base_url,
            )
        raise ConfigurationError(
            f"Unknown transcription engine '{engine}'. Choose from: {list(cls.ENGINES)}"
        )


def build_text_extractor(settings: Settings) -> TextExtractor:
    """Wire every document sub-type and the transcriber into a TextExtractor."""
    word_extractor = WordDocumentExtractor()
    return TextExtractor(
        document_extractors={
            "txt": PlainTextExtractor(),
            "pdf": PdfExtractorFactory.create(settings),
            "docx": word_extractor,
            "doc": word_extractor,
        },
        transcriber=TranscriberFactory.create(settings),
    )
