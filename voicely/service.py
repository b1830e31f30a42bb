from datetime import UTC, datetime

from voicely.config.settings import Settings
from voicely.exceptions import VoicelyError
from voicely.extraction.models import AUDIO
from voicely.formatting.models import check_output_kind
from voicely.logging.logger import Log
from voicely.processor.exceptions import ProcessorError
from voicely.processor.models import PipelineOutcome, truncate_preview
from voicely.processor.pipeline import PipelineContext
from voicely.processor.processor import Processor, build_processor
from voicely.processor.upload_stager import UploadStager, classify_upload
from voicely.speech.factory import build_text_to_speech
from voicely.speech.models import (
    DEFAULT_AUDIO_ENCODING,
    DEFAULT_LANGUAGE_CODE,
    SynthesizedSpeech,
    Voice,
)
from voicely.speech.placeholder_synthesizer import PlaceholderSpeechSynthesizer
from voicely.speech.text_to_speech import TextToSpeech
from voicely.storage.base import BaseArtifactStore
from voicely.storage.filesystem_store import FileSystemArtifactStore
from voicely.storage.models import RetrievedArtifact
from voicely.translation.exceptions import InvalidTranslationInputError
from voicely.translation.factory import TranslationGatewayFactory
from voicely.translation.gateway import TranslationGateway
from voicely.translation.models import TranslationResult


class TranslationService:
    """Entry point for the transport layer.

    Every failure is raised as a VoicelyError; `error_payload` turns it into
    the structured `{kind, message}` form.
    """

    def __init__(
        self,
        *,
        stager: UploadStager,
        processor: Processor,
        gateway: TranslationGateway,
        store: BaseArtifactStore,
        speech: TextToSpeech | None = None,
        include_error_details: bool = False,
    ) -> None:
        self._stager = stager
        self._processor = processor
        self._gateway = gateway
        self._store = store
        self._speech = (
            speech if speech is not None else TextToSpeech(PlaceholderSpeechSynthesizer())
        )
        self._include_error_details = include_error_details

    def submit(
        self,
        file_bytes: bytes,
        file_name: str,
        target_language: str,
        output_kind: str,
        source_language: str | None = None,
    ) -> PipelineOutcome:
        """Run one upload through the pipeline and describe the stored artifact.

        The file type, output kind and target language are checked before
        anything is staged, so a rejected request never reaches extraction or
        a translation provider.
        """
        kind = classify_upload(file_name)
        output = check_output_kind(output_kind, is_timed_media=kind == AUDIO)
        if not target_language or not target_language.strip():
            raise InvalidTranslationInputError("Target language is required")

        upload = self._stager.stage(file_bytes, file_name)
        context = self._processor.process(
            PipelineContext(
                upload=upload,
                target_language=target_language.strip(),
                output_kind=output,
                source_language=source_language,
            )
        )
        if context.artifact is None:
            raise ProcessorError("Pipeline finished without an artifact")

        translation = context.translation
        return PipelineOutcome(
            artifact_id=context.artifact.id,
            truncated_original_text=truncate_preview(context.original_text),
            truncated_translated_text=truncate_preview(context.translated_text),
            source_file_name=upload.original_name,
            source_kind=upload.kind,
            target_language_code=context.target_language,
            output_kind=output,
            completed_at=datetime.now(UTC),
            provider_used=translation.provider_used if translation else None,
            detected_source_language=(
                translation.detected_source_language if translation else None
            ),
        )

    def retrieve_artifact(self, artifact_id: str, extension: str) -> RetrievedArtifact:
        return self._store.read(artifact_id, extension)

    def translate(
        self,
        text: str,
        target: str,
        source: str | None = None,
        provider: str | None = None,
    ) -> TranslationResult:
        return self._gateway.translate(text, target, source=source, provider=provider)

    def synthesize_speech(
        self,
        text: str,
        language_code: str = DEFAULT_LANGUAGE_CODE,
        voice_name: str | None = None,
        audio_encoding: str = DEFAULT_AUDIO_ENCODING,
        speaking_rate: float = 1.0,
        pitch: float = 0.0,
    ) -> SynthesizedSpeech:
        return self._speech.synthesize(
            text,
            language_code=language_code,
            voice_name=voice_name,
            audio_encoding=audio_encoding,
            speaking_rate=speaking_rate,
            pitch=pitch,
        )

    def list_voices(self) -> dict[str, list[Voice]]:
        """Available voices keyed by language code."""
        return self._speech.voices_by_language()

    def error_payload(self, exc: VoicelyError) -> dict[str, str]:
        return exc.to_dict(include_details=self._include_error_details)

    def close(self) -> None:
        """Release provider and transcriber HTTP clients."""
        self._processor.close()
        self._gateway.close()
        self._speech.close()


def build_service(settings: Settings) -> TranslationService:
    """Validate settings and wire the whole pipeline.

    Raises:
        ConfigurationError: settings cannot produce a working service.
    """
    Log.configure(settings.log_level)
    gateway = TranslationGatewayFactory.create(settings)
    store = FileSystemArtifactStore(settings.artifacts_dir)
    stager = UploadStager(
        uploads_root=settings.uploads_dir,
        max_upload_bytes=settings.max_upload_bytes,
    )
    processor = build_processor(settings, gateway=gateway, store=store, stager=stager)
    speech = build_text_to_speech(settings)
    Log.info(
        f"Translation service ready (providers: {', '.join(gateway.provider_names)}, "
        f"pdf engine: {settings.pdf_engine}, transcription: {settings.transcription_engine}, "
        f"tts: {settings.tts_engine})"
    )
    return TranslationService(
        stager=stager,
        processor=processor,
        gateway=gateway,
        store=store,
        speech=speech,
        include_error_details=settings.include_error_details,
    )
