import uuid
from collections.abc import Callable
from datetime import UTC, datetime

from voicely.extraction.models import AUDIO
from voicely.extraction.text_extractor import TextExtractor
from voicely.formatting.formatter import ArtifactFormatter
from voicely.logging.logger import Log
from voicely.processor.exceptions import TranslationFailedError
from voicely.processor.pipeline import (
    EXTRACTING,
    FORMATTING,
    TRANSLATING,
    PipelineContext,
    PipelineStep,
)
from voicely.processor.upload_stager import UploadStager
from voicely.storage.base import BaseArtifactStore
from voicely.storage.models import Artifact
from voicely.translation.exceptions import TranslationError
from voicely.translation.gateway import TranslationGateway


class ExtractTextStep(PipelineStep):
    state = EXTRACTING

    def __init__(self, text_extractor: TextExtractor) -> None:
        self._text_extractor = text_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        upload = context.upload
        context.extraction = self._text_extractor.extract(
            upload.path,
            upload.kind,
            upload.original_name,
        )
        context.original_text = context.extraction.text
        Log.info(
            f"Extracted {len(context.original_text)} chars from {upload.original_name}",
            stage=EXTRACTING,
        )
        return context

    def close(self) -> None:
        self._text_extractor.close()


class ReleaseUploadStep(PipelineStep):
    def __init__(self, stager: UploadStager) -> None:
        self._stager = stager

    def run(self, context: PipelineContext) -> PipelineContext:
        if not context.upload_released:
            self._stager.release(context.upload)
            context.upload_released = True
        return context


class TranslateStep(PipelineStep):
    state = TRANSLATING

    def __init__(self, gateway: TranslationGateway) -> None:
        self._gateway = gateway

    def run(self, context: PipelineContext) -> PipelineContext:
        if not context.original_text.strip():
            Log.warning(
                f"Nothing to translate for {context.upload.original_name}, skipping",
                stage=TRANSLATING,
            )
            context.translated_text = ""
            return context
        try:
            context.translation = self._gateway.translate(
                context.original_text,
                context.target_language,
                context.source_language,
            )
        except TranslationError as exc:
            raise TranslationFailedError(
                f"Translation failed: {exc.message}",
                original_text=context.original_text,
                cause_kind=exc.kind,
            ) from exc
        context.translated_text = context.translation.translated_text
        return context


class FormatArtifactStep(PipelineStep):
    state = FORMATTING

    def __init__(self, formatter: ArtifactFormatter) -> None:
        self._formatter = formatter

    def run(self, context: PipelineContext) -> PipelineContext:
        context.content = self._formatter.format(
            context.original_text,
            context.translated_text,
            context.upload.original_name,
            context.output_kind,
            is_timed_media=context.upload.kind == AUDIO,
        )
        return context


class PersistArtifactStep(PipelineStep):
    state = FORMATTING

    def __init__(
        self,
        store: BaseArtifactStore,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        self._store = store
        self._now = now if now is not None else (lambda: datetime.now(UTC))

    def run(self, context: PipelineContext) -> PipelineContext:
        artifact = Artifact(
            id=uuid.uuid4().hex,
            output_kind=context.output_kind,
            created_at=self._now(),
        )
        self._store.write(artifact, context.content)
        context.artifact = artifact
        return context
