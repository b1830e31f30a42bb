from voicely.config.settings import Settings
from voicely.exceptions import VoicelyError
from voicely.extraction.factory import build_text_extractor
from voicely.formatting.formatter import ArtifactFormatter
from voicely.logging.logger import Log
from voicely.processor.exceptions import ProcessorError
from voicely.processor.pipeline import FAILED, PERSISTED, PipelineContext, PipelineStep
from voicely.processor.steps import (
    ExtractTextStep,
    FormatArtifactStep,
    PersistArtifactStep,
    ReleaseUploadStep,
    TranslateStep,
)
from voicely.processor.upload_stager import UploadStager
from voicely.storage.base import BaseArtifactStore
from voicely.translation.gateway import TranslationGateway


class Processor:
    """Runs one upload through the pipeline steps in order.

    Pipeline: extract -> release upload -> translate -> format -> persist.
    The release step also runs on every failure path, before the error
    reaches the caller, so no staged upload outlives its run. Errors outside
    the VoicelyError taxonomy are re-raised as ProcessorError.
    """

    def __init__(self, steps: list[PipelineStep], release_step: PipelineStep) -> None:
        self._steps = steps
        self._release_step = release_step

    def process(self, context: PipelineContext) -> PipelineContext:
        upload = context.upload
        Log.info(
            f"Processing {upload.original_name} ({upload.kind}) "
            f"-> {context.target_language}/{context.output_kind}"
        )
        try:
            for step in self._steps:
                if step.state is not None and step.state != context.state:
                    Log.debug(
                        f"{upload.original_name}: {context.state} -> {step.state}",
                        stage=step.state,
                    )
                    context.state = step.state
                context = step.run(context)
        except Exception as exc:
            failed_state = context.state
            context.failed_state = failed_state
            context.state = FAILED
            context.error_message = str(exc)
            self._release_step.run(context)
            Log.error(
                f"Pipeline failed while {failed_state} for "
                f"{upload.original_name}: {exc}",
                stage=failed_state,
            )
            if isinstance(exc, VoicelyError):
                raise
            raise ProcessorError(f"Pipeline failed while {failed_state}: {exc}") from exc

        if not context.upload_released:
            self._release_step.run(context)
        context.state = PERSISTED
        artifact_id = context.artifact.id if context.artifact else "-"
        Log.info(
            f"Pipeline finished for {upload.original_name}: artifact {artifact_id}",
            stage=PERSISTED,
        )
        return context

    def close(self) -> None:
        for step in self._steps:
            step.close()


def build_processor(
    settings: Settings,
    gateway: TranslationGateway,
    store: BaseArtifactStore,
    stager: UploadStager,
    formatter: ArtifactFormatter | None = None,
) -> Processor:
    """Build a Processor with the configured extractors and collaborators."""
    release_step = ReleaseUploadStep(stager)
    steps: list[PipelineStep] = [
        ExtractTextStep(build_text_extractor(settings)),
        release_step,
        TranslateStep(gateway),
        FormatArtifactStep(formatter if formatter is not None else ArtifactFormatter()),
        PersistArtifactStep(store),
    ]
    return Processor(steps=steps, release_step=release_step)
