from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from voicely.extraction.models import ExtractionResult
from voicely.processor.models import UploadedFile
from voicely.storage.models import Artifact
from voicely.translation.models import TranslationResult

RECEIVED = "received"
EXTRACTING = "extracting"
TRANSLATING = "translating"
FORMATTING = "formatting"
PERSISTED = "persisted"
FAILED = "failed"


@dataclass(slots=True)
class PipelineContext:
    upload: UploadedFile
    target_language: str
    output_kind: str
    source_language: str | None = None
    state: str = RECEIVED
    failed_state: str | None = None
    extraction: ExtractionResult | None = None
    original_text: str = ""
    translation: TranslationResult | None = None
    translated_text: str = ""
    content: bytes = b""
    artifact: Artifact | None = None
    upload_released: bool = False
    error_message: str = ""


class PipelineStep(ABC):
    # state the run is in while this step executes; None keeps the current one
    state: ClassVar[str | None] = None

    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError

    def close(self) -> None:
        """Release resources owned by the step."""
