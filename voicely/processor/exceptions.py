from voicely.exceptions import VoicelyError


class ProcessorError(VoicelyError):
    """Base exception for pipeline orchestration errors."""

    kind = "ProcessorError"


class RejectedFileTypeError(ProcessorError):
    """Raised when an upload is not on the audio/document allow-list."""

    kind = "RejectedFileType"

    def __init__(self, file_name: str, extension: str) -> None:
        shown = f".{extension}" if extension else "no extension"
        super().__init__(f"File type of '{file_name}' ({shown}) is not allowed")
        self.file_name = file_name
        self.extension = extension


class UploadTooLargeError(ProcessorError):
    """Raised when an upload exceeds the size ceiling."""

    kind = "UploadTooLarge"

    def __init__(self, file_name: str, size_bytes: int, limit_bytes: int) -> None:
        super().__init__(
            f"Upload '{file_name}' is {size_bytes} bytes, limit is {limit_bytes} bytes"
        )
        self.file_name = file_name
        self.size_bytes = size_bytes
        self.limit_bytes = limit_bytes


class UploadStagingError(ProcessorError):
    """Raised when an upload cannot be written to the staging area."""

    kind = "UploadFailed"


class TranslationFailedError(ProcessorError):
    """Raised when the translation stage of a run fails.

    Keeps the extracted original text for diagnostics.
    """

    kind = "TranslationFailed"

    def __init__(self, message: str, original_text: str, cause_kind: str) -> None:
        super().__init__(message)
        self.original_text = original_text
        self.cause_kind = cause_kind
