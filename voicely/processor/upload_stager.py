import uuid
from pathlib import Path

from voicely.extraction.models import (
    AUDIO,
    AUDIO_EXTENSIONS,
    DOCUMENT,
    DOCUMENT_EXTENSIONS,
    file_extension,
)
from voicely.logging.logger import Log
from voicely.processor.exceptions import (
    RejectedFileTypeError,
    UploadStagingError,
    UploadTooLargeError,
)
from voicely.processor.models import UploadedFile

DEFAULT_MAX_UPLOAD_BYTES = 50 * 1024 * 1024


def classify_upload(file_name: str) -> str:
    """Map a file name to `audio` or `document` using the allow-list.

    Raises:
        RejectedFileTypeError: the extension is not allowed.
    """
    extension = file_extension(file_name)
    if extension in AUDIO_EXTENSIONS:
        return AUDIO
    if extension in DOCUMENT_EXTENSIONS:
        return DOCUMENT
    raise RejectedFileTypeError(file_name, extension)


class UploadStager:
    """Writes upload bytes to a private staging file and deletes it afterwards."""

    UPLOADS_ROOT = Path("data/uploads")

    def __init__(
        self,
        uploads_root: Path | None = None,
        max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
    ) -> None:
        self._uploads_root = uploads_root if uploads_root is not None else self.UPLOADS_ROOT
        self._max_upload_bytes = max_upload_bytes

    def stage(self, content: bytes, file_name: str) -> UploadedFile:
        """Validate and persist upload bytes for one run.

        Raises:
            RejectedFileTypeError: the extension is not allowed.
            UploadTooLargeError: the content exceeds the size ceiling.
            UploadStagingError: the staging file cannot be written.
        """
        kind = classify_upload(file_name)
        if len(content) > self._max_upload_bytes:
            raise UploadTooLargeError(file_name, len(content), self._max_upload_bytes)

        path = self._uploads_root / f"{uuid.uuid4().hex}.{file_extension(file_name)}"
        try:
            self._uploads_root.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        except OSError as exc:
            path.unlink(missing_ok=True)
            raise UploadStagingError(f"Could not stage upload '{file_name}': {exc}") from exc

        Log.info(f"Staged {len(content)} bytes of {file_name} as {kind}")
        return UploadedFile(
            path=path,
            original_name=file_name,
            kind=kind,
            size_bytes=len(content),
        )

    def release(self, upload: UploadedFile) -> bool:
        """Delete the staging file. Failures are logged, never raised."""
        try:
            upload.path.unlink(missing_ok=True)
        except OSError as exc:
            Log.warning(f"Could not delete staged upload {upload.path}: {exc}")
            return False
        Log.debug(f"Released staged upload {upload.path.name}")
        return True
