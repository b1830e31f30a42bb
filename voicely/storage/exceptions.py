from voicely.exceptions import VoicelyError


class StorageError(VoicelyError):
    """Base exception for artifact store failures."""

    kind = "StorageError"


class PersistenceFailedError(StorageError):
    """Raised when artifact bytes cannot be written."""

    kind = "PersistenceFailed"


class ArtifactNotFoundError(StorageError):
    """Raised when no artifact exists for an id and extension."""

    kind = "NotFound"
