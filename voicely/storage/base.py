from abc import ABC, abstractmethod

from voicely.storage.models import Artifact, RetrievedArtifact


class BaseArtifactStore(ABC):
    """Contract for append-only, id-addressed artifact storage."""

    @abstractmethod
    def write(self, artifact: Artifact, data: bytes) -> None:
        """Persist `data` once under the artifact's id and kind.

        Raises:
            PersistenceFailedError: on any I/O failure or an existing id.
        """

    @abstractmethod
    def read(self, artifact_id: str, extension: str) -> RetrievedArtifact:
        """Load a previously written artifact.

        Raises:
            ArtifactNotFoundError: if nothing was written under that id.
        """
