import re
from datetime import UTC, datetime
from pathlib import Path

from voicely.logging.logger import Log
from voicely.storage.base import BaseArtifactStore
from voicely.storage.exceptions import (
    ArtifactNotFoundError,
    PersistenceFailedError,
    StorageError,
)
from voicely.storage.models import Artifact, RetrievedArtifact, content_type_for

_ARTIFACT_ID = re.compile(r"[0-9a-f]{32}")
_EXTENSION = re.compile(r"[a-z0-9]{1,8}")


def artifact_file_path(root: Path, artifact_id: str, extension: str) -> Path:
    """Build path to artifact file: {root}/{artifact_id}.{extension}"""
    return root / f"{artifact_id}.{extension}"


class FileSystemArtifactStore(BaseArtifactStore):
    """Stores each artifact as one file named after its id.

    Files are created exclusively, so an id is never overwritten and
    concurrent writers need no lock.
    """

    def __init__(self, root: Path) -> None:
        self._root = root

    def write(self, artifact: Artifact, data: bytes) -> None:
        extension = artifact.output_kind.lower()
        if not self._is_valid(artifact.id, extension):
            raise PersistenceFailedError(
                f"Invalid artifact address '{artifact.id}.{artifact.output_kind}'"
            )
        path = artifact_file_path(self._root, artifact.id, extension)
        try:
            self._root.mkdir(parents=True, exist_ok=True)
            with path.open("xb") as handle:
                handle.write(data)
        except FileExistsError as exc:
            raise PersistenceFailedError(f"Artifact {artifact.id} already exists") from exc
        except OSError as exc:
            raise PersistenceFailedError(f"Could not write artifact {artifact.id}: {exc}") from exc
        Log.info(f"Stored artifact {path.name} ({len(data)} bytes)")

    def read(self, artifact_id: str, extension: str) -> RetrievedArtifact:
        extension = extension.lower().lstrip(".")
        if not self._is_valid(artifact_id, extension):
            raise ArtifactNotFoundError(f"Artifact {artifact_id}.{extension} not found")
        path = artifact_file_path(self._root, artifact_id, extension)
        try:
            data = path.read_bytes()
            modified = path.stat().st_mtime
        except FileNotFoundError as exc:
            raise ArtifactNotFoundError(f"Artifact {artifact_id}.{extension} not found") from exc
        except OSError as exc:
            raise StorageError(f"Could not read artifact {artifact_id}: {exc}") from exc

        artifact = Artifact(
            id=artifact_id,
            output_kind=extension,
            created_at=datetime.fromtimestamp(modified, tz=UTC),
        )
        return RetrievedArtifact(
            artifact=artifact,
            data=data,
            content_type=content_type_for(extension),
        )

    @staticmethod
    def _is_valid(artifact_id: str, extension: str) -> bool:
        return bool(_ARTIFACT_ID.fullmatch(artifact_id) and _EXTENSION.fullmatch(extension))
