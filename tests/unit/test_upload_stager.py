from pathlib import Path
from unittest.mock import patch

import pytest

from voicely.extraction.models import AUDIO, DOCUMENT
from voicely.processor.exceptions import (
    RejectedFileTypeError,
    UploadStagingError,
    UploadTooLargeError,
)
from voicely.processor.upload_stager import UploadStager, classify_upload


class TestClassifyUpload:
    @pytest.mark.parametrize("name", ["memo.mp3", "a.wav", "b.M4A", "c.aac"])
    def test_audio_extensions(self, name: str) -> None:
        assert classify_upload(name) == AUDIO

    @pytest.mark.parametrize("name", ["r.pdf", "l.docx", "old.DOC", "n.txt"])
    def test_document_extensions(self, name: str) -> None:
        assert classify_upload(name) == DOCUMENT

    @pytest.mark.parametrize("name", ["virus.exe", "archive.tar.gz", "README", "photo.png"])
    def test_rejects_everything_else(self, name: str) -> None:
        with pytest.raises(RejectedFileTypeError) as exc_info:
            classify_upload(name)
        assert exc_info.value.kind == "RejectedFileType"

    def test_rejection_message_for_missing_extension(self) -> None:
        with pytest.raises(RejectedFileTypeError, match="no extension"):
            classify_upload("Makefile")


class TestStage:
    def test_writes_private_copy(self, tmp_path: Path) -> None:
        stager = UploadStager(uploads_root=tmp_path / "uploads")

        upload = stager.stage(b"Hello.", "My Notes.TXT")

        assert upload.path.parent == tmp_path / "uploads"
        assert upload.path.read_bytes() == b"Hello."
        assert upload.path.suffix == ".txt"
        assert upload.path.name != "My Notes.TXT"
        assert upload.original_name == "My Notes.TXT"
        assert upload.kind == DOCUMENT
        assert upload.size_bytes == 6
        assert upload.extension == "txt"

    def test_each_run_gets_its_own_file(self, tmp_path: Path) -> None:
        stager = UploadStager(uploads_root=tmp_path)
        first = stager.stage(b"a", "same.txt")
        second = stager.stage(b"b", "same.txt")
        assert first.path != second.path

    def test_rejected_type_writes_nothing(self, tmp_path: Path) -> None:
        stager = UploadStager(uploads_root=tmp_path / "uploads")
        with pytest.raises(RejectedFileTypeError):
            stager.stage(b"MZ", "tool.exe")
        assert not (tmp_path / "uploads").exists()

    def test_oversized_upload_is_rejected(self, tmp_path: Path) -> None:
        stager = UploadStager(uploads_root=tmp_path, max_upload_bytes=4)
        with pytest.raises(UploadTooLargeError) as exc_info:
            stager.stage(b"12345", "big.wav")
        assert exc_info.value.size_bytes == 5
        assert exc_info.value.limit_bytes == 4
        assert list(tmp_path.iterdir()) == []

    def test_write_failure_raises_staging_error(self, tmp_path: Path) -> None:
        stager = UploadStager(uploads_root=tmp_path)
        with patch.object(Path, "write_bytes", side_effect=OSError("disk full")):
            with pytest.raises(UploadStagingError, match="disk full") as exc_info:
                stager.stage(b"x", "a.txt")
        assert exc_info.value.kind == "UploadFailed"


class TestRelease:
    def test_deletes_staging_file(self, tmp_path: Path) -> None:
        stager = UploadStager(uploads_root=tmp_path)
        upload = stager.stage(b"x", "a.txt")

        assert stager.release(upload) is True
        assert not upload.path.exists()

    def test_release_twice_is_harmless(self, tmp_path: Path) -> None:
        stager = UploadStager(uploads_root=tmp_path)
        upload = stager.stage(b"x", "a.txt")
        stager.release(upload)
        assert stager.release(upload) is True

    def test_delete_failure_is_logged_not_raised(self, tmp_path: Path) -> None:
        stager = UploadStager(uploads_root=tmp_path)
        upload = stager.stage(b"x", "a.txt")
        with (
            patch.object(Path, "unlink", side_effect=PermissionError("busy")),
            patch("voicely.processor.upload_stager.Log.warning") as mock_warning,
        ):
            assert stager.release(upload) is False
        mock_warning.assert_called_once()
