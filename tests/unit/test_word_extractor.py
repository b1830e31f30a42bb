import io
import zipfile
from collections.abc import Callable

import pytest

from voicely.extraction.exceptions import DocumentParseError
from voicely.extraction.word_extractor import WordDocumentExtractor


class TestWordDocumentExtractor:
    def test_extracts_paragraphs_in_order(self, make_docx: Callable[[list[str]], bytes]) -> None:
        content = make_docx(["First paragraph.", "Second paragraph!"])
        result = WordDocumentExtractor().extract(content)
        assert result == "First paragraph.\nSecond paragraph!"

    def test_empty_document_returns_empty_string(
        self, make_docx: Callable[[list[str]], bytes]
    ) -> None:
        assert WordDocumentExtractor().extract(make_docx([])) == ""

    def test_raises_for_non_zip_content(self) -> None:
        with pytest.raises(DocumentParseError, match="word-processor"):
            WordDocumentExtractor().extract(b"\xd0\xcf\x11\xe0 legacy binary doc")

    def test_raises_when_body_part_missing(self) -> None:
        buf = io.BytesIO()
        with zipfile.ZipFile(buf, "w") as archive:
            archive.writestr("other.xml", "<x/>")
        with pytest.raises(DocumentParseError):
            WordDocumentExtractor().extract(buf.getvalue())
