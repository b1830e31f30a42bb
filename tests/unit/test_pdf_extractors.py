import pytest

from voicely.extraction.exceptions import DocumentParseError
from voicely.extraction.pdf_extractors import PdfPlumberExtractor, PyMuPdfExtractor

EXTRACTORS = [PdfPlumberExtractor, PyMuPdfExtractor]


@pytest.mark.parametrize("extractor_cls", EXTRACTORS)
class TestPdfExtractors:
    def test_extract_returns_text(self, extractor_cls, sample_pdf_bytes: bytes) -> None:  # type: ignore[no-untyped-def]
        result = extractor_cls().extract(sample_pdf_bytes)
        assert isinstance(result, str)
        assert "Hello PDF World" in result

    def test_extract_multi_page(self, extractor_cls, multi_page_pdf_bytes: bytes) -> None:  # type: ignore[no-untyped-def]
        result = extractor_cls().extract(multi_page_pdf_bytes)
        assert "Page one content" in result
        assert "Page two content" in result

    def test_extract_blank_pdf_returns_empty_string(self, extractor_cls, empty_pdf_bytes: bytes) -> None:  # type: ignore[no-untyped-def]
        assert extractor_cls().extract(empty_pdf_bytes) == ""

    def test_extract_raises_parse_error_on_invalid_bytes(self, extractor_cls) -> None:  # type: ignore[no-untyped-def]
        with pytest.raises(DocumentParseError):
            extractor_cls().extract(b"not a pdf")

    def test_extract_result_is_stripped(self, extractor_cls, sample_pdf_bytes: bytes) -> None:  # type: ignore[no-untyped-def]
        result = extractor_cls().extract(sample_pdf_bytes)
        assert result == result.strip()
