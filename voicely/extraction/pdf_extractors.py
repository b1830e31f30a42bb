import io

import pdfplumber
import pymupdf

from voicely.extraction.base import BaseDocumentExtractor
from voicely.extraction.exceptions import DocumentParseError


class PdfPlumberExtractor(BaseDocumentExtractor):
    """Reads PDF page text with pdfplumber."""

    def extract(self, content: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(content)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise DocumentParseError(f"pdfplumber could not read PDF: {exc}") from exc
        return "\n".join(pages).strip()


class PyMuPdfExtractor(BaseDocumentExtractor):
    """Reads PDF page text with PyMuPDF."""

    def extract(self, content: bytes) -> str:
        try:
            with pymupdf.open(stream=content, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
        except Exception as exc:
            raise DocumentParseError(f"pymupdf could not read PDF: {exc}") from exc
        return "\n".join(pages).strip()
