"""Word-processor (OOXML) text extraction.

A .docx file is a zip container whose body lives in ``word/document.xml``.
Paragraph text is read from ``w:t`` runs; tabs and breaks inside a paragraph
are kept as whitespace so sentence boundaries survive.
"""

import io
from zipfile import BadZipFile, ZipFile

from lxml import etree

from voicely.extraction.base import BaseDocumentExtractor
from voicely.extraction.exceptions import DocumentParseError

WORD_NAMESPACE = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
_W = f"{{{WORD_NAMESPACE}}}"


class WordDocumentExtractor(BaseDocumentExtractor):
    """Extracts body text from word-processor documents."""

    BODY_PART = "word/document.xml"

    def extract(self, content: bytes) -> str:
        try:
            with ZipFile(io.BytesIO(content)) as archive:
                body = archive.read(self.BODY_PART)
            parser = etree.XMLParser(resolve_entities=False, no_network=True)
            root = etree.fromstring(body, parser)
        except (BadZipFile, KeyError, etree.XMLSyntaxError) as exc:
            raise DocumentParseError(
                f"not a readable word-processor document: {exc}"
            ) from exc

        paragraphs = [self._paragraph_text(p) for p in root.iter(f"{_W}p")]
        return "\n".join(paragraphs).strip()

    @staticmethod
    def _paragraph_text(paragraph: etree._Element) -> str:
        parts: list[str] = []
        for node in paragraph.iter(f"{_W}t", f"{_W}tab", f"{_W}br", f"{_W}cr"):
            if node.tag == f"{_W}t":
                parts.append(node.text or "")
            elif node.tag == f"{_W}tab":
                parts.append("\t")
            else:
                parts.append("\n")
        return "".join(parts)
