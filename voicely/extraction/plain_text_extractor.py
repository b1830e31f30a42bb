from voicely.extraction.base import BaseDocumentExtractor


class PlainTextExtractor(BaseDocumentExtractor):
    """Decodes UTF-8 text files (a leading BOM is dropped).

    Undecodable bytes become U+FFFD so the rest of the text survives.
    """

    def extract(self, content: bytes) -> str:
        return content.decode("utf-8-sig", errors="replace").strip()
