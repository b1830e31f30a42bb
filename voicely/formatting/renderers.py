from abc import ABC, abstractmethod


class BaseDocumentRenderer(ABC):
    """Contract for turning the plain report into a document container."""

    @abstractmethod
    def render(self, report: str, output_kind: str) -> bytes:
        """Render the report for `output_kind` (`pdf` or `docx`)."""


class PlainTextDocumentRenderer(BaseDocumentRenderer):
    """Stand-in renderer: the document body is the UTF-8 report itself.

    Only the artifact's declared kind and extension differ from `txt`.
    """

    def render(self, report: str, output_kind: str) -> bytes:
        _ = output_kind
        return report.encode("utf-8")
