from collections.abc import Callable
from datetime import UTC, datetime

from voicely.formatting.models import SRT, TXT, VTT, check_output_kind
from voicely.formatting.renderers import BaseDocumentRenderer, PlainTextDocumentRenderer
from voicely.formatting.report import render_report
from voicely.formatting.subtitles import build_cues, render_srt, render_vtt


class ArtifactFormatter:
    """Produces artifact bytes for each output kind."""

    def __init__(
        self,
        renderer: BaseDocumentRenderer | None = None,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        self._renderer = renderer if renderer is not None else PlainTextDocumentRenderer()
        self._now = now if now is not None else (lambda: datetime.now(UTC))

    def format(
        self,
        original_text: str,
        translated_text: str,
        source_file_name: str,
        output_kind: str,
        is_timed_media: bool,
    ) -> bytes:
        """Format the texts as `output_kind`.

        Raises:
            UnsupportedOutputKindError: unknown output kind.
            FormatNotApplicableError: subtitle kind for a non-audio source.
        """
        kind = check_output_kind(output_kind, is_timed_media)
        if kind == SRT:
            return render_srt(build_cues(original_text, translated_text)).encode("utf-8")
        if kind == VTT:
            return render_vtt(build_cues(original_text, translated_text)).encode("utf-8")

        report = render_report(
            original_text,
            translated_text,
            source_file_name,
            created_at=self._now(),
        )
        if kind == TXT:
            return report.encode("utf-8")
        return self._renderer.render(report, kind)
