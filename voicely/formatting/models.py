from voicely.formatting.exceptions import FormatNotApplicableError, UnsupportedOutputKindError

TXT = "txt"
SRT = "srt"
VTT = "vtt"
PDF = "pdf"
DOCX = "docx"

TIMED_SUBTITLE_KINDS = frozenset({SRT, VTT})
REPORT_KINDS = frozenset({TXT, PDF, DOCX})
OUTPUT_KINDS = TIMED_SUBTITLE_KINDS | REPORT_KINDS


def check_output_kind(output_kind: str, is_timed_media: bool) -> str:
    """Return the normalized output kind or raise if it cannot be produced."""
    kind = output_kind.strip().lower()
    if kind not in OUTPUT_KINDS:
        raise UnsupportedOutputKindError(output_kind)
    if kind in TIMED_SUBTITLE_KINDS and not is_timed_media:
        raise FormatNotApplicableError(kind)
    return kind
