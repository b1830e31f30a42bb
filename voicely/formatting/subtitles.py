"""Subtitle cue generation from unsegmented text.

Both texts are split independently on runs of sentence punctuation and
paired by index. Pairing does not look at timing or meaning, so cues drift
apart when the translation has a different number of sentences.
"""

import math
import re
from dataclasses import dataclass

SENTENCE_BOUNDARY = re.compile(r"[.!?]+")
CUE_DURATION_SECONDS = 4


@dataclass(frozen=True)
class Cue:
    """One timed subtitle entry."""

    number: int
    start_seconds: float
    end_seconds: float
    original: str
    translated: str


def split_sentences(text: str) -> list[str]:
    """Split on `.`, `!`, `?` runs and drop empty fragments."""
    fragments = (fragment.strip() for fragment in SENTENCE_BOUNDARY.split(text))
    return [fragment for fragment in fragments if fragment]


def format_srt_time(seconds: float) -> str:
    """Format seconds as HH:MM:SS,mmm (e.g. 3661.5 -> 01:01:01,500)."""
    total_ms = max(0, math.floor(seconds * 1000))
    total_seconds, milliseconds = divmod(total_ms, 1000)
    total_minutes, secs = divmod(total_seconds, 60)
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d},{milliseconds:03d}"


def format_vtt_time(seconds: float) -> str:
    """Format seconds as HH:MM:SS.mmm."""
    return format_srt_time(seconds).replace(",", ".")


def build_cues(original_text: str, translated_text: str) -> list[Cue]:
    """Pair sentence fragments by index into fixed 4-second cues.

    A missing counterpart becomes an empty line. Slots whose original
    fragment is empty produce no cue and do not advance the numbering, but
    their time window is still consumed.
    """
    originals = split_sentences(original_text)
    translations = split_sentences(translated_text)

    cues: list[Cue] = []
    number = 0
    for index in range(max(len(originals), len(translations))):
        original = originals[index] if index < len(originals) else ""
        translated = translations[index] if index < len(translations) else ""
        if not original:
            continue
        number += 1
        cues.append(
            Cue(
                number=number,
                start_seconds=index * CUE_DURATION_SECONDS,
                end_seconds=(index + 1) * CUE_DURATION_SECONDS,
                original=original,
                translated=translated,
            )
        )
    return cues


def render_srt(cues: list[Cue]) -> str:
    blocks = []
    for cue in cues:
        lines = [
            str(cue.number),
            f"{format_srt_time(cue.start_seconds)} --> {format_srt_time(cue.end_seconds)}",
            *_text_lines(cue),
        ]
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks) + "\n"


def render_vtt(cues: list[Cue]) -> str:
    blocks = ["WEBVTT"]
    for cue in cues:
        lines = [
            f"{format_vtt_time(cue.start_seconds)} --> {format_vtt_time(cue.end_seconds)}",
            *_text_lines(cue),
        ]
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks) + "\n"


def _text_lines(cue: Cue) -> list[str]:
    # a blank line would end the cue early, so an empty translation is omitted
    return [line for line in (cue.original, cue.translated) if line]
