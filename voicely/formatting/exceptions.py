from voicely.exceptions import VoicelyError


class FormattingError(VoicelyError):
    """Base exception for artifact formatting failures."""

    kind = "FormattingError"


class FormatNotApplicableError(FormattingError):
    """Raised when a timed subtitle is requested for non-timed media."""

    kind = "FormatNotApplicable"

    def __init__(self, output_kind: str) -> None:
        super().__init__(
            f"Output kind '{output_kind}' is only available for audio sources"
        )
        self.output_kind = output_kind


class UnsupportedOutputKindError(FormattingError):
    """Raised when the output kind is not known."""

    kind = "UnsupportedOutputKind"

    def __init__(self, output_kind: str) -> None:
        super().__init__(f"Unsupported output kind '{output_kind}'")
        self.output_kind = output_kind
