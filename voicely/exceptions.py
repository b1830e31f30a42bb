from typing import ClassVar


class VoicelyError(Exception):
    """Base exception for every error reported to a pipeline caller."""

    kind: ClassVar[str] = "VoicelyError"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self, include_details: bool = False) -> dict[str, str]:
        """Structured `{kind, message}` form for the transport layer."""
        payload = {"kind": self.kind, "message": self.message}
        if include_details and self.__cause__ is not None:
            payload["details"] = str(self.__cause__)
        return payload


class ConfigurationError(ValueError):
    """Raised at startup when settings cannot produce a working service."""
