import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(stage)s: %(message)s"
NO_STAGE = "-"


class _StageFilter(logging.Filter):
    """Guarantees every record has a `stage` attribute for the formatter."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "stage"):
            record.stage = NO_STAGE
        return True


class Log:
    """Centralized logging for the translation pipeline.

    Pass `stage=` to tag a message with the pipeline state it belongs to.
    """

    _logger: logging.Logger = logging.getLogger("voicely")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level and attach a single stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.addFilter(_StageFilter())
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, stage: str = NO_STAGE) -> None:
        cls._logger.info(message, extra={"stage": stage})

    @classmethod
    def error(cls, message: str, stage: str = NO_STAGE) -> None:
        cls._logger.error(message, extra={"stage": stage})

    @classmethod
    def warning(cls, message: str, stage: str = NO_STAGE) -> None:
        cls._logger.warning(message, extra={"stage": stage})

    @classmethod
    def debug(cls, message: str, stage: str = NO_STAGE) -> None:
        cls._logger.debug(message, extra={"stage": stage})
