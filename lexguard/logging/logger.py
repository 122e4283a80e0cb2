import logging
import sys
from typing import TextIO


class Log:
    """Process-wide diagnostics for the analysis pipeline.

    Keyword arguments passed to the helpers are appended to the message as
    ``key=value`` pairs so tier numbers and causes survive plain-text handlers.
    """

    _logger: logging.Logger = logging.getLogger("lexguard")

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and attach a single handler (stderr by default).

        Reports are printed on stdout, so diagnostics stay off it.
        """
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(cls._render(message, kwargs))

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(cls._render(message, kwargs))

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(cls._render(message, kwargs))

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(cls._render(message, kwargs))

    @staticmethod
    def _render(message: str, fields: dict[str, object]) -> str:
        if not fields:
            return message
        suffix = " ".join(f"{key}={value}" for key, value in fields.items())
        return f"{message} [{suffix}]"
