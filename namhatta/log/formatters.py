"""
Log formatter producing aligned, optionally colored lines.

Layout:
    [12:34:56,789] [I] message            [key:value] [1234] [/launcher/dev]
"""

import logging
import traceback
from datetime import datetime
from typing import Any

from .colors import ColorManager
from .config import LogConfig
from .constants import LogConstants


def _format_value(key: str, value: Any) -> str:
    """Render one extra field value."""
    if key == "exception" and isinstance(value, BaseException):
        text = str(value)
        name = value.__class__.__name__
        return f"{name}: {text}" if text else name
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)


def _extra_fields(record: logging.LogRecord) -> list[tuple[str, str]]:
    extra = getattr(record, LogConstants.EXTRA_ATTR, None) or {}
    return [(key, _format_value(key, extra[key])) for key in sorted(extra)]


class LogFormatter(logging.Formatter):
    """
    Formatter rendering records with extra fields and process/logger metadata.

    Args:
        config: Logger configuration (colors and microsecond timestamps)
    """

    def __init__(self, config: LogConfig):
        super().__init__()
        self._config = config

    @property
    def config(self) -> LogConfig:
        return self._config

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        ts = datetime.fromtimestamp(record.created)
        if self._config.micros:
            return ts.strftime("%H:%M:%S,%f")
        return ts.strftime("%H:%M:%S,") + f"{int(record.msecs):03d}"

    def format(self, record: logging.LogRecord) -> str:
        asctime = self.formatTime(record)
        level = record.levelname[:1]
        message = record.getMessage()
        head = f"[{asctime}] [{level}] {message}"

        rule = (
            LogConstants.MICRO_RULE_WIDTH
            if self._config.micros
            else LogConstants.DEFAULT_RULE_WIDTH
        )
        pad = " " * max(1, rule - len(head))

        fields = _extra_fields(record)
        meta = [str(record.process), record.name]

        if self._config.colors:
            line = self._colorize(record, head, pad, fields, meta)
        else:
            parts = [f"[{k}:{v}]" for k, v in fields]
            parts += [f"[{m}]" for m in meta]
            line = head + pad + " ".join(parts)

        if record.exc_info:
            line += "\n" + "".join(traceback.format_exception(*record.exc_info)).rstrip()
        return line

    @staticmethod
    def _colorize(
        record: logging.LogRecord,
        head: str,
        pad: str,
        fields: list[tuple[str, str]],
        meta: list[str],
    ) -> str:
        color = ColorManager.get_color_for_level(record.levelno)
        col = color + "m"
        bold = ColorManager.create_bold_color(color)
        reset = ColorManager.RESET
        gray = ColorManager.gray()

        parts = [f"{col}{k}[{bold}{v}{reset}{col}]{reset}" for k, v in fields]
        parts += [f"{gray}[{m}]{reset}" for m in meta]
        return f"{bold}{head}{reset}{pad}" + " ".join(parts)
