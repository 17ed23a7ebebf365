"""
Rich-based logger with provider and item context support.

Messages are prefixed with the provider identifier and item index of the
input item currently being processed, e.g. ``[P:zapi][I:3] Sending ...``.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from whatsapp_dispatch.core.config.settings import settings

from .context import get_current_item_context, get_current_provider_context

_PACKAGE = "whatsapp_dispatch"
_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_console = Console(
    theme=Theme(
        {
            "logging.level.debug": "dim",
            "logging.level.info": "cyan",
            "logging.level.warning": "yellow",
            "logging.level.error": "bold red",
        }
    )
)


class CompactFormatter(logging.Formatter):
    """Formatter that keeps only the last two parts of package logger names."""

    def format(self, record):
        if record.name.startswith(f"{_PACKAGE}."):
            # whatsapp_dispatch.messaging.builders.zapi_builder -> builders.zapi_builder
            record.name = ".".join(record.name.split(".")[-2:])
        return super().format(record)


class ContextLogger:
    """
    Logger wrapper that adds provider and item context to messages.

    Context is added as a message prefix instead of through the format
    string, so handlers configured by the host keep working. Values set with
    set_item_context() take precedence over the ones bound on the instance.
    """

    def __init__(
        self,
        logger: logging.Logger,
        api_provider: str | None = None,
        item_index: int | None = None,
    ):
        self.logger = logger
        self.api_provider = api_provider
        self.item_index = item_index

    def _prefix(self) -> str:
        provider = get_current_provider_context() or self.api_provider
        item_index = get_current_item_context()
        if item_index is None:
            item_index = self.item_index

        prefix = f"[P:{provider}]" if provider else ""
        if item_index is not None:
            prefix += f"[I:{item_index}]"
        return prefix

    def _log(self, level: int, message: str, *args, **kwargs) -> None:
        prefix = self._prefix()
        if prefix:
            message = f"{prefix} {message}"
        self.logger.log(level, message, *args, **kwargs)

    def debug(self, message: str, *args, **kwargs) -> None:
        self._log(logging.DEBUG, message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs) -> None:
        self._log(logging.INFO, message, *args, **kwargs)

    def warning(self, message: str, *args, **kwargs) -> None:
        self._log(logging.WARNING, message, *args, **kwargs)

    def error(self, message: str, *args, **kwargs) -> None:
        self._log(logging.ERROR, message, *args, **kwargs)

    def exception(self, message: str, *args, **kwargs) -> None:
        kwargs.setdefault("exc_info", True)
        self._log(logging.ERROR, message, *args, **kwargs)

    def bind(self, **context) -> ContextLogger:
        """Return a copy with ``api_provider`` and/or ``item_index`` bound."""
        return ContextLogger(
            self.logger,
            api_provider=context.get("api_provider", self.api_provider),
            item_index=context.get("item_index", self.item_index),
        )


def setup_logging(
    *,
    level: str = "INFO",
    mode: str = "PROD",
    log_dir: str | None = None,
) -> None:
    """
    Configure the root logger for console output through Rich.

    Args:
        level: DEBUG, INFO, WARNING or ERROR (anything else falls back to INFO)
        mode: "DEV" also writes a daily log file to ``log_dir``
        log_dir: Directory for the daily log file
    """
    resolved_level = level.upper() if level.upper() in _LEVELS else "INFO"

    # RichHandler renders time and level itself
    console_handler = RichHandler(
        console=_console,
        rich_tracebacks=True,
        markup=False,
        show_path=False,
    )
    console_handler.setFormatter(CompactFormatter("[%(name)s] %(message)s"))
    handlers: list[logging.Handler] = [console_handler]

    if mode.upper() == "DEV" and log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        log_file = log_path / f"{_PACKAGE}_{date.today():%Y%m%d}.log"
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            CompactFormatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s")
        )
        handlers.append(file_handler)

    logging.basicConfig(level=resolved_level, handlers=handlers, force=True)
    logging.getLogger(_PACKAGE).debug(
        f"Logging ready ({resolved_level}, {len(handlers)} handler(s))"
    )


def setup_app_logging() -> None:
    """Configure logging from the global settings; called once by the host."""
    setup_logging(
        level=settings.log_level,
        mode=settings.environment,
        log_dir=settings.log_dir,
    )


def get_logger(name: str) -> ContextLogger:
    """Return a context-aware logger, usually for ``__name__``."""
    return ContextLogger(logging.getLogger(name))
