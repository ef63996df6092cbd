"""Logging setup used by the paramcheck command line interface.

The library itself only emits records through ``logging.getLogger(__name__)``
loggers and never configures logging on import.
"""

from __future__ import annotations

import copy
import logging
import logging.config
import os
from logging import LogRecord
from pathlib import Path
from typing import Any

import click
import rich.logging
import rich.traceback
import yaml

import paramcheck.validation
from paramcheck.utils import _format_rich

LOGGING_CONFIG_ENVVAR = "PARAMCHECK_LOGGING_CONFIG"
DEFAULT_LOGGING_CONFIG = Path(__file__).parent / "default_logging.yml"


class RichHandler(rich.logging.RichHandler):
    """``rich.logging.RichHandler`` set up for the paramcheck CLI.

    Markup is enabled unless configured otherwise. With ``rich_tracebacks``
    the rich traceback hook is installed with the click and
    ``paramcheck.validation`` frames hidden, so the traceback of a
    ``ParameterError`` ends in the code that made the call.

    Records logged with ``extra={"rich_format": [colour, ...]}`` get their
    leading arguments wrapped in those colours.
    """

    def __init__(self, *args: Any, **kwargs: Any):
        kwargs.setdefault("markup", True)
        super().__init__(*args, **kwargs)
        if self.rich_tracebacks:
            rich.traceback.install(
                show_locals=self.tracebacks_show_locals,
                suppress=[click, paramcheck.validation],
            )

    def emit(self, record: LogRecord) -> None:
        colours = getattr(record, "rich_format", None)
        if colours is None or not record.args:
            super().emit(record)
            return
        if not isinstance(colours, list) or not colours:
            raise TypeError("rich_format must be a non-empty list of colours")

        # Records are shared between handlers, only a copy is coloured.
        coloured = copy.copy(record)
        coloured.args = _colour_args(record.args, colours)  # type: ignore[arg-type]
        super().emit(coloured)


def _colour_args(args: tuple, colours: list[str]) -> tuple:
    return tuple(
        _format_rich(str(arg), colours[i]) if i < len(colours) else arg
        for i, arg in enumerate(args)
    )


class _ValidationLogging:
    """Holds the logging configuration applied by ``configure_logging``."""

    def __init__(self) -> None:
        self.data: dict[str, Any] = {}

    def load_default(self) -> dict[str, Any]:
        """Read the logging configuration pointed to by PARAMCHECK_LOGGING_CONFIG,
        falling back to the bundled default_logging.yml."""
        path = os.environ.get(LOGGING_CONFIG_ENVVAR, DEFAULT_LOGGING_CONFIG)
        return yaml.safe_load(Path(path).read_text(encoding="utf-8"))

    def configure(self, logging_config: dict[str, Any]) -> None:
        logging.config.dictConfig(logging_config)
        self.data = logging_config


LOGGING = _ValidationLogging()


def configure_logging(logging_config: dict[str, Any] | None = None) -> None:
    """Configure logging according to ``logging_config`` dictionary, or to the
    default configuration file when none is given."""
    if logging_config is None:
        logging_config = LOGGING.load_default()
    LOGGING.configure(logging_config)
