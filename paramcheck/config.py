"""``paramcheck.config`` module provides the settings that tune how validated
methods behave at call time."""

from __future__ import annotations

from typing import Any

from dynaconf import LazySettings
from dynaconf.validator import Validator

ENVVAR_PREFIX = "PARAMCHECK"


class _ValidationSettings(LazySettings):
    """Define all settings available for users to configure in paramcheck,
    along with their validation rules and default values.
    Use Dynaconf's LazySettings as base.
    """

    _ENABLED = Validator("ENABLED", default=True, is_type_of=bool)
    _NONE_IS_MISSING = Validator("NONE_IS_MISSING", default=True, is_type_of=bool)
    _LOG_FAILURES = Validator("LOG_FAILURES", default=True, is_type_of=bool)

    def __init__(self, *args: Any, **kwargs: Any):
        kwargs.setdefault("envvar_prefix", ENVVAR_PREFIX)
        kwargs.update(
            validators=[
                self._ENABLED,
                self._NONE_IS_MISSING,
                self._LOG_FAILURES,
            ]
        )
        super().__init__(*args, **kwargs)


settings = _ValidationSettings()


def configure_settings(settings_module: str) -> None:
    """Populate the settings from a Python module, e.g. ``myapp.paramcheck_settings``.

    Values set through ``PARAMCHECK_*`` environment variables still take
    precedence over the module.
    """
    settings.configure(settings_module)


def settings_summary() -> dict[str, Any]:
    """Return the current value of every paramcheck setting."""
    return {
        "ENABLED": settings.ENABLED,
        "NONE_IS_MISSING": settings.NONE_IS_MISSING,
        "LOG_FAILURES": settings.LOG_FAILURES,
    }
