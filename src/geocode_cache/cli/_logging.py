import logging.config
from typing import Any

from geocode_cache.cli._output import err_console

PACKAGE_LOGGER = "geocode_cache"

_QUIET_LOGGERS = ("httpx", "httpcore", "werkzeug")


def logging_config(*, verbose: bool = False) -> dict[str, Any]:
    """Build the ``dictConfig`` used by the CLI.

    Records go to stderr through rich so that ``--plain`` and ``--json``
    output on stdout stays machine-readable. ``verbose`` lowers this package
    to DEBUG and lets HTTP client and server chatter through.
    """
    quiet_level = "DEBUG" if verbose else "WARNING"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"rich": {"format": "%(name)s: %(message)s", "datefmt": "%H:%M:%S"}},
        "handlers": {
            "stderr": {
                "class": "rich.logging.RichHandler",
                "formatter": "rich",
                "console": err_console,
                "show_path": False,
                "markup": False,
            }
        },
        "loggers": {
            PACKAGE_LOGGER: {"level": "DEBUG" if verbose else "INFO"},
            **{name: {"level": quiet_level} for name in _QUIET_LOGGERS},
        },
        "root": {"level": "WARNING", "handlers": ["stderr"]},
    }


def configure_logging(*, verbose: bool = False) -> None:
    logging.config.dictConfig(logging_config(verbose=verbose))
