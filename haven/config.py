"""Configuration of the default module, read from the environment.

HAVEN_ENV=production turns checking off. HAVEN_CHECK_TYPES, when set,
overrides that either way. HAVEN_LOG_FILE names a file that haven's log
records are written to, one JSON object per line.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import pathlib
from typing import Mapping, Optional

from haven.errors import ConfigurationError
from haven.logging import JSONFormatter, get_logger

ENV_VARIABLE = 'HAVEN_ENV'
CHECK_TYPES_VARIABLE = 'HAVEN_CHECK_TYPES'
LOG_FILE_VARIABLE = 'HAVEN_LOG_FILE'

_TRUE = frozenset({'1', 'true', 'yes', 'on'})
_FALSE = frozenset({'0', 'false', 'no', 'off'})

_logger = get_logger(__name__)


def parse_flag(name: str, text: str) -> bool:
    normalized = text.strip().lower()
    if normalized in _TRUE:
        return True
    if normalized in _FALSE:
        return False
    raise ConfigurationError(
        f'{name} must be one of {", ".join(sorted(_TRUE | _FALSE))}; '
        f'got {text!r}'
    )


def check_types_from_environment(
    environ: Optional[Mapping[str, str]] = None,
) -> bool:
    if environ is None:
        environ = os.environ
    explicit = environ.get(CHECK_TYPES_VARIABLE)
    if explicit is not None:
        check_types = parse_flag(CHECK_TYPES_VARIABLE, explicit)
        reason = f'{CHECK_TYPES_VARIABLE}={explicit}'
    else:
        environment = environ.get(ENV_VARIABLE, '').strip().lower()
        check_types = environment != 'production'
        reason = f'{ENV_VARIABLE}={environment}'
    if not check_types:
        _logger.info('type checking is off ({})', reason)
    return check_types


def log_handler_from_environment(
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[logging.Handler]:
    """Send haven's log records to HAVEN_LOG_FILE as JSON, if it is set.

    Returns the handler added to the 'haven' logger, or None."""
    if environ is None:
        environ = os.environ
    path = environ.get(LOG_FILE_VARIABLE)
    if not path:
        return None
    handler = logging.handlers.RotatingFileHandler(
        pathlib.Path(path), maxBytes=1048576, backupCount=1
    )
    handler.setFormatter(JSONFormatter())
    python_logger = logging.getLogger('haven')
    python_logger.addHandler(handler)
    python_logger.setLevel(logging.DEBUG)
    return handler
