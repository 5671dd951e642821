from datetime import datetime, timezone
import inspect
import json
import logging
import pathlib
import traceback
from typing import Callable, Dict, List


class HavenLogger:
    """Wraps a logging.Logger so that it's easy to use str.format syntax."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def debug(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        if not self._logger.isEnabledFor(logging.DEBUG):
            return
        # https://stackoverflow.com/a/44164714/3455228
        caller = inspect.stack()[1]
        _log(self._logger.debug, format_string, caller, args, kwargs)

    def info(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        if not self._logger.isEnabledFor(logging.INFO):
            return
        caller = inspect.stack()[1]
        _log(self._logger.info, format_string, caller, args, kwargs)


def get_logger(name: str) -> HavenLogger:
    python_logger = logging.getLogger(name)
    python_logger.addHandler(logging.NullHandler())
    return HavenLogger(python_logger)


class _LogRecordEncoder(json.JSONEncoder):
    """A JSON Encoder that supports logging.LogRecord objects."""

    def default(self, obj: object):
        if isinstance(obj, logging.LogRecord):
            caller = getattr(obj, 'caller', None)
            if caller is None:
                path_name, line_number, function_name = (
                    obj.pathname,
                    obj.lineno,
                    obj.funcName,
                )
                module = obj.module
            else:
                path_name, line_number, function_name = (
                    caller.filename,
                    caller.lineno,
                    caller.function,
                )
                module = caller.frame.f_globals['__name__']
            return {
                'name': obj.name,
                'message': obj.getMessage(),
                # arguments for the formatting string don't need to be in the
                # JSON
                'level_name': obj.levelname,
                'path_name': path_name,
                'file_name': pathlib.Path(path_name).name,
                'module': module,
                'exception': (
                    traceback.format_exception(*obj.exc_info)
                    if obj.exc_info
                    else None
                ),
                'line_number': line_number,
                'function_name': function_name,
                'created': datetime.fromtimestamp(
                    obj.created, timezone.utc
                ).isoformat(),
                'thread': obj.thread,
                'thread_name': obj.threadName,
                'process_name': obj.processName,
                'process': obj.process,
            }
        return super().default(obj)


class JSONFormatter(logging.Formatter):
    """A logging formatter for producing structured JSON logs."""

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(record, cls=_LogRecordEncoder)


def _log(
    logging_method: Callable,
    format_string: str,
    caller: inspect.FrameInfo,
    args: List[object],
    kwargs: Dict[str, object],
) -> None:
    exc_info = None
    if 'exc_info' in kwargs:
        exc_info = kwargs['exc_info']
        del kwargs['exc_info']
    logging_method(
        _DelayedFormat(format_string, args, kwargs),
        exc_info=exc_info,
        extra={'caller': caller},
    )


class _DelayedFormat:
    def __init__(
        self, format_string: str, args: List[object], kwargs: Dict[str, object]
    ) -> None:
        self._format_string, self._args, self._kwargs = (
            format_string,
            args,
            kwargs,
        )

    def __str__(self) -> str:
        return self._format_string.format(*self._args, **self._kwargs)
