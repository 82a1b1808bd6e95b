"""
corvid.handlers.logging
~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import datetime
import logging
import sys
import traceback

from corvid.base import Client
from corvid.interfaces import exception_context, stacktrace_context

RESERVED = frozenset((
    'stack', 'name', 'module', 'funcName', 'args', 'msg', 'levelno',
    'exc_text', 'exc_info', 'stack_info', 'data', 'created', 'levelname',
    'msecs', 'relativeCreated', 'tags', 'message', 'taskName',
))

LEVELS = {
    logging.CRITICAL: 'fatal',
    logging.ERROR: 'error',
    logging.WARNING: 'warning',
    logging.INFO: 'info',
    logging.DEBUG: 'debug',
}


def level_name(levelno):
    """
    Maps a ``logging`` level number onto the nearest event level at or
    below it.
    """
    for number in sorted(LEVELS, reverse=True):
        if levelno >= number:
            return LEVELS[number]
    return 'debug'


class SentryHandler(logging.Handler):
    def __init__(self, *args, **kwargs):
        client = kwargs.pop('client_cls', Client)
        level = kwargs.pop('level', logging.NOTSET)
        if len(args) == 1:
            arg = args[0]
            if isinstance(arg, str):
                self.client = client(dsn=arg, **kwargs)
            elif isinstance(arg, Client):
                self.client = arg
            else:
                raise ValueError('The first argument to %s must be either a Client instance or a DSN, got %r instead.' % (
                    self.__class__.__name__,
                    arg,
                ))
        elif 'client' in kwargs:
            self.client = kwargs['client']
        else:
            self.client = client(*args, **kwargs)

        logging.Handler.__init__(self, level=level)

    def emit(self, record):
        try:
            self.format(record)

            # Avoid typical config issues by overriding loggers behavior
            if record.name.startswith('corvid'):
                print(record.message, file=sys.stderr)
                return

            return self._emit(record)
        except Exception:
            print("Top level Sentry exception caught - failed creating log record", file=sys.stderr)
            print(record.msg, file=sys.stderr)
            print(traceback.format_exc(), file=sys.stderr)

    def _emit(self, record):
        data = {}

        extra = getattr(record, 'data', None)
        if not isinstance(extra, dict):
            if extra:
                extra = {'data': extra}
            else:
                extra = {}

        for k, v in vars(record).items():
            if k in RESERVED:
                continue
            if k.startswith('_'):
                continue
            if '.' not in k and k != 'culprit':
                extra[k] = v
            else:
                data[k] = v

        # If there's no exception being processed, exc_info may be a 3-tuple of None
        if record.exc_info and all(record.exc_info):
            exc_type, exc_value, exc_traceback = record.exc_info
            data.update(exception_context(str(exc_value), type=exc_type.__name__))
            data.update(stacktrace_context(exc_traceback))
        elif not data.get('culprit') and record.funcName:
            data['culprit'] = '%s in %s' % (record.name, record.funcName)

        if hasattr(record, 'tags'):
            data['tags'] = record.tags

        timestamp = datetime.datetime.fromtimestamp(
            record.created, datetime.timezone.utc)

        return self.client.capture_message(
            record.getMessage(),
            level=level_name(record.levelno),
            logger=record.name,
            timestamp=timestamp,
            extra=extra,
            **data)
