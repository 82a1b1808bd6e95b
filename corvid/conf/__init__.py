"""
corvid.conf
~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import logging

__all__ = ('setup_logging',)

# the client's own diagnostics must never be reported through itself
EXCLUDE_LOGGER_DEFAULTS = (
    'corvid',
    'corvid.errors',
)


def setup_logging(handler, exclude=EXCLUDE_LOGGER_DEFAULTS, logger=None, level=None):
    """
    Attaches a ``SentryHandler`` so that log records become events.

    - ``logger`` is the logger name to attach to, the root logger by default.
    - ``level`` is the minimum level reported, e.g. ``logging.ERROR``.
    - ``exclude`` names loggers whose records must not reach Sentry. They
      stop propagating and get a ``StreamHandler`` so their output still
      shows up somewhere.

    >>> from corvid.handlers.logging import SentryHandler
    >>> setup_logging(SentryHandler(client), level=logging.ERROR)

    Returns ``False`` without changing anything when a handler of the same
    type is already attached.
    """
    target = logging.getLogger(logger)
    if any(type(h) is type(handler) for h in target.handlers):
        return False

    if level is not None:
        handler.setLevel(level)
    target.addHandler(handler)

    for name in exclude:
        excluded = logging.getLogger(name)
        excluded.propagate = False
        if not excluded.handlers:
            excluded.addHandler(logging.StreamHandler())

    return True
