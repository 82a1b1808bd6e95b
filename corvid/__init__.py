"""
corvid
~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

__all__ = ('VERSION', 'Client')

VERSION = '0.8.0'

from corvid.base import Client  # NOQA
from corvid.interfaces import (  # NOQA
    exception_context, query_context, request_context, stacktrace_context,
    user_context,
)
