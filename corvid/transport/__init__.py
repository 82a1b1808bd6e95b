"""
corvid.transport
~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from corvid.transport.base import Response, Transport  # NOQA
from corvid.transport.http import HTTPTransport  # NOQA
from corvid.transport.requests import RequestsHTTPTransport  # NOQA
from corvid.transport.exceptions import InvalidScheme, DuplicateScheme  # NOQA
from corvid.transport.registry import TransportRegistry, default_transports  # NOQA
