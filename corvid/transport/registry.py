"""
corvid.transport.registry
~~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from corvid.transport.exceptions import DuplicateScheme, InvalidScheme
from corvid.transport.http import HTTPTransport
from corvid.transport.requests import RequestsHTTPTransport


class TransportRegistry(object):
    def __init__(self, transports=None):
        # setup a default list of senders
        self._schemes = {}

        if transports:
            for transport in transports:
                self.register_transport(transport)

    def register_transport(self, transport):
        scheme = getattr(transport, 'scheme', None)
        if not scheme or isinstance(scheme, str):
            raise InvalidScheme('Transport %s must have a scheme list' % transport.__name__)

        for scheme in transport.scheme:
            self.register_scheme(scheme, transport)

    def register_scheme(self, scheme, cls):
        """
        It is possible to inject new schemes at runtime
        """
        if scheme in self._schemes:
            raise DuplicateScheme(scheme)

        self._schemes[scheme] = cls

    def supported_scheme(self, scheme):
        return scheme in self._schemes

    def get_transport_cls(self, scheme):
        return self._schemes[scheme]


default_transports = [
    HTTPTransport,
    RequestsHTTPTransport,
]
