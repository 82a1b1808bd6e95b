"""
corvid.conf.remote
~~~~~~~~~~~~~~~~~~

Resolves a DSN into the endpoint and credentials used to submit events.

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import os
from urllib.parse import parse_qsl, urlparse

from corvid.conf import defaults
from corvid.exceptions import ConfigError
from corvid.transport.http import HTTPTransport

ERR_MISSING_DSN = 'must pass dsn or set the {0} environment variable'
ERR_UNPARSEABLE = 'unable to parse DSN: {0!r}'
ERR_MISSING_KEYS = 'unable to parse public and secret keys from: {0!r}'

DEFAULT_TRANSPORT = HTTPTransport

DEFAULT_PORTS = {
    'http': 80,
    'https': 443,
}


def resolve_dsn(dsn=None, environ=None):
    """
    Returns the explicit ``dsn`` if one was given, otherwise the value of
    ``SENTRY_DSN`` in ``environ`` (``os.environ`` by default).
    """
    if dsn:
        return dsn

    if environ is None:
        environ = os.environ

    dsn = environ.get(defaults.DSN_ENV_VAR)
    if not dsn:
        raise ConfigError(ERR_MISSING_DSN.format(defaults.DSN_ENV_VAR))
    return dsn


class RemoteConfig(object):
    def __init__(self, scheme, host, port=None, path='', project=None,
                 public_key=None, secret_key=None, transport=None,
                 options=None):
        netloc = host
        if port:
            netloc += ':%s' % port

        self.scheme = scheme
        self.host = host
        self.port = port
        self.path = path
        self.project = project
        self.public_key = public_key
        self.secret_key = secret_key
        self.options = options or {}

        self.base_url = '%s://%s%s' % (scheme, netloc, path)
        self.store_endpoint = '%s/api/%s/store/' % (self.base_url, project)

        self._transport_cls = transport or DEFAULT_TRANSPORT

    def __str__(self):
        return self.base_url

    def get_transport(self, timeout=None):
        """
        Returns the transport for this DSN. A class is instantiated with the
        DSN options; any other object with a callable ``send`` is used as is.
        """
        if not hasattr(self, '_transport'):
            transport = self._transport_cls
            if isinstance(transport, type):
                options = dict(self.options)
                if timeout is not None:
                    options['timeout'] = timeout
                transport = transport(**options)
            elif callable(getattr(transport, 'send', None)):
                if timeout is not None:
                    transport.timeout = timeout
            else:
                raise ConfigError(
                    'transport must be a class or an object with a send method, got %r'
                    % (transport,))
            self._transport = transport
        return self._transport

    def get_public_dsn(self):
        netloc = self.host
        if self.port:
            netloc += ':%s' % self.port
        return '//%s@%s%s/%s' % (self.public_key, netloc, self.path, self.project)

    @classmethod
    def from_string(cls, value, transport=None, transport_registry=None):
        value = value.strip()

        try:
            url = urlparse(value)
            port = url.port
        except ValueError:
            raise ConfigError(ERR_UNPARSEABLE.format(value))

        if not url.scheme or not url.hostname or '@' not in url.netloc:
            raise ConfigError(ERR_UNPARSEABLE.format(value))

        userinfo = url.netloc.rsplit('@', 1)[0]
        if ':' not in userinfo:
            raise ConfigError(ERR_MISSING_KEYS.format(value))
        public_key, secret_key = userinfo.split(':', 1)
        if not public_key:
            raise ConfigError(ERR_MISSING_KEYS.format(value))

        path_bits = url.path.rstrip('/').rsplit('/', 1)
        if len(path_bits) > 1:
            path = path_bits[0]
        else:
            path = ''
        project = path_bits[-1]

        if not project:
            raise ConfigError('Invalid Sentry DSN, missing project: %r' % value)

        if transport is None:
            if not transport_registry:
                from corvid.transport import TransportRegistry, default_transports
                transport_registry = TransportRegistry(default_transports)

            if transport_registry.supported_scheme(url.scheme):
                transport = transport_registry.get_transport_cls(url.scheme)

        # ``requests+https`` selects a transport, the wire scheme is ``https``
        scheme = url.scheme.rsplit('+', 1)[-1]

        return cls(
            scheme=scheme,
            host=url.hostname,
            port=port or DEFAULT_PORTS.get(scheme),
            path=path,
            project=project,
            public_key=public_key,
            secret_key=secret_key,
            options=dict(parse_qsl(url.query)),
            transport=transport,
        )
