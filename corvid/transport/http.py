"""
corvid.transport.http
~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import socket
from urllib.error import HTTPError, URLError
from urllib.request import Request

from corvid.conf import defaults
from corvid.exceptions import TransportFailure
from corvid.transport.base import Response, Transport
from corvid.utils.http import urlopen


class HTTPTransport(Transport):

    scheme = ['http', 'https', 'sync+http', 'sync+https']

    def __init__(self, timeout=defaults.TIMEOUT, verify_ssl=True,
                 ca_certs=defaults.CA_BUNDLE, **options):
        super(HTTPTransport, self).__init__(timeout=timeout, **options)

        if isinstance(verify_ssl, str):
            verify_ssl = bool(int(verify_ssl))

        self.verify_ssl = verify_ssl
        self.ca_certs = ca_certs

    def send(self, url, data, headers):
        """
        Sends a request to a remote webserver using HTTP POST.
        """
        req = Request(url, data=data, headers=headers, method='POST')

        try:
            response = urlopen(
                url=req,
                timeout=self.timeout,
                verify_ssl=self.verify_ssl,
                ca_certs=self.ca_certs,
            )
        except HTTPError as e:
            return Response(e.code, e.read().decode('utf-8', 'replace'))
        except (URLError, socket.timeout, OSError) as e:
            raise TransportFailure('Unable to reach Sentry log server: %s' % (e,))

        with response:
            body = response.read().decode('utf-8', 'replace')
            return Response(response.getcode(), body)
