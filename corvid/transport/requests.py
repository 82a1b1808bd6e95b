"""
corvid.transport.requests
~~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from corvid.conf import defaults
from corvid.exceptions import TransportFailure
from corvid.transport.base import Response
from corvid.transport.http import HTTPTransport

try:
    import requests
    has_requests = True
except ImportError:
    has_requests = False


class RequestsHTTPTransport(HTTPTransport):

    scheme = ['requests+http', 'requests+https']

    def __init__(self, timeout=defaults.TIMEOUT, verify_ssl=True,
                 ca_certs=defaults.CA_BUNDLE, proxy=None, **options):
        if not has_requests:
            raise ImportError('RequestsHTTPTransport requires requests.')

        super(RequestsHTTPTransport, self).__init__(timeout=timeout,
                                                    verify_ssl=verify_ssl,
                                                    ca_certs=ca_certs,
                                                    **options)
        self.proxy = proxy

    def send(self, url, data, headers):
        verify = self.verify_ssl
        if verify and self.ca_certs:
            # If SSL verification is enabled use the provided CA bundle to
            # perform the verification.
            verify = self.ca_certs

        proxies = None
        if self.proxy:
            proxies = {url.split(':', 1)[0]: self.proxy}

        try:
            response = requests.post(url, data=data, headers=headers,
                                     verify=verify, timeout=self.timeout,
                                     proxies=proxies)
        except requests.RequestException as e:
            raise TransportFailure('Unable to reach Sentry log server: %s' % (e,))

        return Response(response.status_code, response.text)
