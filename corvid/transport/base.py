"""
corvid.transport.base
~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from collections import namedtuple

from corvid.conf import defaults

Response = namedtuple('Response', ('status', 'body'))


class Transport(object):
    """
    All transport implementations need to subclass this class

    You must implement a send method which POSTs ``data`` to ``url`` and
    returns a ``Response``. Network level failures should be raised as
    ``corvid.exceptions.TransportFailure``; any HTTP status, including
    errors, is returned rather than raised.

    Please see the HTTPTransport class for an example.
    """

    scheme = []

    def __init__(self, timeout=defaults.TIMEOUT, **options):
        if isinstance(timeout, str):
            timeout = float(timeout)
        self.timeout = timeout
        self.options = options

    def send(self, url, data, headers):
        """
        You need to override this to do something with the actual
        data. Usually - this is sending to a server
        """
        raise NotImplementedError
