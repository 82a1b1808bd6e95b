"""
corvid.utils.http
~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import ssl
from urllib.request import HTTPSHandler, build_opener

from corvid.conf import defaults


def urlopen(url, data=None, timeout=defaults.TIMEOUT, ca_certs=None,
            verify_ssl=True):
    if verify_ssl:
        context = ssl.create_default_context(cafile=ca_certs)
    else:
        context = ssl._create_unverified_context()

    opener = build_opener(HTTPSHandler(context=context))

    return opener.open(url, data, timeout)
