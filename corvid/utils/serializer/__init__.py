"""
corvid.utils.serializer
~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from corvid.utils.serializer.base import *  # NOQA
from corvid.utils.serializer.manager import *  # NOQA
