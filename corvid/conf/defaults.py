"""
corvid.conf.defaults
~~~~~~~~~~~~~~~~~~~~

Represents the default values for all client settings.

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import socket

# Environment variable consulted when no DSN is passed to ``Client``
DSN_ENV_VAR = 'SENTRY_DSN'

TIMEOUT = 5

# One of ``ENCODINGS``
ENCODING = 'gzip'
ENCODINGS = ('gzip', 'base64', 'text')

PROTOCOL_VERSION = 3

# Not all environments have access to socket module, for example Google App Engine
# Need to check to see if the socket module has ``gethostname``, if it doesn't we
# will set it to None and require it passed in to ``Client`` on initializtion.
NAME = socket.gethostname() if hasattr(socket, 'gethostname') else None

LEVEL = 'error'
LEVELS = ('fatal', 'error', 'warning', 'info', 'debug')

LOGGER = 'root'

PLATFORM = 'python'

FINGERPRINT = ['{{ default }}']

# The maximum length to store of top level event strings.
MAX_LENGTH_MESSAGE = 2048
MAX_LENGTH_CULPRIT = 200

# The maximum length of the response body included in failure warnings.
MAX_LENGTH_RESPONSE = 1000

# Limits applied when transforming stack frame variables.
MAX_LENGTH_LIST = 50
MAX_LENGTH_STRING = 400

# Lines of source context captured around each frame.
CONTEXT_LINES = 5

# Path to a CA bundle for verifying HTTPS; the system store is used when unset
CA_BUNDLE = None
