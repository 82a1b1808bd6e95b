"""
corvid.events
~~~~~~~~~~~~~

Builds the event dict sent to Sentry out of per-call overrides, the
client's stored context and the hard-coded defaults, in that order of
precedence.

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import uuid
import warnings

from corvid.conf import defaults
from corvid.exceptions import ValidationWarning
from corvid.interfaces import INTERFACES
from corvid.utils import merge_dicts, trim
from corvid.utils.dates import to_iso8601, utcnow

__all__ = ('EventBuilder', 'generate_id')


def generate_id():
    return uuid.uuid4().hex


def _first(*values):
    for value in values:
        if value is not None:
            return value
    return None


class EventBuilder(object):
    """
    Constructs events without doing any I/O. Given the same overrides,
    context, ``clock`` and ``id_generator`` the result is always the same.

    >>> builder = EventBuilder(Context({'tags': {'env': 'prod'}}))
    >>> builder.construct(message='foo', tags={'site': 'www'})['tags']
    {'env': 'prod', 'site': 'www'}
    """

    def __init__(self, context, release=None, name=defaults.NAME,
                 clock=None, id_generator=None):
        self.context = context
        self.release = release
        self.name = name
        self.clock = clock or utcnow
        self.id_generator = id_generator or generate_id

    def construct(self, **overrides):
        stored = self.context

        def resolve(key, default=None):
            return _first(overrides.get(key), stored.get(key), default)

        event_id = resolve('event_id')
        if event_id is None:
            event_id = self.id_generator()
        if isinstance(event_id, uuid.UUID):
            event_id = event_id.hex

        timestamp = resolve('timestamp')
        if timestamp is None:
            timestamp = self.clock()

        event = {
            'event_id': event_id,
            'timestamp': to_iso8601(timestamp),
            'logger': resolve('logger', defaults.LOGGER),
            'server_name': resolve('server_name', self.name),
            'platform': resolve('platform', defaults.PLATFORM),
            'level': self.resolve_level(overrides.get('level'), stored.get('level')),
            'extra': merge_dicts(stored.get('extra'), overrides.get('extra')),
            'tags': merge_dicts(stored.get('tags'), overrides.get('tags')),
            'fingerprint': self.resolve_fingerprint(resolve('fingerprint', defaults.FINGERPRINT)),
        }

        message = resolve('message')
        if message is not None:
            event['message'] = trim(message, defaults.MAX_LENGTH_MESSAGE)

        culprit = resolve('culprit')
        if culprit is not None:
            event['culprit'] = trim(culprit, defaults.MAX_LENGTH_CULPRIT)

        release = resolve('release', self.release)
        if release is not None:
            event['release'] = release

        for interface in INTERFACES:
            if overrides.get(interface.name):
                event[interface.name] = interface.trim(overrides[interface.name])

        return event

    def resolve_fingerprint(self, fingerprint):
        # a bare string is a single grouping key
        if isinstance(fingerprint, str):
            return [fingerprint]
        return list(fingerprint)

    def resolve_level(self, level, stored_level=None):
        """
        Returns the first valid level out of the per-call and stored values,
        warning about each invalid one, and falls back to ``error``.
        """
        for candidate in (level, stored_level):
            if candidate is None:
                continue
            if candidate in defaults.LEVELS:
                return candidate
            warnings.warn('unknown level: %r' % (candidate,), ValidationWarning,
                          stacklevel=3)
        return defaults.LEVEL
