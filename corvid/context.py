"""
corvid.context
~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from collections.abc import Mapping

from corvid.utils import merge_dicts


class Context(Mapping):
    """
    Stores the default fields applied to every event until cleared.

    No validation happens here, values are checked when an event is
    built. A context is not thread safe; hosts which share a client
    between threads must serialize access to it.

    >>> context = Context({'logger': 'app'})
    >>> context.merge_tags({'key': 'value'})
    >>> context.get()
    {'logger': 'app', 'tags': {'key': 'value'}}
    """

    def __init__(self, data=None):
        self.data = dict(data or {})

    def __getitem__(self, key):
        return self.data[key]

    def __iter__(self):
        return iter(self.data)

    def __len__(self):
        return len(self.data)

    def __repr__(self):
        return '<%s: %s>' % (type(self).__name__, self.data)

    def get(self, key=None, default=None):
        """
        Returns a snapshot of the whole context, or a single value when
        ``key`` is given.
        """
        if key is not None:
            return self.data.get(key, default)

        snapshot = dict(self.data)
        for key in ('tags', 'extra'):
            if isinstance(snapshot.get(key), dict):
                snapshot[key] = dict(snapshot[key])
        return snapshot

    def add(self, data):
        for key, value in data.items():
            self.data[key] = value

    def merge(self, data):
        for key, value in data.items():
            if key in ('tags', 'extra'):
                self.data[key] = merge_dicts(self.data.get(key), value)
            else:
                self.data[key] = value

    def merge_tags(self, tags):
        self.merge({'tags': tags})

    def merge_extra(self, extra):
        self.merge({'extra': extra})

    def set(self, data):
        self.data = dict(data)

    def clear(self):
        self.data = {}
