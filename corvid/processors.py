"""
corvid.processors
~~~~~~~~~~~~~~~~~

Processors modify events after they are built but before they are sent,
usually to scrub sensitive data. A processor is any object with a
``process(data)`` method returning the event to send on.

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import re

from corvid.interfaces import INTERFACES
from corvid.utils import varmap


class Processor(object):
    """
    Walks the event and hands each block to a hook: every interface present
    goes to ``filter_<interface>`` (``filter_http``, ``filter_user`` and so
    on), ``extra`` to ``filter_extra`` and ``tags`` to ``filter_tags``.

    A hook returns the block to keep. Returning ``None`` removes the block
    from the event.
    """

    def __init__(self, client=None):
        self.client = client

    def process(self, data, **kwargs):
        keys = [(i.name, 'filter_%s' % i.__name__.lower()) for i in INTERFACES]
        keys += [('extra', 'filter_extra'), ('tags', 'filter_tags')]

        for key, hook in keys:
            if key not in data:
                continue
            block = getattr(self, hook)(data[key])
            if block is None:
                del data[key]
            else:
                data[key] = block
        return data

    def filter_exception(self, data):
        return data

    def filter_http(self, data):
        return data

    def filter_stacktrace(self, data):
        return data

    def filter_user(self, data):
        return data

    def filter_query(self, data):
        return data

    def filter_extra(self, data):
        return data

    def filter_tags(self, data):
        return data


class RemovePostDataProcessor(Processor):
    """Removes HTTP post data."""

    def filter_http(self, data):
        return dict((k, v) for k, v in data.items() if k != 'data')


class RemoveStackVariablesProcessor(Processor):
    """Removes local variables from stacktraces."""

    def filter_stacktrace(self, data):
        frames = [
            dict((k, v) for k, v in frame.items() if k != 'vars')
            for frame in data.get('frames', [])
        ]
        return dict(data, frames=frames)


class SanitizePasswordsProcessor(Processor):
    """
    Asterisk out things that look like passwords, credit card numbers
    and API keys.

    Keyed values are masked when their key names a secret (frame variables,
    HTTP data, cookies, headers and environment, ``extra`` and ``tags``).
    Values shaped like card numbers are masked wherever they appear,
    including the User interface. SQL in the Query interface has the
    literal assigned to a secret column replaced.
    """

    MASK = '*' * 8
    FIELDS = frozenset([
        'password',
        'secret',
        'passwd',
        'authorization',
        'api_key',
        'apikey',
        'sentry_dsn',
        'access_token',
    ])
    VALUES_RE = re.compile(r'^(?:\d[ -]*?){13,16}$')
    # password = 'x', api_key="x", secret=x
    QUERY_RE = re.compile(
        r'''(\b\w*(?:%s)\w*\s*=\s*)('(?:[^']|'')*'|"[^"]*"|[^\s,;)]+)'''
        % '|'.join(sorted(re.escape(f) for f in FIELDS)),
        re.IGNORECASE)

    def is_sensitive_key(self, key):
        if not key:
            return False
        if isinstance(key, bytes):
            key = key.decode('utf-8', 'replace')
        key = str(key).lower()
        return any(field in key for field in self.FIELDS)

    def sanitize(self, key, value):
        if value is None:
            return

        if isinstance(value, str) and self.VALUES_RE.match(value):
            return self.MASK

        if self.is_sensitive_key(key):
            return self.MASK
        return value

    def sanitize_keyvals(self, keyvals, delimiter):
        """
        Masks ``key=value`` pairs in a query string or cookie header, leaving
        anything that isn't a single pair untouched.
        """
        pairs = []
        for pair in keyvals.split(delimiter):
            parts = pair.split('=')
            if len(parts) == 2:
                pair = '='.join((parts[0], self.sanitize(*parts)))
            pairs.append(pair)
        return delimiter.join(pairs)

    def filter_stacktrace(self, data):
        frames = []
        for frame in data.get('frames', []):
            if 'vars' in frame:
                frame = dict(frame, vars=varmap(self.sanitize, frame['vars']))
            frames.append(frame)
        return dict(data, frames=frames)

    def filter_http(self, data):
        data = dict(data)
        for key in ('data', 'cookies', 'headers', 'env', 'query_string'):
            if key not in data:
                continue

            value = data[key]
            if isinstance(value, str):
                if '=' in value:
                    value = self.sanitize_keyvals(value, ';' if key == 'cookies' else '&')
            else:
                value = varmap(self.sanitize, value)

            if key == 'headers' and isinstance(value, dict):
                for name in value:
                    if name.lower() == 'cookie' and isinstance(value[name], str):
                        value[name] = self.sanitize_keyvals(value[name], ';')

            data[key] = value
        return data

    def filter_user(self, data):
        return varmap(self.sanitize, data)

    def filter_query(self, data):
        query = data.get('query')
        if not isinstance(query, str):
            return data

        def mask(match):
            return "%s'%s'" % (match.group(1), self.MASK)

        return dict(data, query=self.QUERY_RE.sub(mask, query))

    def filter_extra(self, data):
        return varmap(self.sanitize, data)

    def filter_tags(self, data):
        return varmap(self.sanitize, data)
