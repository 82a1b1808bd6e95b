"""
corvid.utils.serializer.manager
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import logging

from corvid.utils import trim

__all__ = ('register', 'transform', 'safe_repr')

logger = logging.getLogger('corvid.errors.serializer')

# passed through untouched
PRIMITIVES = (bool, int, float)


def safe_repr(value):
    try:
        return repr(value)
    except Exception:
        return str(type(value))


class SerializationManager(object):
    def __init__(self):
        self._registry = []

    @property
    def serializers(self):
        return list(self._registry)

    def register(self, serializer):
        if serializer not in self._registry:
            self._registry.append(serializer)
        return serializer


class Transformer(object):
    """
    Turns one value into JSON-safe data. Holds the limits for the walk and
    the ids of the containers currently being visited, so a value which
    contains itself becomes ``'<...>'``.
    """

    def __init__(self, manager, max_depth=6, list_max_length=None,
                 string_max_length=None):
        self.max_depth = max_depth
        self.list_max_length = list_max_length
        self.string_max_length = string_max_length
        self.serializers = [cls(self) for cls in manager.serializers]
        self._visiting = set()

    def trim(self, value):
        return trim(value, self.string_max_length)

    def transform(self, value, depth=0):
        if value is None or isinstance(value, PRIMITIVES):
            return value

        if depth >= self.max_depth:
            return self.trim(safe_repr(value))

        key = id(value)
        if key in self._visiting:
            return '<...>'
        self._visiting.add(key)

        try:
            for serializer in self.serializers:
                if serializer.can(value):
                    return serializer.serialize(value, depth)
            return self.trim(safe_repr(value))
        except Exception:
            logger.exception('Unable to serialize value of %s', type(value))
            return str(type(value))
        finally:
            self._visiting.discard(key)


manager = SerializationManager()
register = manager.register


def transform(value, manager=manager, max_depth=6, list_max_length=None,
              string_max_length=None):
    """
    Returns a JSON-safe copy of ``value``: containers are walked up to
    ``max_depth`` levels and cut to ``list_max_length`` items, strings are
    cut to ``string_max_length`` characters and anything else becomes its
    ``repr``.

    >>> transform({'user': object()}, string_max_length=10)
    {'user': '<object ob'}
    """
    return Transformer(
        manager, max_depth=max_depth, list_max_length=list_max_length,
        string_max_length=string_max_length).transform(value)
