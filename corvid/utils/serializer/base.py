"""
corvid.utils.serializer.base
~~~~~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from collections.abc import Mapping
from itertools import islice

from corvid.utils.serializer.manager import register

__all__ = ('Serializer',)


class Serializer(object):
    types = ()

    def __init__(self, transformer):
        self.transformer = transformer

    def can(self, value):
        return isinstance(value, self.types)

    def serialize(self, value, depth):
        raise NotImplementedError


class TextSerializer(Serializer):
    types = (str, bytes)

    def serialize(self, value, depth):
        if isinstance(value, bytes):
            value = value.decode('utf-8', 'replace')
        return self.transformer.trim(value)


class MappingSerializer(Serializer):
    types = (Mapping,)

    def serialize(self, value, depth):
        items = islice(value.items(), self.transformer.list_max_length)
        return dict(
            (key if isinstance(key, str) else str(key),
             self.transformer.transform(item, depth + 1))
            for key, item in items
        )


class SequenceSerializer(Serializer):
    types = (list, tuple, set, frozenset)

    def serialize(self, value, depth):
        items = islice(value, self.transformer.list_max_length)
        return [self.transformer.transform(item, depth + 1) for item in items]


register(TextSerializer)
register(MappingSerializer)
register(SequenceSerializer)
