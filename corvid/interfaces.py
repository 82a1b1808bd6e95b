"""
corvid.interfaces
~~~~~~~~~~~~~~~~~

Interfaces are the typed sub-records which can be attached to an event.
The set is closed: ``INTERFACES`` lists every interface the client knows
how to send, and only those keys are ever copied onto an event.

Each ``*_context`` builder returns a single entry dict so the result can
be splatted straight into any ``capture_*`` call:

>>> client.capture_message('The sky is falling',
>>>                        **exception_context('falling', type='SkyException'))

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from types import FrameType, TracebackType

from corvid.utils import trim
from corvid.utils.stacks import get_stack_info, iter_frame_chain, iter_traceback_frames

__all__ = (
    'Interface', 'Exception', 'Http', 'Stacktrace', 'User', 'Query',
    'INTERFACES', 'exception_context', 'request_context', 'stacktrace_context',
    'user_context', 'query_context',
)


class Interface(object):
    name = None
    fields = ()
    # field name -> maximum length, strings only
    max_lengths = {}

    @classmethod
    def build(cls, **values):
        data = dict(
            (key, values[key]) for key in cls.fields
            if values.get(key) is not None
        )
        return {cls.name: cls.trim(data)}

    @classmethod
    def trim(cls, data):
        """
        Returns a copy of ``data`` with every string field clipped to its
        maximum length.
        """
        if not isinstance(data, dict):
            return data
        result = dict(data)
        for key, max_length in cls.max_lengths.items():
            if key in result:
                result[key] = trim(result[key], max_length)
        return result


class Exception(Interface):
    name = 'sentry.interfaces.Exception'
    fields = ('type', 'value')
    max_lengths = {
        'type': 128,
        'value': 256,
    }


class Http(Interface):
    name = 'sentry.interfaces.Http'
    fields = ('url', 'method', 'data', 'query_string', 'cookies', 'headers', 'env')
    max_lengths = {
        'url': 1024,
        'data': 2048,
        'query_string': 1024,
        'cookies': 1024,
    }


class Stacktrace(Interface):
    name = 'sentry.interfaces.Stacktrace'
    fields = ('frames',)
    frame_max_lengths = {
        'filename': 256,
        'function': 256,
        'module': 256,
    }

    @classmethod
    def trim(cls, data):
        if not isinstance(data, dict):
            return data
        result = dict(data)
        frames = result.get('frames')
        if isinstance(frames, (list, tuple)):
            result['frames'] = [cls.trim_frame(frame) for frame in frames]
        return result

    @classmethod
    def trim_frame(cls, frame):
        if not isinstance(frame, dict):
            return frame
        frame = dict(frame)
        for key, max_length in cls.frame_max_lengths.items():
            if key in frame:
                frame[key] = trim(frame[key], max_length)
        return frame


class User(Interface):
    name = 'sentry.interfaces.User'
    fields = ('id', 'username', 'email')
    max_lengths = {
        'id': 128,
        'username': 128,
        'email': 128,
    }


class Query(Interface):
    name = 'sentry.interfaces.Query'
    fields = ('query', 'engine')
    max_lengths = {
        'query': 1024,
        'engine': 128,
    }


INTERFACES = (Exception, Http, Stacktrace, User, Query)


def exception_context(value, type=None):
    return Exception.build(value=value, type=type)


def request_context(url, method=None, data=None, query_string=None,
                    cookies=None, headers=None, env=None):
    return Http.build(url=url, method=method, data=data,
                      query_string=query_string, cookies=cookies,
                      headers=headers, env=env)


def stacktrace_context(frames):
    """
    ``frames`` is either a list of frame dicts, oldest first, or something
    native to convert: a traceback, a frame (walked outwards), or a list of
    ``(frame, lineno)`` pairs.
    """
    if isinstance(frames, TracebackType):
        frames = get_stack_info(iter_traceback_frames(frames))
    elif isinstance(frames, FrameType):
        frames = get_stack_info(iter_frame_chain(frames))
    else:
        frames = list(frames)
        if frames and not isinstance(frames[0], dict):
            frames = get_stack_info(frames)

    return Stacktrace.build(frames=frames)


def user_context(id=None, username=None, email=None):
    return User.build(id=id, username=username, email=email)


def query_context(query, engine=None):
    return Query.build(query=query, engine=engine)
