"""
corvid.utils.stacks
~~~~~~~~~~~~~~~~~~~

Turns tracebacks and frames into the frame dicts of the Stacktrace
interface, oldest frame first.

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import os
import re
import sys

from corvid.conf import defaults
from corvid.utils.serializer import transform

# PEP 263 source encoding declaration
_coding_re = re.compile(r'coding[:=]\s*([-\w.]+)')


def _lookup(mapping, key, default=None):
    # f_locals of some frames only support __getitem__
    try:
        return mapping[key]
    except Exception:
        return default


def is_hidden(frame):
    return bool(_lookup(getattr(frame, 'f_locals', {}), '__traceback_hide__'))


def _decode_source(raw):
    encoding = 'utf-8'
    for line in raw[:2]:
        match = _coding_re.search(line.decode('ascii', 'replace'))
        if match:
            encoding = match.group(1)
            break
    try:
        return [line.decode(encoding, 'replace') for line in raw]
    except LookupError:
        return [line.decode('utf-8', 'replace') for line in raw]


def read_source(filename, loader=None, module_name=None):
    """
    Returns the lines of a module's source, asking its ``loader`` first and
    falling back to the file on disk. ``None`` if neither is available.
    """
    get_source = getattr(loader, 'get_source', None)
    if get_source is not None:
        try:
            source = get_source(module_name)
        except (ImportError, OSError):
            source = None
        if source is not None:
            return source.splitlines()

    try:
        with open(filename, 'rb') as f:
            return _decode_source(f.readlines())
    except OSError:
        return None


def get_lines_from_file(filename, lineno, context_lines, loader=None, module_name=None):
    """
    Returns ``(pre_context, context_line, post_context)`` around the zero
    based ``lineno``, or ``(None, [], None)`` when the line can't be read.
    """
    source = read_source(filename, loader, module_name)
    if source is None or not 0 <= lineno < len(source):
        return None, [], None

    def clean(lines):
        return [line.strip('\r\n') for line in lines]

    start = max(0, lineno - context_lines)
    return (
        clean(source[start:lineno]),
        source[lineno].strip('\r\n'),
        clean(source[lineno + 1:lineno + 1 + context_lines]),
    )


def iter_traceback_frames(tb):
    """
    Yields ``(frame, lineno)`` for each traceback entry, skipping frames
    which set ``__traceback_hide__``.
    """
    while tb is not None:
        if not is_hidden(tb.tb_frame):
            yield tb.tb_frame, tb.tb_lineno
        tb = tb.tb_next


def iter_frame_chain(frame):
    """
    Walks ``frame`` outwards through ``f_back`` and yields
    ``(frame, lineno)`` pairs oldest first.
    """
    chain = []
    while frame is not None:
        chain.append((frame, frame.f_lineno))
        frame = frame.f_back
    return reversed(chain)


def relative_filename(abs_path, module_name):
    """
    Strips everything up to the top level package, so
    ``/srv/site-packages/shop/views.py`` becomes ``shop/views.py``.
    """
    if not abs_path or not module_name:
        return abs_path
    top = sys.modules.get(module_name.split('.', 1)[0])
    top_file = getattr(top, '__file__', None)
    if not top_file:
        return abs_path
    root = os.path.dirname(top_file)
    if hasattr(top, '__path__'):
        root = os.path.dirname(root)
    if root and abs_path.startswith(root + os.sep):
        return abs_path[len(root) + 1:]
    return abs_path


def frame_locals(f_locals, list_max_length, string_max_length):
    if f_locals is not None and not isinstance(f_locals, dict):
        keys = getattr(f_locals, 'keys', None)
        if keys is None:
            return '<invalid local scope>'
        try:
            f_locals = dict((key, f_locals[key]) for key in keys())
        except Exception:
            return '<invalid local scope>'
    return transform(f_locals, list_max_length=list_max_length,
                     string_max_length=string_max_length)


def frame_to_dict(frame, lineno, list_max_length=defaults.MAX_LENGTH_LIST,
                  string_max_length=defaults.MAX_LENGTH_STRING,
                  capture_locals=True):
    """
    Describes one frame. ``lineno`` is one based, as in tracebacks.
    """
    f_code = getattr(frame, 'f_code', None)
    abs_path = getattr(f_code, 'co_filename', None)
    function = getattr(f_code, 'co_name', None)

    f_globals = getattr(frame, 'f_globals', {})
    module_name = _lookup(f_globals, '__name__')

    result = {
        'abs_path': abs_path,
        'filename': relative_filename(abs_path, module_name),
        'module': module_name or None,
        'function': function or '<unknown>',
        'lineno': lineno,
    }

    if lineno and abs_path:
        pre_context, context_line, post_context = get_lines_from_file(
            abs_path, lineno - 1, defaults.CONTEXT_LINES,
            _lookup(f_globals, '__loader__'), module_name)
        if pre_context is not None:
            result['pre_context'] = pre_context
            result['context_line'] = context_line
            result['post_context'] = post_context

    if capture_locals:
        result['vars'] = frame_locals(
            getattr(frame, 'f_locals', None), list_max_length, string_max_length)

    return result


def get_stack_info(frames, list_max_length=defaults.MAX_LENGTH_LIST,
                   string_max_length=defaults.MAX_LENGTH_STRING,
                   capture_locals=True):
    """
    Converts frames, or ``(frame, lineno)`` pairs, into a list of frame
    dicts. Hidden frames are left out.
    """
    __traceback_hide__ = True  # NOQA

    results = []
    for item in frames:
        if isinstance(item, (list, tuple)):
            frame, lineno = item
        else:
            frame, lineno = item, item.f_lineno

        if is_hidden(frame):
            continue

        results.append(frame_to_dict(
            frame, lineno, list_max_length=list_max_length,
            string_max_length=string_max_length, capture_locals=capture_locals))
    return results
