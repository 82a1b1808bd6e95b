"""
corvid.utils
~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""


def merge_dicts(*dicts):
    out = {}
    for d in dicts:
        if not d:
            continue

        for k, v in d.items():
            out[k] = v
    return out


def varmap(func, var, context=None, name=None):
    """
    Executes ``func(key_name, value)`` on all values
    recurisively discovering dict and list scoped
    values.
    """
    if context is None:
        context = {}
    objid = id(var)
    if objid in context:
        return func(name, '<...>')
    context[objid] = 1
    if isinstance(var, dict):
        ret = dict((k, varmap(func, v, context, k))
                   for k, v in var.items())
    elif isinstance(var, (list, tuple)):
        ret = [varmap(func, f, context, name) for f in var]
    else:
        ret = func(name, var)
    del context[objid]
    return ret


def trim(value, max_length):
    """
    Clips ``value`` to ``max_length`` characters. Anything that is not a
    string is returned untouched.
    """
    if isinstance(value, str) and max_length is not None and len(value) > max_length:
        return value[:max_length]
    return value


def get_auth_header(protocol, timestamp, client, api_key, api_secret):
    header = {
        'sentry_timestamp': timestamp,
        'sentry_client': client,
        'sentry_version': protocol,
        'sentry_key': api_key,
        'sentry_secret': api_secret,
    }

    return 'Sentry %s' % ', '.join(
        '%s=%s' % (k, header[k]) for k in sorted(header))
