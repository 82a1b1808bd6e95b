"""
corvid.scripts.runner
~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import logging
import os
import sys
from optparse import OptionParser

from corvid import Client
from corvid.exceptions import ConfigError
from corvid.interfaces import request_context
from corvid.utils import json


def store_json(option, opt_str, value, parser):
    try:
        value = json.loads(value)
    except ValueError:
        print("Invalid JSON was used for option %s.  Received: %s" % (opt_str, value))
        sys.exit(1)
    setattr(parser.values, option.dest, value)


def get_loadavg():
    if hasattr(os, 'getloadavg'):
        return os.getloadavg()
    return None


def get_uid():
    try:
        import pwd
    except ImportError:
        return None
    return pwd.getpwuid(os.geteuid())[0]


def send_test_message(client, options):
    print("Client configuration:")
    for k in ('post_url', 'public_key', 'secret_key', 'timeout', 'encoding'):
        print('  %-15s: %s' % (k, getattr(client, k)))
    print()

    data = options.get('data') or {}
    data.setdefault('culprit', 'corvid.scripts.runner')
    data.setdefault('logger', 'corvid.test')
    data.setdefault('sentry.interfaces.Http', request_context(
        'http://example.com', method='GET')['sentry.interfaces.Http'])

    print('Sending a test message...',)

    context = {
        'level': 'info',
        'tags': options.get('tags') or {},
        'extra': {
            'user': get_uid(),
            'loadavg': get_loadavg(),
        },
    }
    context.update(data)

    ident = client.capture_message(
        'This is a test message generated using ``corvid test``', **context)

    if ident is None:
        print('error!')
        return False

    print('success!')
    print('Event ID was %r' % (ident,))
    return True


def main(argv=None):
    root = logging.getLogger('corvid.errors')
    root.setLevel(logging.DEBUG)

    parser = OptionParser(usage='%prog test [DSN]')
    parser.add_option("--data", action="callback", callback=store_json,
        type="string", nargs=1, dest="data")
    parser.add_option("--tags", action="callback", callback=store_json,
        type="string", nargs=1, dest="tags")
    (opts, args) = parser.parse_args(argv)

    if not args or args[0] != 'test':
        parser.print_usage()
        sys.exit(1)

    try:
        client = Client(' '.join(args[1:]) or None)
    except ConfigError as e:
        print("Error: %s" % (e,))
        print("You must either pass a DSN to the command, or set the SENTRY_DSN environment variable.")
        sys.exit(1)

    print("Using DSN configuration:")
    print(" ", client.remote.base_url)
    print()

    if not send_test_message(client, opts.__dict__):
        sys.exit(1)
