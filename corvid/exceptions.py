"""
corvid.exceptions
~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""


class CorvidError(Exception):
    pass


class ConfigError(CorvidError, ValueError):
    """
    Raised when the client cannot be configured, usually because the DSN
    is missing or malformed.
    """


class ProcessorError(CorvidError):
    def __init__(self, message, processor=None):
        super(ProcessorError, self).__init__(message)
        self.processor = processor


class TransportFailure(CorvidError):
    def __init__(self, message, code=None):
        super(TransportFailure, self).__init__(message)
        self.code = code

    def __str__(self):
        message = super(TransportFailure, self).__str__()
        if self.code is None:
            return message
        return '%s: %s' % (message, self.code)


class CaptureReportingFailure(CorvidError):
    """
    Raised by ``Client.capture_errors`` when a failure could not be
    reported. ``event`` is the event which failed to send.
    """

    def __init__(self, message, event=None):
        super(CaptureReportingFailure, self).__init__(message)
        self.event = event


class ValidationWarning(UserWarning):
    pass
