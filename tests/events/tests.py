import datetime
import uuid
import warnings

import pytest

from corvid.context import Context
from corvid.events import EventBuilder, generate_id
from corvid.exceptions import ValidationWarning
from corvid.interfaces import exception_context, user_context
from corvid.utils.testutils import TestCase


def fixed_clock():
    return datetime.datetime(2013, 8, 13, 3, 8, 24)


class EventBuilderTest(TestCase):
    def make_builder(self, **context):
        return EventBuilder(
            Context(context), name='test-host', clock=fixed_clock,
            id_generator=lambda: 'c0ffee' * 5 + 'ab')

    def test_defaults(self):
        event = self.make_builder().construct()
        assert event == {
            'event_id': 'c0ffee' * 5 + 'ab',
            'timestamp': '2013-08-13T03:08:24',
            'logger': 'root',
            'server_name': 'test-host',
            'platform': 'python',
            'level': 'error',
            'extra': {},
            'tags': {},
            'fingerprint': ['{{ default }}'],
        }

    def test_overrides_win_over_context(self):
        builder = self.make_builder(logger='stored', culprit='stored.func')
        event = builder.construct(logger='override')
        assert event['logger'] == 'override'
        assert event['culprit'] == 'stored.func'

    def test_none_override_falls_back_to_context(self):
        builder = self.make_builder(logger='stored')
        assert builder.construct(logger=None)['logger'] == 'stored'

    def test_extra_and_tags_merge(self):
        builder = self.make_builder(
            tags={'site': 'www', 'env': 'prod'},
            extra={'a': 1, 'b': 2},
        )
        event = builder.construct(tags={'env': 'dev'}, extra={'b': 3, 'c': 4})
        assert event['tags'] == {'site': 'www', 'env': 'dev'}
        assert event['extra'] == {'a': 1, 'b': 3, 'c': 4}

    def test_extra_and_tags_are_never_null(self):
        event = self.make_builder(tags=None).construct(extra=None)
        assert event['tags'] == {}
        assert event['extra'] == {}

    def test_merge_does_not_touch_context(self):
        context = Context({'tags': {'site': 'www'}})
        EventBuilder(context).construct(tags={'env': 'dev'})
        assert context.get() == {'tags': {'site': 'www'}}

    def test_fingerprint_is_replaced(self):
        builder = self.make_builder(fingerprint=['a'])
        assert builder.construct(fingerprint=['b'])['fingerprint'] == ['b']
        assert builder.construct()['fingerprint'] == ['a']

    def test_string_fingerprint_is_one_key(self):
        builder = self.make_builder(fingerprint='{{ default }}')
        assert builder.construct()['fingerprint'] == ['{{ default }}']
        assert builder.construct(fingerprint='checkout')['fingerprint'] == ['checkout']

    def test_fingerprint_tuple(self):
        event = self.make_builder().construct(fingerprint=('a', 'b'))
        assert event['fingerprint'] == ['a', 'b']

    def test_valid_level(self):
        builder = self.make_builder()
        for level in ('fatal', 'error', 'warning', 'info', 'debug'):
            with warnings.catch_warnings():
                warnings.simplefilter('error')
                assert builder.construct(level=level)['level'] == level

    def test_invalid_level(self):
        builder = self.make_builder()
        with pytest.warns(ValidationWarning):
            event = builder.construct(level='not-a-level')
        assert event['level'] == 'error'

    def test_invalid_level_falls_back_to_context(self):
        builder = self.make_builder(level='info')
        with pytest.warns(ValidationWarning):
            event = builder.construct(level='not-a-level')
        assert event['level'] == 'info'

    def test_invalid_stored_level(self):
        builder = self.make_builder(level='loud')
        with pytest.warns(ValidationWarning):
            assert builder.construct()['level'] == 'error'

    def test_message_is_truncated(self):
        builder = self.make_builder()
        assert len(builder.construct(message='x' * 3000)['message']) == 2048
        assert builder.construct(message='x' * 10)['message'] == 'x' * 10

    def test_culprit_is_truncated(self):
        event = self.make_builder().construct(culprit='c' * 300)
        assert event['culprit'] == 'c' * 200

    def test_optional_fields_are_omitted(self):
        event = self.make_builder().construct()
        assert 'message' not in event
        assert 'culprit' not in event
        assert 'release' not in event

    def test_release(self):
        builder = EventBuilder(Context(), release='1.2.3')
        assert builder.construct()['release'] == '1.2.3'
        assert builder.construct(release='2.0')['release'] == '2.0'

    def test_event_id_and_timestamp_overrides(self):
        event_id = uuid.UUID('3a7c5f3e-1e4a-4a34-b8b9-1b7c4c2d1e0f')
        event = self.make_builder().construct(
            event_id=event_id,
            timestamp=datetime.datetime(2012, 1, 1, 12, 30, 0),
        )
        assert event['event_id'] == event_id.hex
        assert event['timestamp'] == '2012-01-01T12:30:00'

    def test_aware_timestamp_is_converted_to_utc(self):
        tz = datetime.timezone(datetime.timedelta(hours=2))
        event = self.make_builder().construct(
            timestamp=datetime.datetime(2012, 1, 1, 12, 30, 0, tzinfo=tz))
        assert event['timestamp'] == '2012-01-01T10:30:00'

    def test_construct_is_deterministic(self):
        builder = self.make_builder(tags={'a': 'b'})
        assert builder.construct(message='foo') == builder.construct(message='foo')

    def test_interfaces_are_attached_from_overrides_only(self):
        builder = self.make_builder(**user_context(id='42'))
        event = builder.construct(**exception_context('boom', type='ValueError'))
        assert event['sentry.interfaces.Exception'] == {
            'type': 'ValueError',
            'value': 'boom',
        }
        assert 'sentry.interfaces.User' not in event

    def test_unknown_interfaces_are_ignored(self):
        event = self.make_builder().construct(**{
            'sentry.interfaces.Template': {'filename': 'foo.html'},
        })
        assert 'sentry.interfaces.Template' not in event

    def test_interfaces_are_trimmed(self):
        event = self.make_builder().construct(**exception_context('v' * 300))
        assert event['sentry.interfaces.Exception']['value'] == 'v' * 256


class GenerateIdTest(TestCase):
    def test_is_hex_uuid(self):
        event_id = generate_id()
        assert len(event_id) == 32
        assert uuid.UUID(event_id).hex == event_id
