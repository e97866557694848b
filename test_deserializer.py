import io
import json
import logging
import threading

import pytest

import ical_reader
from ical_reader import (DataClass, Deserializer, GrammarError, ICSCalendar, StreamConsumedError,
                         StructuralError, deserialize, load_config, loads)

CALENDAR = """BEGIN:VCALENDAR
VERSION:2.0
PRODID:-//Example Corp//Calendar//EN
BEGIN:VEVENT
UID:1@example.com
DTSTART;TZID=Europe/Paris:20240102T103000
SUMMARY:Weekly sync\\, room 4
DESCRIPTION:A description long enough to be
  folded on two lines
PRIORITY:1
CATEGORIES:work,meeting
END:VEVENT
BEGIN:VEVENT
UID:2@example.com
DTSTART;VALUE=DATE:20240103
SUMMARY:Holiday
END:VEVENT
END:VCALENDAR
"""


def test_minimal():
    out = loads(['BEGIN:VCALENDAR', 'VERSION:2.0', 'END:VCALENDAR'])
    assert len(out) == 1
    cal = out[0]
    assert cal.name == 'VCALENDAR'
    assert [p.name for p in cal.properties] == ['VERSION']
    assert cal.get('VERSION').values == ['2.0']


def test_full_calendar():
    cal, = loads(CALENDAR)
    assert isinstance(cal, ical_reader.Calendar)
    first, second = cal.events
    assert first.summary == 'Weekly sync, room 4'
    assert first.value('DESCRIPTION') == 'A description long enough to be folded on two lines'
    assert first.value('PRIORITY') == 1
    assert first.get('CATEGORIES').values == ['work', 'meeting']
    assert first.value('DTSTART').tzinfo is not None
    assert second.value('DTSTART').isoformat() == '2024-01-03'


def test_file_like_source_with_crlf():
    text = CALENDAR.replace('\n', '\r\n')
    cal, = deserialize(io.StringIO(text))
    assert len(cal.events) == 2


def test_streaming():
    def source():
        yield 'BEGIN:A'
        yield 'END:A'
        yield 'BEGIN:B'
        raise AssertionError('read too far')

    stream = deserialize(source())
    assert next(stream).name == 'A'


def test_stream_is_single_pass():
    stream = deserialize(['BEGIN:A', 'END:A'])
    assert [c.name for c in stream] == ['A']
    with pytest.raises(StreamConsumedError):
        iter(stream)


def test_diagnostics_on_grammar_error():
    stream = deserialize(['BEGIN:VCALENDAR', '', 'VERSION:2.0', 'BAD LINE', 'END:VCALENDAR'])
    with pytest.raises(GrammarError) as e:
        list(stream)
    err = e.value
    assert (err.line_number, err.original_line_number, err.line) == (2, 3, 'BAD LINE')
    assert 'Line number: `3` (`2` after line breaks removed)' in err.describe()
    message = stream.last_line_message(str(err))
    assert message == err.describe()
    assert 'Line: `BAD LINE`' in message
    assert message.endswith(f'Original exception message: `{err}`')


def test_diagnostics_on_structural_error():
    stream = deserialize(['BEGIN:A', ' folded', 'END:B'])
    with pytest.raises(StructuralError) as e:
        list(stream)
    assert (e.value.line_number, e.value.original_line_number) == (1, 2)


def test_diagnostics_on_unclosed_component():
    with pytest.raises(StructuralError) as e:
        loads(['BEGIN:VCALENDAR', 'VERSION:2.0'])
    assert 'VCALENDAR' in str(e.value)
    assert e.value.line == 'VERSION:2.0'


def test_diagnostics_on_decoder_error():
    stream = deserialize(['BEGIN:VEVENT', 'PRIORITY:urgent', 'END:VEVENT'])
    with pytest.raises(ValueError) as e:
        list(stream)
    assert 'PRIORITY:urgent' in stream.last_line_message(str(e.value))


def test_diagnostics_cleared_after_success():
    stream = deserialize(['BEGIN:A', 'END:A'])
    list(stream)
    assert stream.last_line_message('anything') is None


def test_leading_continuation_is_reported():
    with pytest.raises(GrammarError) as e:
        loads([' BEGIN:A', 'END:A'])
    assert e.value.line == ' BEGIN:A'
    assert e.value.original_line_number == 0


def test_concurrent_streams_share_a_deserializer():
    d = Deserializer()
    results = {}

    def run(key, lines):
        stream = d.deserialize(lines)
        try:
            list(stream)
        except GrammarError as e:
            results[key] = e.line
        else:
            results[key] = stream.last_line_message('ok')

    threads = [
        threading.Thread(target=run, args=('bad', ['BEGIN:A', 'oops', 'END:A'])),
        threading.Thread(target=run, args=('good', ['BEGIN:A', 'END:A'])),
    ]
    for t in threads: t.start()
    for t in threads: t.join()
    assert results == {'bad': 'oops', 'good': None}


def test_keyword_config():
    d = Deserializer(type_mappings={'X-COUNT': 'INTEGER'}, default_type='RAW')
    cal, = d.deserialize(['BEGIN:A', 'X-COUNT:4', 'SUMMARY:a\\,b', 'END:A'])
    assert cal.value('X-COUNT') == 4
    assert cal.get('SUMMARY').values == ['a\\,b']


def test_yaml_config(tmp_path, caplog):
    path = tmp_path / 'config.yaml'
    path.write_text('log_level: INFO\ntype_mappings:\n  x-count: integer\n')
    with caplog.at_level(logging.INFO):
        config = load_config(str(path))
    assert config.log_level == 'INFO'
    assert config.type_mappings == {'x-count': 'integer'}
    assert 'config.yaml' in caplog.text

    d = Deserializer.from_config(str(path))
    cal, = d.deserialize(['BEGIN:A', 'X-COUNT:4', 'END:A'])
    assert cal.value('X-COUNT') == 4


def test_ics_calendar():
    c = ICSCalendar(CALENDAR)
    assert c.data['@type'] == 'VCALENDAR'
    assert c.data['VERSION'] == '2.0'
    assert [e['UID'] for e in c.data['VEVENT']] == ['1@example.com', '2@example.com']
    assert c.data['VEVENT'][0]['CATEGORIES'] == ['work', 'meeting']
    # everything must be json serializable once passed through DataClass.json
    json.dumps(DataClass.json(c.data))
    json.dumps(DataClass.json(c.calendar))


def test_ics_calendar_empty():
    with pytest.raises(StructuralError):
        ICSCalendar('\n\n')


def test_non_text_default_type():
    d = Deserializer(default_type='INTEGER')
    cal, = d.deserialize(['BEGIN:VCALENDAR', 'X-N:1', 'END:VCALENDAR'])
    assert cal.name == 'VCALENDAR'
    assert cal.value('X-N') == 1


def test_log_level_is_applied(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, 'basicConfig', lambda **kw: calls.append(kw))
    Deserializer(log_level='DEBUG')
    Deserializer()
    assert calls == [{'level': 'DEBUG'}]


def test_source_errors_are_not_located():
    def source():
        yield 'BEGIN:A'
        yield 'X:1'
        raise OSError('connection lost')

    stream = deserialize(source())
    with pytest.raises(OSError) as e:
        list(stream)
    assert stream.last_line_message(str(e.value)) is None
