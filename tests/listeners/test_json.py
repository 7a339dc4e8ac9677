import io
import json

from logger_pro import Logger
from logger_pro.listeners.json import JsonSink, json_dumps

from conftest import CaptureChannel


def test_json_dumps_compact():
    assert json_dumps({"kind": "logi", "level": 0}) == '{"kind":"logi","level":0}'


def test_json_dumps_keeps_unicode():
    assert json_dumps({"message": "héllo"}) == '{"message":"héllo"}'


def test_sink_writes_one_line_per_event():
    stream = io.StringIO()
    logger = Logger(sink=JsonSink(stream), channel=CaptureChannel())

    logger.log_info("Hello, world!", name="Demo")
    logger.log_buffer_hex([0x44, 0x41, 0x52, 0x54])

    lines = stream.getvalue().splitlines()
    assert len(lines) == 2

    first, second = map(json.loads, lines)
    assert first["kind"] == "logi"
    assert first["message"] == "Hello, world!"
    assert first["name"] == "Demo"
    assert second["bytes"] == [68, 65, 82, 84]
    assert second["text"] == "44 41 52 54"


def test_raw_ansi_event_round_trips():
    stream = io.StringIO()
    logger = Logger(sink=JsonSink(stream), channel=CaptureChannel())

    logger.log_buffer_ansi([27, 91, 51, 49, 109, *b"ANSI"])

    event = json.loads(stream.getvalue())
    assert event["text"] == "\x1b[31mANSI"


def test_defaults_to_stdout(capsys):
    sink = JsonSink()
    sink.on_log({"kind": "logd"})
    assert capsys.readouterr().out == '{"kind":"logd"}\n'
