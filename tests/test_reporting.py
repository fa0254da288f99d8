import threading
from datetime import datetime, timezone

import pytest

from sfsclient.reporting import MAX_LOG_MESSAGE_SIZE, LogData, LogSeverity, ReportingHandler


@pytest.fixture
def captured():
    handler = ReportingHandler()
    records = []
    handler.set_logging_callback(records.append)
    return handler, records


@pytest.mark.parametrize(
    "severity, name",
    [
        (LogSeverity.INFO, "Info"),
        (LogSeverity.WARNING, "Warning"),
        (LogSeverity.ERROR, "Error"),
        (LogSeverity.VERBOSE, "Verbose"),
    ],
)
def test_severity_names(severity, name):
    assert str(severity) == name


@pytest.mark.parametrize(
    "method, severity",
    [
        ("info", LogSeverity.INFO),
        ("warning", LogSeverity.WARNING),
        ("error", LogSeverity.ERROR),
        ("verbose", LogSeverity.VERBOSE),
    ],
)
def test_severity_shortcuts(captured, method, severity):
    handler, records = captured
    getattr(handler, method)("hello")
    assert len(records) == 1
    assert records[0].severity is severity
    assert records[0].message == "hello"


def test_formatting_with_args(captured):
    handler, records = captured
    handler.info("SFSClient instance created successfully. Version: %s", "1.2.3")
    assert records[0].message == "SFSClient instance created successfully. Version: 1.2.3"


def test_no_args_leaves_message_untouched(captured):
    handler, records = captured
    handler.warning("100% %s")
    assert records[0].message == "100% %s"


def test_formatted_message_is_truncated(captured):
    handler, records = captured
    handler.error("%s", "x" * (MAX_LOG_MESSAGE_SIZE * 2))
    assert len(records[0].message) == MAX_LOG_MESSAGE_SIZE - 1
    assert set(records[0].message) == {"x"}


def test_unformatted_message_is_not_truncated(captured):
    handler, records = captured
    long_message = "y" * (MAX_LOG_MESSAGE_SIZE * 2)
    handler.error(long_message)
    assert records[0].message == long_message


def test_records_caller_location(captured):
    handler, records = captured
    handler.info("where")
    record = records[0]
    assert record.file == __file__
    assert record.function == "test_records_caller_location"
    assert record.line > 0


def test_records_time(captured):
    handler, records = captured
    before = datetime.now(timezone.utc)
    handler.log(LogSeverity.INFO, "now")
    after = datetime.now(timezone.utc)
    assert before <= records[0].time <= after
    assert isinstance(records[0], LogData)


def test_reset_callback(captured):
    handler, records = captured
    handler.info("first")
    handler.set_logging_callback(None)
    handler.info("second")
    assert [r.message for r in records] == ["first"]


def test_no_callback_does_nothing_and_later_callback_sees_only_new():
    handler = ReportingHandler()
    handler.info("lost")
    records = []
    handler.set_logging_callback(records.append)
    handler.info("kept")
    assert [r.message for r in records] == ["kept"]


def test_concurrent_logging(captured):
    handler, records = captured

    def worker(n):
        for i in range(50):
            handler.info("%d-%d", n, i)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(records) == 4 * 50
    assert len({r.message for r in records}) == 4 * 50