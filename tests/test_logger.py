import io

import pytest

from speedwire.logger import LogLevel, LogListener, Logger, set_log_listener


class CollectingListener(LogListener):
    def __init__(self):
        super().__init__()
        self.messages = []

    def log_msg(self, text, level):
        self.messages.append((text, level))


@pytest.fixture(autouse=True)
def reset_listener():
    set_log_listener(None, LogLevel.LOG_ALL)
    yield
    set_log_listener(None, LogLevel.LOG_ALL)


def test_error_message_format():
    listener = CollectingListener()
    set_log_listener(listener, LogLevel.LOG_ALL)
    Logger("mod").print(LogLevel.LOG_ERROR, "value %d", 5)
    assert listener.messages == [("ERROR:   mod: value 5\n", LogLevel.LOG_ERROR)]


def test_prefixes_by_level():
    listener = CollectingListener()
    set_log_listener(listener, LogLevel.LOG_ALL)
    logger = Logger("m")
    logger.print(LogLevel.LOG_WARNING, "w")
    logger.print(LogLevel.LOG_INFO_2, "i")
    texts = [t for t, _ in listener.messages]
    assert texts[0].startswith("WARNING: m: ")
    assert texts[1].startswith("INFO:    m: ")


def test_unknown_prefix_for_combined_level():
    listener = CollectingListener()
    set_log_listener(listener, LogLevel.LOG_ALL)
    Logger("m").print(LogLevel.LOG_ERROR | LogLevel.LOG_WARNING, "x")
    assert listener.messages[0][0].startswith("UNKNOWN: m: ")


def test_newline_not_doubled():
    listener = CollectingListener()
    set_log_listener(listener, LogLevel.LOG_ALL)
    Logger("m").print(LogLevel.LOG_ERROR, "line\n")
    text = listener.messages[0][0]
    assert text.endswith("line\n")
    assert text.count("\n") == 1


def test_level_filtering():
    listener = CollectingListener()
    set_log_listener(listener, LogLevel.LOG_ERROR)
    logger = Logger("m")
    logger.print(LogLevel.LOG_WARNING, "dropped")
    logger.print(LogLevel.LOG_ERROR, "kept")
    assert len(listener.messages) == 1
    assert "kept" in listener.messages[0][0]


def test_without_listener_writes_stderr(capsys):
    Logger("mod").print(LogLevel.LOG_INFO_0, "hello")
    assert capsys.readouterr().err == "INFO:    mod: hello\n"


def test_default_listener_writes_to_stream():
    stream = io.StringIO()
    set_log_listener(LogListener(stream), LogLevel.LOG_ALL)
    Logger("net").print(LogLevel.LOG_WARNING, "%s-%s", "a", "b")
    assert stream.getvalue() == "WARNING: net: a-b\n"


def test_percent_sign_without_args_is_literal():
    listener = CollectingListener()
    set_log_listener(listener, LogLevel.LOG_ALL)
    Logger("m").print(LogLevel.LOG_ERROR, "100%")
    assert "100%" in listener.messages[0][0]