import pytest

from appinsights.diagnostics import (
    DiagnosticsMessageWriter,
    diagnostics_writer,
    new_diagnostics_message_listener,
)


@pytest.fixture
def writer():
    return DiagnosticsMessageWriter()


@pytest.fixture
def global_writer():
    diagnostics_writer.clear()
    yield diagnostics_writer
    diagnostics_writer.clear()


def test_message_sent_to_consumers(global_writer):
    original = "~~~test_message~~~"
    received1 = []
    received2 = []
    new_diagnostics_message_listener(received1.append)
    new_diagnostics_message_listener(received2.append)

    global_writer.write(original)

    assert original in received1
    assert original in received2


def test_remove_listener(writer):
    received = []
    listener = writer.add_listener(received.append)

    writer.write("Hello")
    assert received == ["Hello"]

    listener.remove()
    writer.write("Hello")
    assert received == ["Hello"]
    assert writer.has_listeners() is False


def test_errored_listener_is_removed(writer):
    received = []
    errors = [None, RuntimeError("Test error"), None]

    def handler(message):
        received.append(message)
        error = errors.pop(0)
        if error is not None:
            raise error

    writer.add_listener(handler)

    writer.write("Hello")
    assert received == ["Hello"]
    assert writer.has_listeners() is True

    writer.write("Hello")
    assert received == ["Hello", "Hello"]
    assert writer.has_listeners() is False

    writer.write("Not received")
    assert received == ["Hello", "Hello"]


def test_failing_listener_does_not_stop_others(writer):
    received = []

    def bad(message):
        raise ValueError(message)

    writer.add_listener(bad)
    writer.add_listener(received.append)
    writer.write("one")
    writer.write("two")
    assert received == ["one", "two"]


def test_printf_formats(writer):
    received = []
    writer.add_listener(received.append)
    writer.printf("Channel dropped %d events while throttled", 3)
    writer.printf("no args %s")
    assert received == ["Channel dropped 3 events while throttled", "no args %s"]


def test_printf_without_listeners_skips_formatting(writer):
    writer.printf("%d", "not a number")
    assert writer.has_listeners() is False


def test_remove_twice_is_harmless(writer):
    received = []
    listener = writer.add_listener(received.append)
    listener.remove()
    listener.remove()
    writer.write("x")
    assert received == []


def test_clear(writer):
    received = []
    writer.add_listener(received.append)
    writer.add_listener(received.append)
    assert writer.has_listeners() is True
    writer.clear()
    writer.write("x")
    assert received == []