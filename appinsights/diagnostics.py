"""Diagnostic messages emitted by the library, delivered to subscribers."""

from __future__ import annotations

import threading
from typing import Callable

DiagnosticsMessageHandler = Callable[[str], object]


class DiagnosticsMessageListener:
    """A subscription to diagnostics messages; call remove() to unsubscribe."""

    def __init__(self, handler: DiagnosticsMessageHandler, writer: "DiagnosticsMessageWriter") -> None:
        self.handler = handler
        self._writer = writer

    def remove(self) -> None:
        """Stop receiving diagnostics messages through this listener."""
        self._writer.remove_listener(self)


class DiagnosticsMessageWriter:
    """Fans diagnostics messages out to registered listeners.

    A handler that raises an exception is removed after the message.
    """

    def __init__(self) -> None:
        self._listeners: list[DiagnosticsMessageListener] = []
        self._lock = threading.Lock()

    def add_listener(self, handler: DiagnosticsMessageHandler) -> DiagnosticsMessageListener:
        """Subscribe a handler and return the listener that represents it."""
        listener = DiagnosticsMessageListener(handler, self)
        with self._lock:
            self._listeners.append(listener)
        return listener

    def remove_listener(self, listener: DiagnosticsMessageListener) -> None:
        """Unsubscribe a listener; unknown listeners are ignored."""
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def write(self, message: str) -> None:
        """Deliver a message to every listener."""
        with self._lock:
            listeners = list(self._listeners)

        failed = []
        for listener in listeners:
            try:
                listener.handler(message)
            except Exception:
                failed.append(listener)

        for listener in failed:
            listener.remove()

    def printf(self, message: str, *args: object) -> None:
        """Format a message with %-style arguments and deliver it, if anyone listens."""
        if self.has_listeners():
            self.write(message % args if args else message)

    def has_listeners(self) -> bool:
        """Return True if at least one listener is subscribed."""
        with self._lock:
            return bool(self._listeners)

    def clear(self) -> None:
        """Remove every listener."""
        with self._lock:
            self._listeners.clear()


diagnostics_writer = DiagnosticsMessageWriter()


def new_diagnostics_message_listener(handler: DiagnosticsMessageHandler) -> DiagnosticsMessageListener:
    """Subscribe a handler to the library's diagnostics messages."""
    return diagnostics_writer.add_listener(handler)