"""Exception telemetry and call stack capture."""

from __future__ import annotations

import inspect
import traceback
from dataclasses import dataclass, field
from datetime import datetime
from types import FrameType, TracebackType
from typing import Any, Iterator, Optional

from .clock import current_clock
from .contracts.contexttags import ContextTags
from .contracts.enums import SeverityLevel
from .contracts.frames import ExceptionDetails, StackFrame
from .contracts.operations import ExceptionData

_MAX_FRAMES = 64


def _outer_frames(frame: Optional[FrameType]) -> Iterator[tuple[FrameType, int]]:
    while frame is not None:
        yield frame, frame.f_lineno
        frame = frame.f_back


def _traceback_frames(tb: TracebackType) -> Iterator[tuple[FrameType, int]]:
    """Yield frames from the raise site outwards, past the catching frame."""
    entries = list(traceback.walk_tb(tb))
    yield from reversed(entries)
    yield from _outer_frames(entries[0][0].f_back)


def _module_name(frame: FrameType) -> str:
    module = inspect.getmodule(frame)
    return module.__name__ if module is not None else ""


def _to_stack_frames(entries, limit: int) -> list[StackFrame]:
    frames = []
    for level, (frame, lineno) in enumerate(entries):
        if level >= limit:
            break
        code = frame.f_code
        frames.append(
            StackFrame(
                level=level,
                method=getattr(code, "co_qualname", code.co_name),
                assembly=_module_name(frame),
                file_name=code.co_filename,
                line=lineno or 0,
            )
        )
    return frames


def get_callstack(skip: int = 0) -> list[StackFrame]:
    """Return the current call stack, innermost first, skipping ``skip`` frames.

    With a skip of 0 the first frame is this function itself.
    """
    skip = max(skip, 0)
    frame = inspect.currentframe()
    try:
        for _ in range(skip):
            if frame is None:
                break
            frame = frame.f_back
        return _to_stack_frames(_outer_frames(frame), _MAX_FRAMES + skip)
    finally:
        del frame


def _type_name(value: Any) -> str:
    cls = type(value)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def _describe(error: Any) -> tuple[str, str]:
    """Return (message, type name) for an error value."""
    if isinstance(error, BaseException):
        return str(error), _type_name(error)
    if isinstance(error, str):
        return error, "str"
    cls = type(error)
    if cls.__str__ is not object.__str__:
        return str(error), _type_name(error)
    if cls.__repr__ is not object.__repr__:
        return repr(error), _type_name(error)
    return "<unknown>", "<unknown>"


@dataclass
class ExceptionTelemetry:
    """A handled or unhandled exception that occurred in the application.

    ``error`` may be an exception, a string or any object. When ``frames`` is
    not given, it is taken from the exception's traceback if it has one, and
    otherwise from the stack of the code that creates this item.
    """

    error: Any
    frames: Optional[list[StackFrame]] = None
    severity_level: SeverityLevel = SeverityLevel.ERROR
    timestamp: datetime = field(default_factory=lambda: current_clock().now())
    tags: ContextTags = field(default_factory=ContextTags)
    properties: dict[str, str] = field(default_factory=dict)
    measurements: dict[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.frames is not None:
            return
        tb = getattr(self.error, "__traceback__", None)
        if isinstance(self.error, BaseException) and tb is not None:
            self.frames = _to_stack_frames(_traceback_frames(tb), _MAX_FRAMES)
        else:
            # Skip get_callstack, __post_init__ and __init__.
            self.frames = get_callstack(3)

    def telemetry_data(self) -> ExceptionData:
        """Build the exception data contract for this item."""
        frames = self.frames or []
        message, type_name = _describe(self.error)
        details = ExceptionDetails(
            type_name=type_name,
            message=message,
            has_full_stack=bool(frames),
            parsed_stack=frames,
        )
        return ExceptionData(
            exceptions=[details],
            severity_level=self.severity_level,
            properties=self.properties,
            measurements=self.measurements,
        )