from appinsights.contracts.enums import DataPointType
from appinsights.contracts.frames import DataPoint, ExceptionDetails, StackFrame


def test_stack_frame_short_fields_untouched():
    frame = StackFrame(level=2, method="run", assembly="pkg", file_name="a.py", line=7)
    assert frame.sanitize() == []
    assert frame.method == "run"
    assert frame.file_name == "a.py"


def test_stack_frame_truncation():
    frame = StackFrame(method="m" * 2000, file_name="f" * 1500)
    warnings = frame.sanitize()
    assert warnings == [
        "StackFrame.Method exceeded maximum length of 1024",
        "StackFrame.FileName exceeded maximum length of 1024",
    ]
    assert frame.method == "m" * 1024
    assert frame.file_name == "f" * 1024


def test_exception_details_defaults():
    details = ExceptionDetails()
    assert details.has_full_stack is True
    assert details.parsed_stack == []
    assert details.sanitize() == []


def test_exception_details_collects_frame_warnings():
    details = ExceptionDetails(
        message="x" * 40000,
        parsed_stack=[StackFrame(assembly="a" * 1100), StackFrame()],
    )
    warnings = details.sanitize()
    assert warnings == [
        "ExceptionDetails.Message exceeded maximum length of 32768",
        "StackFrame.Assembly exceeded maximum length of 1024",
    ]
    assert len(details.message) == 32768
    assert len(details.parsed_stack[0].assembly) == 1024


def test_sanitize_is_idempotent():
    details = ExceptionDetails(type_name="t" * 3000)
    assert len(details.sanitize()) == 1
    assert details.sanitize() == []


def test_data_point_defaults_and_truncation():
    point = DataPoint(name="n" * 1025, value=44.0)
    assert point.kind is DataPointType.MEASUREMENT
    assert point.sanitize() == ["DataPoint.Name exceeded maximum length of 1024"]
    assert point.name == "n" * 1024
    assert point.value == 44.0