# appinsights

Building blocks for Application Insights telemetry: the data contracts the
service accepts, with length limits enforced by `sanitize()`, grouped
context tag accessors, a diagnostics message feed, a replaceable clock and
exception capture with parsed call stacks.

## Installation

```
pip install .
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install ".[test]"
pytest
```

## Configuration

```python
from appinsights.configuration import TelemetryConfiguration

config = TelemetryConfiguration("placeholder")
config.endpoint_url        # "https://dc.services.visualstudio.com/v2/track"
config.max_batch_size      # 1024
config.max_batch_interval  # 10.0 (seconds)
config.client              # None
```

`TelemetryConfiguration` is a dataclass holding the instrumentation key and
these settings; nothing in the package reads it to send data.

## Data contracts

The `appinsights.contracts` package holds the telemetry types as
dataclasses:

- `appinsights.contracts.eventdata`: `EventData`, `PageViewData`,
  `MessageData`, `MetricData`
- `appinsights.contracts.operations`: `AvailabilityData`, `ExceptionData`,
  `RemoteDependencyData`
- `appinsights.contracts.requestdata`: `RequestData`
- `appinsights.contracts.envelope`: `Envelope`
- `appinsights.contracts.frames`: `StackFrame`, `ExceptionDetails`,
  `DataPoint`
- `appinsights.contracts.base`: `Base`, `Domain`, `Data`

Every contract has a `sanitize()` method that truncates, in place, fields
longer than the service accepts (including property values and the keys of
properties and measurements) and returns a list of warnings, one per
affected field. Item types also report their `base_type()` and the
`envelope_name(key)` used when wrapped in an `Envelope`:

```python
from appinsights.contracts.eventdata import EventData

EventData(name="signup").envelope_name("abc")
# "Microsoft.ApplicationInsights.abc.Event"
EventData().envelope_name("")
# "Microsoft.ApplicationInsights.Event"
```

### Context tags

`appinsights.contracts.tagkeys` names the well-known tag keys and their
maximum lengths. `sanitize_tags` truncates a tag dictionary in place:

```python
from appinsights.contracts.tagkeys import sanitize_tags

tags = {"ai.session.isFirst": "definitely"}
warnings = sanitize_tags(tags)
# tags["ai.session.isFirst"] == "defin"
# warnings == ["Value for ai.session.isFirst exceeded maximum length of 5"]
```

`ContextTags` (in `appinsights.contracts.contexttags`) is a `dict` with
grouped views: `application()`, `device()`, `location()`, `operation()`,
`session()`, `user()`, `cloud()` and `internal()`. Each view exposes its
tags as attributes; an absent tag reads as `""`, and assigning `""` removes
it:

```python
from appinsights.contracts.contexttags import ContextTags

tags = ContextTags()
tags.device().id = "build-host"
tags["ai.device.id"]      # "build-host"
tags.device().id = ""
"ai.device.id" in tags    # False
```

### Enumerations

```python
from appinsights.contracts.enums import SeverityLevel, DataPointType

str(SeverityLevel(2))        # "Warning"
str(DataPointType(1))        # "Aggregation"
```

`appinsights.constants` offers the same values as module-level names
(`VERBOSE`, `INFORMATION`, `WARNING`, `ERROR`, `CRITICAL`, `MEASUREMENT`,
`AGGREGATION`).

## Diagnostics

Messages are delivered to every subscribed handler. A handler that raises
an exception is unsubscribed after that message.

```python
from appinsights.diagnostics import diagnostics_writer, new_diagnostics_message_listener

listener = new_diagnostics_message_listener(print)
diagnostics_writer.write("hello")
diagnostics_writer.printf("%d items dropped", 3)  # formatted only if someone listens
listener.remove()
```

`DiagnosticsMessageWriter` also has `add_listener`, `remove_listener`,
`has_listeners` and `clear`.

## Clock

`appinsights.clock` provides a `Clock` with `now()` (UTC `datetime`) and
`sleep(seconds)`. `current_clock()` returns the clock in use;
`set_clock(clock)` replaces it (for instance with a fake in tests) and
`reset_clock()` restores the real one. Exception telemetry takes its
timestamp from the current clock.

## Exceptions

`ExceptionTelemetry` (in `appinsights.exception`) wraps an error, which may
be an exception, a string or any object, together with a call stack. If no
frames are given, they are taken from the exception's traceback when it
has one, and otherwise from the stack of the code that created the item.
`telemetry_data()` turns it into an `ExceptionData` contract with the
message and type name of the error:

```python
from appinsights.exception import ExceptionTelemetry

try:
    1 / 0
except ZeroDivisionError as exc:
    data = ExceptionTelemetry(exc).telemetry_data()

data.exceptions[0].type_name  # "ZeroDivisionError"
```

`get_callstack(skip)` returns the current stack, innermost first, as a
list of `StackFrame` contracts, skipping the given number of frames.

## What this package does not do

There is no telemetry client, no batching channel and no transmission:
nothing here serializes envelopes or sends them to the endpoint, retries
failed submissions or handles throttling. The package supplies the data
types, tag helpers, diagnostics feed and exception capture that such a
sender would build on.