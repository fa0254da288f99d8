# sfsclient

Building blocks for a client of an SFS content download service: a content
model, result codes with an exception type, a logging callback holder, error
helpers and environment variable helpers.

## Modules

### `sfsclient.result`

- `ResultCode`: an enumeration of outcomes (`SUCCESS`, `INVALID_ARG`,
  `HTTP_NOT_FOUND`, `HTTP_TIMEOUT`, `SERVICE_INVALID_RESPONSE` and others).
  `str(code)` gives its display name, such as `"HttpNotFound"`.
- `Result`: a code with an optional message. It has `code`, `message`,
  `is_success()` and `is_failure()`, is truthy only on success, and compares
  equal to a `ResultCode` with the same code.
- `SFSError`: the exception raised for a failing result. It carries the
  `result` and exposes its `code` and `message`. It can be built from a
  `Result` or from a `ResultCode` and a message.

### `sfsclient.reporting`

- `LogSeverity`: `INFO`, `WARNING`, `ERROR`, `VERBOSE`.
- `LogData`: one log record, with severity, message, file, line, function and
  a UTC time.
- `ReportingHandler`: holds a logging callback behind a lock. Set it with
  `set_logging_callback(callback)`; pass `None` to remove it. Log with
  `log(severity, message, *args)` or the shortcuts `info`, `warning`, `error`
  and `verbose`. When arguments are given the message is %-formatted and cut
  to 1023 characters. File, line and function name are those of the caller.
  With no callback set, records are dropped.

### `sfsclient.errors`

- `log_failed_result(result, handler)` and `log_if_failed(result, handler)`
  log a failing result as an error of the form `FAILED [Code] message (file:line)`.
- `raise_log(result, handler)` logs and raises a failing result; it raises
  `ValueError` if given a successful one.
- `raise_if_failed_log(result, handler)` does the same only when the result is
  a failure.
- `raise_code_if(code, condition, message)` and
  `raise_code_if_log(code, condition, handler, message)` raise an `SFSError`
  when the condition holds, the latter also logging it.
- `capture_result(func, *args, **kwargs)` calls a function and returns a
  `Result`: the raised `SFSError`'s result, `OUT_OF_MEMORY` for a
  `MemoryError`, `UNEXPECTED` for any other exception, a returned `Result` as
  is, and `SUCCESS` otherwise.
- `log_and_reraise(handler)`: a context manager that logs an `SFSError`
  raised inside it and lets it propagate.

### `sfsclient.env`

- `get_env(name)` returns the value or `None` (also for an empty name).
- `set_env(name, value)` returns `False` for an empty name or value.
- `unset_env(name)` returns `True` even if the variable was not set, and
  `False` for an empty name.
- `scoped_env(name, value)`: a context manager that sets a variable for the
  block and then restores its earlier value, or unsets it.

### `sfsclient.content`

`ContentId`, `File`, `Content`, `ApplicabilityDetails`, `AppFile`,
`AppPrerequisiteContent` and `AppContent`. Two objects are equal when all
their values match; the file lists of contents and prerequisites are compared
without regard to order, while the prerequisites of an `AppContent` are
compared in order. `File.clone()` returns an independent copy,
`Content.make(namespace, name, version, files)` builds content from copies of
the files, and `AppFile.make(...)` builds an app file together with its
applicability details. A negative `size_in_bytes` raises `ValueError`.

## Installing

```
pip install .
```

## Example

```python
from sfsclient.content import Content, File
from sfsclient.errors import raise_code_if_log
from sfsclient.reporting import ReportingHandler
from sfsclient.result import ResultCode

handler = ReportingHandler()
handler.set_logging_callback(lambda data: print(data.severity, data.message))

file = File("file.bin", "http://localhost/file.bin", 100, {})
content = Content.make("default", "product", "1.0.0", [file])

raise_code_if_log(ResultCode.INVALID_ARG, not content.files, handler, "no files")
```

If a check like the last one fails, an `SFSError` is raised and the failure is
also reported through the handler's callback.

## What this package does not do

It makes no network requests: there is no HTTP connection, no client that
queries a service for versions or download information, and no parsing of
service responses. It provides the data model and supporting pieces only.

## Running the tests

```
pip install .[test]
pytest
```