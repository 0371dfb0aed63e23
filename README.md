# slfmt

A small logging library. Each logger belongs to a class name and writes lines
at one of six levels: TRACE, DEBUG, INFO, WARN, ERROR and FATAL. Messages are
formatted with `str.format`, so placeholders are `{}`, `{0}` or `{name}`.

## Installing

```
pip install .
```

## Getting a logger

The factory functions live in `slfmt.log_manager`:

```python
from slfmt.log_manager import (
    get_logger,
    get_console_logger,
    get_file_logger,
    get_rolling_file_logger,
    get_combined_logger,
)

console = get_console_logger("Worker")
console.info("started job {}", 42)
console.warn("{}, {}", "slow disk", "retrying")
```

- `get_logger(clazz)` returns a console logger.
- `get_console_logger(clazz)` returns a `ConsoleLogger` that prints each line to
  standard output, coloured by level (TRACE white, DEBUG magenta, INFO blue,
  WARN yellow, ERROR red, FATAL red, bold and underlined). On Windows the
  lines are printed without colour.
- `get_file_logger(clazz, file)` returns a `FileLogger` that appends to `file`
  (`app.log` if none is given) and flushes after every line. The file is opened
  in append mode, so several loggers can share it.
- `get_rolling_file_logger(clazz, file, file_size)` returns a
  `RollingFileLogger`. It appends to `file`; once the file reaches `file_size`
  bytes (5 MB by default) it is written into a zip archive named
  `<stem>_YYYY-MM-DD_HH-MM-SS.zip`, the archive is moved into the `logs`
  directory (created if missing) and the file is emptied. A file that is
  already over the limit when the logger is created is archived straight away.
  Sizes below 1 MB are raised to 1 MB, and a WARN line saying so is written to
  the file.
- `get_combined_logger(clazz, *loggers)` returns a `CombinedLogger` that sends
  each message to every logger given, in order. Closing it closes them all.

```python
combined = get_combined_logger(
    "Worker",
    get_file_logger("Worker"),
    get_console_logger("Worker"),
)
for i in range(3):
    combined.info("Test message with number: {}", i)
combined.close()
```

The classes can also be used directly. `ConsoleLogger` takes an optional
`stream` to write to instead of standard output, and `RollingFileLogger` takes
an optional `backup_dir` in place of `logs`:

```python
import io
from slfmt.console_logger import ConsoleLogger
from slfmt.rolling_file_logger import RollingFileLogger

buffer = io.StringIO()
ConsoleLogger("Worker", stream=buffer).info("hello")

rolling = RollingFileLogger("Worker", "worker.log", 2 * 1024 * 1024, backup_dir="archive")
```

Loggers are context managers, and `close()` releases any open file:

```python
with get_file_logger("Worker", "worker.log") as log:
    log.error("failed: {}", "timeout")
```

## Levels

`slfmt.level` holds the `Level` enum and conversions by name:

```python
from slfmt.level import Level, level_to_string, string_to_level

console.log(Level.DEBUG, "value={}", 3)
console.log(string_to_level("ERROR"), "boom")
level_to_string(Level.WARN)   # "WARN"
string_to_level("nope")       # Level.UNKNOWN
```

Names must match exactly (upper case). `log()` ignores `Level.UNKNOWN`, though
the message is still formatted, so a bad format string raises either way.

## Line format

By default every line reads

```
2024-01-31 12:00:00,123 INFO (Worker) [Thread-140234] message
```

that is: local timestamp with milliseconds, level, class in parentheses,
thread id, message. Build your own format with `LogFormatBuilder` and install
it for all loggers with `set_log_format`; `get_log_format` returns the one in
use:

```python
from slfmt.log_format import LogFormatBuilder, set_log_format

set_log_format(
    LogFormatBuilder()
    .timestamp("[", "]")
    .level("(", ")")
    .class_name()
    .thread_id("[Thread-<", ">]")
    .message()
    .build()
)
```

Each builder method takes a left and a right delimiter. Parts are joined by
single spaces and each line ends with a newline. Setting an empty format
brings back the default.

## Styles

`slfmt.color` provides `TextStyle` (foreground, background, emphasis) with
`apply(text)` to wrap text in ANSI escapes, `|` to combine styles, named styles
such as `RED`, `BOLD` or `BLUE_BG`, and `style_for_level(level)`.

## File helpers

`slfmt.files` has the helpers the rolling logger uses: `copy_file_to_dir`,
`move_file_to_dir`, `compress_file` and `clear_file`. The first three raise
`FileNotFoundError` when the source file is missing.

## Version

```python
from slfmt.version import version_string, version_number
print(version_string())  # 0.1.0
print(version_number())  # 100
```

## What it does not do

There is no level filtering: every call is written. There is no command-line
tool and no configuration file; loggers are created in code.

## Running the tests

```
pip install ".[test]"
pytest
```