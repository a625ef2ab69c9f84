# plog

Building blocks for logging: severity levels, log records that collect a
message, formatters that turn a record into a line of text, converters that
turn that text into bytes for a file, and helpers that render buffers and
variables.

## Installation

```
pip install .
```

## Severities

`plog.severity.Severity` is an integer enum with the levels `NONE`, `FATAL`,
`ERROR`, `WARNING`, `INFO`, `DEBUG` and `VERBOSE`. A lower value is more
severe.

`severity_to_string` returns the short name that appears in log output:
`FATAL`, `ERROR`, `WARN`, `INFO`, `DEBUG` or `VERB`. For `NONE` and for
unknown values it returns `NONE`. `severity_from_string` reads only the first
letter of its argument, in either case. It returns `Severity.NONE` when the
letter is not recognised or the text is empty.

```python
from plog.severity import Severity, severity_from_string, severity_to_string

severity_to_string(Severity.WARNING)   # "WARN"
severity_from_string("debug")          # Severity.DEBUG
```

## Records

`plog.record.Record` holds a severity, the function, line, file and object
where it was made, an instance id, a time stamp (`plog.util.Time`) and the id
of the thread that made it. Values are appended to its message with `<<`.
`printf` appends text formatted with `%`.

```python
from plog.record import Record
from plog.severity import Severity

record = Record(Severity.INFO, func="void MyClass::method(int)", line=42)
record << "answer: " << 42
record.printf(" (%s)", "checked")
record.message()     # "answer: 42 (checked)"
record.func_name()   # "MyClass::method"
```

`format_value` controls how an appended value is turned into text:

- `None` becomes `(null)`.
- Bytes are decoded as UTF-8.
- Mappings are printed as `[key:value, ...]`.
- Sequences and sets are printed as `[a, b, c]`, and nested containers are
  printed the same way.
- File system paths, and anything else, are printed with `str`.

## Formatters

Each formatter in `plog.formatters` has two methods. `header()` returns the
text that starts a new file. `format(record)` returns one line of text that
ends with `"\n"`.

- `TxtFormatter` and `TxtFormatterUtcTime` write lines like
  `2024-05-01 12:00:00.123 INFO  [1234] [MyClass::method@42] message`. The
  first uses local time and the second uses UTC.
- `CsvFormatter` and `CsvFormatterUtcTime` use the header
  `Date;Time;Severity;TID;This;Function;Message`. They separate fields with
  semicolons and put the message in quotes. A message longer than 32000
  characters is cut off, and `...` is added to it.
- `FuncMessageFormatter` writes `function@line: message`.
- `MessageOnlyFormatter` writes only the message.

## Converters

Converters in `plog.converters` turn formatted text into bytes:

- `UTF8Converter().convert(text)` encodes the text as UTF-8.
  `UTF8Converter().header(text)` puts a UTF-8 byte-order mark in front of the
  encoded text.
- `NativeEOLConverter(next_converter=None, eol=os.linesep)` replaces every
  `"\n"` with `eol` and then hands the text to the next converter. The next
  converter is a `UTF8Converter` by default.

## Helpers

```python
from plog.helpers import ascdump, hexdump, print_var

str(hexdump(b"Hello!"))                              # "48 65 6c 6c 6f 21"
str(hexdump(b"Hello!").group(4).separator(" ", "|")) # "48 65 6c 6c|6f 21"
str(ascdump(b"Hello!\xff"))                          # "Hello!."
print_var(x=10, y=20)                                # "x: 10, y: 20"
```

`HexDump` puts a group separator after every 8 bytes by default. Call
`group(0)` to switch grouping off. `print_var` accepts between one and nine
named values. With any other number it raises `TypeError`.

## Utilities

`plog.util` provides these helpers:

- `current_time()` returns the current time, to the millisecond.
- `thread_id()` returns the id of the calling thread.
- `process_func_name()` strips the signature from a function name.
- `split_file_name()` and `find_extension_dot()` split a file name at its last
  dot.
- `remove_file()` and `rename_file()` return `False` when the file does not
  exist.
- `File` is a file opened for appending through a raw descriptor. `open()`
  returns the current size of the file, and `write()` accepts bytes or text.

## Writing a log line

```python
from plog.converters import NativeEOLConverter
from plog.formatters import TxtFormatter
from plog.record import Record
from plog.severity import Severity
from plog.util import File

formatter, converter = TxtFormatter(), NativeEOLConverter()
with File() as log_file:
    if log_file.open("app.txt") == 0:
        log_file.write(converter.header(formatter.header()))
    log_file.write(converter.convert(formatter.format(Record(Severity.INFO) << "started")))
```

## What is not included

This package only builds and formats records. The following are not part of
it:

- a logger that filters records by a maximum severity and passes them on
- ready-made console, colour-console or rolling-file writers
- shortcut logging functions
- a command to run

To write records somewhere, format and convert them yourself, as in the
example above.