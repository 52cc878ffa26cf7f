# s5kit

Building blocks for tools that copy and sync objects between local storage
and object stores. It has no dependencies outside the standard library.

## Installation

```
pip install s5kit
```

To run the tests:

```
pip install "s5kit[test]"
pytest
```

## Modules

- `s5kit.errors`: `OperationError` wraps an underlying error together with
  the operation name and its source and destination. `full_command()` returns
  `"<op> <src> <dst>"`. The warning errors `ObjectExistsError`,
  `ObjectIsNewerError`, `ObjectSizesMatchError` and
  `ObjectIsNewerAndSizesMatchError` mark objects that were skipped on purpose.
  `is_warning(err)` tells these apart from real failures. `is_cancelation(err)`
  reports whether an error is, or wraps, an `asyncio` or `concurrent.futures`
  cancellation. Wrapping through `OperationError`, `__cause__` and exception
  groups is followed.
- `s5kit.sync_strategy`: `new_strategy(size_only)` returns a
  `SizeOnlyStrategy` or a `SizeAndModificationStrategy`. Their
  `should_sync(src, dst)` method compares objects by their `size` and
  `mod_time` attributes. It returns `True` when the source must be copied and
  raises a warning error when it can be skipped.
  - `SizeOnlyStrategy` copies when the sizes differ.
  - `SizeAndModificationStrategy` copies when the source is newer or the sizes
    differ.
- `s5kit.validation`: `check_versioning_url_remote()`,
  `check_versioning_flag_compatibility()` and `check_number_of_arguments()`
  raise `ValidationError`, a `ValueError`, when the arguments do not fit. A
  negative maximum in `check_number_of_arguments()` means there is no upper
  limit.
- `s5kit.messages`: `InfoMessage`, `ErrorMessage`, `DebugMessage` and
  `TraceMessage`. Each gives a text line through `str()` and a compact JSON
  line through `json()`.
- `s5kit.logger`: `Logger(level="info", json_output=False, stdout=None,
  stderr=None)` writes messages from a single background thread, so that lines
  are never interleaved.
  - The levels are given by name: `trace`, `debug`, `info` and `error`. An
    unknown name means `info`.
  - `error()` writes to stderr. The other methods write to stdout.
  - `stat()` writes whatever the level is.
  - A `Logger` is a context manager, and `close()` flushes pending output.
  - The module-level `init()`, `trace()`, `debug()`, `info()`, `stat()`,
    `error()` and `close()` work on one process-wide logger.
- `s5kit.stats`: `init_stat()` turns collection on. `with collect("cp"):`
  counts the block as one run of the operation, and an exception in the block
  counts as an error. `statistics()` returns a `Stats` list of `Stat` entries.
  It prints as a tab-aligned table through `str()` or as JSON lines through
  `json()`.

## Examples

Deciding whether to copy an object:

```python
from types import SimpleNamespace
from datetime import datetime

from s5kit.errors import is_warning
from s5kit.sync_strategy import new_strategy

src = SimpleNamespace(size=10, mod_time=datetime(2024, 1, 1))
dst = SimpleNamespace(size=10, mod_time=datetime(2024, 1, 2))

strategy = new_strategy(size_only=False)
try:
    strategy.should_sync(src, dst)
except Exception as err:
    if is_warning(err):
        print("skipping:", err)  # object is newer or same age and object size matches
    else:
        raise
```

Logging messages and counting operations:

```python
from s5kit.logger import Logger
from s5kit.messages import ErrorMessage, InfoMessage
from s5kit.stats import collect, init_stat, statistics

init_stat()
with Logger("info") as log:
    with collect("cp"):
        log.info(InfoMessage("cp", source="a.txt", destination="s3://bucket/a.txt"))
    log.error(ErrorMessage("access denied", operation="cp", command="cp a b"))

print(statistics())
```

## What the package does not do

s5kit makes decisions and reports on them. It does not move any data:

- There is no storage client, so it does not list, read or write local files
  or remote objects.
- There is no command-line program.
- There is no task scheduler.
- There is no progress display.

The objects passed to the sync strategies only need `size` and `mod_time`
attributes. Getting them from a store is up to the caller.