# stakrun

Building blocks for a lightweight, single-threaded actor runtime.

## Modules

- `stakrun.log`: logging levels and level sets.
  - `LogLevel`: an `IntEnum` of `TRACE`, `DEBUG`, `INFO`, `WARN`, `ERROR`,
    `AUDIT`, `OPEN`, `CLOSE` and `OFF`. `LogLevel.parse(text)` matches a
    name ignoring case and surrounding whitespace; `LogLevel.from_value(n)`
    converts a number back. Both raise `LogLevelError` (a `ValueError`) on
    bad input. `LogLevel.all_levels()` returns every level.
  - `LogFilter`: an immutable set of enabled levels, combined with `|`.
    `LogFilter.from_level(level)` enables a severity level and all more
    severe ones; `OPEN` and `CLOSE` enable each other; `AUDIT` enables only
    itself; `OFF` enables nothing. `LogFilter.all(levels)` combines several,
    `LogFilter.parse("info,open")` reads a comma-separated list. Use
    `allows(level)` and `is_empty()` to query it; iterating yields the
    enabled levels.
  - `LogVisitor`: an abstract interface (`kv_u64`, `kv_i64`, `kv_f64`,
    `kv_bool`, `kv_null`, `kv_str`, `kv_fmt`, `kv_map`/`kv_mapend`,
    `kv_arr`/`kv_arrend`) for walking a record's key-value pairs.
  - `LogRecord`: a frozen dataclass with `id`, `level`, `target`, `fmt` and
    `kvscan`, a callable that feeds the pairs to a `LogVisitor`.
- `stakrun.queue`: `FnOnceQueue`, a FIFO of callbacks. `push(callback)`
  appends; `execute(context)` runs every queued callback once, in order,
  passing `context`, and leaves the queue empty (callbacks pushed during
  the run wait for the next `execute`); `clear()` discards them unrun;
  `is_empty()` and `len()` report its size.
- `stakrun.ret`: `Ret`, a returner whose callback is called exactly once:
  with the message on `ret(msg)`, or with `None` on `close()`, on leaving a
  `with` block, or when it is garbage collected unused. Calling `ret` twice
  raises `RuntimeError`. Helpers: `ret_do(callback)`,
  `ret_some_do(callback)` (called only with a real message), `ret_nop()`,
  and `ret_panic(msg)` (raises `RetPanicError` if a message is returned).
- `stakrun.refcount`:
  - `ActorState`: `PREP`, `READY`, `ZOMBIE`.
  - `CountAndState`: a saturating strong count packed with an
    `ActorState`; `inc()`, `dec()` (returns the new value and whether the
    count went to zero), `set_state()`, `is_prep()`, `is_zombie()`.
  - `MinRc`: a counted handle on a shared value. `clone()` adds a handle,
    `release()` drops one and returns `True` when the last one goes, at
    which point the optional `on_release` callback gets the value.
  - `FwdRc`: a cheaply cloned, callable reference to a forwarding function.

## Installing

```
pip install .
```

## Examples

Log levels and filters:

```python
from stakrun.log import LogFilter, LogLevel

level = LogLevel.parse("warn")
filt = LogFilter.parse("info,open")
print(filt)                         # LogFilter(INFO,WARN,ERROR,OPEN,CLOSE)
print(filt.allows(LogLevel.DEBUG))  # False
```

A queue of deferred calls:

```python
from stakrun.queue import FnOnceQueue

seen = []
queue = FnOnceQueue()
queue.push(lambda ctx: ctx.append(1))
queue.push(lambda ctx: ctx.append(2))
queue.execute(seen)                 # seen == [1, 2], queue is now empty
```

A returner that is always answered:

```python
from stakrun.ret import Ret

with Ret(lambda msg: print("got", msg)) as r:
    pass                            # prints "got None" on leaving the block
```

## What this package does not do

It holds the pieces an actor runtime is built from, not the runtime
itself: there are no actors, no event loop or scheduler, no timers and
no logger that writes records anywhere. `Ret` helpers call their
callbacks directly rather than queueing calls to an actor.

## Running the tests

```
pip install .[test]
pytest
```