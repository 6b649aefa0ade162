# restic

Building blocks for a deduplicating backup tool. The package has:

- **authenticated encryption** of blobs (`restic.crypto`): AES-256 in CTR
  mode with a Poly1305-AES MAC. Keys are random or derived from a password
  with scrypt.
- **stream wrappers** (`restic.streams`) that encrypt everything written to a
  stream, or verify and decrypt what is read from one.
- **path filters** (`restic.filter`) that work like shell globs but can also
  match across directories, including `**`.
- small helpers for debug logging (`restic.debug`), named hooks
  (`restic.hooks`), cleanup handlers (`restic.cleanup`), progress formatting
  and time parsing (`restic.formatting`) and plain-text tables
  (`restic.table`).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Encryption

```python
from restic import crypto

key = crypto.new_random_key()

ciphertext = crypto.encrypt(key, b"Dies ist ein Test!")
# ciphertext is IV (16 bytes) || encrypted data || MAC (16 bytes)

plaintext = crypto.decrypt(key, ciphertext)
assert plaintext == b"Dies ist ein Test!"
```

Every ciphertext is `crypto.EXTENSION` (32) bytes longer than its plaintext.
If a ciphertext was changed, `decrypt` raises `crypto.UnauthenticatedError`.
Data shorter than 32 bytes raises `ValueError`.

Keys can be derived from a password with scrypt. The arguments are N, r, p,
the salt and the password; an empty salt raises `ValueError`:

```python
import os
from restic import crypto

salt = os.urandom(64)
password = "password"
key = crypto.kdf(16384, 8, 1, salt, password)
assert key.valid()
```

A `Key` holds a 32-byte encryption key and a `MACKey` (`k` and `r`, 16 bytes
each). `valid()` is true when none of the parts is all zero. Both classes
turn into plain dictionaries with base64-encoded values through `to_dict()`,
and back through `from_dict()`, so they can be stored as JSON.

The MAC functions are available on their own as well:
`crypto.poly1305_mac(msg, nonce, mac_key)` and
`crypto.poly1305_verify(msg, nonce, mac_key, mac)`.

## Streams

```python
import io
from restic import crypto, streams

key = crypto.new_random_key()

sink = io.BytesIO()
with streams.encrypt_to(key, sink) as writer:
    writer.write(b"first part, ")
    writer.write(b"second part")
# on close the data is encrypted, the MAC appended and all of it written to sink

reader = streams.decrypt_from(key, io.BytesIO(sink.getvalue()))
assert reader.read() == b"first part, second part"
```

The writer keeps everything in memory until `close()`. Closing it twice, or
writing after it was closed, raises `ValueError`. If the `with` block ends
with an exception, nothing is written.

`decrypt_from` reads the whole stream and verifies the MAC before returning a
reader; a failed check raises `crypto.UnauthenticatedError`.

## Path filters

```python
from restic import filter

filter.match("*.go", "/home/user/file.go")                    # True
filter.match("bar/*.go", "/foo/bar/test.go")                  # True
filter.match("foo/**/bar/*.go", "/home/user/foo/x/bar/a.go")  # True
filter.match("/bar*", "/foo/bar/test.go")                     # False

filter.match_list(["*.c", "*.go"], "/home/user/file.go")      # True
```

A pattern is split at `/` and its parts are matched against consecutive
parts of the path, anywhere in it. `*`, `?`, `[...]` classes and `\` escapes
work within one path part; `**` stands for any number of parts. The empty
pattern matches everything. Matching against an empty path raises
`filter.BadStringError`; a malformed pattern raises `filter.BadPatternError`.

## Formatting helpers

```python
from datetime import timedelta
from restic import formatting

formatting.format_bytes(2048)                          # '2.000 KiB'
formatting.format_seconds(3725)                        # '1:02:05'
formatting.format_duration(timedelta(seconds=65))      # '1:05'
formatting.format_percent(1, 4)                        # '25.00%'
formatting.format_rate(1 << 20, timedelta(seconds=1))  # '1.00MiB/s'
formatting.same_paths(["/a"], ["/a"])                  # True
formatting.parse_time("2015-06-21 14:30")
```

`parse_time` accepts dates such as `2015-06-21`, `21.06.2015`, with optional
`HH:MM` or `HH:MM:SS` and a time zone, and returns a time-zone-aware
`datetime` (local time when no offset is given). Anything else raises
`ValueError`.

## Tables

```python
import sys
from restic.table import Table

table = Table(header="ID        Date", row_format="%-8s  %s")
table.rows.append(("1a2b3c4d", "2015-06-21 14:30:00"))
table.write(sys.stdout)
```

`write` prints the header, a rule of 70 dashes and one line per row.

## Debugging, hooks and cleanup

- `restic.debug.log(tag, message, *args)` does nothing unless `DEBUG_TAGS`
  or `DEBUG_LOG` is set in the environment. `DEBUG_TAGS` is a comma-separated
  list of tags or glob patterns, each optionally prefixed with `+` or `-`,
  for example `DEBUG_TAGS=all,-cat`. Messages for enabled tags go to stderr;
  all messages are also appended to the file named in `DEBUG_LOG`. A
  `DebugLog` object can be built directly, or with
  `DebugLog.from_environment(environ)`, and `parse_tags(spec)` parses a tag
  list on its own.
- `restic.hooks.hook(name, func)`, `run_hook(name, context)` and
  `remove_hook(name)` manage named callbacks.
- `restic.cleanup.add_cleanup_handler(func)` registers a function that
  `run_cleanup_handlers()` calls, at most once. An exception from a handler
  is reported on stderr and does not stop the handlers after it. The
  `CleanupHandlers` class offers the same for a private list.

## What this package does not do

There is no repository, no storage backend, no archiver or restorer, no
locking and no command-line program here. The package provides the
encryption, filtering and console pieces such a tool is built from; reading
and writing snapshots is left to the code that uses it.