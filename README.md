# pipex

A small set of helpers for text-handling code: ASCII character checks,
decimal conversions with fixed C integer widths, a line reader that reads a
stream in fixed-size chunks, and printf-style output to streams.

## Installation

```sh
pip install .
```

For the tests:

```sh
pip install ".[test]"
pytest
```

## Modules

### `pipex.chars`

Character checks that take a one-character string or an integer code:

- `is_spaces(c)`: tab, newline, vertical tab, form feed, carriage return or space.
- `is_alpha(c)`: returns `1` for `A`–`Z`, `2` for `a`–`z`, `0` otherwise.
- `is_digit(c)`, `is_alnum(c)`, `is_print(c)` (codes 32–126), `is_ascii(c)` (0–127).
- `to_upper(c)`, `to_lower(c)`: change the case of an ASCII letter and return
  the same kind of value that was passed in; anything else comes back unchanged.

A string longer than one character raises `ValueError`; a value that is
neither a string nor an integer raises `TypeError`.

Whole-string checks:

- `is_only_digits(s)`, `is_only_spaces(s)`: true for an empty string.
- `contains(s, c)`: whether the character occurs in `s`.
- `streq(s1, s2)`: exact equality; `None` equals only `None`.

### `pipex.conversions`

- `atoi(s)`: skips leading whitespace, reads an optional sign and a run of
  digits, and stops at the first other character. Text without digits gives
  `0`. The result wraps around as a 32-bit signed integer.
- `atol(s)`, `atoll(s)`: the same, wrapping as a 64-bit signed integer.
- `fits_in_longlong(s)`: whether `s` is an optionally signed run of digits
  within the 64-bit signed range. Text longer than 20 characters never fits;
  an empty string or a lone sign is accepted.
- `itoa(n)`: decimal text of `n`.
- `utoa(n)`: decimal text of `n` taken as a 32-bit unsigned integer.

```python
from pipex.conversions import atoi, utoa

atoi("  -42abc")   # -42
atoi("2147483648") # -2147483648
utoa(-1)           # "4294967295"
```

### `pipex.linereader`

`LineReader(stream, buffer_size=20)` reads a text or binary stream in chunks
of `buffer_size` and hands out one line at a time, keeping the newline where
the line had one. `next_line()` returns `None` once the stream is exhausted;
iterating over the reader yields every line. A `buffer_size` of zero or less
raises `ValueError`.

`read_lines(stream, buffer_size=20)` returns an iterator over the lines.

```python
import io
from pipex.linereader import read_lines

list(read_lines(io.StringIO("a\nbc\nd")))  # ["a\n", "bc\n", "d"]
```

### `pipex.dprintf`

- `format_string(fmt, *args)`: expands `fmt`. A format of `None` gives `""`.
- `dprintf(stream, fmt, *args)`: writes the expansion to `stream` and returns
  the number of characters written.
- `put_str(stream, s)`: writes `s`; `None` writes nothing.
- `put_endl(stream, s)`: writes `s` and a newline (the newline even for `None`).
- `put_nbr(stream, n)`: writes `n` as a 32-bit signed integer.

Conversions:

| Spec        | Output                                                        |
|-------------|---------------------------------------------------------------|
| `%%`        | a literal `%`                                                 |
| `%c`        | a one-character string, or an integer taken modulo 256        |
| `%s`        | the string, or `(null)` for `None`                            |
| `%p`        | `0x` and lower-case hex, or `(nil)` for `None` or zero        |
| `%d`, `%i`  | decimal, wrapped to a 32-bit signed integer                   |
| `%u`        | decimal, as a 32-bit unsigned integer                         |
| `%x`, `%X`  | lower- or upper-case hex of a 32-bit unsigned integer         |

An unknown conversion letter produces no output and takes no argument. A
lone `%` at the end of the format ends the output. Running out of arguments
raises `TypeError`.

```python
from pipex.dprintf import format_string

format_string("%s has %d items (%x)", "list", 255, 255)
# "list has 255 items (ff)"
```

## What this package does not do

There is no command-line program, and nothing here runs commands or joins
them with a pipe: there is no splitting of command lines, no `PATH` lookup
and no process handling. The package holds only the helper modules listed
above.