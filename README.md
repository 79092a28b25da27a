# ftkit

A small toolbox of plain helpers for characters, strings, integers, byte
buffers, singly linked lists, buffered line reading and printf-style output.
It uses nothing outside the standard library.

## Installation

```
pip install ftkit
```

## Modules

### `ftkit.chars`

ASCII classification and case conversion. Each function takes a character
as a one-character string or as an integer code point; only ASCII ranges
count.

- `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `isspace`,
  `isspacenl` return `True` or `False`.
- `ishexdigit(c)` returns `c` (letters upper-cased) if it is a hex digit,
  otherwise `None`.
- `isin(c, base)`, `iscount(c, base)` and `iswhere(c, base)` test
  membership, count occurrences, and give the first index (or `-1`).
- `tolower(c)` and `toupper(c)` change ASCII letters and return the result in
  the same form (string or integer) as given.

### `ftkit.skip`

`skip_char(text, index, c)`, `skip_chars(text, index, base)`,
`skip_space(text, index)` and `skip_spacenl(text, index)` return the first
index at or after `index` that is not skipped, or `len(text)`. `skip_space`
skips spaces, tabs, `\r`, `\v` and `\f`; `skip_spacenl` also skips `\n`.
A negative index raises `ValueError`.

### `ftkit.numbers`

- `abs_value(n)`, `power(nbr, exponent)` (a negative exponent raises
  `ValueError`).
- `baselen(n, base)` and `nbrlen(n)` count the characters needed to write a
  number, a minus sign included; `baselen` gives 0 for a base below 2.
- `hexlen(num)` counts hex digits of `num` taken as unsigned 32-bit; 0 gives 0.
- `atoi(text)` parses a leading integer after blank space and one optional
  sign. A value overflowing 64 bits gives `-1` (positive) or `0` (negative);
  the result is wrapped into the signed 32-bit range.
- `itoa(n)` returns the decimal string.

### `ftkit.memory`

Operations on mutable buffers such as `bytearray`: `bzero`, `memset`,
`memcpy`, `memmove`, `memccpy`, `memchr` and `memcmp`. Where a position is
the result (`memccpy`, `memchr`), an index or `None` is returned. Asking for
more bytes than a buffer holds raises `ValueError`.

### `ftkit.strings`

`strlen`, `strchr`, `strrchr`, `strcmp`, `strncmp`, `strequ`, `strisnum`,
`strnstr`, `strdup`, `strndup`, `strcat` and `strcpy`. Searches return an
index or `None`; searching for `"\0"` finds `len(text)`. `strcmp` and
`strncmp` return the difference of the first differing code points, the end
of a string counting as 0.

### `ftkit.transform`

- `split(text, sep)` splits on one character and drops empty pieces.
- `strjoin(s1, s2)` concatenates, treating `None` as absent (both `None`
  gives `None`).
- `strlcat(dest, src, size)` and `strlcpy(src, size)` behave as if writing
  into a buffer of `size` bytes and return `(result, reported_length)`.
- `strmapi(text, func)` builds a string from `func(index, char)`;
  `striteri(text, func)` does the same but keeps a character when `func`
  returns `None`.
- `strtrim(text, charset)` and `substr(text, start, length)`.
- `Tokenizer(text, delim)` yields pieces separated by runs of a delimiter,
  through `next_token()` or iteration.

### `ftkit.lists`

`LinkedList` holds `Node` objects (`content`, `next`). It offers
`add_front`, `add_back`, `last`, `clear(delete)`, `apply(func)`,
`map(func, delete)`, `len()` and iteration over contents. If `func` raises
inside `map`, the contents already produced are passed to `delete` and the
exception propagates.

### `ftkit.lines`

`LineReader(stream, buffer_size=1024)` reads a text or binary stream
`buffer_size` units at a time and returns lines with their newline kept.
`readline()` returns `None` at the end; iteration stops there. A buffer size
below 1 raises `ValueError`.

### `ftkit.output`

`putchar`, `putstr`, `putendl`, `putnbr` and `putnbr_base` write to an
optional text stream (standard output by default) and return the number of
characters written. `putnbr_base(nbr, base, spec)` takes `spec` `"d"`/`"i"`
(unsigned 32-bit) or `"u"`, `"p"`, `"x"`, `"X"` (unsigned 64-bit) and raises
`ValueError` for an invalid base or spec.

`format_string(fmt, *args)` expands `%d %i %u %x %X %c %p %s %%`; `%s` of
`None` gives `(null)`, `%p` of `None` or 0 gives `(nil)`, and unknown
conversions are copied as they stand. A trailing lone `%` or too few
arguments raise `ValueError`. `printfd(stream, fmt, *args)` writes the result
and returns its length.

## Examples

```python
from ftkit.transform import split, Tokenizer
from ftkit.numbers import atoi, itoa

split("  a b  c ", " ")          # ['a', 'b', 'c']
list(Tokenizer("x,,y,z", ","))   # ['x', 'y', 'z']
atoi("  -42abc")                 # -42
itoa(-7)                         # '-7'
```

```python
import io
from ftkit.lines import LineReader

reader = LineReader(io.StringIO("one\ntwo\nthree"), 4)
list(reader)                     # ['one\n', 'two\n', 'three']
```

```python
import sys
from ftkit.output import printfd, format_string

format_string("%s=%d (%x)", "n", 255, 255)   # 'n=255 (ff)'
printfd(sys.stdout, "%c%s\n", "h", "ello")
```

```python
from ftkit.lists import LinkedList

items = LinkedList([1, 2, 3])
items.add_front(0)
items.add_back(4)
list(items)                      # [0, 1, 2, 3, 4]
len(items)                       # 5
```

## What it does not do

ftkit is a library only: it installs no command-line program.

## Running the tests

```
pip install ".[test]"
pytest
```