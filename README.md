# ftkit

Helpers that behave like the classic C library routines, edge cases
included. Positions come back as indices rather than pointers. Where a C
routine would write into a caller's buffer, the new string is returned
instead. Errors are raised as exceptions.

## Modules

### `ftkit.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower` and
`to_upper` work on ASCII only. Each one accepts a one-character string or an
integer code. The predicates return `bool`. The converters return the same
kind of value they were given.

### `ftkit.numbers`

- `atoi(text)` skips leading whitespace, reads one optional sign and then
  digits. The result wraps to a 32-bit int. A magnitude beyond the 64-bit
  signed range gives `-1`, or `0` when the number is negative.
- `atof(text)` skips leading spaces and reads an optional sign, digits and an
  optional fraction. It does not read exponents.
- `itoa(n)` returns the decimal string of `n`.
- `is_number(text)` is true for plain signed decimals such as `-1.5`, `3.`
  or `.5`.

### `ftkit.memory`

These work on `bytearray`, `bytes` and `memoryview` objects:

- `memset(buffer, value, n)` and `bzero(buffer, n)` fill the first `n`
  bytes of a buffer.
- `calloc(nmemb, size)` returns a zeroed `bytearray`. It raises
  `MemoryError` when the total does not fit in 64 bits.
- `memchr(data, value, n)` returns an index or `None`.
- `memcmp(a, b, n)` returns the difference at the first mismatch.
- `memcpy(dest, src, n)` copies into `dest`.
- `memmove(buffer, dest, src, n)` copies within one buffer between offsets.
  The two regions may overlap.

A byte count that is negative, or that runs past a buffer, raises
`ValueError`.

### `ftkit.strings`

- `split(s, sep)` splits on runs of one separator character.
- `strchr` and `strrchr` return an index or `None`. Searching for `"\0"`
  gives `len(s)`.
- `strcmp` and `strncmp` return the code difference at the first mismatch.
- `strnstr(haystack, needle, length)` searches within a prefix of the
  haystack.
- `strlcpy(src, size)` returns `(copied, len(src))`.
- `strlcat(dst, src, size)` returns `(result, would_be_length)`.
- `strjoin(s1, s2)` concatenates, treating `None` as empty.
- `substr(s, start, length)` and `strtrim(s, charset)` extract and trim.
- `strmapi(s, func)` builds a string from `func(index, char)`. A NUL that
  `func` returns ends the result.
- `striteri(seq, func)` calls `func(index, seq)` on a mutable sequence of
  characters, such as a list.

### `ftkit.linkedlist`

`LinkedList` is a singly linked list of `Node(content, next)` objects. It can
be built from an iterable. It supports `len()` and iteration, and yields its
nodes from `nodes()`. Its other methods are:

- `add_front(node)` and `add_back(node)`. Both ignore `None`.
- `last()` returns the tail node, or `None` for an empty list.
- `clear(delete)` passes each content to `delete` and empties the list.
- `iterate(func)` calls `func` on each content.
- `map(func, delete)` returns a new list. If `func` raises, the contents
  already mapped are passed to `delete` and the exception is re-raised.

### `ftkit.tokenize`

`tokenize(s)` splits a command line on spaces and tabs. Quoted sections and
backslash escapes stay inside a token, and the quote characters are kept.
Trailing blanks produce one final empty token.

### `ftkit.env`

- `getenv(envp, var)` returns what follows the prefix `var` (for example
  `"PATH="`) in the first matching `NAME=value` entry, or `None`.
- `getpath(path)` turns a colon-separated search path into directories that
  end in `/`. Empty components are dropped.
- `execvpe(file, argv, envp)` replaces the current process with the program.
  A name that contains `/` is run directly. Otherwise each directory on the
  `PATH` found in `envp` is tried in turn. If nothing can be started, it
  raises an `OSError`.

### `ftkit.output`

`putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd` write to a file
descriptor and return the number of bytes written. `putchar_fd`, and the
functions built on it, refuse a descriptor of 0 or less with `ValueError`.

### `ftkit.formatting`

`sprintf(fmt, *args)` formats with the conversions `c s p d i u x X %`. It
supports the flags `#`, `0`, `-`, `+` and space, a width, and a precision.

- Integers are treated as 32-bit values and pointers as 64-bit addresses.
- `None` prints as `(null)` for `%s` and as `(nil)` for `%p`.
- A `%` that does not begin a known conversion is written literally.
- A format that ends inside a specification raises `ValueError`.
- Missing or mismatched arguments raise `TypeError`.

`printf(fmt, *args)` writes the result to standard output and returns the
number of characters written. `parse_spec` returns a `FormatSpec` for the
text after a `%`. `is_valid_spec` checks such text.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Examples

```python
from ftkit.numbers import atoi, itoa
from ftkit.strings import split, strtrim
from ftkit.tokenize import tokenize
from ftkit.formatting import sprintf

atoi("   -42abc")                 # -42
itoa(-2147483648)                 # "-2147483648"
split("a::b:c", ":")              # ["a", "b", "c"]
strtrim("xxhixx", "x")            # "hi"
tokenize("echo 'hello world'")    # ["echo", "'hello world'"]
sprintf("[%-5d|%#x|%.3s]", 42, 255, "abcdef")  # "[42   |0xff|abc]"
```

## What it does not do

This is a library only. It installs no command-line program.