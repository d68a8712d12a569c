# cbytes

Small, dependency-free routines that behave like the classic C character,
memory and string functions.

## Install

```
pip install .
```

## Modules

### `cbytes.chars`

ASCII character classification and case mapping. Every function takes an
integer character code or a one-character string.

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print` return `bool`.
- `to_upper`, `to_lower` convert ASCII letters only and return a value of
  the same kind they were given (an `int` for an `int`, a `str` for a `str`).

A string of any other length raises `ValueError`; other types raise
`TypeError`.

### `cbytes.memory`

Operations on mutable byte buffers such as `bytearray` and `memoryview`:
`memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`, `calloc`.

- Byte counts must lie between zero and the length of each buffer involved;
  otherwise `ValueError` is raised. Byte values are taken modulo 256.
- `memset`, `memcpy` and `memmove` return the destination buffer.
- `memchr` returns the index of the first matching byte, or `None`.
- `memcmp` returns the difference of the first differing byte values, or 0.
- `calloc(count, size)` returns a zero-filled `bytearray` of `count * size`
  bytes; negative arguments raise `ValueError`.

### `cbytes.cstring`

Routines on Python `str` values treated as NUL-terminated: a string ends at
its first `"\0"`, and anything after it is ignored.

- `strlen(s)`: characters before the first NUL.
- `strchr(s, c)`, `strrchr(s, c)`: index of the first or last occurrence of
  `c`, or `None`; searching for NUL gives `strlen(s)`.
- `strncmp(s1, s2, n)`: difference of character codes at the first position
  where the strings differ or one ends, or 0.
- `strnstr(haystack, needle, length)`: index where `needle` starts within the
  first `length` characters, or `None`; an empty needle is found at 0.
- `strlcpy(dst, src, size)` and `strlcat(dst, src, size)`: return a tuple of
  the resulting string and the length the full result would have had, as the
  bounded C functions report it.
- `strdup(s)`: the string up to its first NUL.
- `atoi(s)`: skips leading blanks, reads an optional sign and ASCII digits;
  returns 0 when there are no digits.

Negative counts and sizes raise `ValueError`.

## Example

```python
from cbytes.chars import is_alpha, to_upper
from cbytes.memory import memmove
from cbytes.cstring import atoi, strlcpy, strchr

is_alpha("q")               # True
to_upper(ord("a"))          # 65
to_upper("a")               # 'A'

buf = bytearray(b"12345")
memmove(memoryview(buf)[1:], buf, 4)
bytes(buf)                  # b'11234'

atoi("   -42abc")           # -42
strlcpy("", "Hello, World!", 6)   # ('Hello', 13)
strchr("Hello", "l")        # 2
```

## Tests

```
pip install ".[test]"
pytest
```