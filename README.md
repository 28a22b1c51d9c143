# webserv

A library of everyday helpers: ASCII character classification, conversion
between integers and text, searching and comparing strings and bytes,
printf-style formatting, simple containers, and buffered line reading.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module                | What it holds                                                        |
|-----------------------|----------------------------------------------------------------------|
| `webserv.chars`       | `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `is_space`, `to_upper`, `to_lower`, `str_is_numeric` |
| `webserv.convert`     | `atoi`, `atoi_base`, `exceeds_int_limits`, `atoi_secure`, `itoa`, `number_to_base`, `to_hex`, `to_dec`, `min_int_array` |
| `webserv.search`      | `find_char`, `rfind_char`, `compare`, `compare_n`, `find_in`, `count_char`, `find_byte`, `compare_bytes` |
| `webserv.printf`      | `ConversionSpec`, `parse_spec`, `format_string`, `printf`, `print_ints`, `print_words`, `print_words_nl` |
| `webserv.containers`  | `Deque`, `IntStrDict`, `index_of`                                    |
| `webserv.lines`       | `LineReader`, `read_lines`                                           |

### Number conversion

`atoi` reads the leading decimal integer of a string, skipping whitespace
and one sign, and wraps the result to 32 bits. `atoi_secure` accepts only an
optional `-` followed by digits and raises `ValueError` for anything else or
for a value outside the signed 32-bit range.

```python
from webserv.convert import atoi, atoi_secure, to_hex

atoi("  -42abc")        # -42
atoi_secure("123")      # 123
to_hex(255, upper=True) # 'FF'
```

### Formatting

`format_string` accepts the conversions `c s p d i u x X %`, the flags
`- 0 # + space`, a minimum field width and a precision:

```python
from webserv.printf import format_string

format_string("%05d|%-6s|%#x", 42, "ab", 255)
# '00042|ab    |0xff'
```

`printf` writes the same text to a file (standard output by default) and
returns the number of characters written. It raises `TypeError` when the
arguments run out.

### Reading lines

```python
import io
from webserv.lines import read_lines

list(read_lines(io.StringIO("one\ntwo\nthree"), 4))
# ['one\n', 'two\n', 'three']
```

`LineReader` works on text and binary streams alike and keeps whatever
follows a returned line for the next call to `read_line`.

### Containers

```python
from webserv.containers import Deque, IntStrDict

dq = Deque()
dq.append_rear("b")
dq.append_head("a")
dq.pop_rear()          # 'b'

table = IntStrDict()
table.put(2, "W")
table.put(3, "B")
table.render()         # '{2: "W", 3: "B"}'
```

`Deque` ignores `None` contents and raises `IndexError` when popping from an
empty deque; `index_of` and `Deque.index` raise `ValueError` when nothing
matches.

## What this package does not do

Despite its name, the package contains no web server and installs no
command: there is nothing that listens for connections, reads a
configuration file or serves requests. It also has no logging facility and
no helpers for trimming, splitting or slicing strings or for writing
single characters and numbers to a file. It is a library of the helpers
listed above only.