# ftformat

A small printf-style formatter. It supports a fixed set of conversions and
returns a character count along with the text it produces.

## Conversions

| Conversion | Argument | Output |
|------------|----------|--------|
| `%c` | a one-character string, or an integer (only its low 8 bits are used) | that character |
| `%s` | a string, or `None` | the string up to its first NUL character; nothing for `None` |
| `%d`, `%i` | an integer | signed decimal, wrapped to the 32-bit signed range |
| `%u` | an integer | unsigned decimal, wrapped to the 32-bit unsigned range |
| `%x`, `%X` | an integer | lower-case or upper-case hexadecimal, wrapped to 32 bits unsigned |
| `%p` | an integer address, or `None` (treated as 0) | `0x` then lower-case hexadecimal, wrapped to 64 bits |
| `%%` | none | a literal `%` |

Other behaviour:

- A conversion character not in the table produces no output and takes no
  argument.
- A `%` at the very end of the format string ends the output.
- The format string is read only up to its first NUL character.
- Extra arguments are ignored. Too few arguments raise `TypeError`, as does
  an argument of the wrong type.

### The count

Each plain character and each character produced by a conversion adds one
to the count, with two exceptions: `%%` writes a `%` but adds nothing, and
`%s` given `None` writes nothing and subtracts one.

## Installation

```
pip install .
```

## Usage

`ftformat.formatter.render` builds the output without writing it and returns
a frozen `Rendered` object with `text` and `count`:

```python
from ftformat.formatter import render

result = render("%d and %x", -123, 255)
result.text   # "-123 and ff"
result.count  # 11
```

`ftformat.formatter.ft_printf` writes the output to a stream, standard output
unless `stream=` names another, and returns the count:

```python
import io
from ftformat.formatter import ft_printf

buf = io.StringIO()
n = ft_printf("%u", -1, stream=buf)
buf.getvalue()  # "4294967295"
n               # 10
```

`ftformat.formatter.format_pointer(address)` formats an address the way
`%p` does.

### Digit helpers

`ftformat.digits` has the conversions on their own:

- `itoa(n)`: decimal text of `n` as a signed 32-bit integer.
- `to_unsigned(n)`: `n` wrapped into the unsigned 32-bit range.
- `to_decimal_unsigned(n)`: decimal text of `to_unsigned(n)`.
- `to_hex(n, upper=False)`: hexadecimal digits of a non-negative integer,
  without prefix; a negative value raises `ValueError`.

Each raises `TypeError` for a non-integer argument.

## Command line

```
ftformat
```

Prints one line for each conversion as a demonstration, ending with a `%p`
line for an object's address and the same address printed by Python's own
formatting for comparison. The command takes no options beyond `--help`.

## What it does not do

There are no flags, field widths, precisions or length modifiers: text
such as `%5d` or `%-s` is not understood, and the character after `%` is
taken as the conversion.

## Tests

```
pip install .[test]
pytest
```