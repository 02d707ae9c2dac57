"""A small printf-style formatter supporting %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterator, TextIO

from ftformat.digits import itoa, to_decimal_unsigned, to_hex, to_unsigned

_POINTER_MODULUS = 1 << 64
_END_OF_ARGS = object()


@dataclass(frozen=True)
class Rendered:
    """The text a format produced and the character count it reports.

    The count follows the formatter's own accounting: ``%%`` adds nothing
    to it and a missing ``%s`` string (``None``) subtracts one.
    """

    text: str
    count: int


def _until_nul(text: str) -> str:
    return text.split("\0", 1)[0]


def _take(args: Iterator[object], spec: str) -> object:
    value = next(args, _END_OF_ARGS)
    if value is _END_OF_ARGS:
        raise TypeError(f"not enough arguments for %{spec}")
    return value


def _as_char(value: object) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c needs a single character")
        return value
    if isinstance(value, int):
        return chr(value & 0xFF)
    raise TypeError(f"%c needs a character or integer, got {type(value).__name__}")


def _as_int(value: object, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} needs an integer, got {type(value).__name__}")
    return value


def format_pointer(address: int | None) -> str:
    """Render an address as ``0x`` followed by lowercase hex digits."""
    if address is None:
        address = 0
    if not isinstance(address, int):
        raise TypeError(f"%p needs an integer address, got {type(address).__name__}")
    return "0x" + to_hex(address % _POINTER_MODULUS)


def _convert(spec: str, args: Iterator[object]) -> tuple[str, int]:
    if spec == "c":
        return _as_char(_take(args, spec)), 1
    if spec == "s":
        value = _take(args, spec)
        if value is None:
            return "", -1
        if not isinstance(value, str):
            raise TypeError(f"%s needs a string, got {type(value).__name__}")
        text = _until_nul(value)
        return text, len(text)
    if spec == "%":
        return "%", 0
    if spec in ("d", "i"):
        text = itoa(_as_int(_take(args, spec), spec))
    elif spec == "u":
        text = to_decimal_unsigned(_as_int(_take(args, spec), spec))
    elif spec in ("x", "X"):
        text = to_hex(to_unsigned(_as_int(_take(args, spec), spec)), spec == "X")
    elif spec == "p":
        text = format_pointer(_take(args, spec))
    else:
        return "", 0
    return text, len(text)


def render(fmt: str, *args: object) -> Rendered:
    """Expand ``fmt`` with ``args`` and return the text and its count.

    Unknown conversions are dropped silently, a trailing lone ``%`` ends
    the output, and surplus arguments are ignored.
    """
    remaining = iter(args)
    chars = iter(_until_nul(fmt))
    pieces: list[str] = []
    count = 0
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            count += 1
            continue
        spec = next(chars, None)
        if spec is None:
            break
        text, produced = _convert(spec, remaining)
        pieces.append(text)
        count += produced
    return Rendered("".join(pieces), count)


def ft_printf(fmt: str, *args: object, stream: TextIO | None = None) -> int:
    """Write the expansion of ``fmt`` to ``stream`` (stdout by default) and return its count."""
    result = render(fmt, *args)
    (sys.stdout if stream is None else stream).write(result.text)
    return result.count


def main(argv: list[str] | None = None) -> int:
    """Print a demonstration of every supported conversion."""
    parser = argparse.ArgumentParser(
        prog="ftformat",
        description="Print a demonstration of every supported conversion.",
    )
    parser.parse_args(argv)

    samples: list[tuple[object, ...]] = [
        ("%c", "a"),
        ("%s", "ola"),
        ("%d", -123),
        ("%i", 123),
        ("%u", -1),
        ("%x", -1),
        ("%X", 255),
        ("%%",),
    ]
    for fmt, *args in samples:
        ft_printf(str(fmt), *args)
        sys.stdout.write("\n")

    value = 19
    address = id(value)
    ft_printf("ft_print = %p", address)
    sys.stdout.write("\n")
    sys.stdout.write(f"ptr = {address:#x}\n")
    return 0