# gbclib

Runtime routines in the style of a small C library for an 8-bit handheld,
keeping its fixed-width overflow, rounding and edge-case rules.

## Modules

- `gbclib.longdiv`: 32-bit division and modulus. `divulong` and `modulong`
  work on unsigned values, `divslong` and `modslong` on signed ones. The
  quotient rounds toward zero; the signed remainder is negative when exactly
  one operand is negative. `divulong` by zero returns `0xFFFFFFFF`; the
  modulus routines raise `ZeroDivisionError`.
- `gbclib.arith`: `mullong` (low 32 bits of a product, unsigned),
  `mulslong` (the same bits read as signed), `int_abs` (16-bit) and
  `long_abs` (32-bit). The most negative value is its own absolute value.
- `gbclib.ctype`: ASCII-only `isalpha`, `isdigit`, `islower`, `isupper`,
  `isspace` (space, tab and newline only), `tolower` and `toupper`.
- `gbclib.strings`: `strlen`, `strcat`, `strncat`, `strcmp`, `strncmp`,
  `strcpy`, `strncpy`, `memcpy` and `reverse` over NUL-terminated text. They
  return new strings; the copying routines overwrite the start of the
  destination and keep what lies past it.
- `gbclib.convert`: `atoi` (8-bit accumulator, wraps), `atol` (32-bit),
  `itoa` (16-bit) and `ltoa` (32-bit).
- `gbclib.bcd`: `BCD`, an eight-digit packed decimal counter with `add`,
  `sub` (both in place, wrapping modulo 10**8), `to_text(tile_offset)`,
  `from_bytes` and `to_bytes`.
- `gbclib.heap`: `Heap(capacity, base=0, header_size=6)`, a first-fit
  allocator of consecutive hunks with `malloc`, `calloc`, `free`, `realloc`,
  `gc`, `hunks`, `read` and `write`. Misuse raises `DoubleFreeError` or
  `UnknownBlockError` (both `HeapError`); running out of room raises
  `MemoryError`.
- `gbclib.search`: `bsearch(key, items, compare)`, returning an index or
  `None`, and `qsort(items, compare)`, a stable in-place insertion sort.
- `gbclib.formatting`: `sprintf`, `printf(fmt, *args, out=None)`,
  `puts(s, out=None)`, `scanf(fmt, read_line)` and `assert_failed`, which
  raises `AssertionFailure`. Output supports `%c %u %d %x %s` on 16-bit
  numbers; `scanf` raises `ScanMismatch` when input does not match.
- `gbclib.gprint`: `TextWriter`, which collects characters (and passes each
  to an optional callback) through `wrtchr`, `gprint`, `gprintn` (8-bit),
  `gprintln` (16-bit) and `gprintf`, which returns the number of
  conversions.
- `gbclib.sound`: `SoundRegisters`, a shadow copy of the 23 sound registers
  at 0xFF10-0xFF26 with `current_value`, `update_value`, `register_bytes`
  and `dump_registers`, recording every byte sent in `writes`; and
  `SoundEditor`, a parameter page editor driven by `press(buttons)` with
  `Button` flags and shown by `screen()`. `music_frequencies()` gives the
  built-in tune.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from gbclib.longdiv import divslong, modslong
from gbclib.bcd import BCD
from gbclib.heap import Heap
from gbclib.formatting import sprintf

divslong(-7, 2)        # -3
modslong(-7, 2)        # -1

score = BCD(1999)
score.add(BCD(1))
str(score)             # "00002000"
score.to_text(0)       # b"\x00\x00\x00\x00\x02\x00\x00\x00"

heap = Heap(1024)
p = heap.malloc(16)
heap.write(p, b"hello")
heap.read(p, 5)        # b"hello"
heap.free(p)

sprintf("%d items at %x", 12, 255)   # "12 items at FF"
```

## What it does not do

There is no command-line program. `SoundEditor` keeps its state and renders
screen rows as strings, but it does not read a real joypad, draw to a
display or drive sound hardware: button readings must be passed to `press`,
and register writes only appear in `SoundRegisters.writes` or through the
`on_write` callback.