# hydrixkit

Small, dependency-free Python models of the utilities that a freestanding
kernel library provides. These are math helpers, wide integers, random numbers,
text formatting, bitmaps, boot protocol records, byte-buffer helpers, a
real-time clock, mouse packet decoding and a heap allocator. Each model keeps
the exact behaviour it describes, quirks included.

## Modules

- `hydrixkit.intmath`: signed 32-bit integer helpers. The functions are
  `absolute`, `minimum`, `maximum`, `clamp`, `sign`, `power`, `square_root`
  and `lerp`. Results wrap on overflow. `power` returns 1 for a non-positive
  exponent. `square_root` builds its result bit by bit over the low 16 bits.
- `hydrixkit.floatmath`: float helpers computed with short series and ten
  Newton iterations. Examples are `square_root`, `cube_root`, `exponential`,
  `log`, `sine`, `cosine`, `arc_tangent`, the hyperbolic functions and
  `hypotenuse`. The formulas are followed as written, so many results are
  rough, and some names have unusual meanings:
  - `floor(x)` returns the fractional part `x - int(x)`.
  - `ceiling(x)` returns `int(x) + 1 - x`.
  - `next_after(x, y)` steps by a whole 1.
  - `nan(tag)` ignores its tag.

  A division by zero gives infinity or NaN instead of raising.
- `hydrixkit.widemath`: `UInt128` holds two 64-bit words, `low` and `high`.
  `UInt256` holds two `UInt128` halves. Each operation works on the halves on
  their own. Only `UInt128.add` and `UInt128.sub` carry or borrow between the
  words. The operations are `add`, `sub`, `mul`, `div`, `mod`, `and_`, `or_`,
  `xor`, `invert`, `lshift`, `rshift`, `neg`, `absolute`, `pow` and `sqrt`.
  `pow` XORs each word with the exponent.
- `hydrixkit.rand`: `LinearCongruential(seed)` has a 64-bit state and yields
  values in `0..32767`.
  - Use `next()`, `set_seed(seed)` and `in_range(minimum, maximum)`.
  - `in_range` raises `ZeroDivisionError` on an empty range.
  - The generator is also an infinite iterator.
- `hydrixkit.text`: string helpers.
  - `strings_equal` compares strings up to their first NUL.
  - `reverse_prefix` reverses the first characters of a string.
  - `format_int` formats a signed 32-bit value.
  - `format_unsigned` accepts values up to 64 bits.
  - `format_float` and `format_double` write six truncated fractional digits.
    `format_float` gives `"NaN"` for NaN, and both give `"0.0"` for zero.
  - The remaining helpers are `format_char`, `format_bool`, `to_hex` and
    `to_digit_char`. `to_hex` writes upper case with no prefix.
- `hydrixkit.images`: `Bitmap(width, height, data)` holds row-major pixels.
  `stretched(width, height)` resizes the bitmap by nearest neighbour.
- `hydrixkit.bootproto`: the boot protocol.
  - Constants: `COMMON_MAGIC`, the request start and end markers, and flag
    constants.
  - `RequestKind` and `request_id(kind)` give the four-word request
    identifiers.
  - `base_revision(revision)` builds a base-revision marker, and
    `base_revision_supported(marker)` checks one.
  - The enums `MemmapType`, `MediaType` and `TerminalCallback`.
  - The records `Uuid` and `MemmapEntry`, with little-endian `pack()` and
    `unpack(data)`.
- `hydrixkit.memory`: `copy`, `fill`, `move` and `compare` work on byte
  buffers. A span outside the buffer raises `IndexError`. `usable_memory(entries)`
  sums the lengths of the `MemmapType.USABLE` entries.
- `hydrixkit.clock`: date and time from a real-time clock.
  - `Clock(read_register)` reads BCD bytes through a callable that you supply.
    The callable takes a register index from `RtcRegister`.
  - `Clock` offers `seconds`, `minutes`, `hours`, `day`, `month`, `year`,
    `century`, `weekday`, `current_time`, `mark_boot` and `since_boot`.
  - `system_time()` gives seconds since 1970.
  - `time_of_day(offset, half_hour)` and `time_of_day_12(...)` return a
    `TimeOfDay`.
  - The module also has the helpers `bcd_decode` and `to_12_hour`.
- `hydrixkit.mouse`: `PacketDecoder(screen_width, screen_height, has_wheel, sensitivity)`.
  - `feed(byte)` consumes PS/2 packet bytes one at a time. It returns `True`
    when a packet is complete.
  - The decoder tracks `button` (a `MouseButton`) and `scroll` (a
    `MouseScroll`).
  - `position()` gives the pointer position, clamped to the screen.
- `hydrixkit.heap`: `Heap(base)` models a first-fit free-list allocator. Each
  block has a 16-byte header, and sizes are rounded up to 16.
  - It offers `allocate`, `free`, `reallocate`, `size_of`, `clean`,
    `free_list_count` and `used_list_count`.
  - The properties `base` and `end` report the heap bounds.
  - Freeing an unknown or already freed address raises `ValueError`.

## Example

```python
from hydrixkit.intmath import square_root
from hydrixkit.rand import LinearCongruential
from hydrixkit.widemath import UInt128
from hydrixkit.mouse import PacketDecoder

square_root(17)                      # 4

rng = LinearCongruential(42)
value = rng.in_range(1, 7)           # 1..6

total = UInt128(low=2**64 - 1, high=0).add(UInt128(low=1, high=0))
# UInt128(low=0, high=1)

decoder = PacketDecoder(640, 480, has_wheel=False, sensitivity=1)
for byte in (0x09, 0x05, 0xFB):
    decoder.feed(byte)
decoder.position()                   # (5, 5)
```

## What it does not do

These are models only.
- The package never touches hardware. `Clock` reads only through the
  callable you give it.
- `PacketDecoder` decodes bytes you feed it and does not talk to a mouse.
- `Heap` keeps books on addresses but holds no memory of its own.
- The package offers no command-line program.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```