# hydrix

A small library of runtime helpers with no dependencies. It offers integer and float math, wide integers, number formatting, byte-buffer primitives, a simulated heap and a model of a CMOS real-time clock.

## Modules

- `hydrix.intmath`: integer helpers that work in signed 32-bit arithmetic and wrap on overflow. They are `absolute`, `minimum`, `maximum`, `clamp`, `sign`, `power`, `square_root` and `linear_interpolation`. `square_root` builds the result bit by bit from bit 15 down. `power` returns 1 when the exponent is zero or negative.
- `hydrix.floatmath`: float helpers (`square_root`, `cube_root`, `exponential`, `log`, `sine`, `cosine`, `arc_tangent`, `floor`, `round_value`, `modulus`, `hypotenuse`, `swap`, ...) and the constants `PI`, `TAU` and `E`.
  - The functions use fixed ten-step iterations and short series, so they are not the textbook functions. `sine(x)` is `x - x**3 + x**5 - ...` with no factorials, and `floor(x)` returns the fractional part `x - int(x)`.
  - `power` multiplies once for each integer step below the exponent.
  - A division by zero inside these functions gives infinity or NaN. It does not raise.
- `hydrix.rand`: `RandomGenerator`, a linear congruential generator that returns values in `0..32767`. `next()` returns the next value. `in_range(low, high)` raises `ValueError` when `low == high`. The module-level `random`, `set_random_seed` and `random_with_range` use one shared generator, which starts from seed 0.
- `hydrix.widemath`: the frozen values `UInt128` (two 64-bit lanes, `low` and `high`) and `UInt256` (two `UInt128` halves).
  - Operators act on each lane separately. Addition and subtraction carry or borrow only from the low 64-bit lane into the high one. No carry passes between the two halves of a `UInt256`.
  - Multiplication, division and modulus work lane by lane. A zero lane in the divisor raises `ZeroDivisionError`.
  - `power(exponent)` combines each lane with the exponent by exclusive or. `square_root()` takes the square root of each lane with `intmath.square_root`.
  - `int(value)` gives the combined integer.
- `hydrix.strings`: formatting helpers.
  - `concatenate` and `compare` join and compare strings.
  - `format_int` gives signed 32-bit decimal. `format_unsigned(value, bits)` gives unsigned decimal for widths 8, 16, 32 or 64.
  - `format_hex(value, bits)` gives upper-case hexadecimal digits with no prefix.
  - `format_float` gives the integer part and exactly six truncated decimals. NaN gives `"NaN"` and infinities raise `OverflowError`.
  - The other helpers are `format_bool`, `format_char` and `digit_char`.
  - `to_string` chooses among these by the type of its argument.
- `hydrix.primitives`: the dataclasses `Point`, `FPoint`, `Rect`, `FRect` and `Size`, `FSize`. `Color` and `ColorA` check that each channel lies in `0..255`. `Bitmap` holds row-major pixel data, and `stretch(width, height)` resamples it by nearest pixel.
- `hydrix.hardware`: `KeyCode`, the PS/2 set 1 make codes (keypad keys that share a code are aliases). It also holds the `DeviceDriver` enum and the `DisplayInfo` dataclass. `keycode_for(scancode)` raises `ValueError` for an unknown scancode.
- `hydrix.memory`: `mem_copy`, `mem_set`, `mem_move` (overlapping ranges inside one `bytearray`) and `mem_compare` (returns -1, 0 or 1) on byte buffers. `total_usable_memory` adds up the lengths of the usable `MemoryMapEntry` records, those with type 0.
- `hydrix.heap`: `Heap`, a simulated bump allocator over an address space that starts at `base`.
  - Each block sits behind a 16-byte header, and sizes are rounded up to 16.
  - Freed blocks go to the front of a free list. A later request reuses the first of them that is large enough.
  - It provides `allocate`, `free` (`None` is ignored, and freeing twice raises `ValueError`), `reallocate`, `clean_allocate`, `read` and `write`.
  - `free_block_count` and `used_block_count` report the number of free and used blocks.
  - `clean` gives free blocks at the top of the heap back.
- `hydrix.clock`: a model of a CMOS real-time clock.
  - `RealTimeClock` reads its registers through a function that you supply. It reports the time-of-day fields, the date fields, `day_of_week` (the raw register), `system_time` (seconds since 1970-01-01), `current_time` and `time_since_boot` after `initialize`.
  - `time(timezone)` returns a 24-hour `TimeOfDay`. `time12(timezone)` returns it in 12-hour form with the `pm` flag set.
  - `Timezone` holds whole-hour offsets. `Timezone.MUMBAI` also adds thirty minutes.
  - The helpers are `bcd_to_int`, `day_of_week_name`, `to_12_hour` and `registers_from_datetime`.

## Install

```
pip install .
```

## Examples

```python
from hydrix import intmath, strings
from hydrix.rand import RandomGenerator
from hydrix.heap import Heap

intmath.square_root(17)          # 4
strings.format_hex(255, 64)      # "FF"

rng = RandomGenerator(42)
value = rng.in_range(1, 10)

heap = Heap(0x1000)
address = heap.allocate(24)
heap.write(address, b"hello")
heap.read(address, 5)            # b"hello"
heap.free(address)
```

`RealTimeClock` takes a function that returns the byte held in a register. `registers_from_datetime` builds a set of registers from a `datetime`:

```python
from datetime import datetime
from hydrix.clock import RealTimeClock, Timezone, registers_from_datetime

registers = registers_from_datetime(datetime(2024, 3, 1, 13, 5, 9))
clock = RealTimeClock(registers.__getitem__)
clock.time12(Timezone.UTC)       # TimeOfDay(seconds=9, minutes=5, hours=1, pm=True)
```

## What it does not do

hydrix makes no contact with real hardware. It does not read I/O ports, keyboards, mice or the real CMOS clock. The clock reads only through the function you give it, and the heap manages a simulated address space that it keeps in a `bytearray`. It has no console, no framebuffer drawing, no system-call handling and no command-line program.

## Tests

```
pip install .[test]
pytest
```