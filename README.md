# fixuint

Unsigned integers of a fixed bit width, any width you choose. A value of
width `bits` is a number from 0 to 2**bits − 1. Values are immutable,
carry their width, and compare equal only to values of the same width.

## Installation

```
pip install fixuint
```

The package has no runtime dependencies. To run the test suite:

```
pip install "fixuint[test]"
pytest
```

## Layout

Every feature lives in its own module, as a subclass of
`fixuint.base.UintBase`. Results keep the class of the value they were
computed from, and operands may be any `UintBase` of the same width.

| Module             | Class           | What it adds                                  |
|--------------------|-----------------|-----------------------------------------------|
| `fixuint.base`     | `UintBase`      | construction, limbs, comparison               |
| `fixuint.power`    | `Power`         | integer powers, `approx_pow2`                 |
| `fixuint.muldiv`   | `MulDiv`        | multiplication, division, remainder           |
| `fixuint.byteconv` | `ByteConv`      | little- and big-endian bytes                  |
| `fixuint.digits`   | `Digits`        | digits in any base of two or more             |
| `fixuint.fromint`  | `IntConversion` | checked, saturating, wrapping construction    |
| `fixuint.toint`    | `IntTarget`     | conversion to machine integer kinds and widths|

## Base values and limbs

```python
from fixuint.base import UintBase, nlimbs, nbytes, mask

x = UintBase(100, 12345)          # ValueError if negative or too wide
UintBase.zero(100)
UintBase.max(100)                 # 2**100 - 1
UintBase.from_limbs(128, [0x7890123456789012, 0x1234567890123456])
x.as_limbs()                      # little-endian 64-bit limbs
x.is_zero(), int(x), x.bits, x.value

UintBase.checked_from_limbs_slice(64, [1, 1])      # None: does not fit
UintBase.overflowing_from_limbs_slice(64, [1, 1])  # (truncated, True)
UintBase.saturating_from_limbs_slice(64, [1, 1])   # the maximum
nlimbs(65), nbytes(65), mask(65)                   # 2, 9, 1
```

`from_limbs` needs exactly `nlimbs(bits)` limbs. Ordering comparisons
between values of different widths raise `TypeError`.

## Multiplication and division

```python
from fixuint.muldiv import MulDiv

a, b = MulDiv(64, 123456789), MulDiv(64, 1000)
a * b                       # wraps modulo 2**64
a.overflowing_mul(b)        # (value, overflowed)
a.checked_mul(b)            # None on overflow
a.saturating_mul(b)         # clamps to the maximum
a.widening_mul(b)           # full product, width 128
a // b, a % b, a.div_rem(b) # ZeroDivisionError for a zero divisor
a.checked_div(MulDiv(64, 0))  # None
a.div_ceil(b)
MulDiv(64, 7).inv_ring()    # inverse modulo 2**64, None for even values
MulDiv.product(64, [a, b])  # wrapping product, one when empty
```

## Powers

```python
from fixuint.power import Power

Power(64, 36).overflowing_pow(12)   # (0x41c21cb8e1000000, False)
Power(64, 36).checked_pow(13)       # None
Power(64, 36).pow(13)               # wraps modulo 2**64
Power.approx_pow2(64, 10.385)       # 1337
Power.approx_pow2(64, 64.0)         # None
```

## Bytes

```python
from fixuint.byteconv import ByteConv

n = ByteConv(72, 0x123456789012345678)
n.to_be_bytes()                                   # exactly 9 bytes
n.to_le_bytes_trimmed()                           # trailing zeros removed
ByteConv.from_le_bytes(72, n.to_le_bytes()) == n  # True
ByteConv.try_from_be_slice(16, b"\x00\x00\x12\x34")  # leading zeros ignored
```

`from_le_bytes` and `from_be_bytes` need exactly `nbytes(bits)` bytes;
the `try_from_*_slice` methods take any length and return `None` when the
value does not fit.

## Digits

```python
from fixuint.digits import Digits

list(Digits(64, 123456789).to_base_be(10))        # [1, 2, ..., 9]
list(Digits(64, 123456789).to_base_le(10))        # [9, 8, ..., 1]
Digits.from_base_le(64, 10, [9, 8, 7, 6, 5, 4, 3, 2, 1])
Digits.from_base_be(64, 10, [1, 2, 3, 4, 5, 6, 7, 8, 9])
```

Zero yields no digits. Errors are `BaseConvertError` subclasses:
`InvalidBaseError`, `InvalidDigitError` and `BaseOverflowError`.

## Conversions

```python
from fixuint.fromint import IntConversion, ValueTooLargeError
from fixuint.toint import IntTarget, IntKind

IntConversion.from_value(8, 142)
IntConversion.saturating_from(8, 300)   # 255
IntConversion.wrapping_from(8, -10)     # 246
try:
    IntConversion.try_from(8, 300)
except ValueTooLargeError as error:
    error.wrapped                       # 44

IntTarget(12, 300).to(IntKind.I16)              # 300
IntTarget(32, 255).saturating_to(IntKind.I8)    # 127
IntTarget(32, 255).wrapping_to(IntKind.I8)      # -1
IntTarget(256, 0x1337cafec0d3).wrapping_to(32)  # a 32-bit value 0xcafec0d3
```

`try_from` accepts Python ints and values of any width. It raises
`ValueTooLargeError` or `ValueNegativeError` (both `ToUintError`, a
`ValueError`), each carrying the value wrapped modulo 2**bits. `try_to`
and `to` raise `FromUintError`, which carries the wrapped and the
saturated result.

## What the package does not do

There is no single class that combines all of the above; pick the module
for the operation you need. The package has no bit-level operations
(bit tests, bit counts, shifts, rotations, `~`, `&`, `|`, `^`), no modular
arithmetic or greatest common divisor, no conversion from or to floats,
no logarithms and no integer roots.