# qrversions

Lookup tables and helpers for the 40 QR code versions. The package uses
only the standard library.

## Installation

```
pip install qrversions
```

## What it provides

`qrversions.version` holds the basic types:

- `Mode`: the encoding mode (`NUMERIC`, `ALPHANUMERIC` or `BYTE`).
- `ECL`: the error correction level (`L`, `M`, `Q`, `H`).
- `Version`: an `IntEnum` with members `V01` to `V40`. The value of each
  member is its version number, 1 to 40. Each member provides:
  - `size()`: the width of the symbol in modules, from 21 for `V01` up to
    177 for `V40`, in steps of 4.
  - `max_bytes()`: the total number of codewords the symbol holds.
  - `missing_bits()`: how many remainder bits are left unfilled at the end
    of the symbol (0, 3, 4 or 7).
  - `information()`: the 18-bit version information word. It is `0` for
    versions 1 to 6, which carry no version information.
  - `alignment_patterns_grid()`: a tuple of the row and column coordinates
    of the alignment pattern centres. It is empty for `V01`.
  - `Version.from_size(n)`: the version whose symbol is `n` modules wide.
    Any other width, or a value that is not an integer, raises
    `ValueError`.

`qrversions.capacity` answers capacity questions:

- `capacity(mode, ecl, version)`: the largest number of characters the
  given version holds in that mode at that level. `version` may be a
  `Version` member or a version number from 1 to 40.
- `best_version(mode, ecl, length)`: the smallest version that holds
  `length` characters. It returns `None` when the input is too long for
  any version, and raises `ValueError` for a negative length.

Both functions raise `TypeError` if `mode` is not a `Mode` or `ecl` is not
an `ECL`.

## Example

```python
from qrversions.version import Mode, ECL, Version
from qrversions.capacity import capacity, best_version

v = best_version(Mode.BYTE, ECL.M, 100)
print(v.name, v.size(), v.alignment_patterns_grid())  # V06 41 (6, 34)

print(capacity(Mode.NUMERIC, ECL.L, Version.V01))     # 41
print(Version.from_size(177).name)                    # V40
```

## What it does not do

The package only answers questions about versions. It does not encode
data, compute error correction codewords, apply masks, build the module
matrix or render a QR code image, and it has no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```