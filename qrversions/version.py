"""QR code versions and the per-version constants of the symbol layout."""

from __future__ import annotations

from enum import Enum, IntEnum


class Mode(Enum):
    """Data encoding mode of a QR code segment."""

    NUMERIC = "numeric"
    ALPHANUMERIC = "alphanumeric"
    BYTE = "byte"


class ECL(Enum):
    """Error correction level."""

    L = "L"
    M = "M"
    Q = "Q"
    H = "H"


_MAX_BYTES = (
    26, 44, 70, 100, 134, 172, 196, 242, 292, 346, 404, 466, 532, 581, 655,
    733, 815, 901, 991, 1085, 1156, 1258, 1364, 1474, 1588, 1706, 1828, 1921,
    2051, 2185, 2323, 2465, 2611, 2761, 2876, 3034, 3196, 3362, 3532, 3706,
)

_VERSION_INFORMATION = (
    0, 0, 0, 0, 0, 0,
    0x07C94, 0x085BC, 0x09A99, 0x0A4D3, 0x0BBF6, 0x0C762, 0x0D847, 0x0E60D,
    0x0F928, 0x10B78, 0x1145D, 0x12A17, 0x13532, 0x149A6, 0x15683, 0x168C9,
    0x177EC, 0x18EC4, 0x191E1, 0x1AFAB, 0x1B08E, 0x1CC1A, 0x1D33F, 0x1ED75,
    0x1F250, 0x209D5, 0x216F0, 0x228BA, 0x2379F, 0x24B0B, 0x2542E, 0x26A64,
    0x27541, 0x28C69,
)

_ALIGNMENT_PATTERNS_GRID: tuple[tuple[int, ...], ...] = (
    (),
    (6, 18),
    (6, 22),
    (6, 26),
    (6, 30),
    (6, 34),
    (6, 22, 38),
    (6, 24, 42),
    (6, 26, 46),
    (6, 28, 50),
    (6, 30, 54),
    (6, 32, 58),
    (6, 34, 62),
    (6, 26, 46, 66),
    (6, 26, 48, 70),
    (6, 26, 50, 74),
    (6, 30, 54, 78),
    (6, 30, 56, 82),
    (6, 30, 58, 86),
    (6, 34, 62, 90),
    (6, 28, 50, 72, 94),
    (6, 26, 50, 74, 98),
    (6, 30, 54, 78, 102),
    (6, 28, 54, 80, 106),
    (6, 32, 58, 84, 110),
    (6, 30, 58, 86, 114),
    (6, 34, 62, 90, 118),
    (6, 26, 50, 74, 98, 122),
    (6, 30, 54, 78, 102, 126),
    (6, 26, 52, 78, 104, 130),
    (6, 30, 56, 82, 108, 134),
    (6, 34, 60, 86, 112, 138),
    (6, 30, 58, 86, 114, 142),
    (6, 34, 62, 90, 118, 146),
    (6, 30, 54, 78, 102, 126, 150),
    (6, 24, 50, 76, 102, 128, 154),
    (6, 28, 54, 80, 106, 132, 158),
    (6, 32, 58, 84, 110, 136, 162),
    (6, 26, 54, 82, 110, 138, 166),
    (6, 30, 58, 86, 114, 142, 170),
)

_MISSING_BITS = {
    **dict.fromkeys((1, 7, 8, 9, 10, 11, 12, 13, 35, 36, 37, 38, 39, 40), 0),
    **dict.fromkeys((14, 15, 16, 17, 18, 19, 20, 28, 29, 30, 31, 32, 33, 34), 3),
    **dict.fromkeys((21, 22, 23, 24, 25, 26, 27), 4),
    **dict.fromkeys((2, 3, 4, 5, 6), 7),
}


class Version(IntEnum):
    """A QR code version; the value is the version number, 1 to 40."""

    V01 = 1
    V02 = 2
    V03 = 3
    V04 = 4
    V05 = 5
    V06 = 6
    V07 = 7
    V08 = 8
    V09 = 9
    V10 = 10
    V11 = 11
    V12 = 12
    V13 = 13
    V14 = 14
    V15 = 15
    V16 = 16
    V17 = 17
    V18 = 18
    V19 = 19
    V20 = 20
    V21 = 21
    V22 = 22
    V23 = 23
    V24 = 24
    V25 = 25
    V26 = 26
    V27 = 27
    V28 = 28
    V29 = 29
    V30 = 30
    V31 = 31
    V32 = 32
    V33 = 33
    V34 = 34
    V35 = 35
    V36 = 36
    V37 = 37
    V38 = 38
    V39 = 39
    V40 = 40

    @property
    def _index(self) -> int:
        return self.value - 1

    @classmethod
    def from_size(cls, n: int) -> Version:
        """Return the version whose symbol is ``n`` modules wide.

        Raises ValueError if no version has that size.
        """
        if not isinstance(n, int) or isinstance(n, bool):
            raise ValueError(f"invalid matrix size: {n!r}")
        if n < 21 or n > 177 or (n - 21) % 4:
            raise ValueError(f"invalid matrix size: {n}")
        return cls((n - 21) // 4 + 1)

    def missing_bits(self) -> int:
        """Number of remainder bits left unfilled at the end of the symbol."""
        return _MISSING_BITS[self.value]

    def max_bytes(self) -> int:
        """Total number of codewords the symbol holds."""
        return _MAX_BYTES[self._index]

    def information(self) -> int:
        """The 18-bit version information word; 0 below version 7."""
        return _VERSION_INFORMATION[self._index]

    def alignment_patterns_grid(self) -> tuple[int, ...]:
        """Row and column coordinates of the alignment pattern centres."""
        return _ALIGNMENT_PATTERNS_GRID[self._index]

    def size(self) -> int:
        """Width of the symbol in modules."""
        return self._index * 4 + 21