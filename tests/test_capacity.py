import pytest

from qrversions.capacity import best_version, capacity
from qrversions.version import ECL, Mode, Version

ECLS_BY_STRENGTH = (ECL.L, ECL.M, ECL.Q, ECL.H)
MODES_BY_DENSITY = (Mode.NUMERIC, Mode.ALPHANUMERIC, Mode.BYTE)


@pytest.mark.parametrize(
    ("mode", "ecl", "length", "expected"),
    [
        (Mode.NUMERIC, ECL.L, 0, Version.V01),
        (Mode.NUMERIC, ECL.L, 41, Version.V01),
        (Mode.NUMERIC, ECL.L, 42, Version.V02),
        (Mode.NUMERIC, ECL.L, 7089, Version.V40),
        (Mode.NUMERIC, ECL.H, 17, Version.V01),
        (Mode.ALPHANUMERIC, ECL.M, 21, Version.V02),
        (Mode.ALPHANUMERIC, ECL.H, 1852, Version.V40),
        (Mode.BYTE, ECL.Q, 12, Version.V02),
        (Mode.BYTE, ECL.H, 1273, Version.V40),
        (Mode.BYTE, ECL.L, 2953, Version.V40),
    ],
)
def test_best_version_boundaries(mode, ecl, length, expected):
    assert best_version(mode, ecl, length) is expected


@pytest.mark.parametrize(
    ("mode", "ecl", "length"),
    [
        (Mode.NUMERIC, ECL.L, 7090),
        (Mode.ALPHANUMERIC, ECL.H, 1853),
        (Mode.BYTE, ECL.H, 1274),
        (Mode.BYTE, ECL.L, 2954),
    ],
)
def test_best_version_too_long(mode, ecl, length):
    assert best_version(mode, ecl, length) is None


@pytest.mark.parametrize(
    ("mode", "ecl", "version", "expected"),
    [
        (Mode.NUMERIC, ECL.L, Version.V01, 41),
        (Mode.NUMERIC, ECL.M, Version.V40, 5596),
        (Mode.ALPHANUMERIC, ECL.Q, Version.V20, 702),
        (Mode.BYTE, ECL.H, Version.V40, 1273),
        (Mode.BYTE, ECL.L, 7, 154),
    ],
)
def test_capacity_values(mode, ecl, version, expected):
    assert capacity(mode, ecl, version) == expected


@pytest.mark.parametrize("mode", MODES_BY_DENSITY)
@pytest.mark.parametrize("ecl", ECLS_BY_STRENGTH)
def test_capacity_grows_with_version(mode, ecl):
    values = [capacity(mode, ecl, v) for v in Version]
    assert all(a < b for a, b in zip(values, values[1:]))


@pytest.mark.parametrize("mode", MODES_BY_DENSITY)
@pytest.mark.parametrize("version", list(Version))
def test_capacity_shrinks_with_stronger_correction(mode, version):
    values = [capacity(mode, ecl, version) for ecl in ECLS_BY_STRENGTH]
    assert all(a >= b for a, b in zip(values, values[1:]))


@pytest.mark.parametrize("ecl", ECLS_BY_STRENGTH)
@pytest.mark.parametrize("version", list(Version))
def test_denser_modes_hold_more(ecl, version):
    values = [capacity(mode, ecl, version) for mode in MODES_BY_DENSITY]
    assert all(a >= b for a, b in zip(values, values[1:]))


@pytest.mark.parametrize("mode", MODES_BY_DENSITY)
@pytest.mark.parametrize("ecl", ECLS_BY_STRENGTH)
def test_best_version_round_trip(mode, ecl):
    for version in Version:
        full = capacity(mode, ecl, version)
        assert best_version(mode, ecl, full) is version
        following = best_version(mode, ecl, full + 1)
        if version is Version.V40:
            assert following is None
        else:
            assert following is Version(version.value + 1)


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        best_version(Mode.BYTE, ECL.L, -1)


def test_invalid_version_rejected():
    with pytest.raises(ValueError):
        capacity(Mode.BYTE, ECL.L, 41)


def test_invalid_mode_rejected():
    with pytest.raises(TypeError):
        capacity("byte", ECL.L, Version.V01)


def test_invalid_ecl_rejected():
    with pytest.raises(TypeError):
        best_version(Mode.NUMERIC, "L", 10)