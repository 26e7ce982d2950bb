import os
import sys
import struct
import pytest

# Add module directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# Import modules under test
from adxl345 import (
    AccelerationData,
    AccelerationUnits,
    MG2G_SCALE_FACTOR,
    EARTH_GRAVITY_MS2,
)

sample_bytes = bytes([0x10, 0x01, 0x20, 0x02, 0x30, 0x03])


# ************************* Begin Tests ************************* #
def test_construction():
    acceleration = AccelerationData(0.1, -0.2, 1.0, AccelerationUnits.G)

    assert acceleration.x == 0.1
    assert acceleration.y == -0.2
    assert acceleration.z == 1.0
    assert acceleration.units == AccelerationUnits.G


def test_from_bytes_g_units():
    acceleration = AccelerationData.from_bytes(sample_bytes, raw_g_units=True)

    assert acceleration.units.value == "g"
    assert acceleration.x == 0x0110 * MG2G_SCALE_FACTOR
    assert acceleration.y == 0x0220 * MG2G_SCALE_FACTOR
    assert acceleration.z == 0x0330 * MG2G_SCALE_FACTOR


def test_from_bytes_ms2_units_by_default():
    acceleration = AccelerationData.from_bytes(sample_bytes)

    assert acceleration.units.value == "m/s²"
    assert acceleration.x == 0x0110 * MG2G_SCALE_FACTOR * EARTH_GRAVITY_MS2
    assert acceleration.y == 0x0220 * MG2G_SCALE_FACTOR * EARTH_GRAVITY_MS2
    assert acceleration.z == 0x0330 * MG2G_SCALE_FACTOR * EARTH_GRAVITY_MS2


def test_from_bytes_negative_values():
    # -1, -256, 32767 in little-endian two's complement
    data = bytes([0xFF, 0xFF, 0x00, 0xFF, 0xFF, 0x7F])
    acceleration = AccelerationData.from_bytes(data, raw_g_units=True)

    assert acceleration.x == -1 * MG2G_SCALE_FACTOR
    assert acceleration.y == -256 * MG2G_SCALE_FACTOR
    assert acceleration.z == 32767 * MG2G_SCALE_FACTOR


def test_from_bytes_accepts_list():
    acceleration = AccelerationData.from_bytes(list(sample_bytes), raw_g_units=True)
    assert acceleration.x == 0x0110 * MG2G_SCALE_FACTOR


def test_from_bytes_one_g_on_z():
    # 250 counts at 4 mg/LSB is 1 g
    data = bytes([0x00, 0x00, 0x00, 0x00, 0xFA, 0x00])
    acceleration = AccelerationData.from_bytes(data)

    assert acceleration.x == 0
    assert acceleration.y == 0
    assert acceleration.z == pytest.approx(EARTH_GRAVITY_MS2)


def test_from_bytes_wrong_length():
    with pytest.raises(struct.error):
        AccelerationData.from_bytes(bytes([0x10, 0x01, 0x20]))


def test_from_bytes_components_are_floats():
    acceleration = AccelerationData.from_bytes(sample_bytes, raw_g_units=True)
    assert all(isinstance(value, float) for value in acceleration.get_as_list())


def test_get_as_tuple_and_list():
    acceleration = AccelerationData(1.5, 2.5, -3.5, AccelerationUnits.MS2)

    assert acceleration.get_as_tuple() == (1.5, 2.5, -3.5)
    assert acceleration.get_as_list() == [1.5, 2.5, -3.5]


if __name__ == "__main__":
    pytest.main([__file__])
