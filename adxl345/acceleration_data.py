from dataclasses import dataclass
from enum import Enum
import struct

# ADXL345 full-resolution sensitivity: 4 mg per LSB
MG2G_SCALE_FACTOR = 0.004
EARTH_GRAVITY_MS2 = 9.80665

# DATAX0..DATAZ1: three little-endian signed 16-bit values
SAMPLE_STRUCT = struct.Struct("<hhh")


class AccelerationUnits(Enum):
    """! Units reported with an AccelerationData sample."""

    G = "g"
    MS2 = "m/s²"


@dataclass
class AccelerationData:
    """! Represents one acceleration sample from the ADXL345.

    Attributes:
    - x (float): X-axis acceleration.
    - y (float): Y-axis acceleration.
    - z (float): Z-axis acceleration.
    - units (AccelerationUnits): Units of x, y and z.

    ---

    - Raw counts are scaled by MG2G_SCALE_FACTOR (4 mg/LSB) to get gravities.
    - To get m/s^2, the gravities are then multiplied by EARTH_GRAVITY_MS2.
    - Axes are converted independently; no calibration is applied here.

    """

    x: float
    y: float
    z: float
    units: AccelerationUnits

    @staticmethod
    def from_bytes(data: bytes, raw_g_units: bool = False) -> "AccelerationData":
        """! Decodes the six DATAX0..DATAZ1 bytes into a sample.

        @param data (bytes): Six bytes read starting at DATAX0.
        @param raw_g_units (bool): Report in g instead of m/s^2. Defaults to False.

        @return AccelerationData: The converted sample.

        @exception struct.error: If data is not exactly six bytes long.
        """
        x_raw, y_raw, z_raw = SAMPLE_STRUCT.unpack(bytes(data))
        if raw_g_units:
            return AccelerationData(
                x=x_raw * MG2G_SCALE_FACTOR,
                y=y_raw * MG2G_SCALE_FACTOR,
                z=z_raw * MG2G_SCALE_FACTOR,
                units=AccelerationUnits.G,
            )
        return AccelerationData(
            x=x_raw * MG2G_SCALE_FACTOR * EARTH_GRAVITY_MS2,
            y=y_raw * MG2G_SCALE_FACTOR * EARTH_GRAVITY_MS2,
            z=z_raw * MG2G_SCALE_FACTOR * EARTH_GRAVITY_MS2,
            units=AccelerationUnits.MS2,
        )

    def get_as_tuple(self) -> tuple:
        """! Gets the acceleration as a tuple of floats.
        @return tuple[float, float, float]: The acceleration as a tuple of floats.
        """
        return (self.x, self.y, self.z)

    def get_as_list(self) -> list:
        """! Gets the acceleration as an [x, y, z] list, in this sample's units."""
        return [self.x, self.y, self.z]
