from enum import IntEnum


class MeasurementRange(IntEnum):
    """! DATA_FORMAT range codes (bits 0-1)."""

    RANGE_2_G = 0b00
    RANGE_4_G = 0b01
    RANGE_8_G = 0b10
    RANGE_16_G = 0b11
