from enum import IntEnum


class I2CAddress(IntEnum):
    """! 7-bit I2C addresses selected by the ALT ADDRESS pin."""

    ALT_GROUNDED = 0x53
    ALT_HIGH = 0x1D
