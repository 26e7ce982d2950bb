from enum import IntEnum


class Register(IntEnum):
    """! ADXL345 register offsets."""

    DEVID = 0x00  # Device ID
    OFSX = 0x1E  # X-axis offset
    OFSY = 0x1F  # Y-axis offset
    OFSZ = 0x20  # Z-axis offset
    BW_RATE = 0x2C  # Data rate and power mode control
    POWER_CTL = 0x2D  # Power-saving features control
    INT_ENABLE = 0x2E  # Interrupt enable control
    INT_MAP = 0x2F  # Interrupt mapping control
    INT_SOURCE = 0x30  # Source of interrupts
    DATA_FORMAT = 0x31  # Data format control
    DATAX0 = 0x32  # X-axis data 0, first of six data bytes
    FIFO_CTL = 0x38  # FIFO control
    FIFO_STATUS = 0x39  # FIFO status
