from enum import IntEnum


class DataRate(IntEnum):
    """! BW_RATE output data rate codes (bits 0-3).

    Bandwidth is half the output data rate.
    """

    DATARATE_3200_HZ = 0b1111
    DATARATE_1600_HZ = 0b1110
    DATARATE_800_HZ = 0b1101
    DATARATE_400_HZ = 0b1100
    DATARATE_200_HZ = 0b1011
    DATARATE_100_HZ = 0b1010  # Power-on default
    DATARATE_50_HZ = 0b1001
    DATARATE_25_HZ = 0b1000
    DATARATE_12_5_HZ = 0b0111
    DATARATE_6_25_HZ = 0b0110
    DATARATE_3_13_HZ = 0b0101
    DATARATE_1_56_HZ = 0b0100
    DATARATE_0_78_HZ = 0b0011
    DATARATE_0_39_HZ = 0b0010
    DATARATE_0_20_HZ = 0b0001
    DATARATE_0_10_HZ = 0b0000
