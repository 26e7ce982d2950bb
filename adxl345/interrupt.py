from enum import IntFlag


class Interrupt(IntFlag):
    """! Interrupt bits shared by INT_ENABLE, INT_MAP and INT_SOURCE.

    Combine with | to build a full mask for set_int_enable / set_int_map.
    """

    DATA_READY = 0b10000000
    SINGLE_TAP = 0b01000000
    DOUBLE_TAP = 0b00100000
    ACTIVITY = 0b00010000
    INACTIVITY = 0b00001000
    FREE_FALL = 0b00000100
    WATERMARK = 0b00000010
    OVERRUN = 0b00000001
