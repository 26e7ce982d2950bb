from enum import IntEnum


class FifoMode(IntEnum):
    """! FIFO_CTL FIFO_MODE codes (bits 6-7)."""

    BYPASS = 0b00
    FIFO = 0b01  # Collect until full, then stop
    STREAM = 0b10  # Collect continuously, oldest samples overwritten
    TRIGGER = 0b11  # Stream until the trigger interrupt fires
