#
#   ADXL345 3-Axis Accelerometer
#   Register access over I2C
#

# Standard library imports
import logging

# Third party imports
from smbus2 import SMBus

# ADXL345 module imports
from .exceptions import InvalidAddressError
from .i2c_address import I2CAddress


class RegisterDevice:
    """! Byte and block register access to one device on an I2C bus.

    Transport errors (OSError from smbus2) are raised to the caller unchanged.
    Nothing here retries, locks or times out; a read-modify-write is two bus
    transactions, so callers must not mutate the same register concurrently.

    @param bus (SMBus): An already open bus. If None, bus_number is opened.
    @param bus_number (int): I2C bus to open when no bus is given. Defaults to 1.
    @param address (int): 7-bit device address, one of I2CAddress.

    @exception InvalidAddressError: If address is not an I2CAddress value.
    """

    def __init__(
        self,
        bus: SMBus = None,
        bus_number: int = 1,
        address: int = I2CAddress.ALT_GROUNDED,
    ) -> None:
        self.__log = logging.getLogger(__class__.__name__)
        try:
            self.__address = I2CAddress(address)
        except ValueError:
            raise InvalidAddressError(f"Invalid I2C address: {address!r}")
        self.__bus_number = bus_number
        if bus is None:
            self.__log.debug(f"Opening I2C bus {bus_number}")
            bus = SMBus(bus_number)
        self.__bus = bus

    @property
    def address(self) -> I2CAddress:
        return self.__address

    @property
    def bus_number(self) -> int:
        return self.__bus_number

    @property
    def bus(self) -> SMBus:
        return self.__bus

    def read_byte(self, register: int) -> int:
        """! Reads one byte from a register.
        @param register (int): The register offset.
        @return int: The register value (0-255)."""
        return self.__bus.read_byte_data(self.__address, register)

    def write_byte(self, register: int, value: int) -> None:
        """! Writes one byte to a register.
        @param register (int): The register offset.
        @param value (int): The byte to write."""
        self.__log.debug(f"Write register 0x{register:02x}: {value}")
        self.__bus.write_byte_data(self.__address, register, value)

    def read_block(self, register: int, length: int) -> bytes:
        """! Reads length contiguous bytes starting at register in one transaction.
        @param register (int): The first register offset.
        @param length (int): Number of bytes to read.
        @return bytes: The register values."""
        return bytes(self.__bus.read_i2c_block_data(self.__address, register, length))

    def write_block(self, register: int, data: bytes) -> None:
        """! Writes contiguous bytes starting at register in one transaction.
        @param register (int): The first register offset.
        @param data (bytes): The bytes to write."""
        self.__log.debug(f"Write block at 0x{register:02x}: {bytes(data).hex()}")
        self.__bus.write_i2c_block_data(self.__address, register, list(data))

    def read_bits(self, register: int, mask: int, shift: int = 0) -> int:
        """! Reads a bit field out of a register.
        @param register (int): The register offset.
        @param mask (int): Mask of the field within the register byte.
        @param shift (int): Position of the field's lowest bit.
        @return int: The field value, shifted down to bit 0."""
        return (self.read_byte(register) & mask) >> shift

    def update_bits(self, register: int, mask: int, value: int, shift: int = 0) -> None:
        """! Read-modify-write of one bit field, leaving the other bits untouched.
        @param register (int): The register offset.
        @param mask (int): Mask of the field within the register byte.
        @param value (int): The new field value, before shifting.
        @param shift (int): Position of the field's lowest bit."""
        current = self.read_byte(register)
        self.write_byte(register, (current & ~mask & 0xFF) | ((value << shift) & mask))
