#
#   ADXL345 3-Axis Accelerometer
#   Driver API for the I2C register interface
#

# Standard library imports
import logging

# Third party imports
from smbus2 import SMBus

# ADXL345 module imports
from .exceptions import DeviceIdentityError, InvalidDataRateError, InvalidRangeError
from .register import Register
from .register_device import RegisterDevice
from .i2c_address import I2CAddress
from .measurement_range import MeasurementRange
from .data_rate import DataRate
from .fifo_mode import FifoMode
from .interrupt import Interrupt
from .acceleration_data import AccelerationData, SAMPLE_STRUCT

DEVICE_ID = 0xE5

# POWER_CTL
POWER_CTL_MEASURE = 0b00001000

# DATA_FORMAT
DATA_FORMAT_INT_INVERT = 0b00100000
DATA_FORMAT_INT_INVERT_SHIFT = 5
DATA_FORMAT_FULL_RES = 0b00001000
DATA_FORMAT_RANGE_MASK = 0b00000011

# BW_RATE
BW_RATE_RATE_MASK = 0b00001111

# FIFO_CTL
FIFO_CTL_MODE_MASK = 0b11000000
FIFO_CTL_MODE_SHIFT = 6
FIFO_CTL_TRIGGER_MASK = 0b00100000
FIFO_CTL_TRIGGER_SHIFT = 5
FIFO_CTL_SAMPLES_MASK = 0b00011111

# FIFO_STATUS
FIFO_STATUS_TRIG_MASK = 0b10000000
FIFO_STATUS_TRIG_SHIFT = 7
FIFO_STATUS_ENTRIES_MASK = 0b00111111


class ADXL345Sensor(RegisterDevice):
    """! Represents an ADXL345 accelerometer on an I2C bus.

    Every multi-field register is updated by read-modify-write: only the
    target bits change, the rest of the byte is written back as read.

    @param bus (SMBus): An already open bus. If None, bus_number is opened.
    @param bus_number (int): I2C bus to open when no bus is given. Defaults to 1.
    @param address (int): I2CAddress.ALT_GROUNDED (default) or I2CAddress.ALT_HIGH.

    @exception OSError: On any failed bus transaction.

    Example usage:
      - sensor = ADXL345Sensor(bus_number=1)
      - sensor.initialize()
      - sensor.set_measurement_range(MeasurementRange.RANGE_4_G)
      - acceleration = sensor.get_acceleration()
    """

    def __init__(
        self,
        bus: SMBus = None,
        bus_number: int = 1,
        address: int = I2CAddress.ALT_GROUNDED,
    ) -> None:
        super().__init__(bus=bus, bus_number=bus_number, address=address)
        self.__log = logging.getLogger(__class__.__name__)

    # ----- Identity & power ----- #
    def get_device_id(self) -> int:
        """! Gets the DEVID register, 0xE5 for an ADXL345."""
        return self.read_byte(Register.DEVID)

    def initialize(self) -> int:
        """! Checks the device identity and enables measurement.
        @return int: The device ID.
        @exception DeviceIdentityError: If DEVID does not hold 0xE5."""
        device_id = self.get_device_id()
        if device_id != DEVICE_ID:
            self.__log.warning(f"Unexpected device ID 0x{device_id:02x} at 0x{self.address:02x}")
            raise DeviceIdentityError(f"Unexpected ADXL345 device ID: 0x{device_id:02x}")
        self.enable_measurement(True)
        self.__log.info(
            f"ADXL345 initialized on bus {self.bus_number} at 0x{self.address:02x}"
        )
        return device_id

    def get_power_control(self) -> int:
        return self.read_byte(Register.POWER_CTL)

    def set_power_control(self, value: int) -> None:
        self.write_byte(Register.POWER_CTL, value)

    def enable_measurement(self, enable: bool = True) -> None:
        """! Switches between measurement and standby mode.

        Enabling writes the whole POWER_CTL byte as "measure on". Disabling
        clears only the Measure bit.

        @param enable (bool): True for measurement mode, False for standby.
        """
        if enable:
            self.set_power_control(POWER_CTL_MEASURE)
        else:
            self.update_bits(Register.POWER_CTL, POWER_CTL_MEASURE, 0)

    # ----- Measurement configuration ----- #
    def set_measurement_range(self, measurement_range: MeasurementRange) -> None:
        """! Sets the g range in DATA_FORMAT bits 0-1 and turns on FULL_RES.

        FULL_RES keeps the scale at 4 mg/LSB in every range, which is what
        get_acceleration converts with. INT_INVERT and the other DATA_FORMAT
        bits are kept.

        @param measurement_range (MeasurementRange): One of the four range codes.
        @exception InvalidRangeError: For None or any value that is not a range code.
        """
        try:
            measurement_range = MeasurementRange(measurement_range)
        except (ValueError, TypeError):
            raise InvalidRangeError("Invalid range")
        self.update_bits(
            Register.DATA_FORMAT,
            DATA_FORMAT_RANGE_MASK | DATA_FORMAT_FULL_RES,
            DATA_FORMAT_FULL_RES | measurement_range,
        )

    def get_measurement_range(self) -> MeasurementRange:
        return MeasurementRange(self.read_bits(Register.DATA_FORMAT, DATA_FORMAT_RANGE_MASK))

    def set_data_rate(self, rate: DataRate) -> None:
        """! Writes the full BW_RATE byte.

        NOTE: Only None is rejected. Any other value is written as-is, so the
        LOW_POWER bit can be set here along with the rate code.

        @param rate (DataRate): The rate code, optionally OR'd with other BW_RATE bits.
        @exception InvalidDataRateError: If rate is None.
        """
        if rate is None:
            raise InvalidDataRateError("Invalid data rate")
        self.write_byte(Register.BW_RATE, rate)

    def get_data_rate(self) -> DataRate:
        return DataRate(self.read_bits(Register.BW_RATE, BW_RATE_RATE_MASK))

    def set_offset_x(self, offset: int) -> None:
        """! Sets the X-axis offset (15.6 mg/LSB, two's complement)."""
        self.write_byte(Register.OFSX, offset & 0xFF)

    def set_offset_y(self, offset: int) -> None:
        """! Sets the Y-axis offset (15.6 mg/LSB, two's complement)."""
        self.write_byte(Register.OFSY, offset & 0xFF)

    def set_offset_z(self, offset: int) -> None:
        """! Sets the Z-axis offset (15.6 mg/LSB, two's complement)."""
        self.write_byte(Register.OFSZ, offset & 0xFF)

    # ----- FIFO ----- #
    def get_fifo_ctl(self) -> int:
        return self.read_byte(Register.FIFO_CTL)

    def set_fifo_ctl(self, value: int) -> None:
        self.write_byte(Register.FIFO_CTL, value)

    def get_fifo_ctl_mode(self) -> FifoMode:
        return FifoMode(
            self.read_bits(Register.FIFO_CTL, FIFO_CTL_MODE_MASK, FIFO_CTL_MODE_SHIFT)
        )

    def set_fifo_ctl_mode(self, mode: FifoMode) -> None:
        """! Sets FIFO_MODE (bits 6-7) of FIFO_CTL.
        @param mode (FifoMode): Bypass, FIFO, stream or trigger."""
        self.update_bits(Register.FIFO_CTL, FIFO_CTL_MODE_MASK, mode, FIFO_CTL_MODE_SHIFT)

    def get_fifo_ctl_samples(self) -> int:
        return self.read_bits(Register.FIFO_CTL, FIFO_CTL_SAMPLES_MASK)

    def set_fifo_ctl_samples(self, samples: int) -> None:
        """! Sets the watermark sample count (bits 0-4) of FIFO_CTL.
        @param samples (int): Watermark level, 0-31."""
        self.update_bits(Register.FIFO_CTL, FIFO_CTL_SAMPLES_MASK, samples)

    def get_fifo_ctl_trigger(self) -> int:
        return self.read_bits(Register.FIFO_CTL, FIFO_CTL_TRIGGER_MASK, FIFO_CTL_TRIGGER_SHIFT)

    def set_fifo_ctl_trigger(self, trigger: int) -> None:
        """! Sets the trigger bit (bit 5) of FIFO_CTL.
        @param trigger (int): 0 links the trigger event to INT1, 1 to INT2."""
        self.update_bits(
            Register.FIFO_CTL, FIFO_CTL_TRIGGER_MASK, trigger, FIFO_CTL_TRIGGER_SHIFT
        )

    def get_fifo_status(self) -> int:
        return self.read_byte(Register.FIFO_STATUS)

    def get_fifo_status_entries(self) -> int:
        """! Gets the number of samples held in the FIFO (0-32)."""
        return self.read_bits(Register.FIFO_STATUS, FIFO_STATUS_ENTRIES_MASK)

    def get_fifo_status_trig(self) -> int:
        """! Gets the FIFO_TRIG bit, 1 if a trigger event has occurred."""
        return self.read_bits(
            Register.FIFO_STATUS, FIFO_STATUS_TRIG_MASK, FIFO_STATUS_TRIG_SHIFT
        )

    def read_fifo_samples(self, raw_g_units: bool = False) -> list[AccelerationData]:
        """! Drains the samples currently held in the FIFO.

        Each acceleration read pops one entry, so the entry count is read once
        and that many samples are read in order.

        @param raw_g_units (bool): Report in g instead of m/s^2. Defaults to False.
        @return list[AccelerationData]: The samples, oldest first.
        """
        entries = self.get_fifo_status_entries()
        self.__log.debug(f"Reading {entries} FIFO entries")
        return [self.get_acceleration(raw_g_units) for _ in range(entries)]

    # ----- Interrupts ----- #
    def get_int_enable(self) -> Interrupt:
        return Interrupt(self.read_byte(Register.INT_ENABLE))

    def set_int_enable(self, mask: int) -> None:
        """! Writes the whole INT_ENABLE byte.
        @param mask (int): Interrupt flags OR'd together, e.g. Interrupt.WATERMARK | Interrupt.OVERRUN."""
        self.write_byte(Register.INT_ENABLE, mask)

    def get_int_map(self) -> Interrupt:
        return Interrupt(self.read_byte(Register.INT_MAP))

    def set_int_map(self, mask: int) -> None:
        """! Writes the whole INT_MAP byte. Set bits route to INT2, clear bits to INT1.
        @param mask (int): Interrupt flags OR'd together."""
        self.write_byte(Register.INT_MAP, mask)

    def get_int_source(self) -> Interrupt:
        return Interrupt(self.read_byte(Register.INT_SOURCE))

    def set_int_active_high(self) -> None:
        """! Clears INT_INVERT so the interrupt pins are active high."""
        self.update_bits(Register.DATA_FORMAT, DATA_FORMAT_INT_INVERT, 0)

    def set_int_active_low(self) -> None:
        """! Sets INT_INVERT so the interrupt pins are active low."""
        self.update_bits(
            Register.DATA_FORMAT, DATA_FORMAT_INT_INVERT, 1, DATA_FORMAT_INT_INVERT_SHIFT
        )

    # ----- Data ----- #
    def get_acceleration(self, raw_g_units: bool = False) -> AccelerationData:
        """! Reads X, Y and Z in one six byte transaction.
        @param raw_g_units (bool): Report in g instead of m/s^2. Defaults to False.
        @return AccelerationData: The acceleration sample.
        """
        data = self.read_block(Register.DATAX0, SAMPLE_STRUCT.size)
        return AccelerationData.from_bytes(data, raw_g_units)
