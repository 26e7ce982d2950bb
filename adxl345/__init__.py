from .exceptions import (
    InvalidRangeError,
    InvalidDataRateError,
    DeviceIdentityError,
    InvalidAddressError,
)
from .register import Register
from .i2c_address import I2CAddress
from .measurement_range import MeasurementRange
from .data_rate import DataRate
from .fifo_mode import FifoMode
from .interrupt import Interrupt
from .acceleration_data import (
    AccelerationData,
    AccelerationUnits,
    MG2G_SCALE_FACTOR,
    EARTH_GRAVITY_MS2,
)
from .register_device import RegisterDevice
from .adxl345_sensor import ADXL345Sensor, DEVICE_ID
