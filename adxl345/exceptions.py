# Local module defined exceptions
class InvalidRangeError(Exception):
    """! Exception raised when a measurement range is not one of the MeasurementRange codes."""

    pass


class InvalidDataRateError(Exception):
    """! Exception raised when no data rate is given."""

    pass


class DeviceIdentityError(Exception):
    """! Exception raised when the DEVID register does not hold the ADXL345 identity."""

    pass


class InvalidAddressError(Exception):
    """! Exception raised when the I2C address is not one the ALT ADDRESS pin can select."""

    pass
