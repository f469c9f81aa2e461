class DavisBindError(ValueError):
    """Base class for input validation failures raised by davisbind."""


class ConfigFormatError(DavisBindError):
    """A binding configuration string or item type was rejected."""


class DecodeError(DavisBindError):
    """A raw sensor payload could not be decoded."""
