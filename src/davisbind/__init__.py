from .version import __version__
from .errors import DavisBindError, ConfigFormatError, DecodeError

__all__ = ["__version__", "DavisBindError", "ConfigFormatError", "DecodeError"]
