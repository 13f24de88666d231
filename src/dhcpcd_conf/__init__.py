"""
dhcpcd.conf Configuration Package
Load, edit and regenerate static interface settings for dhcpcd

Version 1.0.0 - Python 3.12+ with modern type system
"""

__version__ = "1.0.0"

from .config import StaticAddress, DEFAULT_SETTINGS
from .document import DhcpcdConfiguration, load, render, save
from .errors import (
    DhcpcdConfError,
    InvalidArgumentError,
    ConfigNotFoundError,
    InvalidFormatError,
)

__all__ = [
    "StaticAddress",
    "DEFAULT_SETTINGS",
    "DhcpcdConfiguration",
    "load",
    "render",
    "save",
    "DhcpcdConfError",
    "InvalidArgumentError",
    "ConfigNotFoundError",
    "InvalidFormatError",
]
