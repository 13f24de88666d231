"""
Exception hierarchy for dhcpcd.conf loading and saving
"""


class DhcpcdConfError(Exception):
    """Base class for structural configuration file errors"""


class InvalidArgumentError(DhcpcdConfError, ValueError):
    """A required argument (such as the file path) is empty"""


class ConfigNotFoundError(DhcpcdConfError, FileNotFoundError):
    """The configuration file does not exist"""


class InvalidFormatError(DhcpcdConfError, ValueError):
    """The file does not carry the expected configuration extension"""
