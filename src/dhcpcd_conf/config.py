"""
Configuration models and type definitions
Python 3.12+ with modern type system
"""

import ipaddress
from dataclasses import dataclass
from typing import TypeAlias

InterfaceName: TypeAlias = str
IPAddress: TypeAlias = ipaddress.IPv4Address | ipaddress.IPv6Address

# Suffix a dhcpcd configuration file must carry to be loaded or saved
CONF_EXTENSION = ".conf"

# Where dhcpcd reads its configuration on most distributions
DEFAULT_CONF_PATH = "/etc/dhcpcd.conf"

# Prefix lengths are stored in a single unsigned byte
MAX_PREFIX_LENGTH = 255

# Lines always written ahead of any static block, in this order
DEFAULT_SETTINGS: tuple[str, ...] = (
    "hostname",
    "clientid",
    "persistent",
    "option rapid_commit",
    "option domain_name_servers, domain_name, domain_search, host_name",
    "option classless_static_routes",
    "option ntp_servers",
    "option interface_mtu",
    "require dhcp_server_identifier",
    "slaac private",
)


def parse_prefix_length(text: str) -> int:
    """
    Parse a prefix length the way dhcpcd.conf stores it.

    Raises:
        ValueError: If text is not a decimal integer in 0-255
    """
    value = text.strip()
    if not (value.isascii() and value.isdigit()):
        raise ValueError(f"Invalid prefix length: {text!r}")
    prefix = int(value)
    if prefix > MAX_PREFIX_LENGTH:
        raise ValueError(f"Prefix length out of range: {prefix}")
    return prefix


def parse_address(text: str) -> IPAddress:
    """Parse an IPv4 or IPv6 address, raising ValueError on bad input"""
    return ipaddress.ip_address(text.strip())


@dataclass(frozen=True, slots=True)
class StaticAddress:
    """
    Immutable static address assignment for an interface.

    Attributes:
        address: IPv4 or IPv6 host address (e.g., 192.168.1.10)
        prefix_length: Subnet prefix length (e.g., 24)

    Raises:
        ValueError: If prefix_length does not fit in a byte
    """
    address: IPAddress
    prefix_length: int

    def __post_init__(self) -> None:
        """Validate prefix range"""
        if not 0 <= self.prefix_length <= MAX_PREFIX_LENGTH:
            raise ValueError(f"Prefix length out of range: {self.prefix_length}")

    def __str__(self) -> str:
        return f"{self.address}/{self.prefix_length}"

    @property
    def version(self) -> int:
        """IP version of the address (4 or 6)"""
        return self.address.version

    @classmethod
    def parse(cls, text: str, version: int) -> "StaticAddress":
        """
        Parse ``addr/prefix`` text for the given IP version.

        Args:
            text: Address with prefix (e.g., 192.168.1.10/24)
            version: 4 or 6

        Returns:
            Parsed StaticAddress

        Raises:
            ValueError: If the address, the prefix or the version is invalid
        """
        # segments after the prefix are ignored
        parts = text.strip().split("/")
        if len(parts) < 2:
            raise ValueError(f"Missing prefix length in {text!r}")
        address_text, prefix_text = parts[0], parts[1]

        match version:
            case 4:
                address: IPAddress = ipaddress.IPv4Address(address_text)
            case 6:
                address = ipaddress.IPv6Address(address_text)
            case _:
                raise ValueError(f"Unsupported IP version: {version}")

        return cls(address, parse_prefix_length(prefix_text))
