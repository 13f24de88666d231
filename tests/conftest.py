"""
Pytest configuration and shared fixtures
"""

import ipaddress

import pytest

from dhcpcd_conf.config import StaticAddress
from dhcpcd_conf.document import DhcpcdConfiguration


@pytest.fixture
def sample_lines() -> list[str]:
    """Static IPv4 block as found on a typical Raspberry Pi"""
    return [
        "interface eth0",
        "static ip_address=192.168.1.10/24",
        "static routers=192.168.1.1",
        "static domain_name_servers=8.8.8.8 8.8.4.4",
    ]


@pytest.fixture
def stock_dhcpcd_conf() -> str:
    """Distribution dhcpcd.conf with comments and extra directives"""
    return """# A sample configuration for dhcpcd.
# See dhcpcd.conf(5) for details.

# Allow users of this group to interact with dhcpcd via the control socket.
#controlgroup wheel

# Inform the DHCP server of our hostname for DDNS.
hostname

# Use the hardware address of the interface for the Client ID.
clientid

# Persist interface configuration when dhcpcd exits.
persistent

option rapid_commit
option domain_name_servers, domain_name, domain_search, host_name
option classless_static_routes
option ntp_servers
option interface_mtu
require dhcp_server_identifier
slaac private

# Example static IP configuration:
interface eth0
static ip_address=192.168.0.10/24
static ip6_address=fd51:42f8:caae:d92e::ff/64
static routers=192.168.0.1
static domain_name_servers=192.168.0.1 8.8.8.8 fd51:42f8:caae:d92e::1
"""


@pytest.fixture
def conf_file(tmp_path, sample_lines):
    """sample_lines written to a .conf file"""
    path = tmp_path / "dhcpcd.conf"
    path.write_text("\n".join(sample_lines) + "\n")
    return path


@pytest.fixture
def static_configuration() -> DhcpcdConfiguration:
    """Document with a complete IPv4 static block"""
    return DhcpcdConfiguration(
        interface="eth0",
        static_v4=StaticAddress(ipaddress.IPv4Address("192.168.1.10"), 24),
        routers=[ipaddress.ip_address("192.168.1.1")],
        dns_servers=[ipaddress.ip_address("8.8.8.8"), ipaddress.ip_address("8.8.4.4")],
    )

