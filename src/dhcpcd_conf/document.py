"""
dhcpcd.conf document model with line-based loader and renderer
"""

from __future__ import annotations

import errno
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from .config import (
    CONF_EXTENSION,
    DEFAULT_SETTINGS,
    InterfaceName,
    IPAddress,
    StaticAddress,
    parse_address,
)
from .errors import ConfigNotFoundError, InvalidArgumentError, InvalidFormatError

logger = logging.getLogger(__name__)


def _validate_path(filepath: str | Path, must_exist: bool) -> Path:
    """
    Check a configuration path before any content is touched.

    Raises:
        InvalidArgumentError: If the path is empty or whitespace-only
        ConfigNotFoundError: If must_exist and the file is missing
        InvalidFormatError: If the suffix is not .conf
    """
    if filepath is None or not str(filepath).strip():
        raise InvalidArgumentError("Configuration file path must not be empty")

    path = Path(filepath)
    if must_exist and not path.is_file():
        raise ConfigNotFoundError(errno.ENOENT, "Configuration file not found", str(path))
    if path.suffix != CONF_EXTENSION:
        raise InvalidFormatError(
            f"Wrong file type for {path}: expected '{CONF_EXTENSION}', got '{path.suffix or '(none)'}'"
        )
    return path


@dataclass
class DhcpcdConfiguration:
    """
    In-memory view of a dhcpcd.conf file.

    Only the static interface block is modelled. Everything else in a loaded
    file is replaced by DEFAULT_SETTINGS when the document is rendered.

    Attributes:
        interface: Interface the static block applies to (e.g., eth0)
        static_v4: Static IPv4 address and prefix
        static_v6: Static IPv6 address and prefix
        routers: Gateway addresses in file order
        dns_servers: DNS server addresses in file order
        ignored_lines: Directives seen on load that are not modelled
        warnings: Tokens dropped on load, one message each
    """
    interface: Optional[InterfaceName] = None
    static_v4: Optional[StaticAddress] = None
    static_v6: Optional[StaticAddress] = None
    routers: list[IPAddress] = field(default_factory=list)
    dns_servers: list[IPAddress] = field(default_factory=list)
    ignored_lines: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    # -- accessors -----------------------------------------------------

    def set_static_v4(self, address: IPAddress | str, prefix_length: int) -> None:
        """Set the static IPv4 address; strings are parsed strictly"""
        if isinstance(address, str):
            address = StaticAddress.parse(f"{address}/{prefix_length}", 4).address
        if address.version != 4:
            raise ValueError(f"Not an IPv4 address: {address}")
        self.static_v4 = StaticAddress(address, prefix_length)

    def set_static_v6(self, address: IPAddress | str, prefix_length: int) -> None:
        """Set the static IPv6 address; strings are parsed strictly"""
        if isinstance(address, str):
            address = StaticAddress.parse(f"{address}/{prefix_length}", 6).address
        if address.version != 6:
            raise ValueError(f"Not an IPv6 address: {address}")
        self.static_v6 = StaticAddress(address, prefix_length)

    def add_router(self, address: IPAddress | str) -> None:
        if isinstance(address, str):
            address = parse_address(address)
        self.routers.append(address)

    def add_dns_server(self, address: IPAddress | str) -> None:
        if isinstance(address, str):
            address = parse_address(address)
        self.dns_servers.append(address)

    def clear_static(self) -> None:
        """Drop every static setting so the interface falls back to DHCP"""
        self.interface = None
        self.static_v4 = None
        self.static_v6 = None
        self.routers.clear()
        self.dns_servers.clear()

    def has_valid_static_settings(self) -> bool:
        """
        Check whether the static block is complete enough to be written.

        Returns:
            True if an interface, at least one address, a router and a DNS
            server are all present
        """
        return (
            bool(self.interface)
            and (self.static_v4 is not None or self.static_v6 is not None)
            and len(self.routers) > 0
            and len(self.dns_servers) > 0
        )

    # -- rendering -----------------------------------------------------

    def get_lines(self) -> list[str]:
        """
        Render the document as dhcpcd.conf lines.

        Returns:
            DEFAULT_SETTINGS followed by the static block when it is valid
        """
        lines = list(DEFAULT_SETTINGS)

        if self.has_valid_static_settings():
            lines.append(f"interface {self.interface}")
            if self.static_v4 is not None:
                lines.append(f"static ip_address={self.static_v4}")
            if self.static_v6 is not None:
                lines.append(f"static ip6_address={self.static_v6}")
            lines.append(f"static routers={' '.join(str(ip) for ip in self.routers)}")
            lines.append(f"static domain_name_servers={' '.join(str(ip) for ip in self.dns_servers)}")
        elif self.interface or self.static_v4 or self.static_v6 or self.routers or self.dns_servers:
            logger.debug("Static settings incomplete, writing defaults only")

        return lines

    def to_text(self) -> str:
        """Rendered lines joined into file content"""
        return "\n".join(self.get_lines()) + "\n"

    def save(self, filepath: str | Path) -> Path:
        """
        Write the rendered document to a .conf file.

        Args:
            filepath: Destination path (must end in .conf)

        Returns:
            Path that was written

        Raises:
            InvalidArgumentError: If filepath is blank
            InvalidFormatError: If filepath does not end in .conf
        """
        path = _validate_path(filepath, must_exist=False)
        lines = self.get_lines()
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        logger.info(f"Wrote {len(lines)} lines to {path}")
        return path

    # -- loading -------------------------------------------------------

    @classmethod
    def from_file(cls, filepath: str | Path) -> DhcpcdConfiguration:
        """
        Load a document from a dhcpcd.conf file.

        Raises:
            InvalidArgumentError: If filepath is blank
            ConfigNotFoundError: If the file does not exist
            InvalidFormatError: If the file does not end in .conf
        """
        path = _validate_path(filepath, must_exist=True)
        logger.debug(f"Loading {path}")
        text = path.read_text(encoding="utf-8-sig", errors="replace")
        return cls.from_lines(text.splitlines())

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> DhcpcdConfiguration:
        """Parse a document from already-read lines, dropping bad tokens"""
        configuration = cls()
        for line in lines:
            if not line.strip() or line.startswith("#") or " " not in line:
                continue
            configuration._parse_line(line.strip())
        return configuration

    def _parse_line(self, line: str) -> None:
        key, sep, value = line.partition(" ")
        if not sep:
            # leading whitespace only, e.g. "  hostname"
            self.ignored_lines.append(line)
            return

        value = value.strip()
        match key:
            case "interface":
                self.interface = value
            case "static":
                self._parse_static(line, value)
            case _:
                self.ignored_lines.append(line)

    def _parse_static(self, line: str, value: str) -> None:
        subkey, sep, payload = value.partition("=")
        if not sep:
            self._drop(f"Static directive without '=': {line!r}")
            return

        payload = payload.strip()
        match subkey:
            case "ip_address":
                address = self._parse_static_address(payload, 4)
                if address is not None:
                    self.static_v4 = address
            case "ip6_address":
                address = self._parse_static_address(payload, 6)
                if address is not None:
                    self.static_v6 = address
            case "routers":
                self.routers.extend(self._parse_address_list(payload, subkey))
            case "domain_name_servers":
                self.dns_servers.extend(self._parse_address_list(payload, subkey))
            case _:
                self.ignored_lines.append(line)

    def _parse_static_address(self, payload: str, version: int) -> Optional[StaticAddress]:
        try:
            return StaticAddress.parse(payload, version)
        except ValueError as e:
            self._drop(f"Skipping IPv{version} static address {payload!r}: {e}")
            return None

    def _parse_address_list(self, payload: str, subkey: str) -> list[IPAddress]:
        addresses: list[IPAddress] = []
        for token in payload.split():
            try:
                addresses.append(parse_address(token))
            except ValueError:
                self._drop(f"Skipping invalid address {token!r} in static {subkey}")
        return addresses

    def _drop(self, message: str) -> None:
        self.warnings.append(message)
        logger.warning(message)


def load(filepath: str | Path) -> DhcpcdConfiguration:
    """Load a dhcpcd.conf file into a DhcpcdConfiguration"""
    return DhcpcdConfiguration.from_file(filepath)


def render(configuration: DhcpcdConfiguration) -> list[str]:
    """Render a DhcpcdConfiguration as dhcpcd.conf lines"""
    return configuration.get_lines()


def save(configuration: DhcpcdConfiguration, filepath: str | Path) -> Path:
    """Write a DhcpcdConfiguration to a .conf file"""
    return configuration.save(filepath)
