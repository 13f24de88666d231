"""
Tests for configuration models
"""

import ipaddress

import pytest
from dhcpcd_conf.config import (
    DEFAULT_SETTINGS,
    StaticAddress,
    parse_address,
    parse_prefix_length,
)


class TestStaticAddress:
    """Test StaticAddress dataclass"""

    def test_parse_ipv4(self):
        """Test parsing an IPv4 address with prefix"""
        static = StaticAddress.parse("192.168.1.10/24", 4)
        assert static.address == ipaddress.IPv4Address("192.168.1.10")
        assert static.prefix_length == 24
        assert static.version == 4

    def test_parse_ipv6(self):
        """Test parsing an IPv6 address with prefix"""
        static = StaticAddress.parse("fd00::10/64", 6)
        assert static.address == ipaddress.IPv6Address("fd00::10")
        assert static.prefix_length == 64
        assert static.version == 6

    def test_str_is_canonical(self):
        """Test string form uses canonical address text"""
        static = StaticAddress.parse("FD00:0:0:0::10/64", 6)
        assert str(static) == "fd00::10/64"

    def test_ipv6_rejected_for_v4(self):
        """Test IPv6 text does not parse as an IPv4 static address"""
        with pytest.raises(ValueError):
            StaticAddress.parse("fd00::10/64", 4)

    def test_missing_prefix(self):
        """Test address without prefix raises ValueError"""
        with pytest.raises(ValueError, match="Missing prefix"):
            StaticAddress.parse("192.168.1.10", 4)

    def test_trailing_segments_ignored(self):
        """Test only the first segment after the address is the prefix"""
        static = StaticAddress.parse("192.168.1.10/24/extra", 4)
        assert str(static) == "192.168.1.10/24"

    def test_non_ascii_prefix_rejected(self):
        with pytest.raises(ValueError, match="Invalid prefix length"):
            StaticAddress.parse("192.168.1.10/٢٤", 4)

    def test_prefix_out_of_byte_range(self):
        """Test prefix above 255 raises ValueError"""
        with pytest.raises(ValueError, match="out of range"):
            StaticAddress.parse("192.168.1.10/256", 4)

    def test_prefix_in_byte_range_accepted(self):
        """Test prefix up to 255 is kept even when larger than the address width"""
        static = StaticAddress.parse("192.168.1.10/255", 4)
        assert static.prefix_length == 255

    def test_unsupported_version(self):
        """Test unknown IP version raises ValueError"""
        with pytest.raises(ValueError, match="Unsupported IP version"):
            StaticAddress.parse("192.168.1.10/24", 5)

    def test_constructor_validates_prefix(self):
        """Test direct construction rejects negative prefix"""
        with pytest.raises(ValueError):
            StaticAddress(ipaddress.IPv4Address("10.0.0.1"), -1)

    def test_is_frozen(self):
        """Test that StaticAddress is immutable"""
        static = StaticAddress.parse("10.0.0.1/8", 4)
        with pytest.raises(AttributeError):
            static.prefix_length = 16


class TestParsers:
    """Test scalar parsing helpers"""

    @pytest.mark.parametrize("text,expected", [("0", 0), ("24", 24), (" 64 ", 64), ("255", 255)])
    def test_prefix_length_valid(self, text, expected):
        assert parse_prefix_length(text) == expected

    @pytest.mark.parametrize("text", ["", "-1", "abc", "2.4", "256", "٢٤", "２４", "+24"])
    def test_prefix_length_invalid(self, text):
        with pytest.raises(ValueError):
            parse_prefix_length(text)

    def test_parse_address_v4_and_v6(self):
        """Test addresses of either family are accepted"""
        assert parse_address("10.0.0.1").version == 4
        assert parse_address("2001:db8::1").version == 6

    def test_parse_address_invalid(self):
        with pytest.raises(ValueError):
            parse_address("bogus")


class TestDefaultSettings:
    """Test fixed default directive list"""

    def test_default_count(self):
        assert len(DEFAULT_SETTINGS) == 10

    def test_default_order(self):
        """Test defaults start with hostname and end with slaac"""
        assert DEFAULT_SETTINGS[0] == "hostname"
        assert DEFAULT_SETTINGS[3] == "option rapid_commit"
        assert DEFAULT_SETTINGS[-1] == "slaac private"
