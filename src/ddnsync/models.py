"""Shared types for DNS providers."""

import ipaddress
from collections.abc import Callable
from enum import StrEnum
from typing import TYPE_CHECKING, Any, NamedTuple

if TYPE_CHECKING:
    from ddnsync.providers.base import DnsProvider

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address

# Host value denoting the bare domain (zone apex)
APEX_HOST = "@"
WILDCARD_HOST = "*"


class IPVersion(StrEnum):
    """IP version preference for a record."""

    IPV4 = "ipv4"
    IPV6 = "ipv6"
    IPV4_OR_IPV6 = "ipv4 or ipv6"

    @classmethod
    def parse(cls, value: "str | IPVersion") -> "IPVersion":
        """Parse an IP version preference, case-insensitively.

        Raises:
            ValueError: If the value is not a known preference.
        """
        if isinstance(value, IPVersion):
            return value
        if not isinstance(value, str):
            raise ValueError(f"IP version {value!r} is not valid")
        normalized = " ".join(value.strip().lower().split())
        if not normalized:
            return cls.IPV4
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"IP version {value!r} is not valid") from None


class RecordType(StrEnum):
    """DNS record types for address records."""

    A = "A"
    AAAA = "AAAA"


class ProviderName(StrEnum):
    """Identifiers of the supported providers."""

    ALIYUN = "aliyun"
    DONDOMINIO = "dondominio"


ProviderFactory = Callable[[Any, str, str, IPVersion], "DnsProvider"]


class ProviderInfo(NamedTuple):
    """Registry entry and display metadata for a provider."""

    name: ProviderName
    display_name: str
    homepage: str
    factory: ProviderFactory


def as_address(ip: "str | IPAddress") -> IPAddress:
    """Coerce a value to an IP address object.

    IPv4-mapped IPv6 addresses are returned in their IPv4 form.

    Raises:
        ValueError: If the value is not an IP address.
    """
    address = ipaddress.ip_address(ip) if isinstance(ip, str) else ip
    if isinstance(address, ipaddress.IPv6Address) and address.ipv4_mapped is not None:
        return address.ipv4_mapped
    return address


def ip_family(ip: IPAddress) -> int:
    """Return 4 if the address fits in 32 bits, 6 otherwise."""
    return as_address(ip).version


def record_type_for(ip: IPAddress) -> RecordType:
    """Return the address record type matching the IP family."""
    return RecordType.A if ip_family(ip) == 4 else RecordType.AAAA


def build_domain_name(host: str, domain: str) -> str:
    """Build the fully qualified name of a record.

    Args:
        host: Record label, "@" for the apex or "*" for a wildcard.
        domain: Zone domain name.
    """
    if host == APEX_HOST:
        return domain
    if host == WILDCARD_HOST:
        return f"any.{domain}"
    return f"{host}.{domain}"
