"""Convergence check between requested and reported IP addresses."""

import ipaddress

from ddnsync.exceptions import IPMismatch, MalformedReportedIP
from ddnsync.models import IPAddress, as_address


def verify_reported_ip(requested: IPAddress, reported: str) -> IPAddress:
    """Verify the IP reported by a provider equals the requested one.

    Addresses are compared by value, so "2001:db8::1" and
    "2001:0db8:0:0:0:0:0:1" are equal.

    Args:
        requested: The IP address sent to the provider.
        reported: The IP value the provider reports for the record.

    Returns:
        The parsed reported IP address.

    Raises:
        MalformedReportedIP: If the reported value is not an IP address.
        IPMismatch: If the reported IP differs from the requested one.
    """
    try:
        address = as_address(ipaddress.ip_address(reported))
    except ValueError:
        raise MalformedReportedIP(reported) from None

    if address != as_address(requested):
        raise IPMismatch(as_address(requested), address)
    return address


def holds_ip(requested: IPAddress, reported: str) -> bool:
    """Return True if a reported value is an IP equal to the requested one."""
    try:
        verify_reported_ip(requested, reported)
    except (MalformedReportedIP, IPMismatch):
        return False
    return True
