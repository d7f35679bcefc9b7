"""Abstract base class for DNS providers."""

from abc import ABC, abstractmethod

import httpx

from ddnsync._logging import Timer, get_logger, get_record_extra, reset_record, set_record
from ddnsync.exceptions import UpdateError
from ddnsync.models import (
    IPAddress,
    IPVersion,
    ProviderInfo,
    ProviderName,
    as_address,
    build_domain_name,
)

logger = get_logger(__name__)


class DnsProvider(ABC):
    """Abstract interface for dynamic DNS providers.

    A provider updates one address record at one DNS hosting service.
    Configuration is validated when the provider is constructed and is
    never modified afterwards, so one instance can be reused for every
    update cycle.
    """

    name: ProviderName

    @property
    @abstractmethod
    def domain(self) -> str:
        """Domain name of the zone."""
        ...

    @property
    @abstractmethod
    def host(self) -> str:
        """Record label within the domain ("@" for the apex)."""
        ...

    @property
    @abstractmethod
    def ip_version(self) -> IPVersion:
        """IP version preference of the record."""
        ...

    @property
    def proxied(self) -> bool:
        """Whether traffic to the record is proxied by the provider."""
        return False

    @property
    def info(self) -> ProviderInfo:
        """Display metadata of the provider."""
        from ddnsync.registry import get_provider_info

        return get_provider_info(self.name)

    def build_domain_name(self) -> str:
        """Fully qualified name of the record."""
        return build_domain_name(self.host, self.domain)

    def __str__(self) -> str:
        return (
            f"[domain: {self.domain} | host: {self.host} | "
            f"provider: {self.name} | ip: {self.ip_version}]"
        )

    def update(
        self,
        client: httpx.Client,
        ip: str | IPAddress,
        *,
        timeout: float | None = None,
    ) -> IPAddress:
        """Set the record to the given IP address.

        The request shape (IPv4 or IPv6) is chosen from the IP address
        itself. The update only succeeds once the provider reports the
        requested address for the record.

        Args:
            client: HTTP client used for the outbound calls.
            ip: IP address the record should point to.
            timeout: Per-call deadline in seconds.

        Returns:
            The confirmed IP address, equal to the requested one.

        Raises:
            UpdateError: If the update failed or could not be confirmed.
            ValueError: If ip is not an IP address.
        """
        address = as_address(ip)
        token = set_record(self.name, self.build_domain_name())
        try:
            with Timer() as t:
                try:
                    new_ip = self._update(client, address, timeout)
                except UpdateError as e:
                    logger.error(
                        "Record update failed",
                        extra={
                            "ip": str(address),
                            "kind": e.kind,
                            "error": str(e),
                            "duration_ms": t.elapsed_ms,
                            **get_record_extra(),
                        },
                    )
                    raise
            logger.info(
                "Record updated",
                extra={"ip": str(new_ip), "duration_ms": t.elapsed_ms, **get_record_extra()},
            )
            return new_ip
        finally:
            reset_record(token)

    @abstractmethod
    def _update(
        self,
        client: httpx.Client,
        ip: IPAddress,
        timeout: float | None,
    ) -> IPAddress:
        """Provider-specific update of the record.

        Args:
            client: HTTP client used for the outbound calls.
            ip: IP address the record should point to (IPv4-mapped
                addresses already converted to IPv4).
            timeout: Per-call deadline in seconds.

        Returns:
            The IP address the provider now reports for the record.

        Raises:
            UpdateError: If the update failed or could not be confirmed.
        """
        ...
