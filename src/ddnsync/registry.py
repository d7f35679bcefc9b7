"""Provider registry.

Maps provider identifiers to their constructors and display metadata.
"""

from typing import Any

from ddnsync.models import IPVersion, ProviderInfo, ProviderName
from ddnsync.providers.aliyun import AliyunProvider
from ddnsync.providers.base import DnsProvider
from ddnsync.providers.dondominio import DonDominioProvider

PROVIDERS: dict[ProviderName, ProviderInfo] = {
    info.name: info
    for info in (
        ProviderInfo(
            name=ProviderName.ALIYUN,
            display_name="Aliyun",
            homepage="https://www.aliyun.com/",
            factory=AliyunProvider.from_settings,
        ),
        ProviderInfo(
            name=ProviderName.DONDOMINIO,
            display_name="DonDominio",
            homepage="https://www.dondominio.com/",
            factory=DonDominioProvider.from_settings,
        ),
    )
}


def get_provider_info(name: str) -> ProviderInfo:
    """Look up a provider by identifier, case-insensitively.

    Raises:
        ValueError: If the provider is not supported.
    """
    if not isinstance(name, str):
        raise ValueError(f"Unsupported provider: {name!r}")
    try:
        return PROVIDERS[ProviderName(name.strip().lower())]
    except ValueError:
        raise ValueError(f"Unsupported provider: {name}") from None


def new_provider(
    name: str,
    data: Any,
    domain: str,
    host: str = "",
    ip_version: str | IPVersion = IPVersion.IPV4,
) -> DnsProvider:
    """Create a validated provider.

    Args:
        name: Provider identifier (e.g. "dondominio").
        data: Raw provider settings (JSON object as str/bytes or a mapping).
        domain: Domain name.
        host: Record label; empty means the bare domain ("@").
        ip_version: IP version preference.

    Returns:
        A provider ready to update its record.

    Raises:
        ValueError: If the provider or the IP version is not supported.
        ProviderConfigError: If the provider settings are invalid.
        pydantic.ValidationError: If the settings payload cannot be decoded.
    """
    info = get_provider_info(name)
    return info.factory(data, domain, host, IPVersion.parse(ip_version))
