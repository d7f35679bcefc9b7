"""ddnsync - keep DNS records in sync with an IP address across DNS providers."""

from ddnsync._version import __version__
from ddnsync.config import build_providers, load_config
from ddnsync.exceptions import DdnsError, ErrorKind, ProviderConfigError, UpdateError
from ddnsync.models import IPVersion, ProviderName
from ddnsync.providers.base import DnsProvider
from ddnsync.registry import new_provider

__all__ = [
    "DdnsError",
    "DnsProvider",
    "ErrorKind",
    "IPVersion",
    "ProviderConfigError",
    "ProviderName",
    "UpdateError",
    "__version__",
    "build_providers",
    "load_config",
    "new_provider",
]
