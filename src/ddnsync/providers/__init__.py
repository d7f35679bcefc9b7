"""Dynamic DNS providers."""

from ddnsync.providers.aliyun import AliyunProvider
from ddnsync.providers.base import DnsProvider
from ddnsync.providers.dondominio import DonDominioProvider

__all__ = ["AliyunProvider", "DnsProvider", "DonDominioProvider"]
