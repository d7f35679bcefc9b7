"""Alibaba Cloud (Aliyun) DNS provider."""

from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field

from ddnsync._logging import get_logger, get_record_extra
from ddnsync.exceptions import RecordNotFound, UnsuccessfulResponse
from ddnsync.models import APEX_HOST, IPAddress, IPVersion, ProviderName, record_type_for
from ddnsync.providers.base import DnsProvider
from ddnsync.providers.settings import parse_settings
from ddnsync.signing import signed_params
from ddnsync.transport import check_status, decode, default_headers, send
from ddnsync.validation import require_fields
from ddnsync.verify import holds_ip, verify_reported_ip

logger = get_logger(__name__)

API_URL = "https://alidns.aliyuncs.com/"
API_VERSION = "2015-01-09"
DEFAULT_REGION = "cn-hangzhou"

# Largest page size accepted by DescribeDomainRecords
PAGE_SIZE = 500


class _Settings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    access_key_id: str = ""
    access_secret: str = ""
    region: str = ""


class _Record(BaseModel):
    record_id: str = Field(alias="RecordId")
    rr: str = Field(alias="RR")
    type: str = Field(alias="Type")
    value: str = Field(default="", alias="Value")


class _Records(BaseModel):
    record: list[_Record] = Field(default_factory=list, alias="Record")


class _DescribeRecordsResponse(BaseModel):
    domain_records: _Records = Field(default_factory=_Records, alias="DomainRecords")


class _UpdateRecordResponse(BaseModel):
    record_id: str = Field(alias="RecordId")


class AliyunProvider(DnsProvider):
    """DNS provider for Alibaba Cloud DNS.

    Updating a record takes three signed calls: the record is looked up
    by host and type, updated by record ID, then read back to confirm its
    new value. If the record already holds the IP, no update is sent.

    Args:
        domain: Domain name.
        host: Record label ("@" for the apex).
        ip_version: IP version preference.
        access_key_id: Access key ID.
        access_secret: Access key secret.
        region: Region ID (default: "cn-hangzhou").

    Raises:
        EmptyCredentialField: If access_key_id or access_secret is empty.
    """

    name = ProviderName.ALIYUN

    def __init__(
        self,
        domain: str,
        host: str,
        ip_version: IPVersion,
        access_key_id: str,
        access_secret: str,
        region: str = DEFAULT_REGION,
    ):
        self._domain = domain
        self._host = host or APEX_HOST
        self._ip_version = ip_version
        self._access_key_id = access_key_id
        self._access_secret = access_secret
        self._region = region or DEFAULT_REGION

        require_fields(
            [
                ("access_key_id", self._access_key_id),
                ("access_secret", self._access_secret),
            ]
        )

    @classmethod
    def from_settings(
        cls,
        data: Any,
        domain: str,
        host: str,
        ip_version: IPVersion,
    ) -> "AliyunProvider":
        """Create a provider from a raw JSON settings payload."""
        settings = parse_settings(_Settings, data)
        return cls(
            domain,
            host,
            ip_version,
            access_key_id=settings.access_key_id,
            access_secret=settings.access_secret,
            region=settings.region,
        )

    @property
    def domain(self) -> str:
        return self._domain

    @property
    def host(self) -> str:
        return self._host

    @property
    def ip_version(self) -> IPVersion:
        return self._ip_version

    @property
    def region(self) -> str:
        return self._region

    def _call(
        self,
        client: httpx.Client,
        action: str,
        params: dict[str, str],
        timeout: float | None,
    ) -> httpx.Response:
        """Send a signed RPC request and check its HTTP status."""
        query = signed_params(
            "GET",
            action,
            params,
            access_key_id=self._access_key_id,
            access_secret=self._access_secret,
            version=API_VERSION,
            region=self._region,
        )
        logger.debug("Calling Aliyun API", extra={"action": action, **get_record_extra()})
        response = send(
            client,
            "GET",
            API_URL,
            timeout=timeout,
            params=query,
            headers=default_headers(),
        )
        check_status(response)
        return response

    def _find_record(
        self,
        client: httpx.Client,
        record_type: str,
        timeout: float | None,
    ) -> _Record:
        """Find the record matching the host, case-insensitively.

        Raises:
            RecordNotFound: If no record has this host and type.
        """
        response = self._call(
            client,
            "DescribeDomainRecords",
            {
                "DomainName": self._domain,
                "RRKeyWord": self._host,
                "Type": record_type,
                "PageSize": str(PAGE_SIZE),
            },
            timeout,
        )
        data = decode(response, _DescribeRecordsResponse)

        host = self._host.casefold()
        for record in data.domain_records.record:
            if record.rr.casefold() == host and record.type.upper() == record_type:
                return record
        raise RecordNotFound(self._host, self._domain, record_type)

    def _update(
        self,
        client: httpx.Client,
        ip: IPAddress,
        timeout: float | None,
    ) -> IPAddress:
        record_type = record_type_for(ip)
        record = self._find_record(client, record_type, timeout)

        if holds_ip(ip, record.value):
            logger.info(
                "Record already up to date",
                extra={"record_id": record.record_id, **get_record_extra()},
            )
            return verify_reported_ip(ip, record.value)

        response = self._call(
            client,
            "UpdateDomainRecord",
            {
                "RecordId": record.record_id,
                "RR": record.rr,
                "Type": record_type,
                "Value": str(ip),
            },
            timeout,
        )
        updated = decode(response, _UpdateRecordResponse)
        if updated.record_id != record.record_id:
            raise UnsuccessfulResponse(
                f"updated record {updated.record_id!r} instead of {record.record_id!r}"
            )

        response = self._call(
            client,
            "DescribeDomainRecordInfo",
            {"RecordId": record.record_id},
            timeout,
        )
        info = decode(response, _Record)
        return verify_reported_ip(ip, info.value)
