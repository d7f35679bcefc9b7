"""DonDominio dynamic DNS provider."""

from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field

from ddnsync._logging import get_logger, get_record_extra
from ddnsync.exceptions import UnparseableResponse, UnsuccessfulResponse
from ddnsync.models import APEX_HOST, IPAddress, IPVersion, ProviderName, ip_family
from ddnsync.providers.base import DnsProvider
from ddnsync.providers.settings import parse_settings
from ddnsync.transport import check_status, decode, default_headers, send
from ddnsync.validation import require_apex_host, require_fields
from ddnsync.verify import verify_reported_ip

logger = get_logger(__name__)

API_URL = "https://simple-api.dondominio.net/"


class _Settings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    username: str = ""
    password: str = ""
    name: str = ""


class _GlueRecord(BaseModel):
    ipv4: str | None = None
    ipv6: str | None = None


class _ResponseData(BaseModel):
    glue_records: list[_GlueRecord] = Field(default_factory=list, alias="gluerecords")


class _Response(BaseModel):
    success: bool
    error_code: int | None = Field(default=None, alias="errorCode")
    error_code_msg: str | None = Field(default=None, alias="errorCodeMsg")
    response_data: _ResponseData | None = Field(default=None, alias="responseData")


class DonDominioProvider(DnsProvider):
    """DNS provider for DonDominio's simple API.

    DonDominio only supports updating the glue records of the domain
    itself, so the host must be "@".

    Args:
        domain: Domain name.
        host: Record label, must be "@".
        ip_version: IP version preference.
        username: API user.
        password: API password.
        name: Name of the glue record entry.

    Raises:
        EmptyCredentialField: If username, password or name is empty.
        InvalidHostConstraint: If host is not "@".
    """

    name = ProviderName.DONDOMINIO

    def __init__(
        self,
        domain: str,
        host: str,
        ip_version: IPVersion,
        username: str,
        password: str,
        name: str,
    ):
        self._domain = domain
        self._host = host or APEX_HOST
        self._ip_version = ip_version
        self._username = username
        self._password = password
        self._name = name

        require_fields(
            [
                ("username", self._username),
                ("password", self._password),
                ("name", self._name),
            ]
        )
        require_apex_host(self._host)

    @classmethod
    def from_settings(
        cls,
        data: Any,
        domain: str,
        host: str,
        ip_version: IPVersion,
    ) -> "DonDominioProvider":
        """Create a provider from a raw JSON settings payload."""
        settings = parse_settings(_Settings, data)
        return cls(
            domain,
            host,
            ip_version,
            username=settings.username,
            password=settings.password,
            name=settings.name,
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

    def _form(self, ip: IPAddress) -> dict[str, str]:
        """Build the form body; exactly one of ipv4/ipv6 is set."""
        form = {
            "apiuser": self._username,
            "apipasswd": self._password,
            "domain": self._domain,
            "name": self._name,
        }
        if ip_family(ip) == 4:
            form["ipv4"] = str(ip)
        else:
            form["ipv6"] = str(ip)
        return form

    def _update(
        self,
        client: httpx.Client,
        ip: IPAddress,
        timeout: float | None,
    ) -> IPAddress:
        logger.debug(
            "Sending DonDominio update",
            extra={"family": ip_family(ip), **get_record_extra()},
        )
        response = send(
            client,
            "POST",
            API_URL,
            timeout=timeout,
            data=self._form(ip),
            headers=default_headers("application/x-www-form-urlencoded"),
        )
        check_status(response)

        data = decode(response, _Response)
        if not data.success:
            raise UnsuccessfulResponse(data.error_code_msg or "", data.error_code)

        if data.response_data is None or not data.response_data.glue_records:
            raise UnparseableResponse("no glue record in response")

        record = data.response_data.glue_records[0]
        reported = record.ipv4 if ip_family(ip) == 4 else record.ipv6
        return verify_reported_ip(ip, reported or "")
