"""Loading of provider settings from a configuration file.

The configuration is a JSON document of the form::

    {
        "settings": [
            {
                "provider": "dondominio",
                "domain": "example.com",
                "host": "@",
                "ip_version": "ipv4",
                "username": "...",
                "password": "...",
                "name": "..."
            }
        ]
    }

Each entry carries the common fields plus the provider-specific ones.
"""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ddnsync._logging import get_logger
from ddnsync.exceptions import ProviderConfigError
from ddnsync.models import IPVersion
from ddnsync.providers.base import DnsProvider
from ddnsync.registry import new_provider

logger = get_logger(__name__)

CONFIG_ENV = "DDNSYNC_CONFIG"
CONFIG_FILE_ENV = "DDNSYNC_CONFIG_FILE"
DEFAULT_CONFIG_FILE = Path("data") / "config.json"


class CommonSettings(BaseModel):
    """Fields shared by every settings entry."""

    model_config = ConfigDict(extra="allow")

    provider: str = Field(min_length=1)
    domain: str = Field(min_length=1)
    host: str = ""
    ip_version: IPVersion = IPVersion.IPV4

    @field_validator("ip_version", mode="before")
    @classmethod
    def parse_ip_version(cls, value: Any) -> IPVersion:
        """Accept IP versions case-insensitively."""
        if value is None:
            return IPVersion.IPV4
        return IPVersion.parse(value)


class Config(BaseModel):
    """Top-level configuration document."""

    settings: list[Any] = Field(default_factory=list)


def build_providers(data: dict[str, Any]) -> list[DnsProvider]:
    """Create one validated provider per settings entry.

    Args:
        data: Parsed configuration document.

    Returns:
        Providers in configuration order.

    Raises:
        ValueError: If the document or an entry is invalid; for an entry, the
            message names its index.
    """
    try:
        config = Config.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"invalid configuration: {e}") from e
    providers = []
    for index, entry in enumerate(config.settings):
        try:
            common = CommonSettings.model_validate(entry)
            provider = new_provider(
                common.provider,
                entry,
                common.domain,
                common.host,
                common.ip_version,
            )
        except (ValidationError, ProviderConfigError, ValueError) as e:
            logger.error(
                "Invalid settings entry",
                extra={"index": index, "error": str(e)},
            )
            raise ValueError(f"settings entry {index}: {e}") from e
        logger.debug("Provider configured", extra={"index": index, "provider": str(provider)})
        providers.append(provider)

    logger.info("Providers loaded", extra={"count": len(providers)})
    return providers


def load_config(path: str | Path | None = None) -> list[DnsProvider]:
    """Load providers from the environment or a configuration file.

    The JSON document is read, in order, from:
    1. The DDNSYNC_CONFIG environment variable.
    2. The file at ``path``.
    3. The file named by DDNSYNC_CONFIG_FILE, or data/config.json.

    Args:
        path: Configuration file path.

    Returns:
        Validated providers.

    Raises:
        FileNotFoundError: If no configuration is set and the file is missing.
        ValueError: If the document is not valid JSON or an entry is invalid.
    """
    raw = os.environ.get(CONFIG_ENV)
    if raw:
        source = CONFIG_ENV
    else:
        config_path = Path(path or os.environ.get(CONFIG_FILE_ENV) or DEFAULT_CONFIG_FILE)
        raw = config_path.read_text(encoding="utf-8")
        source = str(config_path)

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON configuration in {source}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Configuration in {source} must be a JSON object")

    logger.debug("Configuration read", extra={"source": source})
    return build_providers(data)
