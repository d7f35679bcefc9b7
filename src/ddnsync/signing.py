"""Request signing for Alibaba Cloud RPC-style APIs.

Implements signature version 1.0 (HMAC-SHA1) over the canonicalized
query string, as used by the Alibaba Cloud DNS API.
"""

import base64
import uuid
from datetime import UTC, datetime
from urllib.parse import quote

from cryptography.hazmat.primitives import hashes, hmac

SIGNATURE_METHOD = "HMAC-SHA1"
SIGNATURE_VERSION = "1.0"


def percent_encode(value: str) -> str:
    """Percent-encode a value per RFC 3986 (only A-Z a-z 0-9 - _ . ~ kept)."""
    return quote(value, safe="~")


def canonicalize(params: dict[str, str]) -> str:
    """Build the canonicalized query string, sorted by parameter name."""
    return "&".join(
        f"{percent_encode(key)}={percent_encode(params[key])}" for key in sorted(params)
    )


def string_to_sign(method: str, params: dict[str, str]) -> str:
    """Build the string signed for an RPC request."""
    return "&".join(
        [
            method.upper(),
            percent_encode("/"),
            percent_encode(canonicalize(params)),
        ]
    )


def sign(method: str, params: dict[str, str], access_secret: str) -> str:
    """Compute the base64 HMAC-SHA1 signature of request parameters.

    Args:
        method: HTTP method of the request.
        params: All query parameters except Signature.
        access_secret: Access key secret.

    Returns:
        Base64-encoded signature.
    """
    mac = hmac.HMAC(f"{access_secret}&".encode(), hashes.SHA1())
    mac.update(string_to_sign(method, params).encode())
    return base64.b64encode(mac.finalize()).decode("ascii")


def _timestamp() -> str:
    return datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")


def _nonce() -> str:
    return uuid.uuid4().hex


def signed_params(
    method: str,
    action: str,
    params: dict[str, str],
    *,
    access_key_id: str,
    access_secret: str,
    version: str,
    region: str,
) -> dict[str, str]:
    """Add common parameters and the signature to an RPC request.

    Args:
        method: HTTP method of the request.
        action: API action name (e.g. "DescribeDomainRecords").
        params: Action-specific parameters.
        access_key_id: Access key ID.
        access_secret: Access key secret.
        version: API version (e.g. "2015-01-09").
        region: Region ID.

    Returns:
        Complete query parameters, Signature included.
    """
    query = {
        "Format": "JSON",
        "Version": version,
        "AccessKeyId": access_key_id,
        "SignatureMethod": SIGNATURE_METHOD,
        "SignatureVersion": SIGNATURE_VERSION,
        "SignatureNonce": _nonce(),
        "Timestamp": _timestamp(),
        "RegionId": region,
        "Action": action,
        **params,
    }
    query["Signature"] = sign(method, query, access_secret)
    return query
