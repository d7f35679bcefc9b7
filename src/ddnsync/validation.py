"""Configuration checks applied when a provider is constructed."""

from collections.abc import Iterable

from ddnsync.exceptions import EmptyCredentialField, InvalidHostConstraint
from ddnsync.models import APEX_HOST


def require_fields(fields: Iterable[tuple[str, str]]) -> None:
    """Check that required configuration fields are not empty.

    Fields are checked in the given order and only the first empty one
    is reported.

    Args:
        fields: (field name, value) pairs in declaration order.

    Raises:
        EmptyCredentialField: For the first empty field.
    """
    for name, value in fields:
        if not value:
            raise EmptyCredentialField(name)


def require_apex_host(host: str) -> None:
    """Check that the host targets the bare domain.

    Raises:
        InvalidHostConstraint: If host is not "@".
    """
    if host != APEX_HOST:
        raise InvalidHostConstraint(host, expected=APEX_HOST)
