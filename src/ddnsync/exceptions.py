"""Dynamic DNS update exceptions.

Every failure raised by a provider belongs to one of a closed set of
kinds (:class:`ErrorKind`), whatever provider produced it. Construction
errors derive from :class:`ProviderConfigError`; errors raised while
updating a record derive from :class:`UpdateError`.
"""

from enum import StrEnum

from ddnsync.models import IPAddress


class ErrorKind(StrEnum):
    """Closed vocabulary of failure kinds."""

    EMPTY_CREDENTIAL_FIELD = "empty_credential_field"
    INVALID_HOST_CONSTRAINT = "invalid_host_constraint"
    TRANSPORT_FAILURE = "transport_failure"
    UNPARSEABLE_RESPONSE = "unparseable_response"
    UNSUCCESSFUL_RESPONSE = "unsuccessful_response"
    RECORD_NOT_FOUND = "record_not_found"
    MALFORMED_REPORTED_IP = "malformed_reported_ip"
    IP_MISMATCH = "ip_mismatch"


class DdnsError(Exception):
    """Base exception for ddnsync errors."""

    kind: ErrorKind


# =============================================================================
# Construction errors
# =============================================================================


class ProviderConfigError(DdnsError):
    """Provider configuration is invalid; the provider must not be scheduled."""


class EmptyCredentialField(ProviderConfigError):
    """A required configuration field is empty."""

    kind = ErrorKind.EMPTY_CREDENTIAL_FIELD

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"empty {field.replace('_', ' ')}")


class InvalidHostConstraint(ProviderConfigError):
    """Host violates a provider's structural rule."""

    kind = ErrorKind.INVALID_HOST_CONSTRAINT

    def __init__(self, host: str, expected: str = "@"):
        self.host = host
        self.expected = expected
        super().__init__(f"host can only be {expected!r}, got {host!r}")


# =============================================================================
# Update errors
# =============================================================================


class UpdateError(DdnsError):
    """Base exception for a failed update attempt."""


class TransportFailure(UpdateError):
    """The call could not be completed or returned a bad HTTP status."""

    kind = ErrorKind.TRANSPORT_FAILURE

    def __init__(
        self,
        detail: str,
        status_code: int | None = None,
        timed_out: bool = False,
    ):
        self.detail = detail
        self.status_code = status_code
        self.timed_out = timed_out
        if status_code is not None:
            message = f"bad HTTP status: {status_code}: {detail}"
        elif timed_out:
            message = f"request timed out: {detail}"
        else:
            message = f"request failed: {detail}"
        super().__init__(message)


class UnparseableResponse(UpdateError):
    """Response body did not match the expected schema."""

    kind = ErrorKind.UNPARSEABLE_RESPONSE

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"failed unmarshaling response: {detail}")


class UnsuccessfulResponse(UpdateError):
    """Provider explicitly reported an application-level failure."""

    kind = ErrorKind.UNSUCCESSFUL_RESPONSE

    def __init__(self, message: str, code: int | str | None = None):
        self.message = message
        self.code = code
        text = f"unsuccessful response: {message}"
        if code is not None:
            text += f" (error code {code})"
        super().__init__(text)


class RecordNotFound(UpdateError):
    """No existing record matched the host during lookup."""

    kind = ErrorKind.RECORD_NOT_FOUND

    def __init__(self, host: str, domain: str, record_type: str | None = None):
        self.host = host
        self.domain = domain
        self.record_type = record_type
        target = f"{host} in {domain}"
        if record_type:
            target = f"{record_type} {target}"
        super().__init__(f"record not found: {target}")


class MalformedReportedIP(UpdateError):
    """Provider reported an IP value that cannot be parsed."""

    kind = ErrorKind.MALFORMED_REPORTED_IP

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"IP address received is malformed: {value!r}")


class IPMismatch(UpdateError):
    """Provider reported a well-formed IP different from the requested one."""

    kind = ErrorKind.IP_MISMATCH

    def __init__(self, requested: IPAddress, reported: IPAddress):
        self.requested = requested
        self.reported = reported
        super().__init__(f"IP address received does not match: {reported} (sent {requested})")
