"""Unit tests for configuration validation."""

import pytest

from ddnsync.exceptions import EmptyCredentialField, ErrorKind, InvalidHostConstraint
from ddnsync.validation import require_apex_host, require_fields


class TestRequireFields:
    """Tests for require_fields()."""

    def test_all_present(self):
        """Non-empty fields should not raise."""
        require_fields([("username", "u"), ("password", "p")])

    def test_first_empty_field_reported(self):
        """Only the first empty field in declaration order is reported."""
        with pytest.raises(EmptyCredentialField) as exc_info:
            require_fields([("username", "u"), ("password", ""), ("name", "")])

        assert exc_info.value.field == "password"
        assert exc_info.value.kind is ErrorKind.EMPTY_CREDENTIAL_FIELD
        assert str(exc_info.value) == "empty password"

    def test_underscores_in_message(self):
        """Field names are rendered with spaces."""
        with pytest.raises(EmptyCredentialField, match="empty access key id"):
            require_fields([("access_key_id", "")])


class TestRequireApexHost:
    """Tests for require_apex_host()."""

    def test_apex_accepted(self):
        require_apex_host("@")

    @pytest.mark.parametrize("host", ["www", "*", "", "@.example"])
    def test_other_hosts_rejected(self, host):
        with pytest.raises(InvalidHostConstraint) as exc_info:
            require_apex_host(host)

        assert exc_info.value.host == host
        assert exc_info.value.kind is ErrorKind.INVALID_HOST_CONSTRAINT
