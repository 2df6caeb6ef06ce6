"""Unit tests for the Kind to HTTP status code mapping."""

import pytest
from fastapi import status

from errkind import E, Kind, new
from errkind.presentation.errors import get_status_code, status_code_for


@pytest.mark.unit
class TestGetStatusCode:
    """get_status_code is a total mapping keyed by Kind."""

    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            (Kind.UNKNOWN, status.HTTP_500_INTERNAL_SERVER_ERROR),
            (Kind.INVALID, status.HTTP_400_BAD_REQUEST),
            (Kind.PERMISSION, status.HTTP_401_UNAUTHORIZED),
            (Kind.IO, status.HTTP_500_INTERNAL_SERVER_ERROR),
            (Kind.DUPLICATED, status.HTTP_409_CONFLICT),
            (Kind.NOT_EXIST, status.HTTP_404_NOT_FOUND),
            (Kind.PRIVATE, status.HTTP_401_UNAUTHORIZED),
            (Kind.INTERNAL, status.HTTP_500_INTERNAL_SERVER_ERROR),
            (Kind.DECRYPT, status.HTTP_400_BAD_REQUEST),
            (Kind.UNMARSHAL, status.HTTP_400_BAD_REQUEST),
            (Kind.TRANSIENT, status.HTTP_503_SERVICE_UNAVAILABLE),
            (Kind.UNSUPPORTED, status.HTTP_415_UNSUPPORTED_MEDIA_TYPE),
            (Kind.NOT_ACCEPTABLE, status.HTTP_406_NOT_ACCEPTABLE),
        ],
    )
    def test_mapping(self, kind, expected):
        """Test each kind maps to its fixed status code."""
        assert get_status_code(kind) == expected

    def test_every_kind_is_mapped(self):
        """Test the mapping returns a 4xx/5xx code for all kinds."""
        for kind in Kind:
            assert 400 <= get_status_code(kind) <= 599


@pytest.mark.unit
class TestStatusCodeFor:
    """status_code_for accepts any error value."""

    def test_error_uses_kind(self):
        """Test an Error maps through its kind."""
        err = E(new("no rows"), "user not found", Kind.NOT_EXIST)

        assert status_code_for(err) == status.HTTP_404_NOT_FOUND

    def test_inherited_kind(self):
        """Test an inherited kind drives the status code."""
        err = E(E(new("dup key"), Kind.DUPLICATED), "creating user")

        assert status_code_for(err) == status.HTTP_409_CONFLICT

    def test_plain_error_is_internal(self):
        """Test a non-Error value maps to 500."""
        assert status_code_for(ValueError("boom")) == 500

    def test_none_is_internal(self):
        """Test None maps to 500."""
        assert status_code_for(None) == 500
