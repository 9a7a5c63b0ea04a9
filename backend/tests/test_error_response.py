import logging
import pytest
from fastapi import HTTPException

from inkmatch.utils.errors import PermissionDenied, StoreUnavailable, error_response


def test_error_response_logs(caplog):
    caplog.set_level(logging.ERROR, logger="inkmatch.utils.errors")
    with pytest.raises(HTTPException):
        raise error_response("Invalid", {"field": "bad"})
    assert any(
        "Invalid" in r.getMessage() and "'field': 'bad'" in r.getMessage()
        for r in caplog.records
    )


def test_domain_errors_carry_status_codes():
    assert PermissionDenied("no").status_code == 403
    assert StoreUnavailable("down").status_code == 503
    assert PermissionDenied("no", {"tattoo": "owner"}).field_errors == {"tattoo": "owner"}
