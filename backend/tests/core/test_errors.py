"""Error Hierarchy — verifies codes, kinds, statuses and envelopes.

Tests:
    - Every service-level error is status 400 with the expected kind
    - to_rpc_payload() is exactly {message, status}
    - StorePassthroughError hides the driver message
"""

from sqlalchemy.exc import OperationalError

from catalog.core.errors import (
    BatchMismatchError, CatalogError, EmptyUpdateError, ErrorKind,
    ProductNotFoundError, StorePassthroughError,
)


def test_error_kind_has_four_members():
    assert set(ErrorKind) == {
        ErrorKind.NOT_FOUND,
        ErrorKind.BAD_INPUT,
        ErrorKind.BATCH_MISMATCH,
        ErrorKind.STORE_PASSTHROUGH,
    }


def test_not_found_default_message():
    err = ProductNotFoundError(12)
    assert err.message == "Product with id #12 not found"
    assert str(err) == err.message
    assert err.http_status == 400
    assert err.context.product_id == 12


def test_not_found_accepts_custom_message():
    err = ProductNotFoundError(12, "Product with id #12 not found, update failed")
    assert err.message.endswith("update failed")
    assert err.kind == ErrorKind.NOT_FOUND


def test_empty_update_is_bad_input():
    err = EmptyUpdateError(3)
    assert err.kind == ErrorKind.BAD_INPUT
    assert err.code == "EMPTY_UPDATE"
    assert err.http_status == 400


def test_batch_mismatch_keeps_missing_ids():
    err = BatchMismatchError([4, 5])
    assert err.message == "some products not found"
    assert err.product_ids == [4, 5]
    assert err.to_response()["error"]["context"]["product_ids"] == [4, 5]


def test_rpc_payload_has_message_and_status_only():
    assert ProductNotFoundError(1).to_rpc_payload() == {
        "message": "Product with id #1 not found", "status": 400,
    }


def test_response_envelope_fields():
    body = EmptyUpdateError(1).to_response()["error"]
    assert body["code"] == "EMPTY_UPDATE"
    assert body["kind"] == "bad_input"
    assert body["status"] == 400
    assert "timestamp" in body


def test_store_passthrough_hides_driver_message():
    exc = OperationalError("SELECT 1", {}, Exception("password=hunter2"))
    err = StorePassthroughError.from_exception(exc)
    assert isinstance(err, CatalogError)
    assert err.http_status == 500
    assert err.kind == ErrorKind.STORE_PASSTHROUGH
    assert "hunter2" not in err.message
    assert "OperationalError" in err.message
