"""Tests for ec_common.errors and ec_common.response."""

from src.ec_common.errors import (
    AppError,
    CompanyNotFoundError,
    InternalError,
    LedgerLoadError,
    MalformedRecordError,
)
from src.ec_common.response import ApiResponse, error_response, success_response


class TestAppError:
    def test_base_error(self) -> None:
        err = AppError(code=9002, message="Internal error")
        assert err.code == 9002
        assert err.message == "Internal error"
        assert err.http_status == 500

    def test_is_exception(self) -> None:
        assert isinstance(AppError(code=6001, message="test"), Exception)


class TestSpecificErrors:
    def test_company_not_found(self) -> None:
        err = CompanyNotFoundError("Bank of Mars")
        assert err.code == 6001
        assert err.http_status == 404
        assert "Bank of Mars" in err.message

    def test_ledger_load(self) -> None:
        err = LedgerLoadError("cannot read trades.csv")
        assert err.code == 7001
        assert err.http_status == 500
        assert err.message.startswith("Failed to load order events")

    def test_malformed_record(self) -> None:
        err = MalformedRecordError(3, "invalid time 'x'")
        assert isinstance(err, LedgerLoadError)
        assert err.code == 7002
        assert err.line_number == 3
        assert "line 3" in err.message

    def test_internal(self) -> None:
        assert InternalError().code == 9002


class TestApiResponse:
    def test_success(self) -> None:
        resp = success_response({"count": 1})
        assert resp.code == 0
        assert resp.message == "success"
        assert resp.data == {"count": 1}
        assert resp.request_id.startswith("req_")

    def test_error(self) -> None:
        resp = error_response(6001, "Company not found: X")
        assert resp.code == 6001
        assert resp.data is None

    def test_serialization(self) -> None:
        d = ApiResponse().model_dump()
        assert set(d) == {"code", "message", "data", "timestamp", "request_id"}
