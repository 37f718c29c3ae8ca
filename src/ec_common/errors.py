"""Unified error codes and custom exceptions.

Error code ranges:
  6xxx: Surveillance
  7xxx: Ledger loading
  9xxx: System
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 6xxx: Surveillance ---

class CompanyNotFoundError(AppError):
    def __init__(self, company_name: str) -> None:
        super().__init__(6001, f"Company not found: {company_name}", 404)


# --- 7xxx: Ledger loading ---

class LedgerLoadError(AppError):
    """The record source could not be turned into a ledger. Never partial."""

    def __init__(self, detail: str, code: int = 7001) -> None:
        super().__init__(code, f"Failed to load order events: {detail}", 500)


class MalformedRecordError(LedgerLoadError):
    def __init__(self, line_number: int, detail: str) -> None:
        self.line_number = line_number
        super().__init__(f"line {line_number}: {detail}", code=7002)


# --- 9xxx: System ---

class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)
